"""
Quiz Toolkit Importer

Turns uploaded worksheets (PDF, DOCX, plain text) into quiz questions.

Stages:
    extraction -> preprocess -> detection -> answer_key -> parsing
    -> scoring -> formatter

Entry point:
    >>> from quiz_toolkit.importer import parse_document
    >>> result = parse_document(data, "unit3.docx")
"""

from .config import ImportConfig
from .errors import (
    DocumentImportError,
    EmptyDocumentError,
    ExtractionError,
    UnsupportedFormatError,
)
from .patterns import DEFAULT_PATTERNS, PatternLibrary
from .pipeline import (
    EMPTY_DOCUMENT_MESSAGE,
    LOW_CONFIDENCE_WARNING,
    get_supported_types,
    parse_document,
    validate_file,
)

__all__ = [
    "ImportConfig",
    "DocumentImportError",
    "EmptyDocumentError",
    "ExtractionError",
    "UnsupportedFormatError",
    "DEFAULT_PATTERNS",
    "PatternLibrary",
    "EMPTY_DOCUMENT_MESSAGE",
    "LOW_CONFIDENCE_WARNING",
    "get_supported_types",
    "parse_document",
    "validate_file",
]
