"""
Module: importer.extraction

Purpose:
    Text extraction collaborator. Turns uploaded bytes into plain text
    and answers questions about which formats are accepted.

Key Modules:
    - formats: Type sniffing, supported types, upload validation
    - extractor: PDF/DOCX/TXT decoders and extract_text()

Dependencies:
    - fitz (PyMuPDF): PDF text extraction
    - docx (python-docx): DOCX text extraction
"""

from .formats import detect_file_type, get_supported_types, validate_file
from .extractor import ExtractedText, extract_text

__all__ = [
    "detect_file_type",
    "get_supported_types",
    "validate_file",
    "ExtractedText",
    "extract_text",
]
