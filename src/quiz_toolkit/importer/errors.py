"""
Module: importer.errors

Purpose:
    Exception hierarchy used inside the import pipeline. None of these
    cross the public boundary: parse_document converts them into a
    failed ParseResult.
"""

from __future__ import annotations


class DocumentImportError(Exception):
    """Base error for document import failures."""


class UnsupportedFormatError(DocumentImportError):
    """Raised for formats the importer recognises but cannot read (.doc, .rtf)."""

    def __init__(self, file_type: str, message: str):
        super().__init__(message)
        self.file_type = file_type


class EmptyDocumentError(DocumentImportError):
    """Raised when extraction succeeded but produced no usable text."""


class ExtractionError(DocumentImportError):
    """Raised by a format decoder that could not read the document."""

    def __init__(self, file_type: str, message: str):
        super().__init__(message)
        self.file_type = file_type
