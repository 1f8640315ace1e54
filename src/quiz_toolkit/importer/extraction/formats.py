"""
Module: importer.extraction.formats

Purpose:
    File-type sniffing and pre-upload validation. The extension decides
    first; magic bytes are consulted only when the extension is not one
    the importer knows.

Key Functions:
    - detect_file_type(): Guess the format of a buffer
    - get_supported_types(): Accepted/rejected extensions and MIME types
    - validate_file(): Extension and size check before parsing

Used By:
    - importer.extraction.extractor
    - importer.pipeline
"""

from __future__ import annotations

from typing import Dict, Optional

from quiz_toolkit.common.thresholds import UPLOAD_THRESHOLDS
from quiz_toolkit.core.models.results import FileValidation, SupportedTypes

PDF = "pdf"
DOCX = "docx"
DOC = "doc"
TXT = "txt"
RTF = "rtf"

SUPPORTED_TYPES = (PDF, DOCX, TXT)
UNSUPPORTED_TYPES = (DOC, RTF)
KNOWN_EXTENSIONS = SUPPORTED_TYPES + UNSUPPORTED_TYPES

MIME_TYPES: Dict[str, str] = {
    "application/pdf": PDF,
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": DOCX,
    "text/plain": TXT,
}

# Conversion hints for formats that are recognised but rejected
UNSUPPORTED_MESSAGES: Dict[str, str] = {
    DOC: "Old .doc format is not supported. Please convert to .docx or PDF.",
    RTF: "RTF format is not supported. Please convert to .docx, PDF, or plain text.",
}

PDF_MAGIC = b"%PDF"
ZIP_MAGIC = b"PK"


def file_extension(filename: Optional[str]) -> str:
    """
    Return the lower-cased text after the last dot.

    A name without a dot is returned whole, lower-cased.

    Example:
        >>> file_extension("Unit 3 Quiz.DOCX")
        'docx'
    """
    if not filename:
        return ""
    return filename.lower().rsplit(".", 1)[-1]


def detect_file_type(buffer: bytes, filename: Optional[str]) -> str:
    """
    Guess the document format.

    Order:
    1. Known extension (pdf, docx, doc, txt, rtf)
    2. ``%PDF`` header -> pdf, ``PK`` zip header -> docx
    3. Default: txt
    """
    ext = file_extension(filename)
    if ext in KNOWN_EXTENSIONS:
        return ext

    if len(buffer) >= 4:
        if buffer.startswith(PDF_MAGIC):
            return PDF
        if buffer.startswith(ZIP_MAGIC):
            return DOCX

    return TXT


def get_supported_types() -> SupportedTypes:
    """Return accepted and explicitly rejected extensions plus MIME mapping."""
    return SupportedTypes(
        supported=SUPPORTED_TYPES,
        unsupported=UNSUPPORTED_TYPES,
        mime_types=dict(MIME_TYPES),
    )


def validate_file(
    filename: str,
    size: int,
    max_size_mb: int = UPLOAD_THRESHOLDS.max_size_mb,
) -> FileValidation:
    """
    Check extension and size before a document is parsed.

    Args:
        filename: Original file name.
        size: File size in bytes.
        max_size_mb: Upper limit in megabytes (default 10).

    Returns:
        FileValidation with ``valid=False`` and a user-facing error for
        unsupported extensions or oversized files.

    Example:
        >>> validate_file("notes.rtf", 1000).valid
        False
    """
    ext = file_extension(filename)
    supported = ", ".join(SUPPORTED_TYPES)

    if ext not in SUPPORTED_TYPES:
        hint = UNSUPPORTED_MESSAGES.get(ext)
        message = f"Unsupported file type: .{ext}."
        if hint:
            message = f"{message} {hint}"
        return FileValidation(valid=False, error=f"{message} Supported types: {supported}")

    max_bytes = max_size_mb * 1024 * 1024
    if size > max_bytes:
        return FileValidation(
            valid=False,
            error=f"File too large. Maximum size is {max_size_mb}MB.",
        )

    return FileValidation(valid=True)
