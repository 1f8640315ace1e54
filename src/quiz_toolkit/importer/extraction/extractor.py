"""
Module: importer.extraction.extractor

Purpose:
    Text extraction from uploaded document bytes. Each decoder turns one
    format into plain text; extract_text picks the decoder and converts
    any failure into an unsuccessful ExtractedText so callers never see
    an exception.

Key Functions:
    - extract_text(): Decode a buffer of a known or guessed format
    - extract_from_pdf(), extract_from_docx(), extract_from_txt()

Key Classes:
    - ExtractedText: Decoder outcome (text, error, warnings)

Dependencies:
    - fitz (PyMuPDF): PDF text extraction
    - docx (python-docx): DOCX paragraph and table text

Used By:
    - importer.pipeline: First pipeline stage
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

import docx
import fitz

from ..errors import ExtractionError, UnsupportedFormatError
from .formats import DOC, DOCX, PDF, RTF, TXT, UNSUPPORTED_MESSAGES, detect_file_type

logger = logging.getLogger(__name__)

_BOM = "\ufeff"


@dataclass(frozen=True)
class ExtractedText:
    """
    Outcome of decoding one document.

    Attributes:
        success: Whether the decoder produced text.
        text: Decoded text (empty on failure).
        error: User-facing failure message.
        warnings: Decoder notes that do not stop parsing.
        file_type: Format the decoder was chosen for.
        page_count: Pages read (PDF only, else None).
    """
    success: bool
    text: str = ""
    error: Optional[str] = None
    warnings: Tuple[str, ...] = ()
    file_type: str = TXT
    page_count: Optional[int] = None


def extract_from_pdf(buffer: bytes) -> Tuple[str, int, List[str]]:
    """
    Extract text from a PDF buffer with PyMuPDF.

    Returns:
        (text, page_count, warnings); pages are joined with newlines.

    Raises:
        ExtractionError: If PyMuPDF cannot open or read the document.
    """
    warnings: List[str] = []
    try:
        with fitz.open(stream=buffer, filetype="pdf") as doc:
            pages = []
            for page_num in range(doc.page_count):
                page_text = doc[page_num].get_text()
                if not page_text.strip():
                    warnings.append(f"Page {page_num + 1} has no extractable text")
                pages.append(page_text)
            page_count = doc.page_count
    except Exception as e:
        raise ExtractionError(PDF, f"Failed to extract text from PDF: {e}") from e

    return "\n".join(pages).strip(), page_count, warnings


def extract_from_docx(buffer: bytes) -> Tuple[str, List[str]]:
    """
    Extract raw text from a DOCX buffer with python-docx.

    Body paragraphs come first, one per line, followed by table rows
    with cells separated by tabs.

    Raises:
        ExtractionError: If the buffer is not a readable DOCX package.
    """
    warnings: List[str] = []
    try:
        document = docx.Document(io.BytesIO(buffer))
        lines = [para.text for para in document.paragraphs]
        for table in document.tables:
            for row in table.rows:
                lines.append("\t".join(cell.text for cell in row.cells))
        image_count = len(document.inline_shapes)
    except Exception as e:
        raise ExtractionError(DOCX, f"Failed to extract text from DOCX: {e}") from e

    if image_count:
        warnings.append(f"Ignored {image_count} embedded image(s)")
    return "\n".join(lines), warnings


def extract_from_txt(buffer: bytes) -> str:
    """
    Decode a plain-text buffer as UTF-8.

    A leading byte-order mark is dropped; undecodable bytes become
    U+FFFD rather than failing.

    Raises:
        ExtractionError: If the buffer is not bytes-like.
    """
    try:
        text = bytes(buffer).decode("utf-8", errors="replace")
    except TypeError as e:
        raise ExtractionError(TXT, f"Failed to read text file: {e}") from e

    if text.startswith(_BOM):
        text = text[1:]
    return text


def extract_text(buffer: bytes, filename: Optional[str]) -> ExtractedText:
    """
    Extract text from any supported document.

    Args:
        buffer: Raw file bytes.
        filename: Original file name, used for format detection.

    Returns:
        ExtractedText; ``success=False`` with an error message for
        .doc/.rtf files and for decoder failures.

    Example:
        >>> extract_text(b"1. Hi\\nA) x", "quiz.txt").text
        '1. Hi\\nA) x'
    """
    file_type = detect_file_type(buffer, filename)
    logger.info(f"Detected file type: {file_type} for {filename}")

    try:
        if file_type in (DOC, RTF):
            raise UnsupportedFormatError(file_type, UNSUPPORTED_MESSAGES[file_type])

        if file_type == PDF:
            text, page_count, warnings = extract_from_pdf(buffer)
            return ExtractedText(
                success=True,
                text=text,
                warnings=tuple(warnings),
                file_type=file_type,
                page_count=page_count,
            )

        if file_type == DOCX:
            text, warnings = extract_from_docx(buffer)
            return ExtractedText(
                success=True, text=text, warnings=tuple(warnings), file_type=file_type
            )

        return ExtractedText(success=True, text=extract_from_txt(buffer), file_type=file_type)

    except UnsupportedFormatError as e:
        logger.warning(f"Rejected {filename}: {e}")
        return ExtractedText(success=False, error=str(e), file_type=file_type)
    except ExtractionError as e:
        logger.warning(f"Extraction failed for {filename}: {e}")
        return ExtractedText(success=False, error=str(e), file_type=file_type)
