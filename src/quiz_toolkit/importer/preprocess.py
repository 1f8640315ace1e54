"""
Module: importer.preprocess

Purpose:
    Normalize extracted text before section detection: unify line
    endings, cap runs of blank lines, collapse intra-line whitespace and
    trim every line.

Key Functions:
    - preprocess_text(): Produce the immutable RawText for a document

Used By:
    - importer.pipeline
"""

from __future__ import annotations

import re

_CRLF = re.compile(r"\r\n?")
_BLANK_RUN = re.compile(r"\n{4,}")
_INLINE_SPACE = re.compile(r"[ \t]+")


def preprocess_text(text: str) -> str:
    """
    Normalize extracted document text.

    Steps (in order):
    1. ``\\r\\n`` and lone ``\\r`` become ``\\n``
    2. Four or more consecutive newlines become three
    3. Runs of spaces/tabs become one space
    4. Each line is trimmed, then the whole text is trimmed

    Example:
        >>> preprocess_text("  1.\\tWhat?\\r\\n\\r\\n\\r\\n\\r\\nA)  Yes ")
        '1. What?\\n\\n\\nA) Yes'
    """
    text = _CRLF.sub("\n", text)
    text = _BLANK_RUN.sub("\n\n\n", text)
    text = _INLINE_SPACE.sub(" ", text)
    return "\n".join(line.strip() for line in text.split("\n")).strip()
