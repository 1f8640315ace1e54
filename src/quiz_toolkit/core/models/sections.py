"""
Module: sections

Purpose:
    Section models produced by the section detector. A Section is a
    contiguous, typed span of the preprocessed document; DocumentParts
    is the per-type concatenation handed to the parsers.

Key Classes:
    - SectionType: Region kinds (questions, answerKey, transcript, ...)
    - Section: One detected span with its line range
    - DocumentParts: Same-typed sections joined in document order

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - importer.detection.sections
    - importer.pipeline
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class SectionType(str, Enum):
    """Kinds of document region. Values match the public payload names."""

    QUESTIONS = "questions"
    ANSWER_KEY = "answerKey"
    TRANSCRIPT = "transcript"
    VOCABULARY = "vocabulary"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Section:
    """
    Contiguous typed region of the preprocessed text.

    Attributes:
        type: Region kind. Never UNKNOWN once returned by detect_sections.
        content: Body lines joined with newlines and trimmed. Excludes the
            header line when the section was opened by an explicit header.
        start_line: 0-indexed first line of the span (the header line if any).
        end_line: 0-indexed line after the span (exclusive).
        header: Header line text for explicitly titled sections.

    Invariants:
        - start_line < end_line
        - Sections returned for one document tile its lines without gaps
          or overlaps.
    """

    type: SectionType
    content: str
    start_line: int
    end_line: int
    header: Optional[str] = None

    def __post_init__(self) -> None:
        if self.start_line < 0:
            raise ValueError(f"start_line must be >= 0: {self.start_line}")
        if self.end_line <= self.start_line:
            raise ValueError(
                f"end_line must be > start_line: {self.end_line} <= {self.start_line}"
            )

    @property
    def line_count(self) -> int:
        return self.end_line - self.start_line

    @property
    def is_empty(self) -> bool:
        return not self.content


@dataclass(frozen=True)
class DocumentParts:
    """
    Document split by section type.

    Each text field is None when no non-empty section of that type was
    found. ``other`` keeps sections that do not feed any parser.
    """

    questions: Optional[str] = None
    answer_key: Optional[str] = None
    transcript: Optional[str] = None
    vocabulary: Optional[str] = None
    other: Tuple[Section, ...] = ()

    @property
    def has_questions(self) -> bool:
        return bool(self.questions)

    @property
    def has_answer_key(self) -> bool:
        return bool(self.answer_key)
