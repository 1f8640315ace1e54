"""
Module: questions

Purpose:
    Question models. ParsedQuestion is the parser's internal record with
    lettered options; PublicQuestion is the stable schema consumed by the
    test-delivery UI, where options are a dense positional list.

Key Classes:
    - AnswerKeyEntry: One line of an answer key
    - ParsedQuestion: Question assembled by the line state machine
    - PublicQuestion: Public question schema

Dependencies:
    - dataclasses (std)

Used By:
    - importer.answer_key
    - importer.parsing
    - importer.formatter
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

OPTION_LETTERS: Tuple[str, ...] = ("A", "B", "C", "D")


def _check_letter(letter: str, what: str) -> None:
    if letter not in OPTION_LETTERS:
        raise ValueError(f"{what} must be one of {', '.join(OPTION_LETTERS)}: {letter!r}")


@dataclass(frozen=True)
class AnswerKeyEntry:
    """
    Answer key line mapping a question number to its correct letter.

    Example:
        >>> AnswerKeyEntry(question_number=12, answer="B")
        AnswerKeyEntry(question_number=12, answer='B')
    """

    question_number: int
    answer: str

    def __post_init__(self) -> None:
        if self.question_number < 0:
            raise ValueError(f"question_number must be non-negative: {self.question_number}")
        _check_letter(self.answer, "answer")


@dataclass(frozen=True)
class ParsedQuestion:
    """
    Question record built from loosely formatted text (immutable).

    New instances are produced with ``dataclasses.replace`` as further
    lines are classified; the options mapping is never mutated in place.

    Attributes:
        number: Number as it appeared in the source. Not necessarily
            sequential or unique.
        question_text: Prompt text, possibly empty.
        options: Letter -> text for letters A-D, in insertion order.
            May be partial.
        correct_answer: Letter of the correct option if known.
    """

    number: int
    question_text: str = ""
    options: Dict[str, str] = field(default_factory=dict)
    correct_answer: Optional[str] = None

    def __post_init__(self) -> None:
        if self.number < 0:
            raise ValueError(f"number must be non-negative: {self.number}")
        for letter in self.options:
            _check_letter(letter, "option letter")
        if self.correct_answer is not None:
            _check_letter(self.correct_answer, "correct_answer")

    @property
    def id(self) -> str:
        """Identifier derived from the source number, e.g. ``"q3"``."""
        return f"q{self.number}"

    @property
    def option_count(self) -> int:
        return len(self.options)

    @property
    def has_answer(self) -> bool:
        return bool(self.correct_answer)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "number": self.number,
            "questionText": self.question_text,
            "options": dict(self.options),
            "correctAnswer": self.correct_answer,
        }


@dataclass(frozen=True)
class PublicQuestion:
    """
    Question in the public test schema.

    ``options`` is positional: index 0 is the first populated letter, so
    the letter association is lost whenever a letter was missing.
    ``correct_answer`` is a letter or the empty string.
    """

    id: str
    question_text: str
    options: Tuple[str, ...]
    correct_answer: str
    explanation: str = ""
    explanation_arabic: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "questionText": self.question_text,
            "options": list(self.options),
            "correctAnswer": self.correct_answer,
            "explanation": self.explanation,
            "explanationArabic": self.explanation_arabic,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PublicQuestion":
        return cls(
            id=data["id"],
            question_text=data.get("questionText", ""),
            options=tuple(data.get("options", [])),
            correct_answer=data.get("correctAnswer", ""),
            explanation=data.get("explanation", ""),
            explanation_arabic=data.get("explanationArabic", ""),
        )
