"""
Module: importer.formatter

Purpose:
    Project parsed questions onto the public test schema.

    Options become a dense list in A-D order with unpopulated letters
    dropped, so a question missing option B maps its C text to index 1.
    Consumers index options positionally.
"""

from __future__ import annotations

from typing import Iterable, List

from quiz_toolkit.core.models.questions import OPTION_LETTERS, ParsedQuestion, PublicQuestion


def to_public_question(question: ParsedQuestion) -> PublicQuestion:
    """Convert one ParsedQuestion to the public schema."""
    options = tuple(
        question.options[letter]
        for letter in OPTION_LETTERS
        if question.options.get(letter)
    )
    return PublicQuestion(
        id=question.id,
        question_text=question.question_text or "",
        options=options,
        correct_answer=question.correct_answer or "",
    )


def to_test_question_format(questions: Iterable[ParsedQuestion]) -> List[PublicQuestion]:
    """
    Convert parsed questions to the public schema, preserving order.

    Example:
        >>> q = ParsedQuestion(3, "Pick", {"A": "x", "C": "z"}, None)
        >>> pq = to_test_question_format([q])[0]
        >>> pq.id, pq.options, pq.correct_answer
        ('q3', ('x', 'z'), '')
    """
    return [to_public_question(q) for q in questions]
