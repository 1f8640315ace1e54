"""
Module: importer.parsing.questions

Purpose:
    Run the line state machine over a questions section, reconcile each
    emitted question against the answer key and collect per-question
    warnings.

Key Functions:
    - parse_questions(): Questions section text -> QuestionParseResult
    - finalize_question(): Answer-key reconciliation and warnings

Dependencies:
    - importer.parsing.state_machine: classify_line / step / finish

Used By:
    - importer.pipeline: Stage 5
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import List, Mapping, Optional, Tuple

from quiz_toolkit.core.models.questions import OPTION_LETTERS, ParsedQuestion
from ..patterns import DEFAULT_PATTERNS, PatternLibrary
from .state_machine import INITIAL_STATE, classify_line, finish, step

logger = logging.getLogger(__name__)


@dataclass
class QuestionParseResult:
    """Questions in source order plus the warnings raised while finalizing them."""
    questions: List[ParsedQuestion] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def finalize_question(
    question: ParsedQuestion,
    answer_key: Optional[Mapping[int, str]] = None,
) -> Tuple[ParsedQuestion, List[str]]:
    """
    Fill a missing answer from the answer key and list what is incomplete.

    An answer already set on the question (inline marker or standalone
    answer line) is never replaced by the key.

    Returns:
        (reconciled question, warnings)

    Example:
        >>> q, warnings = finalize_question(ParsedQuestion(number=2), {2: "A"})
        >>> q.correct_answer, warnings
        ('A', ['Question 2: No options detected'])
    """
    if not question.correct_answer and answer_key and question.number in answer_key:
        question = replace(question, correct_answer=answer_key[question.number])

    warnings: List[str] = []
    count = question.option_count
    if count == 0:
        warnings.append(f"Question {question.number}: No options detected")
    elif count < len(OPTION_LETTERS):
        warnings.append(f"Question {question.number}: Only {count} options found")

    if not question.correct_answer:
        warnings.append(f"Question {question.number}: No correct answer found")

    return question, warnings


def parse_questions(
    questions_text: Optional[str],
    answer_key: Optional[Mapping[int, str]] = None,
    *,
    patterns: PatternLibrary = DEFAULT_PATTERNS,
) -> QuestionParseResult:
    """
    Parse a questions section into ParsedQuestions.

    Every question-number line yields exactly one question, however
    incomplete; gaps surface as warnings, never as failures. Lines
    before the first question-number line are ignored.

    Args:
        questions_text: Text of the questions section(s).
        answer_key: Question number -> letter map from the answer key.
        patterns: Line-classification rules.

    Returns:
        QuestionParseResult with questions in source order.
    """
    result = QuestionParseResult()
    if not questions_text:
        return result

    def _emit(question: ParsedQuestion) -> None:
        finalized, warnings = finalize_question(question, answer_key)
        result.questions.append(finalized)
        result.warnings.extend(warnings)

    state = INITIAL_STATE
    for line in questions_text.split("\n"):
        state, emitted = step(state, classify_line(line, patterns))
        if emitted is not None:
            _emit(emitted)

    last = finish(state)
    if last is not None:
        _emit(last)

    logger.debug(
        f"Parsed {len(result.questions)} questions with {len(result.warnings)} warnings"
    )
    return result
