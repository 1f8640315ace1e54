"""
Module: importer.scoring

Purpose:
    Heuristic 0-100 confidence score for a parse. It summarizes how
    structurally complete the questions are; it is not a probability.

Key Functions:
    - calculate_confidence(): Score questions plus parser warnings
    - confidence_level(): "high" / "medium" / "low" band for a score

Used By:
    - importer.pipeline: Stage 6
"""

from __future__ import annotations

from typing import Sequence

from quiz_toolkit.common.thresholds import CONFIDENCE_THRESHOLDS, ConfidenceThresholds
from quiz_toolkit.core.models.questions import ParsedQuestion


def calculate_confidence(
    questions: Sequence[ParsedQuestion],
    warnings: Sequence[str],
    thresholds: ConfidenceThresholds = CONFIDENCE_THRESHOLDS,
) -> int:
    """
    Score a parse from 0 to 100.

    Deductions from 100:
    - 15 per question with no options, else 3 per missing option (of 4)
    - 5 per question without a correct answer
    - 2 per warning (overlaps with the structural deductions above)
    - 10 if numbering differs from 1..N (only when N > 1)

    No questions scores 0. The result is clamped to [0, 100].

    Example:
        >>> q = ParsedQuestion(1, "Q", {"A": "x", "B": "y"}, "A")
        >>> calculate_confidence([q], ["Question 1: Only 2 options found"])
        92
    """
    if not questions:
        return thresholds.min_score

    score = thresholds.max_score
    for question in questions:
        count = question.option_count
        if count == 0:
            score -= thresholds.no_options_penalty
        elif count < thresholds.expected_options:
            score -= thresholds.missing_option_penalty * (thresholds.expected_options - count)

        if not question.correct_answer:
            score -= thresholds.missing_answer_penalty

    score -= thresholds.warning_penalty * len(warnings)

    if len(questions) > 1:
        sequential = all(q.number == i + 1 for i, q in enumerate(questions))
        if not sequential:
            score -= thresholds.non_sequential_penalty

    return max(thresholds.min_score, min(thresholds.max_score, score))


def confidence_level(score: int, thresholds: ConfidenceThresholds = CONFIDENCE_THRESHOLDS) -> str:
    """Band a score: ``"high"`` (>= 80), ``"medium"`` (>= 50) or ``"low"``."""
    return thresholds.band(score)
