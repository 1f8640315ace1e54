"""
Module: importer.answer_key

Purpose:
    Parse an answer-key section into a question-number -> letter map
    used to fill answers the question parser did not find inline.

Key Functions:
    - parse_answer_key_entries(): Every recognised entry, in order
    - parse_answer_key(): Map of number -> letter, last entry wins

Used By:
    - importer.pipeline: Stage 4
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from quiz_toolkit.core.models.questions import AnswerKeyEntry
from .patterns import DEFAULT_PATTERNS, PatternLibrary

logger = logging.getLogger(__name__)


def parse_answer_key_entries(
    answer_key_text: Optional[str],
    *,
    patterns: PatternLibrary = DEFAULT_PATTERNS,
) -> List[AnswerKeyEntry]:
    """
    Extract answer-key entries line by line.

    Each line is tried against the key-entry patterns in order
    (``N. X``, ``N) X``, ``QN. X``, ``N - X``); lines matching none are
    skipped.
    """
    if not answer_key_text:
        return []

    entries = []
    for line in answer_key_text.split("\n"):
        entry = patterns.extract_answer_key_entry(line)
        if entry is not None:
            entries.append(entry)
    return entries


def parse_answer_key(
    answer_key_text: Optional[str],
    *,
    patterns: PatternLibrary = DEFAULT_PATTERNS,
) -> Dict[int, str]:
    """
    Parse answer-key text into a map of question number -> letter.

    Duplicate numbers keep the entry that appears last.

    Example:
        >>> parse_answer_key("1. B\\n2) c\\nQ3: A\\n1 - D")
        {1: 'D', 2: 'C', 3: 'A'}
    """
    answers: Dict[int, str] = {}
    for entry in parse_answer_key_entries(answer_key_text, patterns=patterns):
        if entry.question_number in answers:
            logger.debug(
                f"Answer key overrides Q{entry.question_number}: "
                f"{answers[entry.question_number]} -> {entry.answer}"
            )
        answers[entry.question_number] = entry.answer
    return answers
