"""
Module: importer.patterns

Purpose:
    Line-classification rules for quiz documents. Each line category has
    an ordered tuple of regular expressions evaluated first-match-wins;
    the order encodes precedence and must not be collapsed into a single
    expression.

Key Classes:
    - PatternLibrary: Read-only rule tables plus per-line matchers
    - OptionMatch: Letter, text and inline-correct flag for an option line

Key Constants:
    - DEFAULT_PATTERNS: Library used when no custom one is configured

Dependencies:
    - re (std)

Used By:
    - importer.detection.sections: Header and answer-key detection
    - importer.answer_key: Answer-key entry matching
    - importer.parsing.state_machine: Line classification
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Pattern, Tuple

from quiz_toolkit.common.thresholds import SECTION_THRESHOLDS, SectionDetectionThresholds
from quiz_toolkit.core.models.questions import AnswerKeyEntry
from quiz_toolkit.core.models.sections import SectionType

_I = re.IGNORECASE

QUESTION_NUMBER_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(r"^(\d+)\.\s*"),                    # 1.
    re.compile(r"^(\d+)\)\s*"),                    # 1)
    re.compile(r"^Q(\d+)[.:]\s*", _I),             # Q1. / Q1:
    re.compile(r"^Question\s*(\d+)[.:]\s*", _I),   # Question 1:
    re.compile(r"^#(\d+)[.:]\s*"),                 # #1:
)

OPTION_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(r"^([A-Da-d])\)\s*"),               # A)
    re.compile(r"^([A-Da-d])\.\s*"),               # A.
    re.compile(r"^\(([A-Da-d])\)\s*"),             # (A)
    re.compile(r"^([A-Da-d]):\s*"),                # A:
    re.compile(r"^([A-Da-d])\s*[-–—]\s*"),         # A - / A –
)

INLINE_CORRECT_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(r"\*$"),
    re.compile(r"^\*"),
    re.compile(r"\(correct\)", _I),
    re.compile(r"\[correct\]", _I),
    re.compile(r"✓|✔|√"),
    re.compile(r"\s+\*\s*$"),
)

INLINE_CORRECT_STRIP = re.compile(r"\*|\(correct\)|\[correct\]|✓|✔|√", _I)

ANSWER_KEY_LINE_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(r"^(\d+)[.:]\s*([A-Da-d])\s*$", _I),     # 1. A / 1: B
    re.compile(r"^(\d+)\)\s*([A-Da-d])\s*$", _I),       # 1) A
    re.compile(r"^Q?(\d+)[.:]\s*([A-Da-d])\s*$", _I),   # Q1. A
    re.compile(r"^(\d+)\s*[-–—]\s*([A-Da-d])\s*$", _I), # 1 - A
)

STANDALONE_ANSWER_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(r"^(?:correct\s+)?answers?[.:]\s*([A-Da-d])\s*$", _I),
    re.compile(r"^correct[.:]\s*([A-Da-d])\s*$", _I),
    re.compile(r"^key[.:]\s*([A-Da-d])\s*$", _I),
    re.compile(r"^ans[.:]\s*([A-Da-d])\s*$", _I),
)

# Evaluated in this order; the first type with a matching pattern wins
SECTION_PATTERNS: Tuple[Tuple[SectionType, Tuple[Pattern[str], ...]], ...] = (
    (SectionType.QUESTIONS, (
        re.compile(r"^(?:part|section)\s*(?:\d+|[a-z])?[.:]\s*(?:questions?|listening|comprehension)", _I),
        re.compile(r"^questions?\s*$", _I),
        re.compile(r"^listening\s+(?:comprehension|test|exercise)", _I),
        re.compile(r"^(?:part|section)\s*(?:\d+|[a-z])\s*$", _I),
    )),
    (SectionType.ANSWER_KEY, (
        re.compile(r"^answers?\s*(?:key)?:?\s*$", _I),
        re.compile(r"^(?:answer|correct)\s+key\s*$", _I),
        re.compile(r"^key\s*$", _I),
        re.compile(r"^solutions?\s*$", _I),
        re.compile(r"^answer\s+sheet\s*$", _I),
    )),
    (SectionType.TRANSCRIPT, (
        re.compile(r"^transcri?pt\s*$", _I),
        re.compile(r"^dialogue\s*$", _I),
        re.compile(r"^listening\s+(?:text|script)\s*$", _I),
        re.compile(r"^audio\s+(?:script|text)\s*$", _I),
        re.compile(r"^script\s*$", _I),
        re.compile(r"^text\s*$", _I),
    )),
    (SectionType.VOCABULARY, (
        re.compile(r"^vocabular?y\s*$", _I),
        re.compile(r"^key\s+words?\s*$", _I),
        re.compile(r"^lexis\s*$", _I),
        re.compile(r"^word\s+list\s*$", _I),
        re.compile(r"^new\s+words?\s*$", _I),
        re.compile(r"^glossary\s*$", _I),
    )),
)

# Loose speaker label, used when numbered lines are present
SPEAKER_LABEL_PATTERN = re.compile(r"^[A-Za-z]+\s*\d*\s*:", re.MULTILINE)
# Stricter speaker label for unnumbered text
DIALOGUE_SPEAKER_PATTERN = re.compile(
    r"^(?:Man|Woman|Speaker|Person|[A-Z][a-z]+)\s*\d*\s*:", re.MULTILINE
)
# Option-like line start used when inferring section types
OPTION_PREFIX_PATTERN = re.compile(r"^[A-Da-d][).\s]")
CAPS_HEADER_PATTERN = re.compile(r"^[A-Z\s\d:.-]+$")


def match_first(line: str, patterns: Tuple[Pattern[str], ...]) -> Optional[re.Match]:
    """Return the match of the first pattern that matches, or None."""
    for pattern in patterns:
        match = pattern.search(line)
        if match:
            return match
    return None


@dataclass(frozen=True)
class OptionMatch:
    """Option line split into letter and text, with the marker removed."""

    letter: str
    text: str
    is_correct: bool = False


@dataclass(frozen=True)
class PatternLibrary:
    """
    Read-only rule tables for line classification.

    Every matcher trims its input first, so callers may pass raw lines.
    A custom library is built by replacing individual tables:

    Example:
        >>> lib = PatternLibrary(option=OPTION_PATTERNS[:2])
        >>> lib.extract_option("(A) cat") is None
        True
    """

    question_number: Tuple[Pattern[str], ...] = QUESTION_NUMBER_PATTERNS
    option: Tuple[Pattern[str], ...] = OPTION_PATTERNS
    inline_correct: Tuple[Pattern[str], ...] = INLINE_CORRECT_PATTERNS
    inline_correct_strip: Pattern[str] = INLINE_CORRECT_STRIP
    answer_key_line: Tuple[Pattern[str], ...] = ANSWER_KEY_LINE_PATTERNS
    standalone_answer: Tuple[Pattern[str], ...] = STANDALONE_ANSWER_PATTERNS
    sections: Tuple[Tuple[SectionType, Tuple[Pattern[str], ...]], ...] = SECTION_PATTERNS
    speaker_label: Pattern[str] = SPEAKER_LABEL_PATTERN
    dialogue_speaker: Pattern[str] = DIALOGUE_SPEAKER_PATTERN
    option_prefix: Pattern[str] = OPTION_PREFIX_PATTERN
    caps_header: Pattern[str] = CAPS_HEADER_PATTERN

    # ─────────────────────────────────────────────────────────────────────
    # Per-line matchers
    # ─────────────────────────────────────────────────────────────────────

    def extract_question_number(self, line: str) -> Optional[Tuple[int, str]]:
        """
        Match a question-number line.

        Returns:
            (number, rest of line) or None

        Example:
            >>> DEFAULT_PATTERNS.extract_question_number("Q3: Where is Tom?")
            (3, 'Where is Tom?')
        """
        trimmed = line.strip()
        match = match_first(trimmed, self.question_number)
        if match is None:
            return None
        return int(match.group(1)), trimmed[match.end():]

    def extract_option(self, line: str) -> Optional[OptionMatch]:
        """
        Match an option line and strip any inline correct-answer marker.

        Example:
            >>> DEFAULT_PATTERNS.extract_option("b) Blue *")
            OptionMatch(letter='B', text='Blue', is_correct=True)
        """
        trimmed = line.strip()
        match = match_first(trimmed, self.option)
        if match is None:
            return None

        letter = match.group(1).upper()
        text = trimmed[match.end():]
        is_correct = False
        if match_first(text, self.inline_correct):
            is_correct = True
            text = self.inline_correct_strip.sub("", text).strip()
        return OptionMatch(letter=letter, text=text, is_correct=is_correct)

    def extract_answer_key_entry(self, line: str) -> Optional[AnswerKeyEntry]:
        """Match an answer-key line such as ``12. B`` or ``Q12: b``."""
        match = match_first(line.strip(), self.answer_key_line)
        if match is None:
            return None
        return AnswerKeyEntry(
            question_number=int(match.group(1)),
            answer=match.group(2).upper(),
        )

    def extract_standalone_answer(self, line: str) -> Optional[str]:
        """Match ``Answer: X`` style lines and return the upper-case letter."""
        match = match_first(line.strip(), self.standalone_answer)
        if match is None:
            return None
        return match.group(1).upper()

    def detect_section_type(self, line: str) -> Optional[SectionType]:
        """Return the section type whose header patterns match the line."""
        trimmed = line.strip()
        for section_type, patterns in self.sections:
            if match_first(trimmed, patterns):
                return section_type
        return None

    def is_section_header(
        self,
        line: str,
        thresholds: SectionDetectionThresholds = SECTION_THRESHOLDS,
    ) -> bool:
        """
        Check whether a line can act as a section header.

        A header is shorter than the configured limit, is neither a
        question-number nor an option line, and either matches a section
        pattern or is a short ALL-CAPS line.
        """
        trimmed = line.strip()
        if len(trimmed) >= thresholds.header_max_length:
            return False
        if self.extract_question_number(trimmed):
            return False
        if self.extract_option(trimmed):
            return False

        if self.detect_section_type(trimmed):
            return True

        return (
            len(trimmed) < thresholds.caps_header_max_length
            and trimmed == trimmed.upper()
            and bool(self.caps_header.match(trimmed))
        )

    def is_option_prefixed(self, line: str) -> bool:
        return bool(self.option_prefix.match(line.strip()))

    def count_speaker_labels(self, content: str, *, strict: bool) -> int:
        pattern = self.dialogue_speaker if strict else self.speaker_label
        return len(pattern.findall(content))


DEFAULT_PATTERNS = PatternLibrary()
