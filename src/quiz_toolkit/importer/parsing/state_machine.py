"""
Module: importer.parsing.state_machine

Purpose:
    Line-classification state machine that assembles questions from
    loosely formatted text. Lines are classified without looking at
    parser state; a pure reducer then folds each classified line into
    the state and emits a question whenever one is closed.

Key Functions:
    - classify_line(): Tag one line as blank/question/option/answer/text
    - step(): (state, line) -> (state, emitted question or None)
    - finish(): Close whatever question is still open at end of input

Key Classes:
    - ClassifiedLine: Result of classify_line
    - NoCurrentQuestion, CollectingText, CollectingOptions: Parser states

Dependencies:
    - importer.patterns: Line matchers

Used By:
    - importer.parsing.questions: Drives the reducer over a section

States:
    NoCurrentQuestion  --question-->  CollectingText
    CollectingText     --option/blank-->  CollectingOptions
    any open state     --question-->  CollectingText (previous emitted)
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple, Union

from quiz_toolkit.core.models.questions import ParsedQuestion
from ..patterns import DEFAULT_PATTERNS, PatternLibrary


class LineKind(str, Enum):
    """Category of a line, in classification priority order."""

    BLANK = "blank"
    QUESTION_START = "question_start"
    OPTION = "option"
    ANSWER = "answer"
    TEXT = "text"


@dataclass(frozen=True)
class ClassifiedLine:
    """
    A classified line.

    Attributes:
        kind: Line category.
        text: Question text after the number, option text with markers
            removed, or the trimmed line for TEXT.
        number: Question number (QUESTION_START only).
        letter: Option or answer letter, upper case.
        is_correct: Option carried an inline correct-answer marker.
    """
    kind: LineKind
    text: str = ""
    number: Optional[int] = None
    letter: Optional[str] = None
    is_correct: bool = False


def classify_line(line: str, patterns: PatternLibrary = DEFAULT_PATTERNS) -> ClassifiedLine:
    """
    Classify one line. Question numbers win over options, options over
    standalone answers, and anything else is free text.

    Example:
        >>> classify_line("Answer: c").letter
        'C'
    """
    trimmed = line.strip()
    if not trimmed:
        return ClassifiedLine(LineKind.BLANK)

    numbered = patterns.extract_question_number(trimmed)
    if numbered is not None:
        number, rest = numbered
        return ClassifiedLine(LineKind.QUESTION_START, text=rest, number=number)

    option = patterns.extract_option(trimmed)
    if option is not None:
        return ClassifiedLine(
            LineKind.OPTION,
            text=option.text,
            letter=option.letter,
            is_correct=option.is_correct,
        )

    answer = patterns.extract_standalone_answer(trimmed)
    if answer is not None:
        return ClassifiedLine(LineKind.ANSWER, letter=answer)

    return ClassifiedLine(LineKind.TEXT, text=trimmed)


# ─────────────────────────────────────────────────────────────────────────────
# States
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class NoCurrentQuestion:
    """Before the first question-number line. Other lines are ignored."""


@dataclass(frozen=True)
class CollectingText:
    """Question open; free-text lines extend the prompt buffer."""
    question: ParsedQuestion
    buffer: Tuple[str, ...] = ()

    def commit(self) -> ParsedQuestion:
        """Question with the buffered prompt lines joined into its text."""
        if not self.buffer:
            return self.question
        return replace(self.question, question_text=" ".join(self.buffer).strip())


@dataclass(frozen=True)
class CollectingOptions:
    """Prompt committed; free-text lines continue the last option."""
    question: ParsedQuestion
    last_letter: Optional[str] = None


ParserState = Union[NoCurrentQuestion, CollectingText, CollectingOptions]

INITIAL_STATE: ParserState = NoCurrentQuestion()


def _current_question(state: ParserState) -> Optional[ParsedQuestion]:
    if isinstance(state, CollectingText):
        return state.commit()
    if isinstance(state, CollectingOptions):
        return state.question
    return None


def step(
    state: ParserState,
    line: ClassifiedLine,
) -> Tuple[ParserState, Optional[ParsedQuestion]]:
    """
    Fold one classified line into the parser state.

    Returns:
        (next state, question closed by this line or None). A question
        is only emitted when a new question-number line arrives.
    """
    if line.kind is LineKind.QUESTION_START:
        emitted = _current_question(state)
        opened = ParsedQuestion(number=line.number or 0)
        buffer = (line.text,) if line.text else ()
        return CollectingText(question=opened, buffer=buffer), emitted

    if isinstance(state, NoCurrentQuestion):
        return state, None

    if line.kind is LineKind.OPTION:
        question = _current_question(state)
        options = {**question.options, line.letter: line.text}
        correct = line.letter if line.is_correct else question.correct_answer
        question = replace(question, options=options, correct_answer=correct)
        return CollectingOptions(question=question, last_letter=line.letter), None

    if line.kind is LineKind.ANSWER:
        # Standalone answers override inline markers seen earlier
        question = replace(state.question, correct_answer=line.letter)
        return replace(state, question=question), None

    if line.kind is LineKind.BLANK:
        if isinstance(state, CollectingText) and state.buffer:
            return CollectingOptions(question=state.commit()), None
        return state, None

    # Free text
    if isinstance(state, CollectingText):
        return replace(state, buffer=state.buffer + (line.text,)), None

    if state.last_letter is None:
        return state, None
    question = state.question
    options = dict(question.options)
    options[state.last_letter] = f"{options[state.last_letter]} {line.text}"
    return replace(state, question=replace(question, options=options)), None


def finish(state: ParserState) -> Optional[ParsedQuestion]:
    """Return the question still open at end of input, if any."""
    return _current_question(state)
