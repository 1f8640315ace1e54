"""Question parsing: line classification state machine and driver."""

from .questions import QuestionParseResult, finalize_question, parse_questions
from .state_machine import (
    INITIAL_STATE,
    ClassifiedLine,
    CollectingOptions,
    CollectingText,
    LineKind,
    NoCurrentQuestion,
    ParserState,
    classify_line,
    finish,
    step,
)

__all__ = [
    "QuestionParseResult",
    "finalize_question",
    "parse_questions",
    "INITIAL_STATE",
    "ClassifiedLine",
    "CollectingOptions",
    "CollectingText",
    "LineKind",
    "NoCurrentQuestion",
    "ParserState",
    "classify_line",
    "finish",
    "step",
]
