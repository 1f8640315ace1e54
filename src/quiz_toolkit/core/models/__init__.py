"""
Core Models Package

Immutable, validated data models shared by every pipeline stage.

All question and section models are frozen dataclasses: a stage never
edits what an earlier stage produced, it builds a new instance with
``dataclasses.replace``. ParseResult is the one mutable container,
assembled by the pipeline and handed to the caller.
"""

from .sections import SectionType, Section, DocumentParts
from .questions import OPTION_LETTERS, AnswerKeyEntry, ParsedQuestion, PublicQuestion
from .results import ParseResult, FileValidation, SupportedTypes

__all__ = [
    "SectionType",
    "Section",
    "DocumentParts",
    "OPTION_LETTERS",
    "AnswerKeyEntry",
    "ParsedQuestion",
    "PublicQuestion",
    "ParseResult",
    "FileValidation",
    "SupportedTypes",
]
