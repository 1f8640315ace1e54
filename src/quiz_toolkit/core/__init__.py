"""
Quiz Toolkit Core Package

Shared data models, schemas and serialization used by every importer
stage.

1. **Immutable Data Models**
   - Sections and questions are frozen dataclasses; stages build new
     instances instead of editing earlier output.

2. **Stable Public Schema**
   - PublicQuestion mirrors the test-delivery payload (camelCase keys,
     positional options) and is validated by ``core.schemas``.
"""

from .models import (
    SectionType,
    Section,
    DocumentParts,
    AnswerKeyEntry,
    ParsedQuestion,
    PublicQuestion,
    ParseResult,
    FileValidation,
    SupportedTypes,
)

__all__ = [
    "SectionType",
    "Section",
    "DocumentParts",
    "AnswerKeyEntry",
    "ParsedQuestion",
    "PublicQuestion",
    "ParseResult",
    "FileValidation",
    "SupportedTypes",
]
