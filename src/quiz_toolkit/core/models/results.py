"""
Module: results

Purpose:
    Result containers returned across the public boundary: the parse
    result, file validation outcome and the supported-type listing.

Key Classes:
    - ParseResult: Output of parse_document
    - FileValidation: Output of validate_file
    - SupportedTypes: Output of get_supported_types

Dependencies:
    - dataclasses (std)
    - quiz_toolkit.common.thresholds: Confidence bands

Used By:
    - importer.pipeline
    - importer.extraction.formats
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from quiz_toolkit.common.thresholds import CONFIDENCE_THRESHOLDS
from .questions import PublicQuestion


@dataclass
class ParseResult:
    """
    Result of parsing one document.

    ``success`` is False only when extraction failed or produced no
    usable text. A parse that found zero questions in valid text is
    still successful, with confidence 0.

    Attributes:
        success: Whether usable text was extracted and parsed.
        questions: Questions in the public schema.
        transcript: Transcript section text, if found.
        vocabulary: Vocabulary section text, if found.
        confidence: Heuristic score 0-100.
        warnings: Advisory messages, most important first.
        raw_text: Preprocessed document text.
        error: Failure description when success is False.
    """

    success: bool = False
    questions: List[PublicQuestion] = field(default_factory=list)
    transcript: Optional[str] = None
    vocabulary: Optional[str] = None
    confidence: int = 0
    warnings: List[str] = field(default_factory=list)
    raw_text: str = ""
    error: Optional[str] = None

    @property
    def confidence_level(self) -> str:
        return CONFIDENCE_THRESHOLDS.band(self.confidence)

    @classmethod
    def failure(cls, error: str, raw_text: str = "") -> "ParseResult":
        return cls(success=False, error=error, raw_text=raw_text)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "questions": [q.to_dict() for q in self.questions],
            "transcript": self.transcript,
            "vocabulary": self.vocabulary,
            "confidence": self.confidence,
            "confidenceLevel": self.confidence_level,
            "warnings": list(self.warnings),
            "rawText": self.raw_text,
            "error": self.error,
        }


@dataclass(frozen=True)
class FileValidation:
    """Outcome of the pre-upload file check."""

    valid: bool
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {"valid": self.valid}
        if self.error is not None:
            d["error"] = self.error
        return d


@dataclass(frozen=True)
class SupportedTypes:
    """Accepted and explicitly rejected extensions plus MIME mapping."""

    supported: Tuple[str, ...]
    unsupported: Tuple[str, ...]
    mime_types: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "supported": list(self.supported),
            "unsupported": list(self.unsupported),
            "mimeTypes": dict(self.mime_types),
        }
