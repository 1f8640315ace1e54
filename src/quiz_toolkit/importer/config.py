"""
Module: importer.config

Purpose:
    Configuration dataclass for the document import pipeline. Bundles
    the read-only pattern library and thresholds so they are passed
    explicitly to each stage rather than read from module globals.

Key Classes:
    - ImportConfig: Main configuration for parse_document

Dependencies:
    - dataclasses: For frozen dataclass support

Used By:
    - importer.pipeline: Uses ImportConfig for all stage settings
    - quiz_toolkit.cli: Builds ImportConfig from command-line flags
"""

from dataclasses import dataclass, field

from quiz_toolkit.common.thresholds import (
    CONFIDENCE_THRESHOLDS,
    SECTION_THRESHOLDS,
    UPLOAD_THRESHOLDS,
    ConfidenceThresholds,
    SectionDetectionThresholds,
)
from .patterns import DEFAULT_PATTERNS, PatternLibrary


@dataclass(frozen=True)
class ImportConfig:
    """
    Configuration for the document import pipeline.

    Attributes:
        max_size_mb: Upload size limit used by validate_file (default 10)
        low_confidence_threshold: Scores below this get a review warning
            prepended (default 50)
        patterns: Line-classification rule tables (default DEFAULT_PATTERNS)
        section_thresholds: Section detection limits
        confidence_thresholds: Confidence penalties and bands
        validate_output: Check public questions against the JSON schema
            before returning (default False)
    """
    max_size_mb: int = UPLOAD_THRESHOLDS.max_size_mb
    low_confidence_threshold: int = UPLOAD_THRESHOLDS.low_confidence_threshold
    patterns: PatternLibrary = field(default=DEFAULT_PATTERNS)
    section_thresholds: SectionDetectionThresholds = field(default=SECTION_THRESHOLDS)
    confidence_thresholds: ConfidenceThresholds = field(default=CONFIDENCE_THRESHOLDS)
    validate_output: bool = False

    def __post_init__(self) -> None:
        if self.max_size_mb <= 0:
            raise ValueError(f"max_size_mb must be positive: {self.max_size_mb}")
        if not (0 <= self.low_confidence_threshold <= 100):
            raise ValueError(
                f"low_confidence_threshold must be 0-100: {self.low_confidence_threshold}"
            )
