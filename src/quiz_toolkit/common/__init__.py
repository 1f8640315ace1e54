"""Common utilities shared across the toolkit."""

from __future__ import annotations

from .thresholds import (
    ConfidenceThresholds,
    SectionDetectionThresholds,
    UploadThresholds,
    CONFIDENCE_THRESHOLDS,
    SECTION_THRESHOLDS,
    UPLOAD_THRESHOLDS,
)

__all__ = [
    "ConfidenceThresholds",
    "SectionDetectionThresholds",
    "UploadThresholds",
    "CONFIDENCE_THRESHOLDS",
    "SECTION_THRESHOLDS",
    "UPLOAD_THRESHOLDS",
]
