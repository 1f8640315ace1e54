"""Centralized threshold and magic number configuration.

This module contains all hardcoded thresholds, ratios, and penalties
used throughout section detection, confidence scoring and upload
validation. Having these in one place makes tuning easier and documents
what each value controls.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SectionDetectionThresholds:
    """Thresholds for section header and implicit answer-key detection."""

    header_max_length: int = 100  # Lines this long or longer are never headers
    caps_header_max_length: int = 50  # Max length for an ALL-CAPS header line
    answer_key_lookahead: int = 5  # Window (current line included) scanned for key entries
    answer_key_min_entries: int = 3  # Matching lines in the window to open an answer key
    answer_key_majority_ratio: float = 0.5  # Share of key-entry lines for inferred answer keys
    transcript_min_speakers_numbered: int = 3  # Speaker labels needed when numbered lines exist
    transcript_min_speakers: int = 2  # Speaker labels needed otherwise


@dataclass(frozen=True)
class ConfidenceThresholds:
    """Penalties and bands for the parse confidence score."""

    max_score: int = 100
    min_score: int = 0
    expected_options: int = 4  # Options a complete question carries (A-D)
    no_options_penalty: int = 15  # Per question with zero options
    missing_option_penalty: int = 3  # Per missing option when 1-3 are present
    missing_answer_penalty: int = 5  # Per question without a correct answer
    warning_penalty: int = 2  # Per parser warning
    non_sequential_penalty: int = 10  # Numbering differs from 1..N
    high_band: int = 80  # Scores at or above are "high"
    medium_band: int = 50  # Scores at or above are "medium"

    def band(self, score: int) -> str:
        """Return ``"high"``, ``"medium"`` or ``"low"`` for a score."""
        if score >= self.high_band:
            return "high"
        if score >= self.medium_band:
            return "medium"
        return "low"


@dataclass(frozen=True)
class UploadThresholds:
    """Limits applied before a document is handed to the pipeline."""

    max_size_mb: int = 10
    low_confidence_threshold: int = 50  # Below this a review warning is prepended


# Global instances for easy import
SECTION_THRESHOLDS = SectionDetectionThresholds()
CONFIDENCE_THRESHOLDS = ConfidenceThresholds()
UPLOAD_THRESHOLDS = UploadThresholds()
