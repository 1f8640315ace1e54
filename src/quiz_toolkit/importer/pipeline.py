"""
Module: importer.pipeline

Purpose:
    Main orchestrator for turning an uploaded document into quiz
    questions. Sequences extraction, preprocessing, section detection,
    answer-key parsing, question parsing, confidence scoring and
    formatting into a single ParseResult.

Key Functions:
    - parse_document(): Main entry point; never raises
    - validate_file(): Pre-upload extension and size check
    - get_supported_types(): Accepted and rejected formats

Dependencies:
    - importer.extraction: Text extraction collaborator
    - importer.detection: Section splitting
    - importer.parsing: Question state machine
    - core.schemas: Optional output validation

Used By:
    - quiz_toolkit.cli
    - HTTP upload handlers

Stages:
    1. extract      bytes -> text (PyMuPDF / python-docx / UTF-8)
    2. preprocess   normalize whitespace and line endings
    3. sections     split into questions / answer key / transcript / vocabulary
    4. answer_key   number -> letter map
    5. questions    state machine + reconciliation
    6. confidence   heuristic 0-100 score
    7. format       public question schema
"""

from __future__ import annotations

import logging
from typing import Optional

from quiz_toolkit.core.models.results import ParseResult
from quiz_toolkit.core.schemas.validator import validate_parse_result
from .answer_key import parse_answer_key
from .config import ImportConfig
from .detection.sections import split_document
from .errors import DocumentImportError, EmptyDocumentError
from .extraction.extractor import extract_text
from .extraction.formats import get_supported_types, validate_file
from .formatter import to_test_question_format
from .parsing.questions import parse_questions
from .preprocess import preprocess_text
from .scoring import calculate_confidence
from .timing import TimingLog, timed_stage

logger = logging.getLogger(__name__)

EMPTY_DOCUMENT_MESSAGE = "Document appears to be empty or could not be read."
LOW_CONFIDENCE_WARNING = (
    "Low confidence in parsing results. "
    "Please review carefully or consider using AI-assisted parsing."
)

__all__ = [
    "EMPTY_DOCUMENT_MESSAGE",
    "LOW_CONFIDENCE_WARNING",
    "parse_document",
    "validate_file",
    "get_supported_types",
]


def _run_stages(
    buffer: bytes,
    filename: Optional[str],
    config: ImportConfig,
    timings: TimingLog,
    result: ParseResult,
) -> ParseResult:
    """Run every stage, filling ``result`` as each one completes."""
    with timed_stage(timings, "extract"):
        extraction = extract_text(buffer, filename)

    if not extraction.success:
        return ParseResult.failure(extraction.error or "Text extraction failed.")

    for warning in extraction.warnings:
        logger.warning(f"{filename}: {warning}")

    if not extraction.text or not extraction.text.strip():
        raise EmptyDocumentError(EMPTY_DOCUMENT_MESSAGE)

    with timed_stage(timings, "preprocess"):
        text = preprocess_text(extraction.text)
    result.raw_text = text
    logger.info(f"Extracted {len(text)} characters")

    with timed_stage(timings, "sections"):
        parts = split_document(
            text,
            patterns=config.patterns,
            thresholds=config.section_thresholds,
        )
    logger.debug(
        f"Detected sections: questions={parts.has_questions}, "
        f"answer_key={parts.has_answer_key}, "
        f"transcript={parts.transcript is not None}, "
        f"vocabulary={parts.vocabulary is not None}, other={len(parts.other)}"
    )
    result.transcript = parts.transcript
    result.vocabulary = parts.vocabulary

    with timed_stage(timings, "answer_key"):
        answer_key = parse_answer_key(parts.answer_key, patterns=config.patterns)
    logger.info(f"Parsed {len(answer_key)} answers from key")

    with timed_stage(timings, "questions"):
        parsed = parse_questions(parts.questions, answer_key, patterns=config.patterns)
    logger.info(
        f"Parsed {len(parsed.questions)} questions with {len(parsed.warnings)} warnings"
    )
    result.warnings = list(parsed.warnings)

    with timed_stage(timings, "confidence"):
        result.confidence = calculate_confidence(
            parsed.questions, parsed.warnings, config.confidence_thresholds
        )
    logger.info(f"Confidence score: {result.confidence} ({result.confidence_level})")

    with timed_stage(timings, "format"):
        result.questions = to_test_question_format(parsed.questions)
    result.success = True

    if result.confidence < config.low_confidence_threshold:
        result.warnings.insert(0, LOW_CONFIDENCE_WARNING)

    if config.validate_output:
        with timed_stage(timings, "validate"):
            validate_parse_result(result.to_dict(), strict=True)

    return result


def parse_document(
    buffer: bytes,
    filename: Optional[str],
    *,
    config: Optional[ImportConfig] = None,
) -> ParseResult:
    """
    Parse an uploaded document into quiz questions.

    Every failure is reported through the returned result; this function
    does not raise. Partial problems (missing options, missing answers,
    odd numbering) only lower the confidence and add warnings.

    Args:
        buffer: Raw file bytes.
        filename: Original file name, used for format detection.
        config: Pipeline configuration (defaults to ImportConfig()).

    Returns:
        ParseResult. ``success`` is False only when the document could
        not be read or contained no text.

    Example:
        >>> result = parse_document(b"1. Sky?\\nA) Red\\nB) Blue*\\nC) Green\\nD) Grey", "q.txt")
        >>> result.confidence, result.questions[0].correct_answer
        (100, 'B')
    """
    config = config or ImportConfig()
    timings = TimingLog()
    result = ParseResult()
    logger.info(f"Parsing document: {filename}")

    try:
        return _run_stages(buffer, filename, config, timings, result)
    except DocumentImportError as e:
        logger.warning(f"Could not parse {filename}: {e}")
        return ParseResult.failure(str(e), raw_text=result.raw_text)
    except Exception as e:
        logger.exception(f"Unexpected error while parsing {filename}")
        return ParseResult.failure(
            f"Unexpected error while parsing document: {e}",
            raw_text=result.raw_text,
        )
    finally:
        logger.debug(timings.summary())
