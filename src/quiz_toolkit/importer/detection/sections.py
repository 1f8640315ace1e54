"""
Module: importer.detection.sections

Purpose:
    Split preprocessed document text into typed sections (questions,
    answer key, transcript, vocabulary). Sections open on explicit
    header lines or, for answer keys, on a run of key-entry lines with
    no header. Untitled sections are typed from their content.

Key Functions:
    - detect_sections(): Ordered list of Sections covering every line
    - infer_section_type(): Content-based type for untitled sections
    - split_document(): Same-typed sections joined into DocumentParts

Dependencies:
    - importer.patterns: Header, option and key-entry matchers

Used By:
    - importer.pipeline: Stage 3

Algorithm:
    1. Walk lines, accumulating into the current section buffer
    2. A header line (pattern match + header guard) closes the buffer
       and opens a section of the header's type; the header line is
       kept in the new section's line range but not its content
    3. A key-entry line with enough key entries in the lookahead window
       closes the buffer and opens an answer-key section
    4. Flush the final buffer, then type every untitled section
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from quiz_toolkit.common.thresholds import SECTION_THRESHOLDS, SectionDetectionThresholds
from quiz_toolkit.core.models.sections import DocumentParts, Section, SectionType
from ..patterns import DEFAULT_PATTERNS, PatternLibrary

logger = logging.getLogger(__name__)

# Separator used when joining non-contiguous sections of the same type
SECTION_JOINERS: Dict[SectionType, str] = {
    SectionType.QUESTIONS: "\n\n",
    SectionType.ANSWER_KEY: "\n",
    SectionType.TRANSCRIPT: "\n\n",
    SectionType.VOCABULARY: "\n",
}


@dataclass
class _SectionBuffer:
    """Lines collected for the section currently open."""
    type: SectionType
    start_line: int
    header: Optional[str] = None
    lines: List[str] = field(default_factory=list)

    def close(self, end_line: int) -> Optional[Section]:
        if end_line <= self.start_line:
            return None
        return Section(
            type=self.type,
            content="\n".join(self.lines).strip(),
            start_line=self.start_line,
            end_line=end_line,
            header=self.header,
        )


def _opens_answer_key(
    lines: Sequence[str],
    index: int,
    patterns: PatternLibrary,
    thresholds: SectionDetectionThresholds,
) -> bool:
    """Check whether enough key entries follow ``lines[index]`` (itself an entry)."""
    window_end = min(index + thresholds.answer_key_lookahead, len(lines))
    count = 1
    for j in range(index + 1, window_end):
        if patterns.extract_answer_key_entry(lines[j]):
            count += 1
    return count >= thresholds.answer_key_min_entries


def infer_section_type(
    content: str,
    *,
    patterns: PatternLibrary = DEFAULT_PATTERNS,
    thresholds: SectionDetectionThresholds = SECTION_THRESHOLDS,
) -> SectionType:
    """
    Infer the type of an untitled section from its lines.

    Rules, first match wins:
    1. Key-entry lines exceed half the non-blank lines -> answerKey
    2. Numbered lines and more option lines than numbered -> questions
    3. Numbered lines, no option lines: enough speaker labels
       -> transcript, else questions
    4. Enough strict speaker labels (``Man:``, ``Speaker 2:``, ``Tom:``)
       -> transcript
    5. Default -> questions

    Example:
        >>> infer_section_type("1. A\\n2. C\\n3. B")
        <SectionType.ANSWER_KEY: 'answerKey'>
    """
    lines = [line.strip() for line in content.split("\n") if line.strip()]

    question_count = 0
    option_count = 0
    answer_key_count = 0
    for line in lines:
        if patterns.extract_question_number(line):
            question_count += 1
        if patterns.is_option_prefixed(line):
            option_count += 1
        if patterns.extract_answer_key_entry(line):
            answer_key_count += 1

    if answer_key_count > len(lines) * thresholds.answer_key_majority_ratio:
        return SectionType.ANSWER_KEY

    if question_count > 0 and option_count > question_count:
        return SectionType.QUESTIONS

    if question_count > 0 and option_count == 0:
        speakers = patterns.count_speaker_labels(content, strict=False)
        if speakers >= thresholds.transcript_min_speakers_numbered:
            return SectionType.TRANSCRIPT
        return SectionType.QUESTIONS

    if patterns.count_speaker_labels(content, strict=True) >= thresholds.transcript_min_speakers:
        return SectionType.TRANSCRIPT

    return SectionType.QUESTIONS


def detect_sections(
    text: str,
    *,
    patterns: PatternLibrary = DEFAULT_PATTERNS,
    thresholds: SectionDetectionThresholds = SECTION_THRESHOLDS,
) -> List[Section]:
    """
    Detect typed sections in preprocessed text.

    Args:
        text: Preprocessed document text.
        patterns: Line-classification rules.
        thresholds: Header and answer-key detection limits.

    Returns:
        Sections in document order. Their line ranges tile
        ``text.split("\\n")`` exactly; none is left UNKNOWN.

    Example:
        >>> [s.type.value for s in detect_sections("1. Hi\\nA) x\\nB) y\\nAnswer Key\\n1. A")]
        ['questions', 'answerKey']
    """
    lines = text.split("\n")
    sections: List[Section] = []
    current = _SectionBuffer(type=SectionType.UNKNOWN, start_line=0)

    def _switch(index: int, section_type: SectionType, header: Optional[str]) -> _SectionBuffer:
        closed = current.close(index)
        if closed is not None:
            sections.append(closed)
        return _SectionBuffer(type=section_type, start_line=index, header=header)

    for i, line in enumerate(lines):
        trimmed = line.strip()

        section_type = patterns.detect_section_type(trimmed) if trimmed else None
        if section_type and patterns.is_section_header(trimmed, thresholds):
            logger.debug(f"Line {i}: header {trimmed!r} opens {section_type.value}")
            current = _switch(i, section_type, trimmed)
            continue

        if (
            current.type is not SectionType.ANSWER_KEY
            and patterns.extract_answer_key_entry(trimmed)
            and _opens_answer_key(lines, i, patterns, thresholds)
        ):
            logger.debug(f"Line {i}: implicit answer key")
            current = _switch(i, SectionType.ANSWER_KEY, None)

        current.lines.append(line)

    closed = current.close(len(lines))
    if closed is not None:
        sections.append(closed)

    resolved: List[Section] = []
    for section in sections:
        if section.type is SectionType.UNKNOWN:
            inferred = infer_section_type(section.content, patterns=patterns, thresholds=thresholds)
            logger.debug(
                f"Lines {section.start_line}-{section.end_line}: inferred {inferred.value}"
            )
            section = Section(
                type=inferred,
                content=section.content,
                start_line=section.start_line,
                end_line=section.end_line,
                header=section.header,
            )
        resolved.append(section)

    return resolved


def split_document(
    text: str,
    *,
    patterns: PatternLibrary = DEFAULT_PATTERNS,
    thresholds: SectionDetectionThresholds = SECTION_THRESHOLDS,
) -> DocumentParts:
    """
    Split a document into per-type text.

    Same-typed sections are joined in document order (blank line between
    question and transcript sections, single newline between answer-key
    and vocabulary sections). Sections with empty content are skipped.

    If no questions or answer-key section exists anywhere, the entire
    text is used as the questions section.
    """
    joined: Dict[SectionType, List[str]] = {t: [] for t in SECTION_JOINERS}
    other: List[Section] = []

    for section in detect_sections(text, patterns=patterns, thresholds=thresholds):
        if section.type in joined:
            if section.content:
                joined[section.type].append(section.content)
        else:
            other.append(section)

    def _join(section_type: SectionType) -> Optional[str]:
        parts = joined[section_type]
        return SECTION_JOINERS[section_type].join(parts) if parts else None

    questions = _join(SectionType.QUESTIONS)
    answer_key = _join(SectionType.ANSWER_KEY)
    if not questions and not answer_key:
        questions = text

    return DocumentParts(
        questions=questions,
        answer_key=answer_key,
        transcript=_join(SectionType.TRANSCRIPT),
        vocabulary=_join(SectionType.VOCABULARY),
        other=tuple(other),
    )
