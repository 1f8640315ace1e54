"""
Tests for importer.patterns

Test Coverage:
- PatternLibrary per-line matchers (question number, option, answer key,
  standalone answer)
- Section header detection and the header guard
- Custom libraries built from subsets of the default tables
"""

import pytest

from quiz_toolkit.common.thresholds import SectionDetectionThresholds
from quiz_toolkit.core.models.questions import AnswerKeyEntry
from quiz_toolkit.core.models.sections import SectionType
from quiz_toolkit.importer.patterns import (
    DEFAULT_PATTERNS,
    OPTION_PATTERNS,
    OptionMatch,
    PatternLibrary,
)


class TestQuestionNumber:
    """Tests for extract_question_number."""

    @pytest.mark.parametrize("line,expected", [
        ("1. What is this?", (1, "What is this?")),
        ("12) Pick one", (12, "Pick one")),
        ("Q3: Where?", (3, "Where?")),
        ("q4. Lower case", (4, "Lower case")),
        ("Question 5: Why?", (5, "Why?")),
        ("#6: Hash", (6, "Hash")),
        ("7.", (7, "")),
    ])
    def test_extract_when_numbered_then_number_and_rest(self, line, expected):
        assert DEFAULT_PATTERNS.extract_question_number(line) == expected

    @pytest.mark.parametrize("line", ["A) Red", "Answer: B", "The end", ""])
    def test_extract_when_not_numbered_then_none(self, line):
        assert DEFAULT_PATTERNS.extract_question_number(line) is None


class TestOption:
    """Tests for extract_option and inline correct markers."""

    @pytest.mark.parametrize("line,letter,text", [
        ("A) Red", "A", "Red"),
        ("b. Blue", "B", "Blue"),
        ("(C) Green", "C", "Green"),
        ("D: Yellow", "D", "Yellow"),
        ("a - Apple", "A", "Apple"),
    ])
    def test_extract_when_option_then_letter_upper_cased(self, line, letter, text):
        assert DEFAULT_PATTERNS.extract_option(line) == OptionMatch(letter, text, False)

    @pytest.mark.parametrize("line", [
        "B) Blue*",
        "B) *Blue",
        "B) Blue (correct)",
        "B) Blue [CORRECT]",
        "B) Blue ✓",
        "B) Blue *",
    ])
    def test_extract_when_marker_then_stripped_and_correct(self, line):
        match = DEFAULT_PATTERNS.extract_option(line)
        assert match == OptionMatch("B", "Blue", True)

    @pytest.mark.parametrize("line", ["E) Nope", "1. Question", "Answer: A", "Apple pie"])
    def test_extract_when_not_option_then_none(self, line):
        assert DEFAULT_PATTERNS.extract_option(line) is None


class TestAnswerLines:
    @pytest.mark.parametrize("line,number,letter", [
        ("1. A", 1, "A"),
        ("2: b", 2, "B"),
        ("3) C", 3, "C"),
        ("Q4. D", 4, "D"),
        ("5 - a", 5, "A"),
        ("6 – B", 6, "B"),
    ])
    def test_answer_key_entry_when_matched_then_entry(self, line, number, letter):
        assert DEFAULT_PATTERNS.extract_answer_key_entry(line) == AnswerKeyEntry(number, letter)

    @pytest.mark.parametrize("line", ["1. Apple", "1. E", "A) Red", ""])
    def test_answer_key_entry_when_not_matched_then_none(self, line):
        assert DEFAULT_PATTERNS.extract_answer_key_entry(line) is None

    @pytest.mark.parametrize("line,letter", [
        ("Answer: c", "C"),
        ("Answers. A", "A"),
        ("Correct answer: D", "D"),
        ("Correct: B", "B"),
        ("Key: A", "A"),
        ("Ans: b", "B"),
    ])
    def test_standalone_answer_when_matched_then_letter(self, line, letter):
        assert DEFAULT_PATTERNS.extract_standalone_answer(line) == letter

    def test_standalone_answer_when_trailing_text_then_none(self):
        assert DEFAULT_PATTERNS.extract_standalone_answer("Answer: B because") is None


class TestSectionHeaders:
    """Tests for section type detection and the header guard."""

    @pytest.mark.parametrize("line,expected", [
        ("Questions", SectionType.QUESTIONS),
        ("Part 2: Listening", SectionType.QUESTIONS),
        ("Listening Comprehension", SectionType.QUESTIONS),
        ("Section B", SectionType.QUESTIONS),
        ("Answer Key", SectionType.ANSWER_KEY),
        ("ANSWERS:", SectionType.ANSWER_KEY),
        ("Solutions", SectionType.ANSWER_KEY),
        ("Transcript", SectionType.TRANSCRIPT),
        ("Audio script", SectionType.TRANSCRIPT),
        ("Vocabulary", SectionType.VOCABULARY),
        ("Key words", SectionType.VOCABULARY),
        ("Glossary", SectionType.VOCABULARY),
    ])
    def test_detect_when_header_then_type(self, line, expected):
        assert DEFAULT_PATTERNS.detect_section_type(line) is expected

    def test_detect_when_plain_text_then_none(self):
        assert DEFAULT_PATTERNS.detect_section_type("Tom lives in Rome.") is None

    def test_is_header_when_pattern_matches_then_true(self):
        assert DEFAULT_PATTERNS.is_section_header("Answer Key")

    def test_is_header_when_short_caps_then_true(self):
        """Short ALL-CAPS lines count as headers even without a pattern."""
        assert DEFAULT_PATTERNS.is_section_header("READING PASSAGE")

    def test_is_header_when_question_line_then_false(self):
        assert not DEFAULT_PATTERNS.is_section_header("1. QUESTIONS")

    def test_is_header_when_option_line_then_false(self):
        assert not DEFAULT_PATTERNS.is_section_header("A) KEY")

    def test_is_header_when_too_long_then_false(self):
        line = "TRANSCRIPT " + "X" * 95
        assert not DEFAULT_PATTERNS.is_section_header(line)

    def test_is_header_when_custom_limit_then_applied(self):
        thresholds = SectionDetectionThresholds(header_max_length=5)
        assert not DEFAULT_PATTERNS.is_section_header("Answer Key", thresholds)


class TestSpeakersAndPrefixes:
    def test_count_speaker_labels_when_strict_then_only_dialogue_names(self):
        content = "Man: Hello\nWoman: Hi\nnote: lower case"
        assert DEFAULT_PATTERNS.count_speaker_labels(content, strict=True) == 2
        assert DEFAULT_PATTERNS.count_speaker_labels(content, strict=False) == 3

    def test_is_option_prefixed_when_letter_prefix_then_true(self):
        assert DEFAULT_PATTERNS.is_option_prefixed("c) thing")
        assert not DEFAULT_PATTERNS.is_option_prefixed("Cat")


def test_custom_library_when_option_table_reduced_then_rules_dropped():
    """Libraries are configured by replacing whole rule tables."""
    # Arrange
    lib = PatternLibrary(option=OPTION_PATTERNS[:1])

    # Act & Assert
    assert lib.extract_option("A) Red") is not None
    assert lib.extract_option("A. Red") is None
    assert DEFAULT_PATTERNS.extract_option("A. Red") is not None
