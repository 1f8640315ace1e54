"""
Tests for importer.parsing.questions

Test Coverage:
- parse_questions(): Assembly over whole sections
- finalize_question(): Answer-key reconciliation and warnings
"""

from quiz_toolkit.core.models.questions import ParsedQuestion
from quiz_toolkit.importer.parsing.questions import finalize_question, parse_questions


class TestFinalizeQuestion:
    """Tests for reconciliation and per-question warnings."""

    def test_finalize_when_complete_then_no_warnings(self):
        q = ParsedQuestion(1, "Q", {"A": "a", "B": "b", "C": "c", "D": "d"}, "A")
        assert finalize_question(q, {}) == (q, [])

    def test_finalize_when_answer_missing_then_filled_from_key(self):
        q = ParsedQuestion(2, "Q", {"A": "a", "B": "b", "C": "c", "D": "d"})

        finalized, warnings = finalize_question(q, {2: "C"})

        assert finalized.correct_answer == "C"
        assert warnings == []

    def test_finalize_when_answer_present_then_key_ignored(self):
        q = ParsedQuestion(2, "Q", {"A": "a", "B": "b", "C": "c", "D": "d"}, "B")
        assert finalize_question(q, {2: "C"})[0].correct_answer == "B"

    def test_finalize_when_no_options_and_no_answer_then_two_warnings(self):
        _, warnings = finalize_question(ParsedQuestion(5), None)
        assert warnings == [
            "Question 5: No options detected",
            "Question 5: No correct answer found",
        ]

    def test_finalize_when_partial_options_then_count_warning(self):
        q = ParsedQuestion(3, "Q", {"A": "a", "B": "b"}, "A")
        assert finalize_question(q)[1] == ["Question 3: Only 2 options found"]


class TestParseQuestions:
    """Tests for section-level parsing."""

    def test_parse_when_well_formed_then_single_complete_question(self, well_formed_text):
        # Act
        result = parse_questions(well_formed_text, {})

        # Assert
        assert result.warnings == []
        assert result.questions == [
            ParsedQuestion(
                number=1,
                question_text="What color is the sky?",
                options={"A": "Red", "B": "Blue", "C": "Green", "D": "Yellow"},
                correct_answer="B",
            )
        ]

    def test_parse_when_answer_key_then_reconciled(self):
        text = "1. Two plus two?\nA) 3\nB) 5\nC) 4\nD) 6"
        result = parse_questions(text, {1: "C"})
        assert result.questions[0].correct_answer == "C"

    def test_parse_when_incomplete_questions_then_all_emitted_with_warnings(self):
        text = "1. Lonely prompt\n2. Two options\nA) x\nB) y\nAnswer: B\n3. Nothing"

        result = parse_questions(text)

        assert [q.number for q in result.questions] == [1, 2, 3]
        assert result.questions[1].correct_answer == "B"
        assert result.warnings == [
            "Question 1: No options detected",
            "Question 1: No correct answer found",
            "Question 2: Only 2 options found",
            "Question 3: No options detected",
            "Question 3: No correct answer found",
        ]

    def test_parse_when_multiline_prompt_then_joined_with_spaces(self):
        text = "Question 1: Read the passage\nabout Tom\n\nA) yes\nB) no"
        q = parse_questions(text).questions[0]
        assert q.question_text == "Read the passage about Tom"
        assert q.options == {"A": "yes", "B": "no"}

    def test_parse_when_duplicate_numbers_then_both_kept_in_order(self):
        result = parse_questions("1. A?\nA) x\n1. B?\nA) y")
        assert [q.question_text for q in result.questions] == ["A?", "B?"]

    def test_parse_when_mixed_numbering_styles_then_all_found(self):
        text = "Q1: One\nA) a\n#2: Two\nA) b\n3) Three\nA) c"
        assert [q.number for q in parse_questions(text).questions] == [1, 2, 3]

    def test_parse_when_no_question_lines_then_empty(self):
        result = parse_questions("Just prose.\nA) stray option")
        assert result.questions == []
        assert result.warnings == []

    def test_parse_when_none_then_empty(self):
        assert parse_questions(None).questions == []
