"""
Tests for importer.pipeline

Test Coverage:
- parse_document(): End-to-end parsing of TXT, PDF and DOCX uploads
- Failure paths: unsupported formats, empty documents, decoder errors,
  unexpected exceptions
- Low-confidence warning, determinism, output validation
"""

import logging

import pytest

from quiz_toolkit.core.models.questions import PublicQuestion
from quiz_toolkit.core.utils.serialization import result_to_json
from quiz_toolkit.importer import pipeline
from quiz_toolkit.importer.config import ImportConfig
from quiz_toolkit.importer.pipeline import (
    EMPTY_DOCUMENT_MESSAGE,
    LOW_CONFIDENCE_WARNING,
    get_supported_types,
    parse_document,
    validate_file,
)


class TestParseDocument:
    """End-to-end tests on plain-text uploads."""

    def test_parse_when_well_formed_then_full_confidence(self, well_formed_text):
        # Act
        result = parse_document(well_formed_text.encode("utf-8"), "quiz.txt")

        # Assert
        assert result.success
        assert result.error is None
        assert result.questions == [
            PublicQuestion(
                id="q1",
                question_text="What color is the sky?",
                options=("Red", "Blue", "Green", "Yellow"),
                correct_answer="B",
            )
        ]
        assert result.warnings == []
        assert result.confidence == 100
        assert result.confidence_level == "high"

    def test_parse_when_separate_answer_key_then_reconciled(self, worksheet_text):
        result = parse_document(worksheet_text.encode("utf-8"), "worksheet.txt")

        assert [q.correct_answer for q in result.questions] == ["C", "B"]
        assert result.confidence == 100

    def test_parse_when_implicit_answer_key_then_reconciled(self):
        text = (
            "1. Capital of France?\nA) Rome\nB) Paris\nC) Oslo\nD) Bern\n\n"
            "2. Capital of Italy?\nA) Rome\nB) Paris\nC) Oslo\nD) Bern\n\n"
            "1. B\n2. A\n3. C"
        )

        result = parse_document(text.encode("utf-8"), "quiz.txt")

        assert [q.correct_answer for q in result.questions] == ["B", "A"]

    def test_parse_when_transcript_and_vocabulary_then_returned(self):
        text = (
            "Questions\n1. Who calls?\nA) Tom\nB) Ann\nC) Bob\nD) Sue\nAnswer: A\n\n"
            "Transcript\nTom: Hi Ann!\nAnn: Hello Tom.\n\n"
            "Vocabulary\ncall - llamar"
        )

        result = parse_document(text.encode("utf-8"), "lesson.txt")

        assert result.transcript == "Tom: Hi Ann!\nAnn: Hello Tom."
        assert result.vocabulary == "call - llamar"
        assert result.questions[0].correct_answer == "A"

    def test_parse_when_no_headers_then_questions_still_found(self):
        text = "Read carefully.\n1. First?\nA) a\nB) b\n2. Second?\nA) c\nB) d"

        result = parse_document(text.encode("utf-8"), "quiz.txt")

        assert result.success
        assert [q.id for q in result.questions] == ["q1", "q2"]

    def test_parse_when_low_confidence_then_warning_prepended(self):
        text = "1. Alpha\n2. Beta\n3. Gamma\n5. Delta"

        result = parse_document(text.encode("utf-8"), "quiz.txt")

        assert result.confidence < 50
        assert result.warnings[0] == LOW_CONFIDENCE_WARNING
        assert result.warnings[1] == "Question 1: No options detected"

    def test_parse_when_text_without_questions_then_success_zero_confidence(self):
        result = parse_document(b"Nothing numbered here at all.", "notes.txt")

        assert result.success
        assert result.questions == []
        assert result.confidence == 0
        assert result.warnings == [LOW_CONFIDENCE_WARNING]

    def test_parse_when_raw_text_then_preprocessed(self):
        result = parse_document(b"1.\tHi  there\r\nA)  x", "quiz.txt")
        assert result.raw_text == "1. Hi there\nA) x"

    def test_parse_when_called_twice_then_identical(self, worksheet_text):
        """Same bytes and name give byte-identical output."""
        data = worksheet_text.encode("utf-8")

        first = result_to_json(parse_document(data, "w.txt"))
        second = result_to_json(parse_document(data, "w.txt"))

        assert first == second

    def test_parse_when_custom_low_confidence_threshold_then_used(self, well_formed_text):
        config = ImportConfig(low_confidence_threshold=100)
        text = well_formed_text.replace("*", "")

        result = parse_document(text.encode("utf-8"), "quiz.txt", config=config)

        assert result.warnings[0] == LOW_CONFIDENCE_WARNING

    def test_parse_when_validate_output_then_still_succeeds(self, well_formed_text):
        config = ImportConfig(validate_output=True)
        result = parse_document(well_formed_text.encode("utf-8"), "quiz.txt", config=config)
        assert result.success


class TestParseDocumentFormats:
    """End-to-end tests on binary formats."""

    def test_parse_when_pdf_then_questions(self, make_pdf, well_formed_text):
        result = parse_document(make_pdf(well_formed_text), "quiz.pdf")

        assert result.success
        assert len(result.questions) == 1
        assert result.questions[0].correct_answer == "B"
        assert result.questions[0].options == ("Red", "Blue", "Green", "Yellow")

    def test_parse_when_docx_then_questions(self, make_docx, well_formed_text):
        data = make_docx(well_formed_text.split("\n"))

        result = parse_document(data, "quiz.docx")

        assert result.success
        assert result.confidence == 100


class TestParseDocumentFailures:
    """Failure paths never raise."""

    def test_parse_when_rtf_then_failure(self):
        result = parse_document(b"{\\rtf1 hi}", "notes.rtf")

        assert not result.success
        assert result.error == (
            "RTF format is not supported. Please convert to .docx, PDF, or plain text."
        )
        assert result.questions == []

    def test_parse_when_doc_then_failure(self):
        result = parse_document(b"\xd0\xcf\x11\xe0", "old.doc")
        assert result.error == "Old .doc format is not supported. Please convert to .docx or PDF."

    @pytest.mark.parametrize("data", [b"", b"   \n\t\r\n"])
    def test_parse_when_empty_then_failure(self, data):
        result = parse_document(data, "empty.txt")

        assert not result.success
        assert result.error == EMPTY_DOCUMENT_MESSAGE

    def test_parse_when_blank_pdf_then_empty_failure(self, make_pdf):
        result = parse_document(make_pdf(""), "blank.pdf")
        assert result.error == EMPTY_DOCUMENT_MESSAGE

    def test_parse_when_corrupt_docx_then_failure(self):
        result = parse_document(b"PK\x03\x04garbage", "broken.docx")

        assert not result.success
        assert result.error.startswith("Failed to extract text from DOCX:")

    def test_parse_when_stage_raises_then_unexpected_error(self, monkeypatch, caplog):
        # Arrange
        def _boom(*args, **kwargs):
            raise RuntimeError("detector exploded")

        monkeypatch.setattr(pipeline, "split_document", _boom)

        # Act
        with caplog.at_level(logging.ERROR, logger="quiz_toolkit.importer.pipeline"):
            result = parse_document(b"1. Hi", "quiz.txt")

        # Assert
        assert not result.success
        assert result.error == "Unexpected error while parsing document: detector exploded"
        assert result.raw_text == "1. Hi"
        assert "Unexpected error" in caplog.text


def test_reexports_when_imported_then_same_behavior():
    assert not validate_file("notes.rtf", 1000).valid
    assert get_supported_types().supported == ("pdf", "docx", "txt")
