import io
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import quiz_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


WELL_FORMED_QUESTION = (
    "1. What color is the sky?\n"
    "A) Red\n"
    "B) Blue*\n"
    "C) Green\n"
    "D) Yellow"
)

WORKSHEET_WITH_KEY = (
    "Listening Comprehension\n"
    "1. Where does Tom live?\n"
    "A) London\n"
    "B) Paris\n"
    "C) Rome\n"
    "D) Madrid\n"
    "\n"
    "2. What does he do?\n"
    "A) Teacher\n"
    "B) Doctor\n"
    "C) Chef\n"
    "D) Pilot\n"
    "\n"
    "Answer Key\n"
    "1. C\n"
    "2. B"
)


# Common test fixtures
@pytest.fixture
def well_formed_text() -> str:
    """Single complete question with an inline correct marker."""
    return WELL_FORMED_QUESTION


@pytest.fixture
def worksheet_text() -> str:
    """Two questions followed by an explicit answer key."""
    return WORKSHEET_WITH_KEY


@pytest.fixture
def make_pdf():
    """Build an in-memory PDF with one page per string."""
    import fitz

    def _make(*pages: str) -> bytes:
        doc = fitz.open()
        for text in pages:
            page = doc.new_page()
            if text:
                page.insert_text((72, 72), text, fontsize=11)
        data = doc.tobytes()
        doc.close()
        return data

    return _make


@pytest.fixture
def make_docx():
    """Build an in-memory DOCX from paragraphs and optional table rows."""
    import docx

    def _make(paragraphs, table_rows=None) -> bytes:
        document = docx.Document()
        for text in paragraphs:
            document.add_paragraph(text)
        if table_rows:
            table = document.add_table(rows=len(table_rows), cols=len(table_rows[0]))
            for r, row in enumerate(table_rows):
                for c, value in enumerate(row):
                    table.cell(r, c).text = value
        out = io.BytesIO()
        document.save(out)
        return out.getvalue()

    return _make
