"""
Serialization Utilities

To/from JSON helpers for parse results and public questions.

- ``serialize_*`` / ``deserialize_*`` convert between models and the
  camelCase dictionaries the HTTP layer returns
- ``save_*`` / ``load_*`` write and read those dictionaries on disk
- Deserialization validates against the schemas first
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List

from ..models.questions import PublicQuestion
from ..models.results import ParseResult
from ..schemas.validator import validate_parse_result, validate_public_question


# ─────────────────────────────────────────────────────────────────────────────
# Question Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_questions(questions: List[PublicQuestion]) -> list[dict[str, Any]]:
    """Serialize public questions to a list of dictionaries."""
    return [q.to_dict() for q in questions]


def deserialize_questions(
    data: list[dict[str, Any]],
    *,
    validate: bool = True,
) -> List[PublicQuestion]:
    """
    Deserialize public questions.

    Raises:
        ValidationError: If validate=True and an entry is invalid
    """
    questions = []
    for i, item in enumerate(data):
        if validate:
            validate_public_question(item, path=f"[{i}]")
        questions.append(PublicQuestion.from_dict(item))
    return questions


# ─────────────────────────────────────────────────────────────────────────────
# Result Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_result(result: ParseResult) -> dict[str, Any]:
    """
    Serialize a ParseResult to a dictionary.

    Note:
        confidenceLevel is derived from confidence and ignored on load.
    """
    return result.to_dict()


def deserialize_result(data: dict[str, Any], *, validate: bool = True) -> ParseResult:
    """
    Deserialize a ParseResult from a dictionary.

    Raises:
        ValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_parse_result(data)

    return ParseResult(
        success=data["success"],
        questions=deserialize_questions(data.get("questions", []), validate=False),
        transcript=data.get("transcript"),
        vocabulary=data.get("vocabulary"),
        confidence=data.get("confidence", 0),
        warnings=list(data.get("warnings", [])),
        raw_text=data.get("rawText", ""),
        error=data.get("error"),
    )


def result_to_json(result: ParseResult, *, indent: int | None = 2) -> str:
    """Render a ParseResult as JSON text (UTF-8 characters kept as-is)."""
    return json.dumps(serialize_result(result), indent=indent, ensure_ascii=False)


def save_result_json(result: ParseResult, path: Path) -> None:
    """Save a ParseResult to a JSON file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(result_to_json(result))
        f.write("\n")


def load_result_json(path: Path, *, validate: bool = True) -> ParseResult:
    """
    Load a ParseResult from a JSON file.

    Raises:
        FileNotFoundError: If path doesn't exist
        ValidationError: If validate=True and data is invalid
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return deserialize_result(data, validate=validate)
