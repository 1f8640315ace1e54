"""
Schema Validation Utilities

Validates serialized questions and parse results against the JSON
schemas shipped beside this module.

Basic structural checks run first and give precise paths for the most
common problems; ``strict=True`` additionally runs the full JSON Schema
through ``jsonschema``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


# Loaded on first use
_SCHEMAS: dict[str, dict] = {}

_ANSWER_LETTERS = ("", "A", "B", "C", "D")


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def _run_jsonschema(data: Any, schema_name: str, path_prefix: str = "") -> None:
    schema = _load_schema(schema_name)
    try:
        jsonschema.validate(data, schema)
    except jsonschema.ValidationError as e:
        location = ".".join(str(p) for p in e.absolute_path)
        if path_prefix:
            location = f"{path_prefix}.{location}" if location else path_prefix
        raise ValidationError(
            f"Schema validation failed: {e.message}",
            path=location,
            errors=[e.message],
        ) from e


def validate_public_question(data: dict[str, Any], *, strict: bool = False, path: str = "") -> None:
    """
    Validate one question dict in the public schema.

    Args:
        data: Question dictionary (camelCase keys)
        strict: If True, also run the full JSON Schema
        path: Location prefix used in error paths

    Raises:
        ValidationError: If data is invalid
    """
    required = ["id", "questionText", "options", "correctAnswer"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path=path,
            errors=[f"Missing field: {f}" for f in missing],
        )

    options = data["options"]
    if not isinstance(options, list) or len(options) > 4:
        raise ValidationError(
            f"options must be a list of at most 4 strings: {options!r}",
            path=f"{path}.options" if path else "options",
        )
    if any(not isinstance(opt, str) or not opt for opt in options):
        raise ValidationError(
            "options must not contain empty entries",
            path=f"{path}.options" if path else "options",
        )

    answer = data["correctAnswer"]
    if answer not in _ANSWER_LETTERS:
        raise ValidationError(
            f"Invalid correctAnswer: {answer!r} (must be A-D or empty)",
            path=f"{path}.correctAnswer" if path else "correctAnswer",
        )

    if strict:
        _run_jsonschema(data, "public_question", path)


def validate_parse_result(data: dict[str, Any], *, strict: bool = False) -> None:
    """
    Validate a serialized ParseResult and every question inside it.

    Args:
        data: Result dictionary from ParseResult.to_dict()
        strict: If True, also run the full JSON Schemas

    Raises:
        ValidationError: If data is invalid
    """
    required = ["success", "questions", "confidence", "warnings", "rawText"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            errors=[f"Missing field: {f}" for f in missing],
        )

    confidence = data["confidence"]
    if not isinstance(confidence, int) or not (0 <= confidence <= 100):
        raise ValidationError(
            f"Invalid confidence: {confidence} (must be 0-100)",
            path="confidence",
        )

    if not data["success"] and not data.get("error"):
        raise ValidationError("Failed results must carry an error", path="error")

    for i, question in enumerate(data["questions"]):
        validate_public_question(question, strict=strict, path=f"questions[{i}]")

    if strict:
        _run_jsonschema(data, "parse_result")
