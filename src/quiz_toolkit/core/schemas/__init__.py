"""
Schemas Package

JSON schema definitions and validation utilities.
"""

from .validator import (
    validate_public_question,
    validate_parse_result,
    ValidationError,
)

__all__ = [
    "validate_public_question",
    "validate_parse_result",
    "ValidationError",
]
