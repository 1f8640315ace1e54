"""
Utils Package

Serialization and utility functions.
"""

from .serialization import (
    serialize_questions,
    deserialize_questions,
    serialize_result,
    deserialize_result,
    result_to_json,
    save_result_json,
    load_result_json,
)

__all__ = [
    "serialize_questions",
    "deserialize_questions",
    "serialize_result",
    "deserialize_result",
    "result_to_json",
    "save_result_json",
    "load_result_json",
]
