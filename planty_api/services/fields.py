"""Typed lookups into nested JSON trees (Dialogflow parameters, platform payloads).

Every lookup returns a Result so callers see exactly which step failed
instead of chaining ``.get()`` calls that collapse to None.
"""

from typing import Any, Mapping

from planty_api.services.result import Result


def get_field(tree: Any, *path: str) -> Result[Any]:
    """Walk ``path`` through nested mappings."""
    current = tree
    walked = []
    for key in path:
        if not isinstance(current, Mapping):
            location = ".".join(walked) or "<root>"
            return Result.failure(f"'{location}' is not an object", "not_an_object")
        walked.append(key)
        if key not in current:
            return Result.failure(f"missing field '{'.'.join(walked)}'", "missing_field")
        current = current[key]
    return Result.success(current)


def get_string(tree: Any, *path: str) -> Result[str]:
    def _check(value: Any) -> Result[str]:
        if isinstance(value, str):
            return Result.success(value)
        return Result.failure(f"field '{'.'.join(path)}' is not a string", "wrong_type")

    return get_field(tree, *path).then(_check)


def get_number(tree: Any, *path: str) -> Result[float]:
    def _check(value: Any) -> Result[float]:
        # bool is an int subclass but never a valid amount
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return Result.success(value)
        return Result.failure(f"field '{'.'.join(path)}' is not a number", "wrong_type")

    return get_field(tree, *path).then(_check)


def get_mapping(tree: Any, *path: str) -> Result[Mapping[str, Any]]:
    def _check(value: Any) -> Result[Mapping[str, Any]]:
        if isinstance(value, Mapping):
            return Result.success(value)
        return Result.failure(f"field '{'.'.join(path)}' is not an object", "wrong_type")

    return get_field(tree, *path).then(_check)


def get_non_blank_string(tree: Any, *path: str) -> Result[str]:
    """Like get_string, but whitespace-only values count as absent."""

    def _check(value: str) -> Result[str]:
        if value.strip():
            return Result.success(value)
        return Result.failure(f"field '{'.'.join(path)}' is blank", "blank")

    return get_string(tree, *path).then(_check)
