"""JSON Schema validation helpers for MCP tool input contracts.

Wraps jsonschema Draft7 validation and reports the first error with its
location so tool callers get a readable message.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from jsonschema import Draft7Validator


class SchemaError(ValueError):
    """Raised when data fails to validate against a provided schema."""


def _first_error_message(schema: Dict[str, Any], data: Dict[str, Any], label: str) -> Optional[str]:
    validator = Draft7Validator(schema)
    errs = sorted(validator.iter_errors(data), key=lambda e: list(e.path))
    if not errs:
        return None
    first = errs[0]
    path = "/".join([str(p) for p in first.path])
    return f"Invalid {label} at '{path}': {first.message}"


def validate_input(schema: Dict[str, Any], data: Dict[str, Any]) -> None:
    """Validate tool input strictly and raise on the first error.

    Args:
        schema: Draft-07 JSON Schema dict.
        data:   Input payload to validate.
    """
    msg = _first_error_message(schema, data, "input")
    if msg:
        raise SchemaError(msg)


def drop_unset(data: Dict[str, Any]) -> Dict[str, Any]:
    """Remove keys whose value is None so optional parameters validate as absent."""
    return {k: v for k, v in data.items() if v is not None}
