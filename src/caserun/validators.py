"""Validators for primitive test-data fields.

Every validator takes the value and a human-readable field label and returns
a :class:`ValidationResult`; none of them raise on bad input.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, Mapping


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one field."""

    valid: bool
    message: str

    def __bool__(self) -> bool:
        return self.valid


def _ok(field_name: str) -> ValidationResult:
    return ValidationResult(valid=True, message=f"{field_name} is valid.")


def _fail(message: str) -> ValidationResult:
    return ValidationResult(valid=False, message=message)


def validate_string(value: Any, field_name: str) -> ValidationResult:
    if not isinstance(value, str) or not value.strip():
        return _fail(f"{field_name} must be a non-empty string.")
    return _ok(field_name)


def validate_number(
    value: Any,
    field_name: str,
    min_value: float = 0,
    max_value: float = math.inf,
) -> ValidationResult:
    """Accept real numbers within ``[min_value, max_value]``; bools and NaN are rejected."""

    is_number = isinstance(value, (int, float)) and not isinstance(value, bool)
    if not is_number or math.isnan(value) or value < min_value or value > max_value:
        return _fail(f"{field_name} must be a number between {min_value} and {max_value}.")
    return _ok(field_name)


def validate_boolean(value: Any, field_name: str) -> ValidationResult:
    if not isinstance(value, bool):
        return _fail(f"{field_name} must be a boolean.")
    return _ok(field_name)


def validate_array(value: Any, field_name: str, min_length: int = 1) -> ValidationResult:
    if not isinstance(value, (list, tuple)) or len(value) < min_length:
        return _fail(f"{field_name} must be a non-empty array.")
    return _ok(field_name)


def validate_object(value: Any, field_name: str, required_fields: Iterable[str] = ()) -> ValidationResult:
    if not isinstance(value, Mapping):
        return _fail(f"{field_name} must be a non-null object.")
    for required in required_fields:
        if required not in value:
            return _fail(f"{field_name} is missing required field: {required}")
    return _ok(field_name)


def validate_test_data(data: Any, field_name: str = "test data") -> ValidationResult:
    """Check a declarative case record has a ``name``, a ``type`` and an ``expected`` entry."""

    result = validate_object(data, field_name)
    if not result:
        return result
    for key in ("name", "type"):
        if not validate_string(data.get(key), key):
            return _fail(f"{field_name} is missing {key}")
    if "expected" not in data:
        return _fail(f"{field_name} is missing expected")
    return _ok(field_name)
