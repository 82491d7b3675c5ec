"""Strict-equality comparison of test results with expected values."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping

import numpy as np


@dataclass
class ComparisonResult:
    """Outcome of comparing an actual value with the expected one."""

    passed: bool
    message: str | None = None


def compare(actual: Any, expected: Any) -> ComparisonResult:
    if strict_equal(actual, expected):
        return ComparisonResult(passed=True)
    if type(actual) is not type(expected):
        return ComparisonResult(
            passed=False,
            message=f"type mismatch: got {type(actual).__name__}, expected {type(expected).__name__}",
        )
    return ComparisonResult(passed=False, message=f"value mismatch: got {actual!r}, expected {expected!r}")


def strict_equal(actual: Any, expected: Any) -> bool:
    """Return True when both values share the exact same type and are equal.

    No coercion is applied: ``2`` and ``"2"`` differ, and so do ``1``,
    ``1.0`` and ``True``. ``NaN`` never equals itself. Containers are
    compared element-wise with the same rule; numpy arrays must share
    dtype and shape as well as contents.
    """

    if type(actual) is not type(expected):
        return False
    if isinstance(actual, np.ndarray):
        return _arrays_equal(actual, expected)
    if isinstance(actual, np.generic):
        return actual.dtype == expected.dtype and _scalars_equal(actual.item(), expected.item())
    if isinstance(actual, (list, tuple)):
        return len(actual) == len(expected) and all(
            strict_equal(left, right) for left, right in zip(actual, expected)
        )
    if isinstance(actual, Mapping):
        return _mappings_equal(actual, expected)
    if isinstance(actual, (set, frozenset)):
        return len(actual) == len(expected) and all(_find_match(item, expected) is not _MISSING for item in actual)
    return _scalars_equal(actual, expected)


def _scalars_equal(actual: Any, expected: Any) -> bool:
    if isinstance(actual, float) and isinstance(expected, float):
        if math.isnan(actual) or math.isnan(expected):
            return False
    result = actual == expected
    # objects with elementwise __eq__ do not produce a single truth value
    return bool(result) if isinstance(result, (bool, np.bool_)) else False


def _arrays_equal(actual: np.ndarray, expected: np.ndarray) -> bool:
    if actual.dtype != expected.dtype or actual.shape != expected.shape:
        return False
    return bool(np.array_equal(actual, expected))


_MISSING = object()


def _find_match(item: Any, candidates: Any) -> Any:
    # hashing alone would match 1 with True and 1.0
    for candidate in candidates:
        if strict_equal(item, candidate):
            return candidate
    return _MISSING


def _mappings_equal(actual: Mapping, expected: Mapping) -> bool:
    if len(actual) != len(expected):
        return False
    for key, value in actual.items():
        match = _find_match(key, expected.keys())
        if match is _MISSING or not strict_equal(value, expected[match]):
            return False
    return True
