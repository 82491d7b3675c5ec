"""Explicit result of invoking a test function."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Union


@dataclass(frozen=True)
class Ok:
    """The test function returned ``value``."""

    value: Any


@dataclass(frozen=True)
class Err:
    """The test function raised; ``message`` describes the fault."""

    message: str
    exc_type: str = "Exception"


Invocation = Union[Ok, Err]


def invoke(test_fn: Callable[[], Any]) -> Invocation:
    """Call ``test_fn`` with no arguments, converting any raised ``Exception`` to ``Err``."""

    try:
        return Ok(test_fn())
    except Exception as exc:
        return Err(message=describe_exception(exc), exc_type=type(exc).__name__)


def describe_exception(exc: BaseException) -> str:
    message = str(exc)
    # KeyError wraps its argument in quotes
    if isinstance(exc, KeyError) and exc.args:
        message = str(exc.args[0])
    return message or type(exc).__name__
