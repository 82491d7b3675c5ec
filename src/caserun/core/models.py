"""Core dataclasses shared across caserun subsystems."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Tuple


@dataclass(frozen=True)
class TestCase:
    """A named zero-argument computation paired with its expected result."""

    __test__ = False  # keep pytest from collecting this class

    name: str
    test_fn: Callable[[], Any]
    expected_result: Any
    tags: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("TestCase name must be a non-empty string")
        if not callable(self.test_fn):
            raise TypeError(f"TestCase '{self.name}' test_fn must be callable")
        object.__setattr__(self, "tags", tuple(str(tag) for tag in self.tags))

    def identifier(self) -> str:
        if self.tags:
            return f"{self.name}[{','.join(self.tags)}]"
        return self.name
