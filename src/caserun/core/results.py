"""Result data structures produced by the test runner."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from .models import TestCase

PASSED = "passed"
FAILED = "failed"
ERROR = "error"


@dataclass(frozen=True)
class CaseResult:
    """Outcome of executing a single test case."""

    case: TestCase
    index: int
    status: str
    duration_s: float = 0.0
    actual: Any = None
    error: Optional[str] = None
    detail: Optional[str] = None

    @property
    def passed(self) -> bool:
        return self.status == PASSED

    @property
    def expected(self) -> Any:
        return self.case.expected_result


@dataclass(frozen=True)
class Summary:
    """Aggregate counts for one run; ``failed`` includes errored cases."""

    passed: int
    failed: int
    total: int
    errors: int = field(default=0, compare=False)
    results: Tuple[CaseResult, ...] = field(default_factory=tuple, compare=False, repr=False)

    @classmethod
    def from_results(cls, results: Tuple[CaseResult, ...]) -> "Summary":
        passed = sum(1 for result in results if result.passed)
        errors = sum(1 for result in results if result.status == ERROR)
        failed = len(results) - passed
        return cls(passed=passed, failed=failed, total=passed + failed, errors=errors, results=results)

    @property
    def success_rate(self) -> float:
        if self.total == 0:
            return 0.0
        return self.passed / self.total * 100

    def passed_results(self) -> Tuple[CaseResult, ...]:
        return tuple(result for result in self.results if result.passed)

    def failed_results(self) -> Tuple[CaseResult, ...]:
        return tuple(result for result in self.results if not result.passed)

    def as_dict(self) -> dict[str, int]:
        return {"passed": self.passed, "failed": self.failed, "total": self.total}
