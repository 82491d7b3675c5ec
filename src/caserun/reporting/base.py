"""Reporter interface definitions."""
from __future__ import annotations

from typing import Sequence

from caserun.core.results import CaseResult, Summary


class Reporter:
    """Interface for output renderers."""

    def on_start(self, total: int) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def on_case_result(self, result: CaseResult, total: int) -> None:  # pragma: no cover
        raise NotImplementedError

    def on_complete(self, summary: Summary) -> None:  # pragma: no cover
        raise NotImplementedError


class ReportManager(Reporter):
    """Dispatches lifecycle callbacks to multiple reporters."""

    def __init__(self, reporters: Sequence[Reporter]) -> None:
        self._reporters = list(reporters)

    def on_start(self, total: int) -> None:
        for reporter in self._reporters:
            reporter.on_start(total)

    def on_case_result(self, result: CaseResult, total: int) -> None:
        for reporter in self._reporters:
            reporter.on_case_result(result, total)

    def on_complete(self, summary: Summary) -> None:
        for reporter in self._reporters:
            reporter.on_complete(summary)
