"""Terminal reporter rendering per-case lines and a summary block."""
from __future__ import annotations

from typing import Any, Optional, TextIO

import click

from caserun.core.results import ERROR, CaseResult, Summary

from .base import Reporter


STATUS_COLORS = {
    "passed": "green",
    "failed": "red",
    "error": "yellow",
}

PASS_MARK = "✓"
FAIL_MARK = "✗"


class TerminalReporter(Reporter):
    """Human-readable reporter that writes lines to ``out`` (stdout by default)."""

    def __init__(self, *, out: Optional[TextIO] = None, use_color: bool = False) -> None:
        self._out = out
        self._use_color = use_color

    def on_start(self, total: int) -> None:
        self._echo(self._styled("=== Starting Test Execution ===", force_color="cyan"))
        self._echo("")

    def on_case_result(self, result: CaseResult, total: int) -> None:
        name = result.case.name
        if result.passed:
            self._echo(self._styled(f"{PASS_MARK} [{result.index}] {name}", status=result.status))
            return
        if result.status == ERROR:
            self._echo(self._styled(f"{FAIL_MARK} [{result.index}] {name} - ERROR", status=result.status))
            self._echo(f"  Error: {result.error}")
            return
        self._echo(self._styled(f"{FAIL_MARK} [{result.index}] {name}", status=result.status))
        self._echo(f"  Expected: {format_value(result.expected)}, Got: {format_value(result.actual)}")

    def on_complete(self, summary: Summary) -> None:
        self._echo("")
        self._echo(self._styled("=== Test Summary ===", force_color="cyan"))
        self._echo(f"Passed: {summary.passed}")
        self._echo(f"Failed: {summary.failed}")
        self._echo(f"Total: {summary.total}")
        self._echo(f"Success Rate: {summary.success_rate:.2f}%")

    def _echo(self, text: str) -> None:
        click.echo(text, file=self._out, color=self._use_color or None)

    def _styled(self, text: str, *, status: str | None = None, force_color: str | None = None) -> str:
        if not self._use_color:
            return text
        color = force_color or STATUS_COLORS.get(status or "")
        if color:
            return click.style(text, fg=color)
        return text


def format_value(value: Any) -> str:
    """Render a value so that ``2`` and ``'2'`` stay distinguishable."""

    return repr(value)
