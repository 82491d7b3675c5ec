"""Executor for plan files."""
from __future__ import annotations

import fnmatch
import logging
from typing import List, Sequence

import click

from caserun.core import TestCase, TestRunner
from caserun.reporting import JsonReporter, ReportManager, Reporter, TerminalReporter

from .loader import build_cases
from .models import Plan, PlanOptions

logger = logging.getLogger(__name__)


def run_plan(
    plan: Plan,
    options: PlanOptions,
    *,
    report_format: str = "terminal",
    report_path: str | None = None,
    use_color: bool = True,
) -> int:
    """Execute the plan; returns process exit code (0 success, 1 failures)."""

    selected = select_cases(build_cases(plan), options)
    if options.list_only:
        for case in selected:
            click.echo(case.identifier())
        return 0
    if not selected:
        click.echo("No cases matched the provided filters.")
        return 1
    logger.info("Running plan '%s' with %d of %d case(s)", plan.name, len(selected), len(plan.cases))
    summary = TestRunner(reporter=_make_reporter(report_format, report_path, use_color)).run(selected)
    return 0 if summary.failed == 0 else 1


def select_cases(cases: Sequence[TestCase], options: PlanOptions) -> List[TestCase]:
    """Filter ``cases`` by name globs and tags, preserving their order."""

    matches: List[TestCase] = []
    for case in cases:
        if options.cases and not any(fnmatch.fnmatchcase(case.name, pattern) for pattern in options.cases):
            continue
        if options.tags and not set(options.tags) & set(case.tags):
            continue
        if options.skip_tags and set(options.skip_tags) & set(case.tags):
            continue
        matches.append(case)
    return matches


def _make_reporter(report_format: str, report_path: str | None, use_color: bool) -> Reporter:
    if report_format == "json":
        if report_path:
            return ReportManager([TerminalReporter(use_color=use_color), JsonReporter(path=report_path)])
        return JsonReporter()
    if report_format == "terminal":
        return TerminalReporter(use_color=use_color)
    raise ValueError(f"Unknown report format '{report_format}'")
