"""Test runner executing cases sequentially and aggregating a summary."""
from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Optional, Sequence, TextIO

from .comparator import compare
from .models import TestCase
from .outcome import Err, describe_exception, invoke
from .results import ERROR, FAILED, PASSED, CaseResult, Summary

if TYPE_CHECKING:
    from caserun.reporting.base import Reporter

logger = logging.getLogger(__name__)


class TestRunner:
    """Executes a collection of test cases sequentially.

    Every case is run exactly once, in input order. A case whose function
    raises is recorded as an error and the run moves on; ``run`` itself
    always returns a :class:`Summary`.
    """

    __test__ = False

    def __init__(self, reporter: Optional[Reporter] = None) -> None:
        self._reporter = reporter

    def run(self, cases: Sequence[TestCase]) -> Summary:
        total = len(cases)
        logger.debug("Running %d case(s)", total)
        if self._reporter:
            self._reporter.on_start(total)
        results: list[CaseResult] = []
        for index, case in enumerate(cases, start=1):
            result = self._execute_case(case, index)
            results.append(result)
            if self._reporter:
                self._reporter.on_case_result(result, total)
        summary = Summary.from_results(tuple(results))
        logger.debug("Run complete: passed=%d failed=%d total=%d", summary.passed, summary.failed, summary.total)
        if self._reporter:
            self._reporter.on_complete(summary)
        return summary

    def _execute_case(self, case: TestCase, index: int) -> CaseResult:
        logger.debug("[%d] %s: invoking", index, case.name)
        start = time.perf_counter()
        invocation = invoke(case.test_fn)
        duration = time.perf_counter() - start
        if isinstance(invocation, Err):
            logger.debug("[%d] %s: raised %s: %s", index, case.name, invocation.exc_type, invocation.message)
            return CaseResult(
                case=case,
                index=index,
                status=ERROR,
                duration_s=duration,
                error=invocation.message,
                detail=invocation.exc_type,
            )
        try:
            comparison = compare(invocation.value, case.expected_result)
        except Exception as exc:
            logger.debug("[%d] %s: comparison raised %s", index, case.name, type(exc).__name__)
            return CaseResult(
                case=case,
                index=index,
                status=ERROR,
                duration_s=duration,
                actual=invocation.value,
                error=describe_exception(exc),
                detail=type(exc).__name__,
            )
        status = PASSED if comparison.passed else FAILED
        logger.debug("[%d] %s: %s", index, case.name, status)
        return CaseResult(
            case=case,
            index=index,
            status=status,
            duration_s=duration,
            actual=invocation.value,
            detail=comparison.message,
        )


def run_tests(
    cases: Sequence[TestCase],
    *,
    reporter: Optional[Reporter] = None,
    out: Optional[TextIO] = None,
    use_color: bool = False,
) -> Summary:
    """Run ``cases`` and print the report to ``out`` (stdout by default).

    Pass ``reporter`` to route output elsewhere; ``out`` and ``use_color``
    only apply to the default terminal reporter.
    """

    if reporter is None:
        from caserun.reporting.terminal import TerminalReporter

        reporter = TerminalReporter(out=out, use_color=use_color)
    return TestRunner(reporter=reporter).run(cases)
