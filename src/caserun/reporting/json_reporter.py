"""JSON reporter emitting structured execution results."""
from __future__ import annotations

import datetime as dt
import json
import math
import pathlib
import time
from typing import Any, Dict, Optional

import click
from jsonschema import validate

from caserun.core.results import ERROR, CaseResult, Summary

from .base import Reporter
from .schema import JSON_SCHEMA_V1, SCHEMA_VERSION


class JsonReporter(Reporter):
    """Writes results as JSON validated against the schema.

    When ``path`` is None the document is echoed to stdout instead.
    """

    def __init__(self, path: Optional[str] = None) -> None:
        self._path = pathlib.Path(path) if path else None
        self._records: list[Dict[str, Any]] = []
        self._start_time = 0.0

    def on_start(self, total: int) -> None:
        self._records.clear()
        self._start_time = time.perf_counter()

    def on_case_result(self, result: CaseResult, total: int) -> None:
        self._records.append(_case_to_dict(result))

    def on_complete(self, summary: Summary) -> None:
        payload = {
            "schema_version": SCHEMA_VERSION,
            "generated_at": dt.datetime.now(dt.timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
            "summary": _build_summary(summary, time.perf_counter() - self._start_time),
            "cases": list(self._records),
        }
        validate(instance=payload, schema=JSON_SCHEMA_V1)
        text = json.dumps(payload, indent=2)
        if self._path is None:
            click.echo(text)
            return
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(text, encoding="utf-8")
        except OSError as exc:  # pragma: no cover - filesystem protection
            raise RuntimeError(f"Failed to write JSON report to {self._path}: {exc}") from exc
        click.echo(f"JSON report written to {self._path}")


def _build_summary(summary: Summary, duration: float) -> Dict[str, Any]:
    return {
        "total": summary.total,
        "passed": summary.passed,
        "failed": summary.failed,
        "errors": summary.errors,
        "success_rate": round(summary.success_rate, 2),
        "duration_s": duration,
    }


def _case_to_dict(result: CaseResult) -> Dict[str, Any]:
    case = result.case
    record: Dict[str, Any] = {
        "index": result.index,
        "name": case.name,
        "status": result.status,
        "duration_ms": result.duration_s * 1000,
        "expected": _jsonify(result.expected),
    }
    if case.tags:
        record["tags"] = list(case.tags)
    if result.status == ERROR:
        record["error"] = result.error or ""
    else:
        record["actual"] = _jsonify(result.actual)
    if result.detail:
        record["detail"] = result.detail
    return record


def _jsonify(value: Any) -> Any:
    if isinstance(value, dict):
        return {str(key): _jsonify(val) for key, val in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonify(item) for item in value]
    if isinstance(value, float) and not math.isfinite(value):
        return repr(value)
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return repr(value)
