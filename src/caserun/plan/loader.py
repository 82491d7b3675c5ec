"""YAML loader and validation for plan files."""
from __future__ import annotations

import functools
import logging
from pathlib import Path
from typing import Any, Callable, List, Mapping

import yaml
from jsonschema import Draft7Validator

from caserun.core import TestCase
from caserun.utils import import_string
from caserun.validators import validate_object, validate_string

from . import custom
from .models import CaseConfig, Plan, PlanError

logger = logging.getLogger(__name__)

_STRING_LIST = {"type": "array", "items": {"type": "string", "minLength": 1}}

PLAN_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": ["cases"],
    "properties": {
        "name": {"type": "string"},
        "description": {"type": "string"},
        "cases": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name", "expected"],
                "properties": {
                    "name": {"type": "string", "minLength": 1},
                    "call": {"type": "string", "minLength": 1},
                    "source": {"type": "string", "minLength": 1},
                    "function": {"type": "string", "minLength": 1},
                    "args": {"type": "array"},
                    "kwargs": {"type": "object"},
                    "expected": {},
                    "tags": _STRING_LIST,
                },
                "additionalProperties": False,
                "oneOf": [
                    {"required": ["call"], "not": {"required": ["source"]}},
                    {"required": ["source", "function"], "not": {"required": ["call"]}},
                ],
            },
        },
    },
    "additionalProperties": False,
}

_validator = Draft7Validator(PLAN_SCHEMA)


def load_plan(path: str) -> Plan:
    """Load and validate a plan file."""

    plan_path = Path(path).expanduser().resolve()
    try:
        raw = yaml.safe_load(plan_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise PlanError(f"Plan file {plan_path} is not valid YAML: {exc}") from exc
    if not validate_object(raw, "plan"):
        raise PlanError("Plan file must contain a mapping at the top level")
    errors = sorted(_validator.iter_errors(raw), key=lambda e: [str(part) for part in e.path])
    if errors:
        messages = "; ".join(f"{'/'.join(map(str, err.path)) or 'root'}: {err.message}" for err in errors)
        raise PlanError(f"Plan schema validation failed: {messages}")
    cases = _parse_cases(raw["cases"], plan_path.parent)
    _validate_unique_names(cases)
    logger.debug("Loaded %d case(s) from %s", len(cases), plan_path)
    return Plan(
        name=str(raw.get("name") or plan_path.stem),
        description=str(raw.get("description", "")),
        cases=cases,
        plan_dir=plan_path.parent,
    )


def build_cases(plan: Plan) -> List[TestCase]:
    """Resolve every case's callable and bind its arguments."""

    cases: List[TestCase] = []
    for config in plan.cases:
        func = _resolve_callable(config)
        test_fn = functools.partial(func, *config.args, **dict(config.kwargs))
        cases.append(
            TestCase(
                name=config.name,
                test_fn=test_fn,
                expected_result=config.expected,
                tags=tuple(config.tags),
            )
        )
    return cases


def _parse_cases(raw_cases: List[Mapping[str, Any]], base: Path) -> tuple[CaseConfig, ...]:
    parsed: list[CaseConfig] = []
    for index, raw in enumerate(raw_cases):
        name = raw["name"]
        check = validate_string(name, f"cases/{index}/name")
        if not check:
            raise PlanError(check.message)
        source = raw.get("source")
        parsed.append(
            CaseConfig(
                name=name.strip(),
                expected=raw["expected"],
                call=raw.get("call"),
                source=(base / source).resolve() if source else None,
                function=raw.get("function"),
                args=tuple(raw.get("args") or ()),
                kwargs=dict(raw.get("kwargs") or {}),
                tags=tuple(raw.get("tags") or ()),
            )
        )
    return tuple(parsed)


def _validate_unique_names(cases: tuple[CaseConfig, ...]) -> None:
    seen: set[str] = set()
    for case in cases:
        if case.name in seen:
            raise PlanError(f"Duplicate case name '{case.name}'")
        seen.add(case.name)


def _resolve_callable(config: CaseConfig) -> Callable[..., Any]:
    if not config.call and (config.source is None or config.function is None):
        raise PlanError(f"Case '{config.name}' needs either call or source and function")
    try:
        if config.call:
            func = import_string(config.call)
        else:
            func = custom.load_from_source(config.source, config.function)
    except (ImportError, AttributeError, ValueError, FileNotFoundError, TypeError, SyntaxError) as exc:
        raise PlanError(f"Case '{config.name}': cannot resolve {config.target()}: {exc}") from exc
    if not callable(func):
        raise PlanError(f"Case '{config.name}': {config.target()} is not callable")
    return func
