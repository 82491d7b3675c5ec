from __future__ import annotations

from pathlib import Path

import pytest

from caserun.plan import CaseConfig, Plan, PlanError, build_cases, load_plan


def test_load_plan_parses_cases(write_plan, helpers_module: Path) -> None:
    plan_path = write_plan(
        """
        name: arithmetic
        description: basic checks
        cases:
          - name: "1 + 1 equals 2"
            call: operator:add
            args: [1, 1]
            expected: 2
            tags: [smoke]
          - name: greeting
            source: helpers.py
            function: greet
            kwargs: {name: world}
            expected: hello world
        """
    )
    plan = load_plan(str(plan_path))
    assert plan.name == "arithmetic"
    assert plan.description == "basic checks"
    assert plan.plan_dir == plan_path.parent.resolve()
    first, second = plan.cases
    assert first.call == "operator:add"
    assert first.args == (1, 1)
    assert first.tags == ("smoke",)
    assert second.source == helpers_module.resolve()
    assert second.function == "greet"
    assert second.kwargs == {"name": "world"}


def test_plan_name_defaults_to_file_stem(write_plan) -> None:
    plan_path = write_plan(
        """
        cases:
          - name: length
            call: builtins.len
            args: [[1, 2, 3]]
            expected: 3
        """,
        name="lengths.yaml",
    )
    assert load_plan(str(plan_path)).name == "lengths"


def test_build_cases_binds_arguments(write_plan, helpers_module: Path) -> None:
    plan_path = write_plan(
        """
        cases:
          - name: add
            call: operator:add
            args: [2, 3]
            expected: 5
          - name: greet default
            source: helpers.py
            function: greet
            expected: hello world
        """
    )
    cases = build_cases(load_plan(str(plan_path)))
    assert [case.name for case in cases] == ["add", "greet default"]
    assert cases[0].test_fn() == 5
    assert cases[0].expected_result == 5
    assert cases[1].test_fn() == "hello world"


def test_build_cases_reports_unresolvable_callable(write_plan) -> None:
    plan_path = write_plan(
        """
        cases:
          - name: missing
            call: operator:does_not_exist
            expected: 1
        """
    )
    with pytest.raises(PlanError) as exc:
        build_cases(load_plan(str(plan_path)))
    assert "Case 'missing'" in str(exc.value)
    assert "operator:does_not_exist" in str(exc.value)


def test_build_cases_reports_missing_source(write_plan) -> None:
    plan_path = write_plan(
        """
        cases:
          - name: nowhere
            source: missing.py
            function: run
            expected: 1
        """
    )
    with pytest.raises(PlanError) as exc:
        build_cases(load_plan(str(plan_path)))
    assert "Custom source file not found" in str(exc.value)


def test_build_cases_rejects_non_callable(write_plan) -> None:
    plan_path = write_plan(
        """
        cases:
          - name: constant
            call: math:pi
            expected: 1
        """
    )
    with pytest.raises(PlanError) as exc:
        build_cases(load_plan(str(plan_path)))
    assert "is not callable" in str(exc.value)


def test_build_cases_requires_a_target(tmp_path: Path) -> None:
    plan = Plan(
        name="manual",
        description="",
        cases=(CaseConfig(name="orphan", expected=1, function="run"),),
        plan_dir=tmp_path,
    )
    with pytest.raises(PlanError, match="Case 'orphan' needs either call or source and function"):
        build_cases(plan)
