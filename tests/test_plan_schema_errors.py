from __future__ import annotations

import pytest

from caserun.plan import PlanError, load_plan


def test_schema_missing_cases(write_plan) -> None:
    plan_path = write_plan(
        """
        name: empty
        """
    )
    with pytest.raises(PlanError) as exc:
        load_plan(str(plan_path))
    assert "cases" in str(exc.value)


def test_case_requires_expected(write_plan) -> None:
    plan_path = write_plan(
        """
        cases:
          - name: no expectation
            call: operator:add
        """
    )
    with pytest.raises(PlanError) as exc:
        load_plan(str(plan_path))
    assert "cases/0" in str(exc.value)
    assert "expected" in str(exc.value)


def test_case_requires_exactly_one_target(write_plan) -> None:
    plan_path = write_plan(
        """
        cases:
          - name: both
            call: operator:add
            source: helpers.py
            function: greet
            expected: 1
          - name: neither
            expected: 1
        """
    )
    with pytest.raises(PlanError) as exc:
        load_plan(str(plan_path))
    message = str(exc.value)
    assert "cases/0" in message
    assert "cases/1" in message


def test_unknown_case_keys_rejected(write_plan) -> None:
    plan_path = write_plan(
        """
        cases:
          - name: typo
            call: operator:add
            expcted: 1
            expected: 1
        """
    )
    with pytest.raises(PlanError) as exc:
        load_plan(str(plan_path))
    assert "expcted" in str(exc.value)


def test_blank_case_name_rejected(write_plan) -> None:
    plan_path = write_plan(
        """
        cases:
          - name: "   "
            call: operator:add
            expected: 1
        """
    )
    with pytest.raises(PlanError) as exc:
        load_plan(str(plan_path))
    assert "cases/0/name must be a non-empty string." in str(exc.value)


def test_duplicate_case_names_rejected(write_plan) -> None:
    plan_path = write_plan(
        """
        cases:
          - name: same
            call: operator:add
            expected: 1
          - name: same
            call: operator:sub
            expected: 1
        """
    )
    with pytest.raises(PlanError, match="Duplicate case name 'same'"):
        load_plan(str(plan_path))


def test_top_level_must_be_mapping(write_plan) -> None:
    plan_path = write_plan(
        """
        - name: list
        """
    )
    with pytest.raises(PlanError, match="mapping at the top level"):
        load_plan(str(plan_path))


def test_invalid_yaml_rejected(write_plan) -> None:
    plan_path = write_plan("cases: [unclosed\n")
    with pytest.raises(PlanError, match="not valid YAML"):
        load_plan(str(plan_path))


def test_plan_error_is_value_error() -> None:
    assert issubclass(PlanError, ValueError)
