from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from caserun import __version__
from caserun.cli.main import cli, main


def _write_plan(tmp_path: Path, expected: str = "2") -> Path:
    plan = tmp_path / "plan.yaml"
    plan.write_text(
        f"""
name: cli
cases:
  - name: add
    call: operator:add
    args: [1, 1]
    expected: {expected}
    tags: [smoke]
  - name: upper
    call: builtins:str.upper
    args: [abc]
    expected: ABC
""",
        encoding="utf-8",
    )
    return plan


def test_cli_help_short_flag() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["-h"])
    assert result.exit_code == 0
    assert "Usage:" in result.output
    assert "run" in result.output


def test_cli_version() -> None:
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert result.output.strip() == f"caserun {__version__}"


def test_cli_run_plan(tmp_path: Path) -> None:
    plan = _write_plan(tmp_path)
    result = CliRunner().invoke(cli, ["run", "--plan", str(plan), "--no-color"])
    assert result.exit_code == 0, result.output
    assert "✓ [1] add" in result.output
    assert "✓ [2] upper" in result.output
    assert "Success Rate: 100.00%" in result.output


def test_cli_run_plan_failure_exit_code(tmp_path: Path) -> None:
    plan = _write_plan(tmp_path, expected='"2"')
    result = CliRunner().invoke(cli, ["run", "--plan", str(plan), "--no-color"])
    assert result.exit_code == 1
    assert "  Expected: '2', Got: 2" in result.output


def test_cli_filters_and_list(tmp_path: Path) -> None:
    plan = _write_plan(tmp_path)
    result = CliRunner().invoke(cli, ["run", "--plan", str(plan), "--tags", "smoke", "--list"])
    assert result.exit_code == 0
    assert result.output.splitlines() == ["add[smoke]"]
    result = CliRunner().invoke(cli, ["run", "--plan", str(plan), "--cases", "up*, nothing", "--list"])
    assert result.output.splitlines() == ["upper"]


def test_cli_json_report(tmp_path: Path) -> None:
    report_path = tmp_path / "report.json"
    plan = _write_plan(tmp_path)
    result = CliRunner().invoke(
        cli,
        ["run", "--plan", str(plan), "--report", "json", "--report-path", str(report_path)],
    )
    assert result.exit_code == 0, result.output
    payload = json.loads(report_path.read_text(encoding="utf-8"))
    assert payload["summary"]["passed"] == 2


def test_cli_reports_plan_errors(tmp_path: Path) -> None:
    plan = tmp_path / "plan.yaml"
    plan.write_text("cases:\n  - name: broken\n", encoding="utf-8")
    result = CliRunner().invoke(cli, ["run", "--plan", str(plan)])
    assert result.exit_code == 1
    assert "Plan schema validation failed" in result.output


def test_main_returns_exit_code(tmp_path: Path) -> None:
    plan = _write_plan(tmp_path)
    assert main(["run", "--plan", str(plan), "--no-color"]) == 0
    assert main(["run", "--plan", str(plan), "--cases", "missing"]) == 1
