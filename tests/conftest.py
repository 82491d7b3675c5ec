from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def write_plan(tmp_path: Path) -> Callable[[str], Path]:
    """Write a dedented YAML plan into ``tmp_path`` and return its path."""

    def _write(content: str, name: str = "plan.yaml") -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def helpers_module(tmp_path: Path) -> Path:
    """A python source file with functions referenced by plan cases."""

    path = tmp_path / "helpers.py"
    path.write_text(
        textwrap.dedent(
            """
            def greet(name="world"):
                return "hello " + name


            def explode():
                raise RuntimeError("kaboom")
            """
        ),
        encoding="utf-8",
    )
    return path
