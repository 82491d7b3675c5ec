"""caserun package initialization."""
from __future__ import annotations

from .core import Summary, TestCase, TestRunner, run_tests
from .version import __version__

__all__ = [
    "__version__",
    "Summary",
    "TestCase",
    "TestRunner",
    "run_tests",
]
