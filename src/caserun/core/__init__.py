"""Core models and helpers exposed at the package level."""
from .comparator import ComparisonResult, compare, strict_equal
from .models import TestCase
from .outcome import Err, Invocation, Ok, invoke
from .results import CaseResult, Summary
from .runner import TestRunner, run_tests

__all__ = [
    "CaseResult",
    "ComparisonResult",
    "Err",
    "Invocation",
    "Ok",
    "Summary",
    "TestCase",
    "TestRunner",
    "compare",
    "invoke",
    "run_tests",
    "strict_equal",
]
