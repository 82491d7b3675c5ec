"""Plan loader and executor."""

from .loader import build_cases, load_plan
from .models import CaseConfig, Plan, PlanError, PlanOptions
from .runner import run_plan, select_cases

__all__ = [
    "CaseConfig",
    "Plan",
    "PlanError",
    "PlanOptions",
    "build_cases",
    "load_plan",
    "run_plan",
    "select_cases",
]
