"""Data models for plan files."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence


class PlanError(ValueError):
    """Raised when a plan file is malformed or one of its cases cannot be resolved."""


@dataclass(frozen=True)
class CaseConfig:
    name: str
    expected: Any
    call: Optional[str] = None
    source: Optional[Path] = None
    function: Optional[str] = None
    args: Sequence[Any] = field(default_factory=tuple)
    kwargs: Mapping[str, Any] = field(default_factory=dict)
    tags: Sequence[str] = field(default_factory=tuple)

    def target(self) -> str:
        if self.call:
            return self.call
        return f"{self.source}:{self.function}"


@dataclass(frozen=True)
class Plan:
    name: str
    description: str
    cases: Sequence[CaseConfig]
    plan_dir: Path


@dataclass(frozen=True)
class PlanOptions:
    cases: Sequence[str] = field(default_factory=tuple)
    tags: Sequence[str] = field(default_factory=tuple)
    skip_tags: Sequence[str] = field(default_factory=tuple)
    list_only: bool = False
