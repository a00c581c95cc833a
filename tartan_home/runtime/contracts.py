"""Core runtime contracts for decisions and apply plans."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..const import SEVERITY_ERROR, SEVERITY_INFO


@dataclass(frozen=True)
class DecisionRecord:
    """Single human-readable decision made during an evaluation pass."""

    policy: str
    message: str
    severity: str = SEVERITY_INFO
    context: dict[str, Any] = field(default_factory=dict)

    @property
    def is_error(self) -> bool:
        return self.severity == SEVERITY_ERROR

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ApplyStep:
    """Command for one snapshot field the evaluation changed."""

    domain: str
    target: str
    action: str
    value: Any
    previous: Any = None
    policy: str = ""

    @property
    def command(self) -> str:
        return f"{self.domain}.{self.action}"


@dataclass(frozen=True)
class ApplyPlan:
    """Collection of actuator changes produced by an evaluation pass."""

    steps: list[ApplyStep] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "ApplyPlan":
        return cls(steps=[])

    @property
    def is_empty(self) -> bool:
        return not self.steps

    def targets(self) -> list[str]:
        return [step.target for step in self.steps]
