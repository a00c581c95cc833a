"""Tartan Home smart-home policy evaluator."""

from __future__ import annotations

from .models import EvaluatorOptions
from .runtime.engine import EvaluationResult, build_apply_plan, evaluate, evaluate_state
from .runtime.evaluation_log import EvaluationLog
from .runtime.snapshot import HvacMode, StateSnapshot

__all__ = [
    "EvaluationLog",
    "EvaluationResult",
    "EvaluatorOptions",
    "HvacMode",
    "StateSnapshot",
    "build_apply_plan",
    "evaluate",
    "evaluate_state",
]
