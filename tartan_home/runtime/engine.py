"""Tartan Home runtime engine (validation + ordered policy pipeline)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from ..const import (
    ALARM_ARMED,
    ALARM_PASSCODE,
    ALARM_SOUNDING,
    AWAY_TIMER_ACTIVE,
    CHILLER_ON,
    DOOR_OPEN,
    GIVEN_PASSCODE,
    HEATER_ON,
    HUMIDIFIER_ON,
    HVAC_MODE,
    LIGHT_ON,
    POLICY_AWAY_TIMER,
    POLICY_CLIMATE,
    POLICY_DOOR,
    POLICY_LIGHTING,
    POLICY_SECURITY,
)
from ..models import EvaluatorOptions
from .contracts import ApplyPlan, ApplyStep, DecisionRecord
from .evaluation_log import EvaluationLog
from .lighting import apply_occupancy_lighting
from .policy import apply_away_timer, apply_climate, apply_security, apply_vacancy_door
from .snapshot import HvacMode, StateSnapshot
from .validation import ValidationResult, validate_state

_LOGGER = logging.getLogger(__name__)

_PASSCODE_FIELDS = frozenset({ALARM_PASSCODE, GIVEN_PASSCODE})

# field -> (domain, action when true, action when false, owning policy)
_SWITCH_FIELDS: dict[str, tuple[str, str, str, str]] = {
    AWAY_TIMER_ACTIVE: ("away_timer", "start", "stop", POLICY_AWAY_TIMER),
    LIGHT_ON: ("light", "turn_on", "turn_off", POLICY_LIGHTING),
    DOOR_OPEN: ("door", "open", "close", POLICY_DOOR),
    ALARM_ARMED: ("alarm", "arm", "disarm", POLICY_SECURITY),
    ALARM_SOUNDING: ("alarm", "sound", "silence", POLICY_SECURITY),
    HUMIDIFIER_ON: ("humidifier", "turn_on", "turn_off", POLICY_CLIMATE),
    HEATER_ON: ("heater", "turn_on", "turn_off", POLICY_CLIMATE),
    CHILLER_ON: ("chiller", "turn_on", "turn_off", POLICY_CLIMATE),
}


@dataclass(frozen=True)
class EvaluationResult:
    """Everything produced by one evaluation pass."""

    snapshot: StateSnapshot
    log: EvaluationLog
    plan: ApplyPlan
    errors: tuple[DecisionRecord, ...] = ()


def evaluate(
    current: StateSnapshot | Any,
    log: EvaluationLog | None = None,
    *,
    options: EvaluatorOptions | None = None,
) -> StateSnapshot:
    """Compute the next snapshot from the current one.

    Decisions are appended to ``log``; when no log is given they are kept for
    this call only. The caller's snapshot is never modified.
    """
    if log is None:
        log = EvaluationLog()
    _, snapshot = _run_pipeline(current, log, options)
    return snapshot


def evaluate_state(
    current: StateSnapshot | Any,
    *,
    options: EvaluatorOptions | None = None,
) -> EvaluationResult:
    """Run one pass with a fresh log and return snapshot, log and apply plan."""
    log = EvaluationLog()
    validation, snapshot = _run_pipeline(current, log, options)
    return EvaluationResult(
        snapshot=snapshot,
        log=log,
        plan=build_apply_plan(validation.snapshot, snapshot),
        errors=validation.errors,
    )


def build_apply_plan(previous: StateSnapshot, evaluated: StateSnapshot) -> ApplyPlan:
    """List the actuator changes between two typed snapshots."""
    steps: list[ApplyStep] = []

    for key, (domain, on_action, off_action, policy) in _SWITCH_FIELDS.items():
        before = getattr(previous, key)
        after = getattr(evaluated, key)
        if before == after:
            continue
        steps.append(
            ApplyStep(
                domain=domain,
                target=key,
                action=on_action if after else off_action,
                value=after,
                previous=before,
                policy=policy,
            )
        )

    if previous.hvac_mode != evaluated.hvac_mode:
        mode = HvacMode.parse(evaluated.hvac_mode)
        steps.append(
            ApplyStep(
                domain="hvac",
                target=HVAC_MODE,
                action="set_mode",
                value=mode.value,
                previous=HvacMode.parse(previous.hvac_mode).value,
                policy=POLICY_CLIMATE,
            )
        )

    return ApplyPlan(steps=steps)


def _run_pipeline(
    current: Any,
    log: EvaluationLog,
    options: EvaluatorOptions | None,
) -> tuple[ValidationResult, StateSnapshot]:
    if options is None:
        options = EvaluatorOptions()

    validation = validate_state(current, options.defaults_snapshot())
    log.extend(validation.errors)

    requested = validation.snapshot
    _LOGGER.debug("Tartan evaluation requested: %s", requested)

    # Order matters: each stage reads the snapshot left by the previous one.
    state, records = apply_away_timer(requested)
    log.extend(records)

    state, records = apply_occupancy_lighting(state, requested)
    log.extend(records)

    state, records = apply_vacancy_door(state, requested)
    log.extend(records)

    state, records = apply_security(
        state,
        requested,
        passcode_presented=not validation.substituted & _PASSCODE_FIELDS,
    )
    log.extend(records)

    state, records = apply_climate(state)
    log.extend(records)

    _LOGGER.debug("Tartan evaluation result: %s", state)
    return validation, state
