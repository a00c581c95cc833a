"""Core policy helpers: away timer, door, security and climate."""

from __future__ import annotations

from dataclasses import replace

from ..const import (
    MSG_ALARM_ENABLED_VACANT,
    MSG_ALARM_KEPT_SOUNDING,
    MSG_BREAK_IN,
    MSG_CHILLER_ON,
    MSG_DOOR_CLOSED_VACANT,
    MSG_DOOR_LEFT_OPEN,
    MSG_HEATER_ON,
    MSG_PASSCODE_INVALID,
    MSG_PASSCODE_VALID,
    MSG_STARTING_AWAY_TIMER,
    MSG_STOPPING_AWAY_TIMER,
    MSG_TARGET_REACHED,
    POLICY_AWAY_TIMER,
    POLICY_CLIMATE,
    POLICY_DOOR,
    POLICY_SECURITY,
)
from .contracts import DecisionRecord
from .snapshot import HvacMode, StateSnapshot

PolicyOutcome = tuple[StateSnapshot, list[DecisionRecord]]


def apply_away_timer(state: StateSnapshot) -> PolicyOutcome:
    """Start or stop the away timer and force the vacant posture while armed."""
    records: list[DecisionRecord] = []

    if state.proximity_occupied:
        if state.away_timer_active:
            records.append(DecisionRecord(POLICY_AWAY_TIMER, MSG_STOPPING_AWAY_TIMER))
            state = replace(state, away_timer_active=False)
        return state, records

    if not state.away_timer_active:
        records.append(DecisionRecord(POLICY_AWAY_TIMER, MSG_STARTING_AWAY_TIMER))
        state = replace(state, away_timer_active=True)

    return replace(state, light_on=False, door_open=False, alarm_armed=True), records


def apply_vacancy_door(state: StateSnapshot, requested: StateSnapshot) -> PolicyOutcome:
    """Keep the door closed while vacant, otherwise echo the requested door."""
    if state.vacant:
        records = []
        if requested.door_open:
            records.append(DecisionRecord(POLICY_DOOR, MSG_DOOR_CLOSED_VACANT))
        return replace(state, door_open=False), records

    records = []
    if requested.door_open:
        records.append(DecisionRecord(POLICY_DOOR, MSG_DOOR_LEFT_OPEN))
    return replace(state, door_open=requested.door_open), records


def resolve_passcode(*, alarm_passcode: str, given_passcode: str, presented: bool = True) -> bool:
    """Exact, case-sensitive passcode comparison."""
    if not presented:
        return False
    return given_passcode == alarm_passcode


def apply_security(
    state: StateSnapshot,
    requested: StateSnapshot,
    *,
    passcode_presented: bool = True,
) -> PolicyOutcome:
    """Arming lock, passcode disarm and break-in detection.

    Break-in is judged on the door value at pass start, before the door
    policy closed the door for vacancy. The alarm counts as armed when it was
    armed at pass start or the away timer was already running.
    """
    records: list[DecisionRecord] = []
    armed = state.alarm_armed
    sounding = state.alarm_sounding

    if state.vacant:
        # Once the away posture is held, a disarm write in the same tick
        # does not suspend break-in detection.
        armed_at_start = requested.alarm_armed or requested.away_timer_active
        if not armed:
            armed = True
        if not requested.alarm_armed:
            records.append(DecisionRecord(POLICY_SECURITY, MSG_ALARM_ENABLED_VACANT))
        if armed_at_start and requested.door_open and not sounding:
            sounding = True
            records.append(
                DecisionRecord(POLICY_SECURITY, MSG_BREAK_IN, context={"door_open": True})
            )
        return replace(state, alarm_armed=armed, alarm_sounding=sounding), records

    if sounding:
        if resolve_passcode(
            alarm_passcode=state.alarm_passcode,
            given_passcode=state.given_passcode,
            presented=passcode_presented,
        ):
            sounding = False
            records.append(DecisionRecord(POLICY_SECURITY, MSG_PASSCODE_VALID))
        else:
            records.append(DecisionRecord(POLICY_SECURITY, MSG_PASSCODE_INVALID))

    # A sounding alarm stays armed.
    if sounding and not armed:
        armed = True
        records.append(DecisionRecord(POLICY_SECURITY, MSG_ALARM_KEPT_SOUNDING))

    return replace(state, alarm_armed=armed, alarm_sounding=sounding), records


def apply_climate(state: StateSnapshot) -> PolicyOutcome:
    """Select heater or chiller from the temperature error."""
    records: list[DecisionRecord] = []
    context = {
        "temperature_reading": state.temperature_reading,
        "target_temperature": state.target_temperature,
    }

    if state.temperature_reading < state.target_temperature:
        if not state.heater_on:
            records.append(DecisionRecord(POLICY_CLIMATE, MSG_HEATER_ON, context=context))
        return (
            replace(state, hvac_mode=HvacMode.HEATER, heater_on=True, chiller_on=False),
            records,
        )

    if state.temperature_reading > state.target_temperature:
        if not state.chiller_on:
            records.append(DecisionRecord(POLICY_CLIMATE, MSG_CHILLER_ON, context=context))
        return (
            replace(state, hvac_mode=HvacMode.CHILLER, heater_on=False, chiller_on=True),
            records,
        )

    if state.heater_on or state.chiller_on:
        records.append(DecisionRecord(POLICY_CLIMATE, MSG_TARGET_REACHED, context=context))
    return replace(state, heater_on=False, chiller_on=False), records
