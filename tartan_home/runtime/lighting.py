"""Lighting domain helpers (occupancy policy)."""

from __future__ import annotations

from dataclasses import replace

from ..const import MSG_LIGHT_BLOCKED_VACANT, MSG_TURNING_ON_LIGHT, POLICY_LIGHTING
from .contracts import DecisionRecord
from .snapshot import StateSnapshot


def resolve_light(requested_on: bool, occupied: bool) -> bool:
    """Resolve the final light state from the request and occupancy."""
    if not occupied:
        return False
    return requested_on


def apply_occupancy_lighting(
    state: StateSnapshot, requested: StateSnapshot
) -> tuple[StateSnapshot, list[DecisionRecord]]:
    """Force the light off while vacant, otherwise honor the request."""
    light_on = resolve_light(requested.light_on, state.proximity_occupied)
    records: list[DecisionRecord] = []

    if state.vacant and requested.light_on:
        records.append(DecisionRecord(POLICY_LIGHTING, MSG_LIGHT_BLOCKED_VACANT))
    elif light_on:
        records.append(DecisionRecord(POLICY_LIGHTING, MSG_TURNING_ON_LIGHT))

    return replace(state, light_on=light_on), records
