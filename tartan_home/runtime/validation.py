"""Input validation guard: normalizes loosely typed snapshot values."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import voluptuous as vol

from ..const import (
    AWAY_TIMER_ACTIVE,
    BOOLEAN_FIELDS,
    FAIL_SAFE_FIELDS,
    HVAC_MODE,
    INTEGER_FIELDS,
    MSG_INVALID_AWAY_TIMER,
    MSG_INVALID_FIELD,
    MSG_INVALID_PROXIMITY,
    MSG_INVALID_SNAPSHOT,
    POLICY_VALIDATION,
    PROXIMITY_OCCUPIED,
    SEVERITY_ERROR,
    STRING_FIELDS,
)
from .contracts import DecisionRecord
from .snapshot import HvacMode, StateSnapshot

_LOGGER = logging.getLogger(__name__)

_STRING_BOOLEAN = vol.Boolean()
_STRING_INTEGER = vol.Coerce(int)

_ERROR_MESSAGES = {
    PROXIMITY_OCCUPIED: MSG_INVALID_PROXIMITY,
    AWAY_TIMER_ACTIVE: MSG_INVALID_AWAY_TIMER,
}


def boolean(value: Any) -> bool:
    """Validate a boolean given as bool, 0/1 or an on/off style string."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        return _STRING_BOOLEAN(value.strip())
    raise vol.Invalid(f"expected boolean, got {type(value).__name__}")


def integer(value: Any) -> int:
    """Validate an integer given as int, integral float or numeric string."""
    if isinstance(value, bool):
        raise vol.Invalid("expected integer, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        return _STRING_INTEGER(value.strip())
    raise vol.Invalid(f"expected integer, got {type(value).__name__}")


def hvac_mode(value: Any) -> HvacMode:
    try:
        return HvacMode.parse(value)
    except ValueError as err:
        raise vol.Invalid(str(err)) from err


def _build_field_schemas() -> dict[str, vol.Schema]:
    schemas: dict[str, vol.Schema] = {}
    for name in INTEGER_FIELDS:
        schemas[name] = vol.Schema(integer)
    for name in BOOLEAN_FIELDS:
        schemas[name] = vol.Schema(boolean)
    for name in STRING_FIELDS:
        schemas[name] = vol.Schema(str)
    schemas[HVAC_MODE] = vol.Schema(hvac_mode)
    return schemas


FIELD_SCHEMAS = _build_field_schemas()


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of the validation guard for one evaluation pass."""

    snapshot: StateSnapshot
    errors: tuple[DecisionRecord, ...] = ()
    substituted: frozenset[str] = field(default_factory=frozenset)

    @property
    def ok(self) -> bool:
        return not self.errors


def validate_state(raw: Any, defaults: StateSnapshot | None = None) -> ValidationResult:
    """Produce a fully typed snapshot from a possibly ill-typed one.

    Values that cannot be read as their declared type are replaced by the
    default for that field. Proximity and away timer always fall back to
    vacant and inactive. Never raises.
    """
    base = defaults or StateSnapshot.defaults()
    errors: list[DecisionRecord] = []

    values = _read_values(raw)
    if values is None:
        values = {}
        errors.append(
            DecisionRecord(
                policy=POLICY_VALIDATION,
                message=MSG_INVALID_SNAPSHOT,
                severity=SEVERITY_ERROR,
                context={"type": type(raw).__name__},
            )
        )

    normalized: dict[str, Any] = {}
    substituted: set[str] = set()

    for name in StateSnapshot.field_names():
        if name not in values:
            normalized[name] = _fallback(name, base)
            continue

        try:
            normalized[name] = FIELD_SCHEMAS[name](values[name])
        except vol.Invalid as err:
            normalized[name] = _fallback(name, base)
            substituted.add(name)
            errors.append(
                DecisionRecord(
                    policy=POLICY_VALIDATION,
                    message=_ERROR_MESSAGES.get(name, MSG_INVALID_FIELD.format(field=name)),
                    severity=SEVERITY_ERROR,
                    context={"field": name, "reason": str(err)},
                )
            )

    return ValidationResult(
        snapshot=StateSnapshot(**normalized),
        errors=tuple(errors),
        substituted=frozenset(substituted),
    )


def _fallback(name: str, base: StateSnapshot) -> Any:
    if name in FAIL_SAFE_FIELDS:
        return False
    return getattr(base, name)


def _read_values(raw: Any) -> dict[Any, Any] | None:
    if isinstance(raw, StateSnapshot):
        return raw.raw_values()
    if not isinstance(raw, Mapping):
        return None

    try:
        values = dict(raw)
    except Exception:
        _LOGGER.debug("Unreadable snapshot mapping %s", type(raw).__name__, exc_info=True)
        return None

    unknown = [key for key in values if key not in FIELD_SCHEMAS]
    if unknown:
        _LOGGER.debug("Ignoring unknown snapshot keys: %s", unknown)
    return values
