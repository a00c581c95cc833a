"""Typed models for Tartan Home configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import voluptuous as vol

from .const import (
    BOOLEAN_FIELDS,
    CONF_DEFAULTS,
    FAIL_SAFE_FIELDS,
    HVAC_MODE,
    INTEGER_FIELDS,
    STRING_FIELDS,
)
from .runtime.snapshot import StateSnapshot
from .runtime.validation import boolean, hvac_mode, integer


def _defaults_schema() -> vol.Schema:
    fields: dict[Any, Any] = {}
    for name in INTEGER_FIELDS:
        fields[vol.Optional(name)] = integer
    for name in BOOLEAN_FIELDS:
        if name in FAIL_SAFE_FIELDS:
            continue
        fields[vol.Optional(name)] = boolean
    for name in STRING_FIELDS:
        fields[vol.Optional(name)] = str
    fields[vol.Optional(HVAC_MODE)] = hvac_mode
    return vol.Schema(fields)


DEFAULTS_SCHEMA = _defaults_schema()

OPTIONS_SCHEMA = vol.Schema(
    {
        vol.Optional(CONF_DEFAULTS, default={}): dict,
    }
)


@dataclass(frozen=True)
class EvaluatorOptions:
    """Normalized evaluator options.

    ``defaults`` overrides the per-field defaults the validation guard falls
    back to. Proximity and away timer keep their fail-safe values and cannot
    be overridden. Invalid options raise ``vol.Invalid`` here, never during
    evaluation.
    """

    defaults: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "defaults", DEFAULTS_SCHEMA(dict(self.defaults)))

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None) -> "EvaluatorOptions":
        data = OPTIONS_SCHEMA(dict(options or {}))
        return cls(defaults=data[CONF_DEFAULTS])

    def defaults_snapshot(self) -> StateSnapshot:
        return StateSnapshot(**self.defaults)
