"""State snapshot models."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any

from ..const import (
    DEFAULT_HUMIDITY_READING,
    DEFAULT_PASSCODE,
    DEFAULT_TARGET_TEMPERATURE,
    DEFAULT_TEMPERATURE_READING,
    HVAC_MODE,
)


class HvacMode(str, Enum):
    """Selected climate mode."""

    HEATER = "Heater"
    CHILLER = "Chiller"

    @classmethod
    def parse(cls, value: Any) -> "HvacMode":
        """Parse a mode from the enum or a case-insensitive name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            lowered = value.strip().lower()
            for mode in cls:
                if mode.value.lower() == lowered:
                    return mode
        raise ValueError(f"Unknown hvac mode: {value!r}")


@dataclass(frozen=True)
class StateSnapshot:
    """One point-in-time reading of the house."""

    temperature_reading: int = DEFAULT_TEMPERATURE_READING
    humidity_reading: int = DEFAULT_HUMIDITY_READING
    target_temperature: int = DEFAULT_TARGET_TEMPERATURE
    humidifier_on: bool = False
    door_open: bool = True
    light_on: bool = False
    proximity_occupied: bool = False
    alarm_armed: bool = False
    alarm_sounding: bool = False
    heater_on: bool = False
    chiller_on: bool = False
    away_timer_active: bool = False
    hvac_mode: HvacMode = HvacMode.HEATER
    alarm_passcode: str = field(default=DEFAULT_PASSCODE, repr=False)
    given_passcode: str = field(default=DEFAULT_PASSCODE, repr=False)

    @classmethod
    def defaults(cls) -> "StateSnapshot":
        return cls()

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @property
    def vacant(self) -> bool:
        return not self.proximity_occupied

    def raw_values(self) -> dict[str, Any]:
        """Field values exactly as stored, without conversion."""
        return {name: getattr(self, name) for name in self.field_names()}

    def as_dict(self) -> dict[str, Any]:
        data = self.raw_values()
        mode = data[HVAC_MODE]
        if isinstance(mode, HvacMode):
            data[HVAC_MODE] = mode.value
        return data
