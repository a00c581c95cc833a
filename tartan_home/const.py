"""Constants for the Tartan Home policy evaluator."""

from __future__ import annotations

DOMAIN = "tartan_home"

# Snapshot field keys
TEMPERATURE_READING = "temperature_reading"
HUMIDITY_READING = "humidity_reading"
TARGET_TEMPERATURE = "target_temperature"
HUMIDIFIER_ON = "humidifier_on"
DOOR_OPEN = "door_open"
LIGHT_ON = "light_on"
PROXIMITY_OCCUPIED = "proximity_occupied"
ALARM_ARMED = "alarm_armed"
ALARM_SOUNDING = "alarm_sounding"
HEATER_ON = "heater_on"
CHILLER_ON = "chiller_on"
AWAY_TIMER_ACTIVE = "away_timer_active"
HVAC_MODE = "hvac_mode"
ALARM_PASSCODE = "alarm_passcode"
GIVEN_PASSCODE = "given_passcode"

INTEGER_FIELDS = (TEMPERATURE_READING, HUMIDITY_READING, TARGET_TEMPERATURE)
BOOLEAN_FIELDS = (
    HUMIDIFIER_ON,
    DOOR_OPEN,
    LIGHT_ON,
    PROXIMITY_OCCUPIED,
    ALARM_ARMED,
    ALARM_SOUNDING,
    HEATER_ON,
    CHILLER_ON,
    AWAY_TIMER_ACTIVE,
)
STRING_FIELDS = (ALARM_PASSCODE, GIVEN_PASSCODE)

# Fields whose fail-safe value is fixed and cannot be overridden by options.
FAIL_SAFE_FIELDS = (PROXIMITY_OCCUPIED, AWAY_TIMER_ACTIVE)

DEFAULT_TEMPERATURE_READING = 20
DEFAULT_HUMIDITY_READING = 50
DEFAULT_TARGET_TEMPERATURE = 70
DEFAULT_PASSCODE = "1234"

# Options keys
CONF_DEFAULTS = "defaults"

# Policy names used on decision records
POLICY_VALIDATION = "validation"
POLICY_AWAY_TIMER = "away_timer"
POLICY_LIGHTING = "occupancy_lighting"
POLICY_DOOR = "vacancy_door"
POLICY_SECURITY = "security"
POLICY_CLIMATE = "climate"

SEVERITY_INFO = "info"
SEVERITY_ERROR = "error"

# Log phrases (downstream consumers match on these)
MSG_STARTING_AWAY_TIMER = "Starting away timer"
MSG_STOPPING_AWAY_TIMER = "Stopping away timer because house occupied"
MSG_TURNING_ON_LIGHT = "Turning on light"
MSG_LIGHT_BLOCKED_VACANT = "House vacant, unable to turn on light"
MSG_DOOR_CLOSED_VACANT = "Closed door because house vacant"
MSG_DOOR_LEFT_OPEN = "Door left open because house occupied"
MSG_ALARM_ENABLED_VACANT = "Enabling alarm because house vacant"
MSG_ALARM_KEPT_SOUNDING = "Alarm sounding, unable to disable alarm"
MSG_PASSCODE_VALID = "Alarm disabled with valid passcode"
MSG_PASSCODE_INVALID = "Invalid passcode, alarm still sounding"
MSG_BREAK_IN = "Break-in detected, sounding alarm"
MSG_HEATER_ON = "Turning on heater"
MSG_CHILLER_ON = "Turning on chiller"
MSG_TARGET_REACHED = "Target temperature reached, heater and chiller off"
MSG_INVALID_PROXIMITY = "Error: Invalid proximity state"
MSG_INVALID_AWAY_TIMER = "Error: Invalid away timer value"
MSG_INVALID_FIELD = "Error: Invalid {field} value"
MSG_INVALID_SNAPSHOT = "Error: Invalid state snapshot"
