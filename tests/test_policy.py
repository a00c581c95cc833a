from tartan_home.runtime.policy import (
    apply_away_timer,
    apply_climate,
    apply_security,
    apply_vacancy_door,
    resolve_passcode,
)
from tartan_home.runtime.snapshot import HvacMode, StateSnapshot


def _messages(records):
    return [record.message for record in records]


def test_away_timer_starts_when_vacant():
    state, records = apply_away_timer(
        StateSnapshot(proximity_occupied=False, away_timer_active=False, light_on=True, door_open=True)
    )
    assert state.away_timer_active is True
    assert state.light_on is False
    assert state.door_open is False
    assert state.alarm_armed is True
    assert _messages(records) == ["Starting away timer"]


def test_away_timer_already_active_keeps_posture_without_log():
    state, records = apply_away_timer(
        StateSnapshot(proximity_occupied=False, away_timer_active=True, light_on=True)
    )
    assert state.away_timer_active is True
    assert state.light_on is False
    assert records == []


def test_away_timer_resets_when_occupied():
    state, records = apply_away_timer(
        StateSnapshot(proximity_occupied=True, away_timer_active=True, light_on=True, door_open=True)
    )
    assert state.away_timer_active is False
    assert state.light_on is True
    assert state.door_open is True
    assert _messages(records) == ["Stopping away timer because house occupied"]


def test_away_timer_idle_when_occupied():
    state, records = apply_away_timer(StateSnapshot(proximity_occupied=True))
    assert state == StateSnapshot(proximity_occupied=True)
    assert records == []


def test_door_closed_when_vacant():
    requested = StateSnapshot(proximity_occupied=False, door_open=True)
    state, records = apply_vacancy_door(requested, requested)
    assert state.door_open is False
    assert _messages(records) == ["Closed door because house vacant"]


def test_door_already_closed_when_vacant_is_silent():
    requested = StateSnapshot(proximity_occupied=False, door_open=False)
    state, records = apply_vacancy_door(requested, requested)
    assert state.door_open is False
    assert records == []


def test_door_logs_vacancy_close_after_cascade_closed_it():
    requested = StateSnapshot(proximity_occupied=False, door_open=True)
    cascaded, _ = apply_away_timer(requested)
    state, records = apply_vacancy_door(cascaded, requested)
    assert state.door_open is False
    assert _messages(records) == ["Closed door because house vacant"]


def test_door_echoes_request_when_occupied():
    requested = StateSnapshot(proximity_occupied=True, door_open=True)
    state, records = apply_vacancy_door(requested, requested)
    assert state.door_open is True
    assert _messages(records) == ["Door left open because house occupied"]

    requested = StateSnapshot(proximity_occupied=True, door_open=False)
    state, records = apply_vacancy_door(requested, requested)
    assert state.door_open is False
    assert records == []


def test_resolve_passcode_is_exact_and_case_sensitive():
    assert resolve_passcode(alarm_passcode="Testing1!", given_passcode="Testing1!") is True
    assert resolve_passcode(alarm_passcode="Testing1!", given_passcode="testing1!") is False
    assert resolve_passcode(alarm_passcode="1234", given_passcode="1234 ") is False
    assert resolve_passcode(alarm_passcode="1234", given_passcode="1234", presented=False) is False


def test_security_vacant_cannot_disable_alarm():
    requested = StateSnapshot(proximity_occupied=False, alarm_armed=False, door_open=False)
    state, records = apply_security(requested, requested)
    assert state.alarm_armed is True
    assert state.alarm_sounding is False
    assert _messages(records) == ["Enabling alarm because house vacant"]


def test_security_occupied_disarm_is_honored():
    requested = StateSnapshot(proximity_occupied=True, alarm_armed=False)
    state, records = apply_security(requested, requested)
    assert state.alarm_armed is False
    assert records == []


def test_security_valid_passcode_clears_sounding():
    requested = StateSnapshot(
        proximity_occupied=True,
        alarm_armed=True,
        alarm_sounding=True,
        alarm_passcode="Testing1!",
        given_passcode="Testing1!",
    )
    state, records = apply_security(requested, requested)
    assert state.alarm_sounding is False
    assert state.alarm_armed is True
    assert _messages(records) == ["Alarm disabled with valid passcode"]


def test_security_invalid_passcode_keeps_sounding():
    requested = StateSnapshot(
        proximity_occupied=True,
        alarm_armed=True,
        alarm_sounding=True,
        alarm_passcode="Testing1!",
        given_passcode="wrong",
    )
    state, records = apply_security(requested, requested)
    assert state.alarm_sounding is True
    assert _messages(records) == ["Invalid passcode, alarm still sounding"]


def test_security_unpresented_passcode_never_matches():
    requested = StateSnapshot(proximity_occupied=True, alarm_armed=True, alarm_sounding=True)
    state, _ = apply_security(requested, requested, passcode_presented=False)
    assert state.alarm_sounding is True


def test_security_sounding_alarm_stays_armed():
    requested = StateSnapshot(
        proximity_occupied=True,
        alarm_armed=False,
        alarm_sounding=True,
        given_passcode="wrong",
    )
    state, records = apply_security(requested, requested)
    assert state.alarm_sounding is True
    assert state.alarm_armed is True
    assert "Alarm sounding, unable to disable alarm" in _messages(records)


def test_security_break_in_uses_pass_start_door():
    requested = StateSnapshot(proximity_occupied=False, alarm_armed=True, door_open=True)
    closed, _ = apply_vacancy_door(requested, requested)
    assert closed.door_open is False

    state, records = apply_security(closed, requested)
    assert state.alarm_sounding is True
    assert _messages(records) == ["Break-in detected, sounding alarm"]


def test_security_no_break_in_when_door_closed():
    requested = StateSnapshot(proximity_occupied=False, alarm_armed=True, door_open=False)
    state, records = apply_security(requested, requested)
    assert state.alarm_sounding is False
    assert records == []


def test_security_no_break_in_when_alarm_was_disarmed_at_start():
    requested = StateSnapshot(proximity_occupied=False, alarm_armed=False, door_open=True)
    state, _ = apply_security(requested, requested)
    assert state.alarm_armed is True
    assert state.alarm_sounding is False


def test_security_closing_door_does_not_clear_sounding():
    requested = StateSnapshot(
        proximity_occupied=False, alarm_armed=True, alarm_sounding=True, door_open=False
    )
    state, records = apply_security(requested, requested)
    assert state.alarm_sounding is True
    assert records == []


def test_climate_heats_below_target():
    state, records = apply_climate(
        StateSnapshot(temperature_reading=-100, target_temperature=22, hvac_mode=HvacMode.CHILLER)
    )
    assert state.heater_on is True
    assert state.chiller_on is False
    assert state.hvac_mode is HvacMode.HEATER
    assert _messages(records) == ["Turning on heater"]


def test_climate_chills_above_target():
    state, records = apply_climate(
        StateSnapshot(temperature_reading=30, target_temperature=22, heater_on=True)
    )
    assert state.heater_on is False
    assert state.chiller_on is True
    assert state.hvac_mode is HvacMode.CHILLER
    assert _messages(records) == ["Turning on chiller"]


def test_climate_equal_turns_both_off_and_keeps_mode():
    state, records = apply_climate(
        StateSnapshot(
            temperature_reading=22,
            target_temperature=22,
            chiller_on=True,
            hvac_mode=HvacMode.CHILLER,
        )
    )
    assert state.heater_on is False
    assert state.chiller_on is False
    assert state.hvac_mode is HvacMode.CHILLER
    assert _messages(records) == ["Target temperature reached, heater and chiller off"]


def test_climate_leaves_humidity_alone():
    before = StateSnapshot(humidity_reading=80, humidifier_on=True)
    state, _ = apply_climate(before)
    assert state.humidity_reading == 80
    assert state.humidifier_on is True


def test_security_disarm_write_during_away_posture_still_detects_break_in():
    requested = StateSnapshot(
        proximity_occupied=False, away_timer_active=True, alarm_armed=False, door_open=True
    )
    cascaded, _ = apply_away_timer(requested)
    closed, _ = apply_vacancy_door(cascaded, requested)

    state, records = apply_security(closed, requested)
    assert state.alarm_armed is True
    assert state.alarm_sounding is True
    assert "Break-in detected, sounding alarm" in _messages(records)
