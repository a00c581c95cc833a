import pytest
import voluptuous as vol

from tartan_home.models import EvaluatorOptions
from tartan_home.runtime.snapshot import HvacMode, StateSnapshot


def test_options_defaults():
    options = EvaluatorOptions.from_mapping({})
    assert options.defaults == {}
    assert options.defaults_snapshot() == StateSnapshot()


def test_options_none_mapping():
    assert EvaluatorOptions.from_mapping(None) == EvaluatorOptions()


def test_options_default_overrides_are_normalized():
    options = EvaluatorOptions.from_mapping(
        {
            "defaults": {"target_temperature": "68", "hvac_mode": "CHILLER", "door_open": "off"},
        }
    )
    snapshot = options.defaults_snapshot()
    assert snapshot.target_temperature == 68
    assert snapshot.hvac_mode is HvacMode.CHILLER
    assert snapshot.door_open is False


def test_options_reject_fail_safe_override():
    with pytest.raises(vol.Invalid):
        EvaluatorOptions.from_mapping({"defaults": {"proximity_occupied": True}})
    with pytest.raises(vol.Invalid):
        EvaluatorOptions(defaults={"away_timer_active": True})


def test_options_reject_unknown_keys():
    with pytest.raises(vol.Invalid):
        EvaluatorOptions.from_mapping({"defaults": {"window_open": True}})
    with pytest.raises(vol.Invalid):
        EvaluatorOptions.from_mapping({"language": "en"})


def test_options_reject_bad_default_value():
    with pytest.raises(vol.Invalid):
        EvaluatorOptions(defaults={"temperature_reading": "warm"})


def test_snapshot_defaults():
    snap = StateSnapshot.defaults()
    assert snap.temperature_reading == 20
    assert snap.humidity_reading == 50
    assert snap.target_temperature == 70
    assert snap.door_open is True
    assert snap.proximity_occupied is False
    assert snap.alarm_armed is False
    assert snap.hvac_mode is HvacMode.HEATER
    assert snap.alarm_passcode == "1234"
    assert snap.given_passcode == "1234"


def test_snapshot_as_dict_uses_mode_value():
    data = StateSnapshot(hvac_mode=HvacMode.CHILLER).as_dict()
    assert data["hvac_mode"] == "Chiller"
    assert set(data) == set(StateSnapshot.field_names())


def test_snapshot_repr_hides_passcodes():
    text = repr(StateSnapshot(alarm_passcode="s3cret", given_passcode="guess"))
    assert "s3cret" not in text
    assert "guess" not in text


def test_hvac_mode_parse():
    assert HvacMode.parse("HEATER") is HvacMode.HEATER
    assert HvacMode.parse(" chiller ") is HvacMode.CHILLER
    assert HvacMode.parse(HvacMode.CHILLER) is HvacMode.CHILLER
    with pytest.raises(ValueError):
        HvacMode.parse("fan")
    with pytest.raises(ValueError):
        HvacMode.parse(1)
