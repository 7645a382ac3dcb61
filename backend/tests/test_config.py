import pytest
from decimal import Decimal

from teesheet.services.teetimes.config import (
    TeeSheetConfig,
    get_tee_sheet_config,
    minutes_to_label,
    normalize_time_label,
    time_str_to_minutes,
)


@pytest.mark.parametrize("value,expected", [
    ("7:00 AM", 420),
    ("07:00", 420),
    ("12:00 PM", 720),
    ("12:15 AM", 15),
    ("6:45 pm", 1125),
    ("18:45", 1125),
])
def test_time_str_to_minutes(value, expected):
    assert time_str_to_minutes(value) == expected


@pytest.mark.parametrize("value", ["", "7 AM", "13:00 PM", "24:00", "7:60", "noon"])
def test_time_str_to_minutes_rejects_garbage(value):
    with pytest.raises(ValueError):
        time_str_to_minutes(value)


def test_labels_are_twelve_hour_without_leading_zero():
    assert minutes_to_label(420) == "7:00 AM"
    assert minutes_to_label(720) == "12:00 PM"
    assert minutes_to_label(0) == "12:00 AM"
    assert minutes_to_label(1125) == "6:45 PM"
    assert normalize_time_label("13:30") == "1:30 PM"


def test_default_window_yields_48_slots():
    config = TeeSheetConfig()
    tee_times = config.tee_times()

    assert config.slots_per_day == 48
    assert len(tee_times) == 48
    assert tee_times[0] == (420, "7:00 AM")
    assert tee_times[-1] == (1125, "6:45 PM")
    minutes = [m for m, _ in tee_times]
    assert minutes == sorted(minutes)


def test_settings_backed_config_matches_defaults():
    config = get_tee_sheet_config()
    assert config.first_tee_minute == 420
    assert config.last_tee_minute == 1140
    assert config.max_players == 4
    assert config.price == Decimal("85.00")


@pytest.mark.parametrize("kwargs", [
    {"interval_minutes": 0},
    {"interval_minutes": 7},
    {"first_tee_minute": 600, "last_tee_minute": 600},
    {"max_players": 0},
])
def test_invalid_config_is_rejected(kwargs):
    with pytest.raises(ValueError):
        TeeSheetConfig(**kwargs)
