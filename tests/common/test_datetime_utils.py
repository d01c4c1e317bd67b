from decimal import Decimal

from src.timekeeper.timekeeper.common.datetime_utils import (
    format_hours,
    minutes_to_hours,
    minutes_to_time,
    time_to_minutes,
)


def test_time_to_minutes_is_linear():
    assert time_to_minutes("00:00") == 0
    assert time_to_minutes("09:10") == 550
    assert time_to_minutes("23:59") == 1439


def test_time_to_minutes_does_not_validate_range():
    assert time_to_minutes("25:70") == 25 * 60 + 70


def test_minutes_to_time_inverts_time_to_minutes_for_every_clock_time():
    for h in range(24):
        for m in range(60):
            t = f"{h:02d}:{m:02d}"
            assert minutes_to_time(time_to_minutes(t)) == t


def test_hours_are_rounded_to_two_decimals():
    assert minutes_to_hours(470) == Decimal("7.83")
    assert format_hours(470) == "7.83"
    assert format_hours(0) == "0.00"
    assert format_hours(90) == "1.50"
    # 1/120 h rounds half up
    assert format_hours(1) == "0.02"
