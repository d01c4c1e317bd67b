from __future__ import annotations

import pytest

from src.timekeeper.timekeeper.core.exceptions import AuthorizationError, ConfigurationError, ValidationError
from src.timekeeper.timekeeper.paysettings.service import parse_start_days


def test_parse_sorts_and_deduplicates():
    assert parse_start_days("15, 1, 15").start_days == (1, 15)
    assert parse_start_days([31, "5"]).start_days == (5, 31)


def test_blank_items_are_skipped():
    assert parse_start_days("1,,15,").start_days == (1, 15)


def test_single_day_number_is_accepted():
    assert parse_start_days(15).start_days == (15,)


@pytest.mark.parametrize("value", [{"a": 1}, {1: 15}, 1.5, True, object()])
def test_unsupported_input_types_are_rejected(value):
    with pytest.raises(ValidationError, match="valid day numbers"):
        parse_start_days(value)


@pytest.mark.parametrize("value", ["", "   ", ",", None, []])
def test_empty_input_is_a_configuration_error(value):
    with pytest.raises(ConfigurationError):
        parse_start_days(value)


@pytest.mark.parametrize("value", ["abc", "1, x", "0", "32", "-1", "1.5"])
def test_non_numeric_or_out_of_range_days_are_rejected(value):
    with pytest.raises(ValidationError):
        parse_start_days(value)


def test_defaults_are_first_and_fifteenth(container):
    assert container.pay_settings_service.get().start_days == (1, 15)


def test_save_persists_settings(container, admin):
    container.pay_settings_service.save_start_days(current=admin, value="10, 25")
    assert container.store.get("paySettings") == {"startDays": [10, 25]}


def test_rejected_input_keeps_previous_settings(container, admin):
    with pytest.raises(ConfigurationError):
        container.pay_settings_service.save_start_days(current=admin, value="")
    with pytest.raises(ValidationError):
        container.pay_settings_service.save_start_days(current=admin, value="40")
    assert container.pay_settings_service.get().start_days == (1, 15)


def test_only_admin_saves_settings(container, alice):
    with pytest.raises(AuthorizationError):
        container.pay_settings_service.save_start_days(current=alice, value="1")
