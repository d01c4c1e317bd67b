from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime

import pytest

from src.timekeeper.timekeeper.core.enums import PunchState
from src.timekeeper.timekeeper.core.exceptions import AuthorizationError, NoOpenPunchError, ValidationError
from src.timekeeper.timekeeper.punches.model import OpenPunch


def test_punch_in_then_out_appends_log_entry(container, alice):
    svc = container.punch_service

    svc.punch_in(alice, now=datetime(2024, 3, 10, 9, 10, 45))
    entry = svc.punch_out(alice, now=datetime(2024, 3, 10, 17, 30))

    assert entry.username == "alice"
    assert entry.date == "2024-03-10"
    assert entry.punch_in == "09:10"
    assert entry.punch_out == "17:30"
    assert entry.minutes_worked == 470
    assert entry.pay_period_start == "2024-03-01"
    assert container.logs_repo.load_logs() == [entry]
    assert container.open_punches_repo.load_open_punches() == {}


def test_pay_period_follows_saved_settings(container, admin, alice):
    container.pay_settings_service.save_start_days(current=admin, value="1, 15")
    svc = container.punch_service

    svc.punch_in(alice, now=datetime(2024, 3, 20, 9, 0))
    entry = svc.punch_out(alice, now=datetime(2024, 3, 20, 17, 0))

    assert entry.pay_period_start == "2024-03-15"
    assert entry.minutes_worked == 480


def test_punch_out_without_punch_in_is_rejected_without_changes(container, alice):
    container.open_punches_repo.save_open_punches({"bob": OpenPunch(date="2024-03-10", punch_in="08:00")})

    with pytest.raises(NoOpenPunchError):
        container.punch_service.punch_out(alice, now=datetime(2024, 3, 10, 17, 0))

    assert container.logs_repo.load_logs() == []
    assert container.open_punches_repo.load_open_punches() == {
        "bob": OpenPunch(date="2024-03-10", punch_in="08:00")
    }


def test_stale_punch_from_previous_day_does_not_count(container, alice):
    svc = container.punch_service
    svc.punch_in(alice, now=datetime(2024, 3, 9, 9, 0))

    assert svc.status(alice, now=datetime(2024, 3, 10, 8, 0)).state == PunchState.NOT_PUNCHED
    with pytest.raises(NoOpenPunchError):
        svc.punch_out(alice, now=datetime(2024, 3, 10, 17, 0))
    assert "alice" in container.open_punches_repo.load_open_punches()


def test_stale_punch_is_overwritten_by_new_punch_in(container, alice):
    svc = container.punch_service
    svc.punch_in(alice, now=datetime(2024, 3, 9, 9, 0))
    svc.punch_in(alice, now=datetime(2024, 3, 10, 9, 5))

    assert container.open_punches_repo.load_open_punches()["alice"] == OpenPunch(date="2024-03-10", punch_in="09:05")


def test_second_punch_in_same_day_replaces_first(container, alice, caplog):
    svc = container.punch_service
    svc.punch_in(alice, now=datetime(2024, 3, 10, 9, 0))

    with caplog.at_level(logging.WARNING):
        svc.punch_in(alice, now=datetime(2024, 3, 10, 9, 30))

    assert "replacing punch-in 09:00" in caplog.text
    entry = svc.punch_out(alice, now=datetime(2024, 3, 10, 17, 0))
    assert entry.punch_in == "09:30"
    assert entry.minutes_worked == 450


def test_status_reports_open_punch(container, alice):
    svc = container.punch_service
    assert svc.status(alice, now=datetime(2024, 3, 10, 8, 0)).state == PunchState.NOT_PUNCHED

    svc.punch_in(alice, now=datetime(2024, 3, 10, 9, 0))
    status = svc.status(alice, now=datetime(2024, 3, 10, 12, 0))

    assert status.state == PunchState.PUNCHED_IN
    assert status.punch_in == "09:00"
    assert (status.shift_start, status.shift_end) == ("09:00", "17:00")


def test_account_without_schedule_uses_default_shift(container, alice):
    accounts = container.accounts_repo.load_accounts()
    container.accounts_repo.save_accounts(
        [replace(a, shift_start=None, shift_end=None) if a.username == "alice" else a for a in accounts]
    )
    svc = container.punch_service

    svc.punch_in(alice, now=datetime(2024, 3, 10, 9, 15))
    entry = svc.punch_out(alice, now=datetime(2024, 3, 10, 18, 0))

    # default 09:00-17:00
    assert entry.minutes_worked == 465


def test_admin_cannot_punch(container, admin):
    with pytest.raises(AuthorizationError):
        container.punch_service.punch_in(admin, now=datetime(2024, 3, 10, 9, 0))


def test_deleted_account_cannot_punch_out(container, admin, alice):
    svc = container.punch_service
    svc.punch_in(alice, now=datetime(2024, 3, 10, 9, 0))
    container.accounts_repo.save_accounts([a for a in container.accounts_repo.load_accounts() if a.username != "alice"])

    with pytest.raises(ValidationError):
        svc.punch_out(alice, now=datetime(2024, 3, 10, 17, 0))
    assert container.logs_repo.load_logs() == []


def test_minutes_worked_is_never_negative(container, alice):
    svc = container.punch_service
    # clock set back between punches
    svc.punch_in(alice, now=datetime(2024, 3, 10, 16, 50))
    entry = svc.punch_out(alice, now=datetime(2024, 3, 10, 16, 40))
    assert entry.minutes_worked == 0
