from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..accounts.repository import AccountRepository
from ..accounts.service import SessionUser
from ..common.datetime_utils import format_clock, format_iso_date, now_local
from ..core.enums import PunchState, Role
from ..core.exceptions import AuthorizationError, NoOpenPunchError, ValidationError
from ..payroll.calculator.base import WorkedMinutesCalculator
from ..payroll.calculator.shift_anchored_calculator import ShiftAnchoredCalculator
from ..payroll.periods import get_pay_period_start
from ..paysettings.repository import PaySettingsRepository
from .model import LogEntry, OpenPunch, PunchStatus
from .repository import LogRepository, OpenPunchRepository

logger = logging.getLogger(__name__)


class PunchService:
    def __init__(
        self,
        accounts: AccountRepository,
        logs: LogRepository,
        open_punches: OpenPunchRepository,
        settings: PaySettingsRepository,
        *,
        calculator: Optional[WorkedMinutesCalculator] = None,
    ):
        self._accounts = accounts
        self._logs = logs
        self._open_punches = open_punches
        self._settings = settings
        self._calculator = calculator or ShiftAnchoredCalculator()

    @staticmethod
    def _require_employee(current: SessionUser) -> None:
        if current.role != Role.EMPLOYEE:
            raise AuthorizationError("Only employees can punch in or out")

    def _open_punch_today(self, username: str, today: str) -> Optional[OpenPunch]:
        punch = self._open_punches.load_open_punches().get(username)
        if punch and punch.date == today:
            return punch
        return None

    def status(self, current: SessionUser, *, now: datetime | None = None) -> PunchStatus:
        now = now or now_local()
        punch = self._open_punch_today(current.username, format_iso_date(now.date()))
        return PunchStatus(
            state=PunchState.PUNCHED_IN if punch else PunchState.NOT_PUNCHED,
            punch_in=punch.punch_in if punch else None,
            shift_start=current.shift_start,
            shift_end=current.shift_end,
        )

    def punch_in(self, current: SessionUser, *, now: datetime | None = None) -> OpenPunch:
        self._require_employee(current)
        now = now or now_local()
        punch = OpenPunch(date=format_iso_date(now.date()), punch_in=format_clock(now))

        open_punches = self._open_punches.load_open_punches()
        previous = open_punches.get(current.username)
        if previous and previous.date == punch.date:
            # Last write wins; the earlier punch-in time is dropped.
            logger.warning(
                "User %r punched in again at %s, replacing punch-in %s",
                current.username,
                punch.punch_in,
                previous.punch_in,
            )

        open_punches[current.username] = punch
        self._open_punches.save_open_punches(open_punches)
        logger.info("User %r punched in at %s", current.username, punch.punch_in)
        return punch

    def punch_out(self, current: SessionUser, *, now: datetime | None = None) -> LogEntry:
        self._require_employee(current)
        now = now or now_local()
        today = now.date()
        today_s = format_iso_date(today)

        open_punches = self._open_punches.load_open_punches()
        punch = open_punches.get(current.username)
        if not punch or punch.date != today_s:
            raise NoOpenPunchError("No punch in record found for today.")

        account = self._accounts.get_by_username(current.username)
        if not account:
            raise ValidationError("Employee not found")

        punch_out = format_clock(now)
        minutes = self._calculator.worked_minutes(
            scheduled_start=account.scheduled_start,
            scheduled_end=account.scheduled_end,
            actual_in=punch.punch_in,
            actual_out=punch_out,
        )
        entry = LogEntry(
            username=account.username,
            date=today_s,
            punch_in=punch.punch_in,
            punch_out=punch_out,
            minutes_worked=minutes,
            pay_period_start=get_pay_period_start(today, self._settings.load()),
        )

        logs = self._logs.load_logs()
        logs.append(entry)
        self._logs.save_logs(logs)

        del open_punches[current.username]
        self._open_punches.save_open_punches(open_punches)

        logger.info("User %r punched out at %s (%d minutes)", current.username, punch_out, minutes)
        return entry
