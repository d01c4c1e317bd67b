from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Sequence

from ..accounts.model import Account
from ..accounts.repository import AccountRepository
from ..accounts.service import SessionUser, require_admin
from ..common.datetime_utils import format_hours, minutes_to_hours, round2
from ..core.exceptions import ValidationError
from ..punches.model import LogEntry
from ..punches.repository import LogRepository
from .export import write_summary_csv


@dataclass(frozen=True)
class SummaryRow:
    period: str
    user: str
    total_minutes: int
    total_hours: Decimal
    total_pay: Decimal

    def to_dict(self) -> dict:
        return {
            "period": self.period,
            "user": self.user,
            "totalHours": str(self.total_hours),
            "totalPay": str(self.total_pay),
        }


def generate_summary(logs: Iterable[LogEntry], accounts: Sequence[Account]) -> list[SummaryRow]:
    """Total minutes and pay per (pay period, employee).

    Periods ascend; within a period users keep the order they first appear in.
    """
    totals: dict[str, dict[str, int]] = {}
    for entry in logs:
        per_user = totals.setdefault(entry.pay_period_start, {})
        per_user[entry.username] = per_user.get(entry.username, 0) + entry.minutes_worked

    rates = {a.username: a.rate for a in accounts}

    rows: list[SummaryRow] = []
    for period in sorted(totals):
        for user, minutes in totals[period].items():
            rate = Decimal(str(rates.get(user, 0)))
            rows.append(
                SummaryRow(
                    period=period,
                    user=user,
                    total_minutes=minutes,
                    total_hours=minutes_to_hours(minutes),
                    total_pay=round2(Decimal(minutes) / Decimal(60) * rate),
                )
            )
    return rows


def log_row(entry: LogEntry) -> dict:
    return {
        "username": entry.username,
        "date": entry.date,
        "punchIn": entry.punch_in,
        "punchOut": entry.punch_out,
        "hours": format_hours(entry.minutes_worked),
        "payPeriodStart": entry.pay_period_start,
    }


class PayrollReportService:
    def __init__(self, logs: LogRepository, accounts: AccountRepository):
        self._logs = logs
        self._accounts = accounts

    def generate_summary(self, *, current: SessionUser) -> list[SummaryRow]:
        require_admin(current)
        return generate_summary(self._logs.load_logs(), self._accounts.load_accounts())

    def export_summary_csv(self, *, current: SessionUser) -> str:
        rows = self.generate_summary(current=current)
        if not rows:
            raise ValidationError("No summary data to export.")
        return write_summary_csv(rows)

    def list_logs(self, *, current: SessionUser) -> list[dict]:
        require_admin(current)
        return [log_row(e) for e in self._logs.load_logs()]

    def history_rows(self, *, current: SessionUser) -> list[dict]:
        """The current user's own log entries, without the username column."""
        rows = []
        for entry in self._logs.load_logs():
            if entry.username == current.username:
                row = log_row(entry)
                del row["username"]
                rows.append(row)
        return rows
