from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..core.enums import PunchState


@dataclass(frozen=True)
class OpenPunch:
    """A punch-in still waiting for its punch-out."""

    date: str
    punch_in: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "OpenPunch":
        return cls(date=str(data["date"]), punch_in=str(data["punchIn"]))

    def to_dict(self) -> dict[str, Any]:
        return {"date": self.date, "punchIn": self.punch_in}


@dataclass(frozen=True)
class LogEntry:
    """Domain entity: one completed shift. Never mutated after creation."""

    username: str
    date: str
    punch_in: str
    punch_out: str
    minutes_worked: int
    pay_period_start: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LogEntry":
        return cls(
            username=str(data["username"]),
            date=str(data["date"]),
            punch_in=str(data["punchIn"]),
            punch_out=str(data["punchOut"]),
            minutes_worked=int(data["minutesWorked"]),
            pay_period_start=str(data["payPeriodStart"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "username": self.username,
            "date": self.date,
            "punchIn": self.punch_in,
            "punchOut": self.punch_out,
            "minutesWorked": self.minutes_worked,
            "payPeriodStart": self.pay_period_start,
        }


@dataclass(frozen=True)
class PunchStatus:
    """Read-model for the employee screen."""

    state: PunchState
    punch_in: Optional[str]
    shift_start: str
    shift_end: str
