from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..core.constants import DEFAULT_SHIFT_END, DEFAULT_SHIFT_START
from ..core.enums import Role


@dataclass(frozen=True)
class Account:
    """Domain entity: login account (admin or employee).

    Note: Plain data object; storage layout lives in to_dict/from_dict.
    """

    username: str
    password: str
    role: Role
    hourly_rate: Optional[float] = None
    shift_start: Optional[str] = None
    shift_end: Optional[str] = None

    @property
    def scheduled_start(self) -> str:
        return self.shift_start or DEFAULT_SHIFT_START

    @property
    def scheduled_end(self) -> str:
        return self.shift_end or DEFAULT_SHIFT_END

    @property
    def rate(self) -> float:
        return float(self.hourly_rate or 0)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Account":
        rate = data.get("hourlyRate")
        return cls(
            username=str(data["username"]),
            password=str(data.get("password", "")),
            role=Role(data.get("role", Role.EMPLOYEE.value)),
            hourly_rate=float(rate) if rate is not None else None,
            shift_start=data.get("shiftStart") or None,
            shift_end=data.get("shiftEnd") or None,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "username": self.username,
            "password": self.password,
            "role": self.role.value,
        }
        if self.hourly_rate is not None:
            data["hourlyRate"] = self.hourly_rate
        if self.shift_start:
            data["shiftStart"] = self.shift_start
        if self.shift_end:
            data["shiftEnd"] = self.shift_end
        return data
