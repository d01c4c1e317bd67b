from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable


@dataclass(frozen=True)
class PaySettings:
    """Calendar days (1..31) on which a new pay period begins."""

    start_days: tuple[int, ...]

    @classmethod
    def of(cls, days: Iterable[int]) -> "PaySettings":
        return cls(start_days=tuple(sorted({int(d) for d in days})))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PaySettings":
        return cls.of(data.get("startDays") or [])

    def to_dict(self) -> dict[str, Any]:
        return {"startDays": list(self.start_days)}
