from __future__ import annotations

from abc import ABC, abstractmethod


class WorkedMinutesCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll).

    All times are "HH:MM" strings on the same day.
    """

    @abstractmethod
    def worked_minutes(self, *, scheduled_start: str, scheduled_end: str, actual_in: str, actual_out: str) -> int:
        raise NotImplementedError
