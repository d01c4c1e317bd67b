from __future__ import annotations

from ...common.datetime_utils import time_to_minutes
from .base import WorkedMinutesCalculator


def compute_worked_minutes(scheduled_start: str, scheduled_end: str, actual_in: str, actual_out: str) -> int:
    """Credited minutes for one shift.

    Time counts from the scheduled start, minus any lateness; leaving after
    the scheduled end earns nothing extra, leaving early is counted as is.
    Never negative.
    """
    ss = time_to_minutes(scheduled_start)
    se = time_to_minutes(scheduled_end)
    ai = time_to_minutes(actual_in)
    ao = time_to_minutes(actual_out)

    late = max(0, ai - ss)
    effective_end = min(ao, se)
    return max(0, effective_end - ss - late)


class ShiftAnchoredCalculator(WorkedMinutesCalculator):
    """Standard rule: scheduled start to min(out, scheduled end), less lateness."""

    def worked_minutes(self, *, scheduled_start: str, scheduled_end: str, actual_in: str, actual_out: str) -> int:
        return compute_worked_minutes(scheduled_start, scheduled_end, actual_in, actual_out)
