"""Pay-period bucketing.

A pay period starts on one of the configured calendar days and runs until
the next one. Start days past the end of a short month clamp to its last day.
"""

from __future__ import annotations

import calendar
from datetime import date

from ..common.datetime_utils import format_iso_date
from ..core.exceptions import ConfigurationError
from ..paysettings.model import PaySettings


def _clamped(year: int, month: int, day: int) -> date:
    return date(year, month, min(day, calendar.monthrange(year, month)[1]))


def pay_period_start_date(day: date, settings: PaySettings) -> date:
    start_days = sorted(set(settings.start_days))
    if not start_days:
        raise ConfigurationError("No pay period start days configured")

    chosen = None
    for start_day in start_days:
        if day.day >= start_day:
            chosen = start_day

    if chosen is not None:
        return _clamped(day.year, day.month, chosen)

    # Before the first start day: the period began on the last start day of the previous month.
    if day.month == 1:
        return _clamped(day.year - 1, 12, start_days[-1])
    return _clamped(day.year, day.month - 1, start_days[-1])


def get_pay_period_start(day: date, settings: PaySettings) -> str:
    """ISO date of the pay period containing ``day``."""
    return format_iso_date(pay_period_start_date(day, settings))
