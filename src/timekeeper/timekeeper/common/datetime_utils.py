from __future__ import annotations

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal

TWO_PLACES = Decimal("0.01")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def format_iso_date(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def format_clock(value: datetime) -> str:
    """Wall-clock HH:MM of a datetime (seconds dropped, not rounded)."""
    return value.strftime("%H:%M")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def time_to_minutes(value: str) -> int:
    """Convert "HH:MM" to minutes after midnight.

    No range checks: "25:70" gives 1570.
    """
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


def minutes_to_time(minutes: int) -> str:
    """Inverse of time_to_minutes, zero padded."""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def round2(value: Decimal) -> Decimal:
    return value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def minutes_to_hours(minutes: int) -> Decimal:
    """Minutes as hours rounded to two decimals (470 -> 7.83)."""
    return round2(Decimal(minutes) / Decimal(60))


def format_hours(minutes: int) -> str:
    return str(minutes_to_hours(minutes))
