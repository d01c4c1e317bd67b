from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account role used for access control."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class PunchState(str, Enum):
    """Punch state of a single employee for the current day."""

    NOT_PUNCHED = "NOT_PUNCHED"
    PUNCHED_IN = "PUNCHED_IN"
