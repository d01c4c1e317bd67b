from __future__ import annotations

import math
import re
from decimal import Decimal, InvalidOperation

from ..core.exceptions import ValidationError

_CLOCK_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_clock_time(value: str, field_name: str) -> str:
    value = require_non_empty(value, field_name)
    if not _CLOCK_RE.match(value):
        raise ValidationError(f"{field_name} must be HH:MM")
    return value


def require_rate(value, field_name: str) -> float:
    """Accept numbers or numeric strings; reject NaN, overflow and negatives."""
    try:
        rate = Decimal(str(value).strip())
    except (InvalidOperation, AttributeError):
        raise ValidationError(f"{field_name} must be a number")
    as_float = float(rate)
    if not math.isfinite(as_float) or as_float < 0:
        raise ValidationError(f"{field_name} must be a non-negative number")
    return as_float
