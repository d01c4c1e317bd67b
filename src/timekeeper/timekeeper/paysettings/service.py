from __future__ import annotations

import logging
from typing import Iterable, Union

from ..accounts.service import SessionUser, require_admin
from ..core.constants import MAX_START_DAY, MIN_START_DAY
from ..core.exceptions import ConfigurationError, ValidationError
from .model import PaySettings
from .repository import PaySettingsRepository

logger = logging.getLogger(__name__)

_INVALID_DAYS = "Please enter valid day numbers separated by commas."


def parse_start_days(value: Union[str, Iterable]) -> PaySettings:
    """Parse "1, 15" (or a list) into validated pay settings.

    Blank items are skipped; anything else must be a day number in 1..31.
    """
    if value is None:
        value = ""
    if isinstance(value, int) and not isinstance(value, bool):
        value = [value]
    if isinstance(value, str):
        parts = value.split(",")
    elif isinstance(value, (list, tuple)):
        parts = list(value)
    else:
        raise ValidationError(_INVALID_DAYS)

    days: list[int] = []
    for part in parts:
        text = str(part).strip()
        if not text:
            continue
        try:
            day = int(text)
        except ValueError:
            raise ValidationError(f"Invalid day number: {text!r}")
        if not MIN_START_DAY <= day <= MAX_START_DAY:
            raise ValidationError(f"Day number out of range {MIN_START_DAY}-{MAX_START_DAY}: {day}")
        days.append(day)

    if not days:
        raise ConfigurationError(_INVALID_DAYS)
    return PaySettings.of(days)


class PaySettingsService:
    def __init__(self, settings: PaySettingsRepository):
        self._settings = settings

    def get(self) -> PaySettings:
        return self._settings.load()

    def save_start_days(self, *, current: SessionUser, value: Union[str, Iterable]) -> PaySettings:
        require_admin(current)
        settings = parse_start_days(value)
        self._settings.save(settings)
        logger.info("Pay period start days set to %s by %r", list(settings.start_days), current.username)
        return settings
