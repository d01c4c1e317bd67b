from __future__ import annotations

import logging

from werkzeug.security import generate_password_hash

from ..core.constants import (
    ACCOUNTS_KEY,
    DEFAULT_ADMIN_PASSWORD,
    DEFAULT_ADMIN_USERNAME,
    DEFAULT_START_DAYS,
    LOGS_KEY,
    OPEN_PUNCHES_KEY,
    PAY_SETTINGS_KEY,
)
from ..core.enums import Role
from .store import KeyValueStore

logger = logging.getLogger(__name__)


def ensure_defaults(store: KeyValueStore, *, admin_password: str = DEFAULT_ADMIN_PASSWORD) -> list[str]:
    """Create the baseline documents that are missing (or unreadable).

    Returns the keys that were written. Existing documents are left alone.
    """
    defaults = {
        ACCOUNTS_KEY: lambda: [
            {
                "username": DEFAULT_ADMIN_USERNAME,
                "password": generate_password_hash(admin_password),
                "role": Role.ADMIN.value,
            }
        ],
        PAY_SETTINGS_KEY: lambda: {"startDays": list(DEFAULT_START_DAYS)},
        LOGS_KEY: lambda: [],
        OPEN_PUNCHES_KEY: lambda: {},
    }

    written = []
    for key, make in defaults.items():
        if store.get(key, None) is None:
            store.set(key, make())
            written.append(key)

    if written:
        logger.info("Initialized default documents: %s", ", ".join(written))
    return written
