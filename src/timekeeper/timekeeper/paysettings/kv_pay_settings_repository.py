from __future__ import annotations

from ..core.constants import DEFAULT_START_DAYS, PAY_SETTINGS_KEY
from ..storage.store import KeyValueStore
from .model import PaySettings
from .repository import PaySettingsRepository


class KVPaySettingsRepository(PaySettingsRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def load(self) -> PaySettings:
        data = self._store.get(PAY_SETTINGS_KEY, {"startDays": list(DEFAULT_START_DAYS)})
        return PaySettings.from_dict(data)

    def save(self, settings: PaySettings) -> None:
        self._store.set(PAY_SETTINGS_KEY, settings.to_dict())
