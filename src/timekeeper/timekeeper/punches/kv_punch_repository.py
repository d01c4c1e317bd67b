from __future__ import annotations

from typing import Mapping, Sequence

from ..core.constants import LOGS_KEY, OPEN_PUNCHES_KEY
from ..storage.store import KeyValueStore
from .model import LogEntry, OpenPunch
from .repository import LogRepository, OpenPunchRepository


class KVLogRepository(LogRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def load_logs(self) -> list[LogEntry]:
        return [LogEntry.from_dict(r) for r in self._store.get(LOGS_KEY, [])]

    def save_logs(self, logs: Sequence[LogEntry]) -> None:
        self._store.set(LOGS_KEY, [e.to_dict() for e in logs])


class KVOpenPunchRepository(OpenPunchRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def load_open_punches(self) -> dict[str, OpenPunch]:
        raw = self._store.get(OPEN_PUNCHES_KEY, {})
        return {username: OpenPunch.from_dict(p) for username, p in raw.items()}

    def save_open_punches(self, punches: Mapping[str, OpenPunch]) -> None:
        self._store.set(OPEN_PUNCHES_KEY, {u: p.to_dict() for u, p in punches.items()})
