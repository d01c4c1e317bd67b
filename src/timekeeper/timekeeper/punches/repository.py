from __future__ import annotations

from typing import Mapping, Protocol, Sequence

from .model import LogEntry, OpenPunch


class LogRepository(Protocol):
    def load_logs(self) -> list[LogEntry]:
        raise NotImplementedError

    def save_logs(self, logs: Sequence[LogEntry]) -> None:
        raise NotImplementedError


class OpenPunchRepository(Protocol):
    def load_open_punches(self) -> dict[str, OpenPunch]:
        """Open punches keyed by username."""

        raise NotImplementedError

    def save_open_punches(self, punches: Mapping[str, OpenPunch]) -> None:
        raise NotImplementedError
