from __future__ import annotations

from typing import Optional, Protocol, Sequence


class BlobBackend(Protocol):
    """Raw string storage keyed by document name.

    Note: The JSON layer lives in KeyValueStore; backends only move strings.
    """

    def read(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def write(self, key: str, raw: str) -> None:
        raise NotImplementedError

    def keys(self) -> Sequence[str]:
        raise NotImplementedError


class MemoryBlobBackend(BlobBackend):
    """Process-local backend used by tests and the demo configuration."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._blobs: dict[str, str] = dict(initial or {})

    def read(self, key: str) -> Optional[str]:
        return self._blobs.get(key)

    def write(self, key: str, raw: str) -> None:
        self._blobs[key] = raw

    def keys(self) -> Sequence[str]:
        return sorted(self._blobs)
