from __future__ import annotations

import json
import logging
from typing import Any

from .backend import BlobBackend

logger = logging.getLogger(__name__)


class KeyValueStore:
    """JSON documents over a blob backend.

    A missing, empty or corrupt document reads as the caller's default, and so
    does one whose JSON type differs from the default's (a list where a mapping
    is expected).
    Corrupt documents are logged and left in place until the next write.
    """

    def __init__(self, backend: BlobBackend):
        self._backend = backend

    def get(self, key: str, default: Any = None) -> Any:
        raw = self._backend.read(key)
        if not raw:
            return default
        try:
            value = json.loads(raw)
        except ValueError as e:
            logger.warning("Error parsing stored document %r: %s", key, e)
            return default
        if default is not None and not isinstance(value, type(default)):
            logger.warning(
                "Stored document %r is a %s, expected %s", key, type(value).__name__, type(default).__name__
            )
            return default
        return value

    def set(self, key: str, value: Any) -> None:
        # Serialize before touching the backend so a bad value never half-writes.
        raw = json.dumps(value, ensure_ascii=False)
        self._backend.write(key, raw)

    def keys(self) -> list[str]:
        return list(self._backend.keys())
