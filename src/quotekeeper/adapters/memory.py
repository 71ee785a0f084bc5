"""In-process key-value store."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from quotekeeper.domain.ports.persistence import Absent, Found, Stored

if TYPE_CHECKING:
    from collections.abc import Mapping

    from quotekeeper.domain.ports.persistence import KeyValueStore, LoadResult, SaveResult


class InMemoryKeyValueStore:
    """Dictionary-backed store; values live as long as the instance."""

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> LoadResult:
        with self._lock:
            value = self._values.get(key)
        return Absent() if value is None else Found(value=value)

    def set(self, key: str, value: str) -> SaveResult:
        with self._lock:
            self._values[key] = value
        return Stored()

    def snapshot(self) -> dict[str, str]:
        with self._lock:
            return dict(self._values)


if TYPE_CHECKING:
    _store_check: KeyValueStore = InMemoryKeyValueStore()
