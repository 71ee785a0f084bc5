"""Ports for persisting string values under string keys.

Stores report outcomes through explicit result values instead of raising, so
callers can degrade to local-only behavior without exception handling.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class Found:
    value: str


@dataclass(frozen=True, slots=True)
class Absent:
    """No value is stored under the requested key."""


@dataclass(frozen=True, slots=True)
class Stored:
    """The value was written."""


@dataclass(frozen=True, slots=True)
class StoreFailure:
    reason: str


type LoadResult = Found | Absent | StoreFailure
type SaveResult = Stored | StoreFailure


@runtime_checkable
class KeyValueStore(Protocol):
    """String key-value persistence contract."""

    def get(self, key: str) -> LoadResult: ...

    def set(self, key: str, value: str) -> SaveResult: ...


__all__ = [
    "Absent",
    "Found",
    "KeyValueStore",
    "LoadResult",
    "SaveResult",
    "StoreFailure",
    "Stored",
]
