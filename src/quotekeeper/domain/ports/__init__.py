"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import QuoteSource
from .persistence import (
    Absent,
    Found,
    KeyValueStore,
    LoadResult,
    SaveResult,
    StoreFailure,
    Stored,
)
from .presentation import QuotePresenter

__all__ = [
    "Absent",
    "Found",
    "KeyValueStore",
    "LoadResult",
    "QuotePresenter",
    "QuoteSource",
    "SaveResult",
    "StoreFailure",
    "Stored",
]
