"""SQLAlchemy adapter package for quotekeeper."""

from __future__ import annotations

from .engine import (
    StartupError,
    configured_engine,
    is_started,
    session_factory,
    shutdown,
    startup,
)
from .mappings import create_all_tables, key_value_table, metadata
from .store import SqlAlchemyKeyValueStore

__all__ = [
    "SqlAlchemyKeyValueStore",
    "StartupError",
    "configured_engine",
    "create_all_tables",
    "is_started",
    "key_value_table",
    "metadata",
    "session_factory",
    "shutdown",
    "startup",
]
