"""Synchronization defaults for the periodic remote refresh."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_float
from .errors import ConfigurationError

DEFAULT_SYNC_INTERVAL_SECONDS = 30.0


@dataclass(frozen=True, slots=True)
class SyncConfig:
    interval_seconds: float = DEFAULT_SYNC_INTERVAL_SECONDS


def get_sync_config() -> SyncConfig:
    interval = env_float("QUOTEKEEPER_SYNC_INTERVAL", DEFAULT_SYNC_INTERVAL_SECONDS)
    if interval <= 0:
        raise ConfigurationError("QUOTEKEEPER_SYNC_INTERVAL must be positive")
    return SyncConfig(interval_seconds=interval)
