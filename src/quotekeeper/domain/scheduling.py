"""Cancellable background loop for periodic remote reconciliation."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from .quote_book import SyncResult

log = logging.getLogger(__name__)


class PeriodicSync:
    """Run ``sync`` every ``interval_seconds`` on a daemon thread until stopped.

    The first cycle runs one interval after ``start()``. A failing cycle is
    logged and the loop keeps going; ``max_cycles`` bounds the number of cycles
    (``None`` runs until ``stop()``).
    """

    def __init__(
        self,
        sync: Callable[[], SyncResult],
        *,
        interval_seconds: float,
        max_cycles: int | None = None,
        name: str = "quote-sync",
    ) -> None:
        if interval_seconds <= 0:
            raise ValueError("Sync interval must be positive")
        if max_cycles is not None and max_cycles < 1:
            raise ValueError("max_cycles must be at least 1")
        self.sync = sync
        self.interval_seconds = interval_seconds
        self.max_cycles = max_cycles
        self.name = name
        self.cycles = 0
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            log.warning("Periodic sync already running")
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._loop, daemon=True, name=self.name)
        self._thread.start()
        log.info("Periodic sync started: interval=%ss", self.interval_seconds)

    def stop(self, timeout: float = 5.0) -> None:
        self._stop_event.set()
        if self._thread is None:
            return
        self._thread.join(timeout=timeout)
        if self._thread.is_alive():
            log.warning("Sync thread did not stop cleanly")
        else:
            log.info("Periodic sync stopped after %s cycle(s)", self.cycles)

    def join(self, timeout: float | None = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout=timeout)

    def _loop(self) -> None:
        while not self._stop_event.wait(self.interval_seconds):
            try:
                self.sync()
            except Exception:  # noqa: BLE001
                log.exception("Periodic sync cycle failed")
            self.cycles += 1
            if self.max_cycles is not None and self.cycles >= self.max_cycles:
                self._stop_event.set()
