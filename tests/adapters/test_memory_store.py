from __future__ import annotations

import threading

from quotekeeper.adapters.memory import InMemoryKeyValueStore
from quotekeeper.domain.ports.persistence import Absent, Found, Stored


def test_initial_values_are_copied() -> None:
    initial = {"quotes": "[]"}
    store = InMemoryKeyValueStore(initial)
    initial["quotes"] = "changed"

    assert store.get("quotes") == Found(value="[]")
    assert store.get("lastViewedQuote") == Absent()


def test_set_replaces_value_and_snapshot_is_detached() -> None:
    store = InMemoryKeyValueStore()

    assert store.set("lastSelectedCategory", "Life") == Stored()
    store.set("lastSelectedCategory", "Work")
    snapshot = store.snapshot()
    snapshot["lastSelectedCategory"] = "other"

    assert store.get("lastSelectedCategory") == Found(value="Work")


def test_concurrent_writers_do_not_lose_keys() -> None:
    store = InMemoryKeyValueStore()

    def writer(offset: int) -> None:
        for index in range(50):
            store.set(f"key-{offset}-{index}", str(index))

    threads = [threading.Thread(target=writer, args=(offset,)) for offset in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(store.snapshot()) == 200
