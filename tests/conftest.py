from __future__ import annotations

import os
import random
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine  # noqa: TC002

from quotekeeper.adapters.memory import InMemoryKeyValueStore
from quotekeeper.adapters.sqlalchemy import create_all_tables
from quotekeeper.domain.quote_book import QuoteBook
from tests.helpers.quotes import FakeQuoteSource, RecordingPresenter

os.environ.setdefault("DATABASE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from quotekeeper.domain.model import Quote
    from quotekeeper.domain.ports import KeyValueStore


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def source() -> FakeQuoteSource:
    return FakeQuoteSource()


@pytest.fixture
def presenter() -> RecordingPresenter:
    return RecordingPresenter()


@pytest.fixture
def make_book(
    store: InMemoryKeyValueStore,
    source: FakeQuoteSource,
    presenter: RecordingPresenter,
) -> Callable[..., QuoteBook]:
    def factory(
        *,
        defaults: tuple[Quote, ...] = (),
        store_override: KeyValueStore | None = None,
        load: bool = True,
    ) -> QuoteBook:
        book = QuoteBook(
            store=store_override or store,
            source=source,
            presenter=presenter,
            defaults=defaults,
            rng=random.Random(7),
        )
        if load:
            book.load()
        return book

    return factory


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    create_all_tables(engine)
    try:
        yield engine
    finally:
        engine.dispose()
