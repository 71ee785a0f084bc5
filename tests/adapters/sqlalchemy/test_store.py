from __future__ import annotations

from collections.abc import Iterator  # noqa: TC003

import pytest
from sqlalchemy import create_engine, select
from sqlalchemy.engine import Engine  # noqa: TC002
from sqlalchemy.orm import sessionmaker

from quotekeeper.adapters.sqlalchemy import (
    SqlAlchemyKeyValueStore,
    StartupError,
    configured_engine,
    is_started,
    key_value_table,
    session_factory,
    shutdown,
    startup,
)
from quotekeeper.domain.ports.persistence import Absent, Found, StoreFailure, Stored


@pytest.fixture
def kv_store(sqlite_engine: Engine) -> SqlAlchemyKeyValueStore:
    return SqlAlchemyKeyValueStore(sessionmaker(bind=sqlite_engine, expire_on_commit=False))


@pytest.fixture
def clean_adapter_state() -> Iterator[None]:
    shutdown()
    try:
        yield
    finally:
        shutdown()


def test_get_missing_key_returns_absent(kv_store: SqlAlchemyKeyValueStore) -> None:
    assert kv_store.get("quotes") == Absent()


def test_set_then_get_returns_stored_value(kv_store: SqlAlchemyKeyValueStore) -> None:
    assert kv_store.set("quotes", "[]") == Stored()

    assert kv_store.get("quotes") == Found(value="[]")


def test_set_overwrites_existing_value(
    kv_store: SqlAlchemyKeyValueStore,
    sqlite_engine: Engine,
) -> None:
    kv_store.set("lastSelectedCategory", "Life")
    kv_store.set("lastSelectedCategory", "Work")

    assert kv_store.get("lastSelectedCategory") == Found(value="Work")
    with sqlite_engine.connect() as conn:
        rows = conn.execute(select(key_value_table.c.key)).all()
    assert len(rows) == 1


def test_store_reports_failure_when_table_is_missing() -> None:
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    store = SqlAlchemyKeyValueStore(sessionmaker(bind=engine))
    try:
        assert isinstance(store.get("quotes"), StoreFailure)
        assert isinstance(store.set("quotes", "[]"), StoreFailure)
    finally:
        engine.dispose()


@pytest.mark.usefixtures("clean_adapter_state")
def test_session_factory_requires_startup() -> None:
    assert not is_started()

    with pytest.raises(StartupError):
        session_factory()


@pytest.mark.usefixtures("clean_adapter_state")
def test_startup_creates_tables_for_default_store() -> None:
    startup(database_uri="sqlite+pysqlite:///:memory:")

    assert is_started()
    store = SqlAlchemyKeyValueStore()
    assert store.set("quotes", "[]") == Stored()
    assert store.get("quotes") == Found(value="[]")


@pytest.mark.usefixtures("clean_adapter_state")
def test_startup_twice_requires_force(sqlite_engine: Engine) -> None:
    startup(database_uri="sqlite+pysqlite:///:memory:")

    with pytest.raises(StartupError):
        startup(engine=sqlite_engine)

    startup(engine=sqlite_engine, force=True)
    assert configured_engine() is sqlite_engine
