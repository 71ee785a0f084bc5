"""Key-value store backed by a SQLAlchemy session factory."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import insert, select, update
from sqlalchemy.exc import SQLAlchemyError

from quotekeeper.domain.ports.persistence import Absent, Found, StoreFailure, Stored

from .engine import session_factory as default_session_factory
from .mappings import key_value_table

if TYPE_CHECKING:
    from sqlalchemy.orm import Session, sessionmaker

    from quotekeeper.domain.ports.persistence import KeyValueStore, LoadResult, SaveResult

log = logging.getLogger(__name__)


class SqlAlchemyKeyValueStore:
    def __init__(self, session_factory: sessionmaker[Session] | None = None) -> None:
        self.session_factory = session_factory or default_session_factory()

    def get(self, key: str) -> LoadResult:
        stmt = select(key_value_table.c.value).where(key_value_table.c.key == key)
        try:
            with self.session_factory() as session:
                value = session.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as exc:
            log.warning("Failed to read key %r: %s", key, exc)
            return StoreFailure(reason=str(exc))
        if value is None:
            return Absent()
        return Found(value=value)

    def set(self, key: str, value: str) -> SaveResult:
        now = datetime.now(UTC)
        exists_stmt = select(key_value_table.c.key).where(key_value_table.c.key == key)
        try:
            with self.session_factory.begin() as session:
                if session.execute(exists_stmt).scalar_one_or_none() is None:
                    session.execute(
                        insert(key_value_table).values(key=key, value=value, updated_at=now)
                    )
                else:
                    session.execute(
                        update(key_value_table)
                        .where(key_value_table.c.key == key)
                        .values(value=value, updated_at=now)
                    )
        except SQLAlchemyError as exc:
            log.warning("Failed to write key %r: %s", key, exc)
            return StoreFailure(reason=str(exc))
        return Stored()


if TYPE_CHECKING:
    _store_check: KeyValueStore = SqlAlchemyKeyValueStore()
