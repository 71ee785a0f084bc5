"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from quotekeeper.adapters.console import ConsolePresenter
from quotekeeper.adapters.json_file import read_quote_file, write_quote_file
from quotekeeper.adapters.jsonplaceholder import HttpQuoteSource
from quotekeeper.adapters.sqlalchemy import SqlAlchemyKeyValueStore, is_started, startup
from quotekeeper.config import get_sync_config
from quotekeeper.domain.quote_book import (
    AddQuoteResult,
    ImportQuotesResult,
    QuoteBook,
    SyncResult,
)
from quotekeeper.domain.scheduling import PeriodicSync

if TYPE_CHECKING:
    from pathlib import Path

    from quotekeeper.domain.model import Quote
    from quotekeeper.domain.ports import KeyValueStore, QuotePresenter, QuoteSource


log = getLogger(__name__)


def _default_store() -> KeyValueStore:
    if not is_started():
        startup()
    return SqlAlchemyKeyValueStore()


def open_quote_book(
    *,
    store: KeyValueStore | None = None,
    source: QuoteSource | None = None,
    presenter: QuotePresenter | None = None,
) -> QuoteBook:
    """Build a quote book from the configured adapters and load stored quotes."""

    book = QuoteBook(
        store=store or _default_store(),
        source=source or HttpQuoteSource(),
        presenter=presenter or ConsolePresenter(),
    )
    book.load()
    return book


def show_random_quote(
    *,
    category: str | None = None,
    book: QuoteBook | None = None,
) -> Quote | None:
    """Show a random quote, optionally switching the remembered category filter first."""

    active_book = book or open_quote_book()
    return active_book.show_random_quote(category=category)


def show_last_quote(*, book: QuoteBook | None = None) -> Quote | None:
    """Show the quote viewed last time, or a random one if none was remembered."""

    active_book = book or open_quote_book()
    return active_book.show_last_viewed_quote()


def list_categories(*, book: QuoteBook | None = None) -> tuple[str, ...]:
    active_book = book or open_quote_book()
    categories = active_book.categories()
    active_book.presenter.show_categories(categories, active_book.selected_category())
    return categories


def add_quote(
    *,
    text: str,
    category: str,
    submit: bool = True,
    book: QuoteBook | None = None,
) -> AddQuoteResult:
    active_book = book or open_quote_book()
    result = active_book.add_quote(text, category, submit=submit)
    log.info("Add quote finished: status=%s", result.status)
    return result


def import_quotes_file(
    path: Path,
    *,
    submit: bool = True,
    book: QuoteBook | None = None,
) -> ImportQuotesResult:
    active_book = book or open_quote_book()
    result = active_book.import_quotes_json(read_quote_file(path), submit=submit)
    log.info(
        "Import finished: status=%s, accepted=%s, rejected=%s, submitted=%s",
        result.status,
        result.accepted,
        result.rejected,
        result.submitted,
    )
    return result


def export_quotes_file(path: Path, *, book: QuoteBook | None = None) -> Path | None:
    active_book = book or open_quote_book()
    content = active_book.export_quotes()
    if content is None:
        return None
    return write_quote_file(path, content)


def sync_quotes(*, book: QuoteBook | None = None) -> SyncResult:
    """Run one server-precedence sync against the remote source."""

    active_book = book or open_quote_book()
    result = active_book.sync_with_remote()
    log.info(
        f"Finished quote sync: fetched={result.fetched}, total={result.total}, "
        f"applied={result.applied}"
    )
    return result


def watch_quotes(
    *,
    interval_seconds: float | None = None,
    max_cycles: int | None = None,
    book: QuoteBook | None = None,
) -> PeriodicSync:
    """Sync once, then keep syncing every interval until ``max_cycles`` or interruption."""

    active_book = book or open_quote_book()
    interval = interval_seconds or get_sync_config().interval_seconds
    active_book.sync_with_remote()
    periodic = PeriodicSync(
        active_book.sync_with_remote,
        interval_seconds=interval,
        max_cycles=max_cycles,
    )
    periodic.start()
    try:
        periodic.join()
    finally:
        periodic.stop()
    return periodic
