"""Application service owning the local quote collection.

``QuoteBook`` holds the single writable reference to the collection. Every
mutation (add, import, remote sync) runs under one lock for its whole
merge-and-persist cycle, so a background sync can never interleave with a
user-initiated change. The merge logic itself lives in
``quotekeeper.domain.reconciliation``.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Final

from .errors import InvalidQuoteError, MalformedQuoteDataError, RemoteUnavailableError
from .model import ALL_CATEGORIES, Quote, parse_quote, parse_quotes
from .ports.persistence import Absent, Found, StoreFailure
from .reconciliation import (
    derive_categories,
    filter_quotes,
    merge_quotes,
    merge_with_server_precedence,
)
from .selection import pick_random_quote
from .serialization import (
    decode_quote,
    decode_quote_list,
    decode_quotes,
    encode_quote,
    encode_quotes,
)

if TYPE_CHECKING:
    import random
    from collections.abc import Sequence

    from .model import QuoteCollection
    from .ports import KeyValueStore, QuotePresenter, QuoteSource

log = logging.getLogger(__name__)

QUOTES_KEY: Final[str] = "quotes"
LAST_VIEWED_QUOTE_KEY: Final[str] = "lastViewedQuote"
LAST_SELECTED_CATEGORY_KEY: Final[str] = "lastSelectedCategory"

DEFAULT_QUOTES: Final[QuoteCollection] = (
    Quote(
        text="The best way to get started is to quit talking and begin doing.",
        category="Motivation",
    ),
    Quote(
        text="Don't let yesterday take up too much of today.",
        category="Inspiration",
    ),
    Quote(
        text="It's not whether you get knocked down, it's whether you get up.",
        category="Resilience",
    ),
)


class AddStatus(StrEnum):
    SUBMITTED = "submitted"
    LOCAL_ONLY = "local-only"
    REJECTED = "rejected"


class ImportStatus(StrEnum):
    IMPORTED = "imported"
    REJECTED = "rejected"


@dataclass(slots=True)
class AddQuoteResult:
    status: AddStatus
    quote: Quote | None = None


@dataclass(slots=True)
class ImportQuotesResult:
    status: ImportStatus
    accepted: int = 0
    rejected: int = 0
    submitted: int = 0


@dataclass(slots=True)
class SyncResult:
    """Outcome of one remote reconciliation cycle."""

    fetched: int
    total: int
    applied: bool


class QuoteBook:
    def __init__(
        self,
        *,
        store: KeyValueStore,
        source: QuoteSource,
        presenter: QuotePresenter,
        defaults: Sequence[Quote] = DEFAULT_QUOTES,
        rng: random.Random | None = None,
    ) -> None:
        self.store = store
        self.source = source
        self.presenter = presenter
        self.defaults: QuoteCollection = tuple(defaults)
        self._rng = rng
        self._lock = threading.Lock()
        self._quotes: QuoteCollection = ()

    @property
    def quotes(self) -> QuoteCollection:
        return self._quotes

    # Loading ---------------------------------------------------------------

    def load(self) -> QuoteCollection:
        """Replace the in-memory collection with the stored one (or the defaults)."""

        with self._lock:
            self._quotes = self._read_stored_quotes()
            return self._quotes

    def _read_stored_quotes(self) -> QuoteCollection:
        result = self.store.get(QUOTES_KEY)
        if isinstance(result, Absent):
            return self.defaults
        if isinstance(result, StoreFailure):
            log.warning("Failed to read stored quotes: %s", result.reason)
            self.presenter.notify("Stored quotes could not be read; using defaults.")
            return self.defaults
        try:
            return decode_quotes(result.value)
        except MalformedQuoteDataError as exc:
            log.error("Failed to parse stored quotes: %s", exc)
            self.presenter.notify("Stored quotes were unreadable; using defaults.")
            return self.defaults

    # Mutations -------------------------------------------------------------

    def add_quote(self, text: object, category: object, *, submit: bool = True) -> AddQuoteResult:
        """Validate and add one quote, preferring the record the remote side accepted."""

        try:
            quote = parse_quote({"text": text, "category": category})
        except InvalidQuoteError as exc:
            log.error("Invalid quote: %s", exc)
            self.presenter.notify("Please provide both quote text and category.")
            return AddQuoteResult(status=AddStatus.REJECTED)

        with self._lock:
            stored, status = self._submit(quote) if submit else (quote, AddStatus.LOCAL_ONLY)
            self._quotes = merge_quotes(self._quotes, [stored])
            self._persist_quotes()

        if status is AddStatus.SUBMITTED:
            self.presenter.notify("Quote added successfully (and sent to server)!")
        elif submit:
            self.presenter.notify("Quote added locally (server unavailable).")
        else:
            self.presenter.notify("Quote added locally.")
        self.refresh()
        return AddQuoteResult(status=status, quote=stored)

    def import_quotes_json(self, text: str, *, submit: bool = True) -> ImportQuotesResult:
        """Import quotes from the text of a JSON file."""

        try:
            raw_items = decode_quote_list(text)
        except MalformedQuoteDataError as exc:
            log.error("Import error: %s", exc)
            self.presenter.notify(f"Failed to import quotes: {exc}")
            return ImportQuotesResult(status=ImportStatus.REJECTED)
        return self.import_quotes(raw_items, submit=submit)

    def import_quotes(self, raw_items: object, *, submit: bool = True) -> ImportQuotesResult:
        """Import already-decoded records, dropping the invalid ones."""

        if not isinstance(raw_items, list):
            log.error("Import error: payload is not an array")
            self.presenter.notify("Failed to import quotes: JSON is not an array.")
            return ImportQuotesResult(status=ImportStatus.REJECTED)

        accepted, rejected = parse_quotes(raw_items)
        if not accepted:
            self.presenter.notify("No valid quotes found in the imported file.")
            return ImportQuotesResult(status=ImportStatus.REJECTED, rejected=rejected)

        submitted = 0
        with self._lock:
            incoming: list[Quote] = []
            for quote in accepted:
                if not submit:
                    incoming.append(quote)
                    continue
                stored, status = self._submit(quote)
                if status is AddStatus.SUBMITTED:
                    submitted += 1
                incoming.append(stored)
            self._quotes = merge_quotes(self._quotes, incoming)
            self._persist_quotes()

        self.refresh()
        self.presenter.notify(f"Successfully imported {len(accepted)} quotes!")
        if rejected:
            self.presenter.notify(f"Skipped {rejected} invalid quote(s).")
        return ImportQuotesResult(
            status=ImportStatus.IMPORTED,
            accepted=len(accepted),
            rejected=rejected,
            submitted=submitted,
        )

    def sync_with_remote(self) -> SyncResult:
        """Fetch remote quotes and merge them in with server precedence."""

        log.info("Checking server for updates...")
        remote = self.source.fetch_all()
        if not remote:
            log.info("No remote quotes fetched; keeping local state")
            self.presenter.notify("No quotes received from server; keeping local quotes.")
            with self._lock:
                total = len(self._quotes)
            return SyncResult(fetched=0, total=total, applied=False)

        with self._lock:
            log.info("Merging server quotes with local quotes (server precedence)...")
            self._quotes = merge_with_server_precedence(self._quotes, remote)
            self._persist_quotes()
            total = len(self._quotes)

        self.refresh()
        log.info("Quotes updated from server: fetched=%s, total=%s", len(remote), total)
        return SyncResult(fetched=len(remote), total=total, applied=True)

    def _submit(self, quote: Quote) -> tuple[Quote, AddStatus]:
        try:
            accepted = self.source.submit(quote)
        except RemoteUnavailableError as exc:
            log.warning("Failed to post quote to server, keeping it locally: %s", exc)
            return quote, AddStatus.LOCAL_ONLY
        return accepted, AddStatus.SUBMITTED

    def _persist_quotes(self) -> None:
        result = self.store.set(QUOTES_KEY, encode_quotes(self._quotes))
        if isinstance(result, StoreFailure):
            log.error("Failed to save quotes: %s", result.reason)

    # Export ----------------------------------------------------------------

    def export_quotes(self) -> str | None:
        """Return the collection as pretty-printed JSON, or ``None`` when empty."""

        quotes = self._quotes
        if not quotes:
            self.presenter.notify("No quotes to export.")
            return None
        return encode_quotes(quotes, indent=2)

    # Categories and display ------------------------------------------------

    def categories(self) -> tuple[str, ...]:
        return derive_categories(self._quotes)

    def selected_category(self) -> str:
        """Return the remembered category filter, or ``"all"`` if it no longer exists."""

        result = self.store.get(LAST_SELECTED_CATEGORY_KEY)
        if isinstance(result, Found) and result.value in self.categories():
            return result.value
        return ALL_CATEGORIES

    def select_category(self, category: str) -> QuoteCollection:
        """Remember ``category`` as the active filter and return the matching quotes."""

        result = self.store.set(LAST_SELECTED_CATEGORY_KEY, category)
        if isinstance(result, StoreFailure):
            log.warning("Failed to save selected category: %s", result.reason)
        return filter_quotes(self._quotes, category)

    def filtered_quotes(self) -> QuoteCollection:
        return filter_quotes(self._quotes, self.selected_category())

    def show_random_quote(self, *, category: str | None = None) -> Quote | None:
        """Display a random quote from the active filter, or from ``category`` after selecting it.

        An explicitly requested category is used as is, so an unknown one yields ``None``.
        """

        if category is None:
            candidates = self.filtered_quotes()
        else:
            candidates = self.select_category(category)
        quote = pick_random_quote(candidates, rng=self._rng)
        self.display(quote)
        return quote

    def show_last_viewed_quote(self) -> Quote | None:
        """Redisplay the last viewed quote, falling back to a random one."""

        quote = self.last_viewed_quote()
        if quote is None:
            return self.show_random_quote()
        self.display(quote)
        return quote

    def display(self, quote: Quote | None) -> None:
        self.presenter.show_quote(quote)
        if quote is None:
            return
        result = self.store.set(LAST_VIEWED_QUOTE_KEY, encode_quote(quote))
        if isinstance(result, StoreFailure):
            log.warning("Failed to save last viewed quote: %s", result.reason)

    def last_viewed_quote(self) -> Quote | None:
        result = self.store.get(LAST_VIEWED_QUOTE_KEY)
        if not isinstance(result, Found):
            return None
        try:
            return decode_quote(result.value)
        except MalformedQuoteDataError as exc:
            log.warning("Failed to parse last viewed quote: %s", exc)
            return None

    def refresh(self) -> None:
        """Re-render the category list and a random quote from the active filter."""

        self.presenter.show_categories(self.categories(), self.selected_category())
        self.show_random_quote()
