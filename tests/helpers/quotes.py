"""Reusable fakes and helpers for quote-book tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from quotekeeper.domain.errors import RemoteUnavailableError
from quotekeeper.domain.model import Quote
from quotekeeper.domain.ports.persistence import StoreFailure

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from quotekeeper.domain.ports.persistence import LoadResult, SaveResult


def make_quotes(*pairs: tuple[str, str]) -> tuple[Quote, ...]:
    return tuple(Quote(text=text, category=category) for text, category in pairs)


def pairs_of(quotes: Iterable[Quote]) -> list[tuple[str, str]]:
    return [quote.key for quote in quotes]


@dataclass
class FakeQuoteSource:
    remote: list[Quote] = field(default_factory=list)
    available: bool = True
    assigned_fields: dict[str, object] = field(default_factory=dict)
    submitted: list[Quote] = field(default_factory=list)
    fetch_calls: int = 0

    def fetch_all(self) -> list[Quote]:
        self.fetch_calls += 1
        if not self.available:
            return []
        return list(self.remote)

    def submit(self, quote: Quote) -> Quote:
        if not self.available:
            raise RemoteUnavailableError("server down")
        self.submitted.append(quote)
        return Quote(
            text=quote.text,
            category=quote.category,
            extra={**quote.extra, **self.assigned_fields},
        )


@dataclass
class RecordingPresenter:
    shown: list[Quote | None] = field(default_factory=list)
    category_lists: list[tuple[tuple[str, ...], str]] = field(default_factory=list)
    notices: list[str] = field(default_factory=list)

    def show_quote(self, quote: Quote | None) -> None:
        self.shown.append(quote)

    def show_categories(self, categories: Sequence[str], selected: str) -> None:
        self.category_lists.append((tuple(categories), selected))

    def notify(self, message: str) -> None:
        self.notices.append(message)


class FailingStore:
    """Store whose reads and writes always fail."""

    def __init__(self) -> None:
        self.attempted_writes: list[str] = []

    def get(self, key: str) -> LoadResult:
        return StoreFailure(reason=f"cannot read {key}")

    def set(self, key: str, value: str) -> SaveResult:
        del value
        self.attempted_writes.append(key)
        return StoreFailure(reason=f"cannot write {key}")


if TYPE_CHECKING:
    from quotekeeper.domain.ports import KeyValueStore, QuotePresenter, QuoteSource

    _source_check: QuoteSource = FakeQuoteSource()
    _presenter_check: QuotePresenter = RecordingPresenter()
    _store_check: KeyValueStore = FailingStore()
