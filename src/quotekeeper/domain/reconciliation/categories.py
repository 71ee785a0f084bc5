"""Category projections over a quote collection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from quotekeeper.domain.model import ALL_CATEGORIES

if TYPE_CHECKING:
    from collections.abc import Iterable

    from quotekeeper.domain.model import Quote, QuoteCollection


def derive_categories(quotes: Iterable[Quote]) -> tuple[str, ...]:
    """Return ``"all"`` followed by each distinct category in first-seen order."""

    # a literal "all" category collapses into the sentinel
    categories = dict.fromkeys([ALL_CATEGORIES, *(quote.category for quote in quotes)])
    return tuple(categories)


def filter_quotes(quotes: Iterable[Quote], category: str) -> QuoteCollection:
    if category == ALL_CATEGORIES:
        return tuple(quotes)
    return tuple(quote for quote in quotes if quote.category == category)
