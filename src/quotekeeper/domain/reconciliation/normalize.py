"""Normalization stage for quote records.

Responsibilities of this stage:
- trim leading/trailing whitespace from ``text`` and ``category``
- leave every other field untouched
- avoid type coercion; callers validate raw input first (see ``parse_quote``)
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from quotekeeper.domain.model import Quote


def normalize_quote(quote: Quote) -> Quote:
    """Return ``quote`` with its identity fields trimmed."""

    return replace(quote, text=quote.text.strip(), category=quote.category.strip())


def normalize_quotes(quotes: Iterable[Quote]) -> list[Quote]:
    return [normalize_quote(quote) for quote in quotes]
