"""Order-preserving deduplication of quote collections.

Keys are compared exactly (case-sensitive, no trimming); normalize first when
whitespace should not matter. The first record seen for a key survives.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from quotekeeper.domain.model import Quote, QuoteCollection, QuoteKey


def deduplicate_quotes(quotes: Iterable[Quote]) -> QuoteCollection:
    """Keep the first record per ``(text, category)`` key, in input order."""

    seen: set[QuoteKey] = set()
    survivors: list[Quote] = []
    for quote in quotes:
        if quote.key in seen:
            continue
        seen.add(quote.key)
        survivors.append(quote)
    return tuple(survivors)
