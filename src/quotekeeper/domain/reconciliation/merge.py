"""Merge policies for folding one quote collection into another.

Two policies exist and they break ties in opposite directions:

- ``merge_quotes`` (neutral): used for single adds, file imports and any other
  locally originated batch. The existing copy wins on a shared key.
- ``merge_with_server_precedence``: used for remote sync. The remote copy wins
  on a shared key; local-only quotes are kept and remote-only quotes appended.

Both return a new collection with no duplicate keys and never mutate inputs.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .deduplicate import deduplicate_quotes
from .normalize import normalize_quotes

if TYPE_CHECKING:
    from collections.abc import Iterable

    from quotekeeper.domain.model import Quote, QuoteCollection, QuoteKey

log = logging.getLogger(__name__)


def merge_quotes(existing: Iterable[Quote], incoming: Iterable[Quote]) -> QuoteCollection:
    """Append normalized ``incoming`` after ``existing`` and drop repeated keys."""

    return deduplicate_quotes([*existing, *normalize_quotes(incoming)])


def merge_with_server_precedence(
    local: Iterable[Quote],
    remote: Iterable[Quote],
) -> QuoteCollection:
    """Overlay normalized ``remote`` onto normalized ``local`` by key."""

    by_key: dict[QuoteKey, Quote] = {quote.key: quote for quote in normalize_quotes(local)}
    local_count = len(by_key)

    overwritten = 0
    for quote in normalize_quotes(remote):
        if quote.key in by_key:
            overwritten += 1
        by_key[quote.key] = quote

    log.debug(
        "Server-precedence merge: local=%s, overwritten=%s, added=%s",
        local_count,
        overwritten,
        len(by_key) - local_count,
    )
    return deduplicate_quotes(by_key.values())
