"""Reconciliation engine for quote collections.

Every function here is a pure transformation: it takes collection(s) and
returns a new collection without touching shared state. Callers own the
collection and serialize concurrent writers themselves.

Flow for any incoming batch:
1) normalize records (trim identity fields)
2) merge with the neutral or the server-precedence policy
3) deduplicate by ``(text, category)`` key
"""

from __future__ import annotations

from .categories import derive_categories, filter_quotes
from .deduplicate import deduplicate_quotes
from .merge import merge_quotes, merge_with_server_precedence
from .normalize import normalize_quote, normalize_quotes

__all__ = [
    "deduplicate_quotes",
    "derive_categories",
    "filter_quotes",
    "merge_quotes",
    "merge_with_server_precedence",
    "normalize_quote",
    "normalize_quotes",
]
