"""Quote domain: records, reconciliation engine and the quote book service."""

from __future__ import annotations

from .errors import (
    InvalidQuoteError,
    MalformedQuoteDataError,
    QuoteImportError,
    QuoteKeeperError,
    RemoteUnavailableError,
)
from .model import ALL_CATEGORIES, Quote, QuoteCollection, QuoteKey, parse_quote, parse_quotes

__all__ = [
    "ALL_CATEGORIES",
    "InvalidQuoteError",
    "MalformedQuoteDataError",
    "Quote",
    "QuoteCollection",
    "QuoteImportError",
    "QuoteKey",
    "QuoteKeeperError",
    "RemoteUnavailableError",
    "parse_quote",
    "parse_quotes",
]
