"""JSON encoding of quote collections for storage and file exchange."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, cast

from .errors import InvalidQuoteError, MalformedQuoteDataError
from .model import parse_quote, parse_quotes

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .model import Quote, QuoteCollection

log = logging.getLogger(__name__)


def encode_quotes(quotes: Iterable[Quote], *, indent: int | None = None) -> str:
    return json.dumps(
        [quote.to_payload() for quote in quotes],
        indent=indent,
        ensure_ascii=False,
    )


def encode_quote(quote: Quote) -> str:
    return json.dumps(quote.to_payload(), ensure_ascii=False)


def decode_quote_list(text: str) -> list[object]:
    """Parse ``text`` as a JSON array; raise ``MalformedQuoteDataError`` otherwise."""

    try:
        loaded: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedQuoteDataError(f"Invalid JSON: {exc.msg}") from exc
    if not isinstance(loaded, list):
        raise MalformedQuoteDataError("JSON is not an array")
    return cast(list[object], loaded)


def decode_quotes(text: str) -> QuoteCollection:
    """Decode a stored collection, dropping records that fail validation."""

    accepted, rejected = parse_quotes(decode_quote_list(text))
    if rejected:
        log.warning("Dropped %s invalid stored quote record(s)", rejected)
    return tuple(accepted)


def decode_quote(text: str) -> Quote:
    try:
        loaded: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedQuoteDataError(f"Invalid JSON: {exc.msg}") from exc
    try:
        return parse_quote(loaded)
    except InvalidQuoteError as exc:
        raise MalformedQuoteDataError(str(exc)) from exc
