"""Translate mock server payloads into domain quotes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from quotekeeper.domain.model import Quote

from .schema import AcceptedQuotePayload, PostsResponse

if TYPE_CHECKING:
    from collections.abc import Sequence

log = logging.getLogger(__name__)


def parse_posts(payload: object, *, categories: Sequence[str]) -> list[Quote]:
    """Map posts to quotes, assigning ``categories`` round-robin by position.

    Posts without a usable title are skipped but still consume their slot in
    the rotation, so a post's category depends only on its index.
    """

    if not categories:
        raise ValueError("At least one category is required to map posts")
    posts = PostsResponse.model_validate(payload).root
    quotes: list[Quote] = []
    for index, post in enumerate(posts):
        if post.title is None:
            continue
        quotes.append(Quote(text=post.title, category=categories[index % len(categories)]))
    return quotes


def parse_accepted_quote(payload: object, *, submitted: Quote) -> Quote:
    """Build the accepted record from a submission response.

    The response is opaque beyond ``text`` and ``category``; anything else is
    kept as extra fields. A response without a usable pair falls back to the
    submitted record, still carrying the response's extra fields.
    """

    try:
        accepted = AcceptedQuotePayload.model_validate(payload)
    except ValidationError as exc:
        log.warning("Unexpected submission response, keeping submitted quote: %s", exc)
        return submitted

    extra = {**submitted.extra, **accepted.extra_fields}
    if accepted.text is None or accepted.category is None:
        return Quote(text=submitted.text, category=submitted.category, extra=extra)
    return Quote(text=accepted.text, category=accepted.category, extra=extra)
