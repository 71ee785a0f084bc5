"""Public interface for the mock quote server adapter."""

from __future__ import annotations

from .client import HttpQuoteSource
from .schema import AcceptedQuotePayload, PostPayload, PostsResponse
from .translator import parse_accepted_quote, parse_posts

__all__ = [
    "AcceptedQuotePayload",
    "HttpQuoteSource",
    "PostPayload",
    "PostsResponse",
    "parse_accepted_quote",
    "parse_posts",
]
