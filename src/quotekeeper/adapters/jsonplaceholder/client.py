"""HTTP quote source backed by a JSONPlaceholder-style ``/posts`` endpoint."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from quotekeeper.adapters.http_resilience import ResilienceConfig, ResilientClient
from quotekeeper.config.remote import RemoteConfig, get_remote_config
from quotekeeper.domain.errors import RemoteUnavailableError
from quotekeeper.domain.ports.fetching import QuoteSource

from .translator import parse_accepted_quote, parse_posts

if TYPE_CHECKING:
    from collections.abc import Callable

    from quotekeeper.domain.model import Quote

log = getLogger(__name__)


def _should_cache_payload(payload: object) -> bool:
    return isinstance(payload, list) and bool(payload)


def _default_remote_config() -> RemoteConfig:
    return get_remote_config(cache_predicate=_should_cache_payload)


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


@dataclass(slots=True)
class HttpQuoteSource:
    config: RemoteConfig = field(default_factory=_default_remote_config)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )

    def fetch_all(self) -> list[Quote]:
        try:
            quotes = asyncio.run(self._fetch_all_async())
        except (httpx.HTTPError, ValidationError, ValueError, RemoteUnavailableError) as exc:
            log.error(f"Error fetching quotes: {exc}")
            return []
        log.info("Fetched %s quote(s) from %s", len(quotes), self.config.base_url)
        return quotes

    def submit(self, quote: Quote) -> Quote:
        try:
            return asyncio.run(self._submit_async(quote))
        except httpx.HTTPStatusError as exc:
            raise RemoteUnavailableError(
                f"Server rejected quote: {exc.response.status_code}",
                status_code=exc.response.status_code,
            ) from exc
        except (httpx.HTTPError, ValueError) as exc:
            raise RemoteUnavailableError(f"Failed to post quote: {exc}") from exc

    async def _fetch_all_async(self) -> list[Quote]:
        async with self.client_factory(self.config.resilience) as client:
            response = await client.get(self._posts_url())
            response.raise_for_status()
            payload = response.json()

        if not isinstance(payload, list):
            raise RemoteUnavailableError("Unexpected quote server response payload")
        return parse_posts(payload, categories=self.config.categories)

    async def _submit_async(self, quote: Quote) -> Quote:
        async with self.client_factory(self.config.resilience) as client:
            response = await client.post(self._posts_url(), json=quote.to_payload())
            response.raise_for_status()
            payload = response.json()
        return parse_accepted_quote(payload, submitted=quote)

    def _posts_url(self) -> str:
        return self.config.base_url.rstrip("/") + self.config.posts_path


if TYPE_CHECKING:
    _source_check: QuoteSource = HttpQuoteSource()
