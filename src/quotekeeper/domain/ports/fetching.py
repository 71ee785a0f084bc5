"""Ports for exchanging quotes with a remote source."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from quotekeeper.domain.model import Quote


@runtime_checkable
class QuoteSource(Protocol):
    """Remote source of truth for quotes."""

    def fetch_all(self) -> list[Quote]:
        """Return every remote quote, or an empty list when the source is unavailable."""
        ...

    def submit(self, quote: Quote) -> Quote:
        """Store ``quote`` remotely and return the accepted record.

        The accepted record may carry extra fields assigned by the remote side.
        Raises ``RemoteUnavailableError`` when the submission fails.
        """
        ...


__all__ = ["QuoteSource"]
