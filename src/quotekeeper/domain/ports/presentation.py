"""Ports for showing quotes and notices to a user."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from quotekeeper.domain.model import Quote


@runtime_checkable
class QuotePresenter(Protocol):
    def show_quote(self, quote: Quote | None) -> None:
        """Render ``quote``; ``None`` means there is nothing to show."""
        ...

    def show_categories(self, categories: Sequence[str], selected: str) -> None: ...

    def notify(self, message: str) -> None: ...


__all__ = ["QuotePresenter"]
