# ruff: noqa: T201

"""Console presenter writing quotes and notices to a text stream."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from collections.abc import Sequence

    from quotekeeper.domain.model import Quote
    from quotekeeper.domain.ports.presentation import QuotePresenter


def format_quote(quote: Quote | None) -> str:
    if quote is None:
        return "No quote available."
    return f'"{quote.text}" ({quote.category})'


@dataclass(slots=True)
class ConsolePresenter:
    stream: TextIO = field(default_factory=lambda: sys.stdout)
    show_category_list: bool = True

    def show_quote(self, quote: Quote | None) -> None:
        print(format_quote(quote), file=self.stream)

    def show_categories(self, categories: Sequence[str], selected: str) -> None:
        if not self.show_category_list:
            return
        labels = [f"[{category}]" if category == selected else category for category in categories]
        print("Categories: " + ", ".join(labels), file=self.stream)

    def notify(self, message: str) -> None:
        print(message, file=self.stream)


if TYPE_CHECKING:
    _presenter_check: QuotePresenter = ConsolePresenter()
