"""Quote records and raw-record validation.

A quote's identity is the ``(text, category)`` pair. Nothing else takes part in
equality: fields attached by the remote side (e.g. a server-assigned ``id``)
ride along in ``extra`` and survive serialization, but two records with the
same pair are the same quote.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final, cast

from .errors import InvalidQuoteError

if TYPE_CHECKING:
    from collections.abc import Iterable


type QuoteKey = tuple[str, str]
type QuoteCollection = tuple[Quote, ...]

ALL_CATEGORIES: Final[str] = "all"
_IDENTITY_FIELDS: Final[frozenset[str]] = frozenset({"text", "category"})


@dataclass(frozen=True, slots=True)
class Quote:
    text: str
    category: str
    extra: Mapping[str, object] = field(default_factory=dict, compare=False, repr=False)

    @property
    def key(self) -> QuoteKey:
        return (self.text, self.category)

    def to_payload(self) -> dict[str, object]:
        """Return the JSON-ready mapping, identity fields last so they win."""
        payload: dict[str, object] = dict(self.extra)
        payload["text"] = self.text
        payload["category"] = self.category
        return payload


def parse_quote(raw: object) -> Quote:
    """Validate a raw mapping and return a normalized ``Quote``.

    ``text`` and ``category`` must be strings that are non-empty once trimmed.
    Other keys are kept in ``extra``.
    """

    if not isinstance(raw, Mapping):
        raise InvalidQuoteError(
            f"Quote record must be an object, got {type(raw).__name__}", record=raw
        )
    mapping = cast(Mapping[object, object], raw)

    text = mapping.get("text")
    category = mapping.get("category")
    if not isinstance(text, str) or not text.strip():
        raise InvalidQuoteError("Quote text must be a non-empty string", record=raw)
    if not isinstance(category, str) or not category.strip():
        raise InvalidQuoteError("Quote category must be a non-empty string", record=raw)

    extra = {
        str(name): value for name, value in mapping.items() if name not in _IDENTITY_FIELDS
    }
    return Quote(text=text.strip(), category=category.strip(), extra=extra)


def parse_quotes(raw_items: Iterable[object]) -> tuple[list[Quote], int]:
    """Parse every raw item, dropping invalid ones.

    Returns the accepted quotes in input order and the number of rejected items.
    """

    accepted: list[Quote] = []
    rejected = 0
    for raw in raw_items:
        try:
            accepted.append(parse_quote(raw))
        except InvalidQuoteError:
            rejected += 1
    return accepted, rejected
