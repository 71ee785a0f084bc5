from __future__ import annotations

from quotekeeper.domain.model import Quote
from quotekeeper.domain.reconciliation import normalize_quote, normalize_quotes


def test_normalize_trims_text_and_category() -> None:
    quote = normalize_quote(Quote(text="  Stay hungry \n", category="\tMotivation "))

    assert quote.text == "Stay hungry"
    assert quote.category == "Motivation"


def test_normalize_keeps_inner_whitespace_and_case() -> None:
    quote = normalize_quote(Quote(text=" Less  is More ", category=" Design "))

    assert quote.key == ("Less  is More", "Design")


def test_normalize_is_idempotent() -> None:
    once = normalize_quote(Quote(text=" a ", category=" b "))

    assert normalize_quote(once) == once
    assert normalize_quote(once).key == once.key


def test_normalize_preserves_extra_fields_and_does_not_mutate_input() -> None:
    original = Quote(text=" Hi ", category="A", extra={"id": 101})

    normalized = normalize_quote(original)

    assert normalized.extra == {"id": 101}
    assert original.text == " Hi "


def test_normalize_quotes_maps_in_order() -> None:
    quotes = normalize_quotes([Quote(text=" x", category="A"), Quote(text="y ", category=" B")])

    assert [quote.key for quote in quotes] == [("x", "A"), ("y", "B")]
