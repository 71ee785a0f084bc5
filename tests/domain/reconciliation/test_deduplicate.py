from __future__ import annotations

from quotekeeper.domain.model import Quote
from quotekeeper.domain.reconciliation import deduplicate_quotes
from tests.helpers.quotes import make_quotes, pairs_of


def test_deduplicate_keeps_first_occurrence_in_order() -> None:
    first = Quote(text="Hi", category="A", extra={"origin": "first"})
    later = Quote(text="Hi", category="A", extra={"origin": "later"})
    other = Quote(text="Bye", category="B")

    result = deduplicate_quotes([first, other, later])

    assert pairs_of(result) == [("Hi", "A"), ("Bye", "B")]
    assert result[0].extra == {"origin": "first"}


def test_deduplicate_identity_is_the_text_category_pair() -> None:
    quotes = make_quotes(("X", "A"), ("X", "B"), ("Y", "A"))

    assert deduplicate_quotes(quotes) == quotes


def test_deduplicate_is_case_and_whitespace_sensitive() -> None:
    quotes = make_quotes(("Hi", "A"), ("hi", "A"), (" Hi", "A"))

    assert len(deduplicate_quotes(quotes)) == 3


def test_deduplicate_is_idempotent() -> None:
    quotes = make_quotes(("a", "1"), ("b", "2"), ("a", "1"), ("c", "1"), ("b", "2"))

    once = deduplicate_quotes(quotes)

    assert deduplicate_quotes(once) == once
    assert pairs_of(once) == [("a", "1"), ("b", "2"), ("c", "1")]


def test_deduplicate_empty_input() -> None:
    assert deduplicate_quotes([]) == ()
