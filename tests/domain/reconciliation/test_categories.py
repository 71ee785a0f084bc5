from __future__ import annotations

from quotekeeper.domain.model import ALL_CATEGORIES
from quotekeeper.domain.reconciliation import derive_categories, filter_quotes
from tests.helpers.quotes import make_quotes, pairs_of


def test_derive_categories_in_first_occurrence_order() -> None:
    quotes = make_quotes(("1", "A"), ("2", "B"), ("3", "A"), ("4", "B"), ("5", "A"))

    assert derive_categories(quotes) == ("all", "A", "B")


def test_derive_categories_of_empty_collection() -> None:
    assert derive_categories(()) == (ALL_CATEGORIES,)


def test_derive_categories_does_not_repeat_the_sentinel() -> None:
    quotes = make_quotes(("1", "B"), ("2", "all"))

    assert derive_categories(quotes) == ("all", "B")


def test_filter_all_returns_equal_collection() -> None:
    quotes = make_quotes(("1", "A"), ("2", "B"))

    assert filter_quotes(quotes, ALL_CATEGORIES) == quotes


def test_filter_by_category() -> None:
    quotes = make_quotes(("1", "A"), ("2", "B"), ("3", "A"))

    assert pairs_of(filter_quotes(quotes, "A")) == [("1", "A"), ("3", "A")]


def test_filter_by_absent_category_is_empty() -> None:
    assert filter_quotes(make_quotes(("1", "A")), "Z") == ()
