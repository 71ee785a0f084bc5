from __future__ import annotations

from quotekeeper.domain.model import Quote
from quotekeeper.domain.reconciliation import merge_quotes, merge_with_server_precedence
from tests.helpers.quotes import make_quotes, pairs_of


def test_merge_normalizes_incoming_and_drops_duplicates() -> None:
    local = make_quotes(("Hi", "A"))
    imported = make_quotes((" Hi ", "A"), ("Bye", "B"))

    merged = merge_quotes(local, imported)

    assert pairs_of(merged) == [("Hi", "A"), ("Bye", "B")]


def test_merge_keeps_existing_copy_on_conflict() -> None:
    existing = [Quote(text="Hi", category="A", extra={"id": 1})]
    incoming = [Quote(text="Hi", category="A", extra={"id": 2})]

    merged = merge_quotes(existing, incoming)

    assert len(merged) == 1
    assert merged[0].extra == {"id": 1}


def test_merge_has_same_identities_in_either_order_but_different_survivors() -> None:
    a = [Quote(text="Hi", category="A", extra={"side": "a"}), Quote(text="Only A", category="A")]
    b = [Quote(text="Hi", category="A", extra={"side": "b"}), Quote(text="Only B", category="B")]

    ab = merge_quotes(a, b)
    ba = merge_quotes(b, a)

    assert set(pairs_of(ab)) == set(pairs_of(ba))
    assert ab[0].extra == {"side": "a"}
    assert ba[0].extra == {"side": "b"}


def test_merge_does_not_mutate_inputs() -> None:
    existing = [Quote(text="Hi", category="A")]
    incoming = [Quote(text=" New ", category="B")]

    merge_quotes(existing, incoming)

    assert existing == [Quote(text="Hi", category="A")]
    assert incoming[0].text == " New "


def test_server_precedence_prefers_remote_copy() -> None:
    local = [Quote(text="Hi", category="A", extra={"id": "local"})]
    remote = [Quote(text=" Hi", category="A ", extra={"id": "remote"})]

    merged = merge_with_server_precedence(local, remote)

    assert pairs_of(merged) == [("Hi", "A")]
    assert merged[0].extra == {"id": "remote"}


def test_server_precedence_keeps_local_only_and_appends_remote_only() -> None:
    local = make_quotes(("Local", "A"), ("Shared", "B"))
    remote = make_quotes(("Shared", "B"), ("Remote", "C"))

    merged = merge_with_server_precedence(local, remote)

    assert pairs_of(merged) == [("Local", "A"), ("Shared", "B"), ("Remote", "C")]


def test_server_precedence_identity_includes_category() -> None:
    merged = merge_with_server_precedence(make_quotes(("X", "A")), make_quotes(("X", "B")))

    assert pairs_of(merged) == [("X", "A"), ("X", "B")]


def test_server_precedence_normalizes_local_side_too() -> None:
    local = make_quotes((" Hi ", "A"), ("Hi", "A"))

    merged = merge_with_server_precedence(local, [])

    assert pairs_of(merged) == [("Hi", "A")]


def test_policies_break_ties_in_opposite_directions() -> None:
    local = [Quote(text="Q", category="C", extra={"from": "local"})]
    incoming = [Quote(text="Q", category="C", extra={"from": "incoming"})]

    assert merge_quotes(local, incoming)[0].extra == {"from": "local"}
    assert merge_with_server_precedence(local, incoming)[0].extra == {"from": "incoming"}
