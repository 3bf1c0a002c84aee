from __future__ import annotations

import pytest

from pepa_core.errors import InvalidInputError
from pepa_core.models import Document, State, TagDelta
from pepa_core.tags import (
    add_tags,
    all_tags,
    normalize_tag,
    remove_tags,
    sorted_tags,
    tag_delta,
    tag_document,
    tag_document_count,
    untag_document,
)


@pytest.mark.parametrize(
    ("tag", "expected"),
    [
        (" Foo ", "foo"),
        ("foo", "foo"),
        ("INBOX\n", "inbox"),
        ("  ", ""),
        ("Tax Return", "tax return"),
    ],
)
def test_normalize_tag(tag: str, expected: str) -> None:
    assert normalize_tag(tag) == expected
    assert normalize_tag(normalize_tag(tag)) == normalize_tag(tag)


@pytest.mark.parametrize("bad", [None, 1, b"foo", ["foo"]])
def test_normalize_tag_rejects_non_strings(bad: object) -> None:
    with pytest.raises(InvalidInputError):
        normalize_tag(bad)  # type: ignore[arg-type]


def test_add_tags_skips_existing_and_keeps_container() -> None:
    result = add_tags({"a", "b"}, ["b", "c"])
    assert result == {"a", "b", "c"}
    assert isinstance(result, set)

    frozen = add_tags(frozenset({"a"}), {"b"})
    assert frozen == frozenset({"a", "b"})
    assert isinstance(frozen, frozenset)


def test_add_tags_appends_to_ordered_containers_without_duplicates() -> None:
    assert add_tags(["b", "a"], ["a", "c", "c"]) == ["b", "a", "c"]
    assert add_tags(("x",), ["y"]) == ("x", "y")


def test_add_tags_does_not_normalize() -> None:
    assert add_tags({"foo"}, ["Foo"]) == {"foo", "Foo"}


def test_remove_tags_keeps_container_and_order() -> None:
    result = remove_tags({"a", "b", "c"}, ["b", "z"])
    assert result == {"a", "c"}
    assert isinstance(result, set)
    assert remove_tags(["c", "a", "b"], {"a"}) == ["c", "b"]
    assert remove_tags(("a",), ["a"]) == ()


def test_remove_tags_undoes_add_tags() -> None:
    original = frozenset({"inbox", "invoice"})
    new = {"2024", "tax"}
    assert remove_tags(add_tags(original, new), new) == original


def test_tag_document_normalizes() -> None:
    doc = Document(id=1, tags=frozenset({"inbox"}))
    tagged = tag_document(doc, [" Invoice ", "INBOX"])
    assert tagged.tags == frozenset({"inbox", "invoice"})
    assert doc.tags == frozenset({"inbox"})

    assert untag_document(tagged, ["Inbox"]).tags == frozenset({"invoice"})


def test_tag_delta() -> None:
    before = Document(id=1, tags=frozenset({"a", "b"}))
    after = Document(id=1, tags=frozenset({"b", "c"}))
    assert tag_delta(before, after) == TagDelta(added=frozenset({"c"}), removed=frozenset({"a"}))
    assert tag_delta(None, after) == TagDelta(added=frozenset({"b", "c"}))
    assert tag_delta(after, after).is_empty


def test_tag_counts_and_ranking() -> None:
    state = State(tags={"inbox": 3, "bills": 5, "archive": 3, "tax": 1})

    assert tag_document_count(state, "bills") == 5
    assert tag_document_count(state, "missing") == 0
    assert all_tags(state) == {"inbox", "bills", "archive", "tax"}
    assert sorted_tags(state) == ["bills", "archive", "inbox", "tax"]
    assert sorted_tags(state) == sorted_tags(state)


def test_sorted_tags_empty_state() -> None:
    assert sorted_tags(State()) == []
