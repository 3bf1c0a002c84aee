from __future__ import annotations

from collections.abc import Collection, Iterable
from dataclasses import replace
from typing import TypeVar

from pepa_core.errors import InvalidInputError
from pepa_core.models import Document, State, TagDelta

TagsT = TypeVar("TagsT", bound=Collection[str])


def normalize_tag(tag: str) -> str:
    if not isinstance(tag, str):
        raise InvalidInputError(f"Tag must be a string, got {type(tag).__name__}: {tag!r}")
    return tag.lower().strip()


def add_tags(existing: TagsT, to_add: Iterable[str]) -> TagsT:
    """
    Return `existing` with every tag of `to_add` that it lacks.

    Membership is plain equality; normalize before calling. The result has the
    container type of `existing`, and ordered containers get new tags appended.
    """
    seen = set(existing)
    merged = list(existing)
    for tag in to_add:
        if tag not in seen:
            seen.add(tag)
            merged.append(tag)
    return type(existing)(merged)  # type: ignore[call-arg]


def remove_tags(existing: TagsT, to_remove: Iterable[str]) -> TagsT:
    removed = set(to_remove)
    return type(existing)(t for t in existing if t not in removed)  # type: ignore[call-arg]


def tag_document(document: Document, tags: Iterable[str]) -> Document:
    return replace(document, tags=add_tags(frozenset(document.tags), [normalize_tag(t) for t in tags]))


def untag_document(document: Document, tags: Iterable[str]) -> Document:
    return replace(
        document,
        tags=remove_tags(frozenset(document.tags), [normalize_tag(t) for t in tags]),
    )


def tag_delta(before: Document | None, after: Document) -> TagDelta:
    old = frozenset(before.tags) if before is not None else frozenset()
    new = frozenset(after.tags)
    return TagDelta(added=new - old, removed=old - new)


def tag_document_count(state: State, tag: str) -> int:
    return state.tags.get(tag, 0)


def all_tags(state: State) -> set[str]:
    return set(state.tags)


def sorted_tags(state: State) -> list[str]:
    # document count descending, then name ascending
    return sorted(all_tags(state), key=lambda t: (-tag_document_count(state, t), t))
