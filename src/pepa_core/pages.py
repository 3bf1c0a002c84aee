from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import replace
from typing import TypeVar

from loguru import logger

from pepa_core.errors import InvalidInputError
from pepa_core.models import Document, PageId, Position

PagesT = TypeVar("PagesT", bound=Sequence[PageId])


def is_page_sequence(value: object) -> bool:
    return isinstance(value, (list, tuple))


def _coerce_position(position: Position | str) -> Position:
    try:
        return Position(position)
    except ValueError:
        raise InvalidInputError(
            f"position must be 'before' or 'after', got {position!r}"
        ) from None


def move_pages(
    pages: PagesT,
    to_move: Iterable[PageId],
    position: Position | str,
    target: PageId | None,
) -> PagesT:
    """
    Remove `to_move` from `pages` and re-insert it before or after `target`.

    Pages are addressed by id rather than index, so queued moves stay valid while
    other pages come and go. `to_move` keeps its own iteration order and may
    contain ids not yet in `pages`, which is how new pages get inserted. With
    `target=None` the moved pages go after all remaining pages, whatever the
    position.

    The result has the container type of `pages`.
    """
    if not is_page_sequence(pages):
        raise InvalidInputError(f"pages must be a list or tuple, got {type(pages).__name__}")
    pos = _coerce_position(position)
    moving = list(to_move)
    moving_set = set(moving)
    if target is not None and target in moving_set:
        raise InvalidInputError(f"Cannot move pages relative to a page being moved: {target!r}")

    remaining = [p for p in pages if p not in moving_set]

    if target is None:
        before, anchor, after = remaining, [], []
    else:
        if target not in remaining:
            raise InvalidInputError(f"Target page not found: {target!r}")
        if remaining[0] == target:
            idx = 0
        elif remaining[-1] == target:
            idx = len(remaining) - 1
        else:
            idx = remaining.index(target)
        before, anchor, after = remaining[:idx], [target], remaining[idx + 1 :]

    result = [
        *before,
        *(moving if pos is Position.BEFORE else ()),
        *anchor,
        *(moving if pos is Position.AFTER else ()),
        *after,
    ]
    logger.debug(
        "Moved {count} page(s) {position} {target}",
        count=len(moving),
        position=pos.value,
        target=target,
    )
    return type(pages)(result)  # type: ignore[call-arg]


def add_pages(
    document: Document,
    pages: Iterable[PageId],
    position: Position | str = Position.BEFORE,
    target: PageId | None = None,
) -> Document:
    """
    Insert pages into a document before or after `target`; at the back when no
    target is given.
    """
    return replace(document, pages=move_pages(document.pages, pages, position, target))


def remove_pages(document: Document, pages: Iterable[PageId]) -> Document:
    removed = set(pages)
    current = document.pages
    return replace(document, pages=type(current)(p for p in current if p not in removed))  # type: ignore[call-arg]
