from __future__ import annotations

from collections.abc import Hashable, Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


PageId = Hashable
DocumentId = Hashable


class Position(str, Enum):
    BEFORE = "before"
    AFTER = "after"


@dataclass(frozen=True)
class Page:
    id: PageId | None
    rotation: int = 0
    render_status: str | None = None
    image: str | None = None


@dataclass(frozen=True)
class Document:
    id: DocumentId | None
    title: str | None = None
    pages: Sequence[PageId] = ()
    tags: frozenset[str] = frozenset()
    created: datetime | None = None
    modified: datetime | None = None
    notes: str | None = None


@dataclass(frozen=True)
class FetchedDocument:
    """
    A document paired with the time it was last fetched from the server.
    """

    document: Document
    last_fetched_at: datetime | None = None


@dataclass(frozen=True)
class TagDelta:
    added: frozenset[str] = frozenset()
    removed: frozenset[str] = frozenset()

    @property
    def is_empty(self) -> bool:
        return not self.added and not self.removed


@dataclass(frozen=True)
class Navigation:
    route: str = "dashboard"
    params: Mapping[str, Any] = field(default_factory=dict)


@dataclass
class State:
    """
    Root aggregate for one client session.

    `tags` maps tag -> number of documents carrying it and is maintained by
    whatever observes document changes; the core only reads it.
    """

    documents: dict[DocumentId, Document] = field(default_factory=dict)
    pages: dict[PageId, Page] = field(default_factory=dict)
    last_fetched: dict[DocumentId, datetime] = field(default_factory=dict)
    navigation: Navigation = field(default_factory=Navigation)
    upload: dict[Any, Any] = field(default_factory=dict)
    tags: dict[str, int] = field(default_factory=dict)
