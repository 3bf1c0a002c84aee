from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import UTC, datetime
from typing import TypeVar

from pepa_core.models import Document, FetchedDocument

STALENESS_THRESHOLD_S = 60 * 30

DocsT = TypeVar("DocsT", bound=Iterable[object])


def last_update(document: Document | FetchedDocument) -> datetime | None:
    if isinstance(document, FetchedDocument):
        return document.last_fetched_at
    return None


def is_stale(
    document: Document | FetchedDocument,
    threshold_s: float = STALENESS_THRESHOLD_S,
    *,
    now: datetime | None = None,
) -> bool:
    """
    True when the document was last fetched more than `threshold_s` seconds ago.

    Documents without a fetch timestamp are never stale. Uses the wall clock
    unless `now` is given; naive timestamps are taken as UTC.
    """
    updated = last_update(document)
    if updated is None:
        return False
    current = now or datetime.now(UTC)
    return (_as_utc(current) - _as_utc(updated)).total_seconds() > threshold_s


def stale_documents(
    documents: DocsT,
    threshold_s: float = STALENESS_THRESHOLD_S,
    *,
    now: datetime | None = None,
) -> DocsT:
    """
    Filter a collection down to its stale documents, keeping its container type.

    Mappings are filtered on their values.
    """
    current = now or datetime.now(UTC)
    if isinstance(documents, Mapping):
        return type(documents)(  # type: ignore[call-arg]
            (k, v) for k, v in documents.items() if is_stale(v, threshold_s, now=current)
        )
    return type(documents)(  # type: ignore[call-arg]
        d for d in documents if is_stale(d, threshold_s, now=current)  # type: ignore[arg-type]
    )


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
