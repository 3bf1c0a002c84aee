from __future__ import annotations

from datetime import UTC, datetime

from loguru import logger

from pepa_core.config import Settings, load_settings
from pepa_core.errors import StoreValidationError
from pepa_core.models import Document, DocumentId, FetchedDocument, Navigation, Page, PageId, State
from pepa_core.pages import is_page_sequence
from pepa_core.staleness import stale_documents


def new_state(settings: Settings | None = None) -> State:
    settings = settings or load_settings()
    return State(navigation=Navigation(route=settings.default_route))


class DocumentStore:
    """
    Keyed access to the documents and pages of one session's `State`.

    Every write replaces a single key, last write wins. Callers serialize edits
    to the same document.
    """

    def __init__(self, state: State | None = None, *, settings: Settings | None = None):
        self._settings = settings or load_settings()
        self._state = state if state is not None else new_state(self._settings)

    @property
    def state(self) -> State:
        return self._state

    def get_document(self, document_id: DocumentId) -> Document | None:
        return self._state.documents.get(document_id)

    def get_page(self, page_id: PageId) -> Page | None:
        return self._state.pages.get(page_id)

    def store_document(self, document: Document, *, fetched_at: datetime | None = None) -> None:
        if document.id is None:
            raise StoreValidationError("Document is missing an id")
        if not is_page_sequence(document.pages):
            raise StoreValidationError(
                f"Document {document.id!r} pages must be a list or tuple, "
                f"got {type(document.pages).__name__}"
            )
        self._state.documents[document.id] = document
        if fetched_at is not None:
            self._state.last_fetched[document.id] = fetched_at
        logger.debug(
            "Stored document {document_id} ({pages} pages)",
            document_id=document.id,
            pages=len(document.pages),
        )

    def store_page(self, page: Page) -> None:
        if page.id is None:
            raise StoreValidationError("Page is missing an id")
        if page.image is None:
            raise StoreValidationError(f"Page {page.id!r} is missing an image")
        self._state.pages[page.id] = page
        logger.debug("Stored page {page_id}", page_id=page.id)

    def record_fetch(self, document_id: DocumentId, at: datetime | None = None) -> None:
        self._state.last_fetched[document_id] = at or datetime.now(UTC)

    def fetched_document(self, document_id: DocumentId) -> FetchedDocument | None:
        document = self.get_document(document_id)
        if document is None:
            return None
        return FetchedDocument(
            document=document,
            last_fetched_at=self._state.last_fetched.get(document_id),
        )

    def stale_documents(
        self,
        threshold_s: float | None = None,
        *,
        now: datetime | None = None,
    ) -> dict[DocumentId, FetchedDocument]:
        if threshold_s is None:
            threshold_s = self._settings.staleness_threshold_s
        fetched = {
            document_id: FetchedDocument(
                document=document,
                last_fetched_at=self._state.last_fetched.get(document_id),
            )
            for document_id, document in self._state.documents.items()
            if document_id in self._state.last_fetched
        }
        return stale_documents(fetched, threshold_s, now=now)
