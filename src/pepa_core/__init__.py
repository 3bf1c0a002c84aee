from loguru import logger

from pepa_core.config import Settings, load_settings
from pepa_core.errors import InvalidInputError, StoreValidationError
from pepa_core.log import configure_logging
from pepa_core.models import Document, FetchedDocument, Navigation, Page, Position, State, TagDelta
from pepa_core.pages import add_pages, move_pages, remove_pages
from pepa_core.staleness import STALENESS_THRESHOLD_S, is_stale, last_update, stale_documents
from pepa_core.store import DocumentStore, new_state
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

__all__ = [
    "__version__",
    "STALENESS_THRESHOLD_S",
    "Document",
    "DocumentStore",
    "FetchedDocument",
    "InvalidInputError",
    "Navigation",
    "Page",
    "Position",
    "Settings",
    "State",
    "StoreValidationError",
    "TagDelta",
    "add_pages",
    "add_tags",
    "all_tags",
    "configure_logging",
    "is_stale",
    "last_update",
    "load_settings",
    "move_pages",
    "new_state",
    "normalize_tag",
    "remove_pages",
    "remove_tags",
    "sorted_tags",
    "stale_documents",
    "tag_delta",
    "tag_document",
    "tag_document_count",
    "untag_document",
]

__version__ = "0.1.0"

logger.disable("pepa_core")
