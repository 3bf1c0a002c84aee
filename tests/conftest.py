from __future__ import annotations

import pytest

from pepa_core.config import Settings
from pepa_core.store import DocumentStore, new_state


@pytest.fixture()
def settings() -> Settings:
    return Settings.model_validate(
        {
            "PEPA_STALENESS_THRESHOLD_S": 1800,
            "PEPA_DEFAULT_ROUTE": "dashboard",
            "PEPA_LOG_LEVEL": "DEBUG",
        }
    )


@pytest.fixture()
def store(settings: Settings) -> DocumentStore:
    return DocumentStore(new_state(settings), settings=settings)
