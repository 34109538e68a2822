"""Shared fixtures for web API tests."""

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from journal.storage import JournalStorage
from web.deps import get_lookback_days, get_remote_sentiment, get_score_scale, get_storage


@pytest.fixture
def storage(tmp_path):
    """Each test gets a fresh journal directory."""
    return JournalStorage(tmp_path / "journal")


@pytest.fixture
def client(storage):
    """Test client wired to the temp journal, lexicon analysis only."""
    from web.app import app

    app.dependency_overrides[get_storage] = lambda: storage
    app.dependency_overrides[get_remote_sentiment] = lambda: None
    app.dependency_overrides[get_lookback_days] = lambda: 30
    app.dependency_overrides[get_score_scale] = lambda: "signed"

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture
def seed(storage):
    """Write one scored entry per day, ending today."""

    def _seed(scores: list[float], emotions: list[str] | None = None):
        now = datetime.now()
        for i, score in enumerate(scores):
            storage.create(
                content=f"Entry {i}",
                title=f"Entry {i}",
                metadata={
                    "score": score,
                    "sentiment": "positive" if score > 0.1 else "neutral",
                    "emotions": emotions or ["neutral"],
                },
                now=now - timedelta(days=len(scores) - 1 - i),
            )

    return _seed
