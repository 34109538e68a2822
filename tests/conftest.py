"""Shared test fixtures for Mood Journal."""

import sys
from datetime import datetime, timedelta
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def fixed_now():
    """A Wednesday, so forecast weekends land at known offsets."""
    return datetime(2024, 3, 13, 20, 0, 0)


@pytest.fixture
def temp_dirs(tmp_path):
    """Create temp directories for journal data and logs."""
    journal_dir = tmp_path / "journal"
    journal_dir.mkdir()

    return {
        "journal_dir": journal_dir,
        "log_file": tmp_path / "moodjournal.log",
    }


@pytest.fixture
def sample_journal_entries(fixed_now):
    """Pre-populated test journal entries, one per day, oldest last."""
    return [
        {
            "type": "daily",
            "title": "Great day",
            "content": "Felt happy and productive, really grateful for the team.",
            "tags": ["work"],
            "created": fixed_now,
            "metadata": {"score": 0.8, "sentiment": "positive", "emotions": ["joy"]},
        },
        {
            "type": "reflection",
            "title": "Rough patch",
            "content": "Stressed about the deadline and a bit anxious.",
            "tags": ["work", "stress"],
            "created": fixed_now - timedelta(days=1),
            "metadata": {"score": -0.5, "sentiment": "negative", "emotions": ["stress", "anxiety"]},
        },
        {
            "type": "gratitude",
            "title": "Small wins",
            "content": "Calm evening walk.",
            "tags": ["health"],
            "created": fixed_now - timedelta(days=2),
            "metadata": {"score": 0.3, "sentiment": "positive", "emotions": ["joy"]},
        },
    ]


@pytest.fixture
def populated_journal(temp_dirs, sample_journal_entries):
    """Journal storage with pre-populated entries."""
    from journal.storage import JournalStorage

    storage = JournalStorage(temp_dirs["journal_dir"])

    created_paths = []
    for entry in sample_journal_entries:
        path = storage.create(
            content=entry["content"],
            entry_type=entry["type"],
            title=entry["title"],
            tags=entry.get("tags"),
            metadata=entry.get("metadata"),
            now=entry["created"],
        )
        created_paths.append(path)

    return {"storage": storage, "paths": created_paths}
