"""Journal CRUD routes wrapping src/journal/storage.py."""

from pathlib import Path
from typing import Optional

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from journal.analysis import analyze_entry
from journal.emotions import coping_strategy
from journal.remote_sentiment import HuggingFaceSentimentClient
from journal.storage import JournalStorage
from web.deps import get_remote_sentiment, get_storage
from web.models import JournalCreate, JournalEntry

logger = structlog.get_logger()

router = APIRouter(prefix="/api/journal", tags=["journal"])


def _entry_from_post(filepath: Path, post, **extra) -> JournalEntry:
    score = post.get("score")
    return JournalEntry(
        filename=filepath.name,
        title=post.get("title", filepath.stem),
        type=post.get("type", "unknown"),
        created=str(post.get("created")) if post.get("created") else None,
        tags=post.get("tags", []),
        score=float(score) if score is not None else None,
        sentiment=post.get("sentiment"),
        emotions=post.get("emotions", []),
        content=post.content,
        **extra,
    )


def _resolve(storage: JournalStorage, filename: str) -> Path:
    """Exact filename inside the journal dir, else 400/404."""
    filepath = (storage.journal_dir / filename).resolve()
    if not filepath.is_relative_to(storage.journal_dir):
        raise HTTPException(status_code=400, detail="Invalid path")
    if not filepath.exists():
        raise HTTPException(status_code=404, detail="Entry not found")
    return filepath


@router.get("", response_model=list[JournalEntry])
async def list_entries(
    entry_type: str | None = None,
    tag: str | None = None,
    limit: int = 50,
    storage: JournalStorage = Depends(get_storage),
):
    tags = [tag] if tag else None
    entries = storage.list_entries(entry_type=entry_type, tags=tags, limit=limit)
    return [
        JournalEntry(
            filename=e["path"].name,
            title=e["title"],
            type=e["type"],
            created=e.get("created"),
            tags=e.get("tags", []),
            score=e.get("score"),
            sentiment=e.get("sentiment"),
            emotions=e.get("emotions") or [],
            preview=e.get("preview", ""),
        )
        for e in entries
    ]


@router.post("", response_model=JournalEntry, status_code=status.HTTP_201_CREATED)
async def create_entry(
    body: JournalCreate,
    storage: JournalStorage = Depends(get_storage),
    remote: Optional[HuggingFaceSentimentClient] = Depends(get_remote_sentiment),
):
    """Analyze mood + emotions, then write the entry with the results in frontmatter."""
    try:
        analysis = analyze_entry(body.content, remote=remote)
    finally:
        if remote is not None:
            remote.close()

    try:
        filepath = storage.create(
            content=body.content,
            entry_type=body.entry_type,
            title=body.title,
            tags=body.tags,
            metadata=analysis,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    post = storage.read(filepath)
    return _entry_from_post(filepath, post, coping_strategy=coping_strategy(analysis["emotions"]))


@router.get("/{filename}", response_model=JournalEntry)
async def get_entry(filename: str, storage: JournalStorage = Depends(get_storage)):
    filepath = _resolve(storage, filename)
    return _entry_from_post(filepath, storage.read(filepath))


@router.delete("/{filename}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entry(filename: str, storage: JournalStorage = Depends(get_storage)):
    filepath = _resolve(storage, filename)
    storage.delete(filepath)
