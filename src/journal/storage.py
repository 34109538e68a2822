"""Markdown journal CRUD operations.

Each entry is one markdown file with YAML frontmatter. Mood analysis results
(score, sentiment, emotions) live in the same frontmatter as title/type/tags.
"""

import re
from datetime import datetime
from pathlib import Path
from typing import Optional

import frontmatter
import structlog

from shared_types import EntryType

logger = structlog.get_logger()

ALLOWED_ENTRY_TYPES = tuple(EntryType)
MAX_CONTENT_LENGTH = 100_000  # 100KB
MAX_TAG_LENGTH = 50
MAX_TAGS = 20
PREVIEW_LENGTH = 200

MOOD_FIELDS = ("score", "score_scale", "sentiment", "emotions")


def _slug(text: str) -> str:
    """Filename-safe slug, [a-z0-9-] only."""
    return re.sub(r"[^a-z0-9-]", "", text.lower().replace(" ", "-"))[:50]


def _clean_tags(tags: Optional[list[str]]) -> list[str]:
    cleaned = []
    for tag in (tags or [])[:MAX_TAGS]:
        tag = re.sub(r"[^\w\s-]", "", tag).strip()[:MAX_TAG_LENGTH]
        if tag:
            cleaned.append(tag)
    return cleaned


def _iso(value) -> Optional[str]:
    # Hand-edited frontmatter may hold an unquoted YAML timestamp
    if isinstance(value, datetime):
        return value.isoformat()
    return value


class JournalStorage:
    """Manages markdown journal files with YAML frontmatter."""

    def __init__(self, journal_dir: str | Path):
        self.journal_dir = Path(journal_dir).expanduser().resolve()
        self.journal_dir.mkdir(parents=True, exist_ok=True)

    def _validate_path(self, filepath: str | Path) -> Path:
        """Resolve filepath (relative to journal_dir if needed) and keep it inside."""
        filepath = Path(filepath)
        if not filepath.is_absolute():
            filepath = self.journal_dir / filepath
        resolved = filepath.resolve()
        if not resolved.is_relative_to(self.journal_dir):
            raise ValueError(f"Path escapes journal directory: {filepath}")
        return resolved

    def _free_path(self, stem: str) -> Path:
        """First unused `<stem>.md`, `<stem>_1.md`, ... in the journal dir."""
        candidate = self._validate_path(f"{stem}.md")
        counter = 1
        while candidate.exists():
            candidate = self._validate_path(f"{stem}_{counter}.md")
            counter += 1
        return candidate

    @staticmethod
    def _write(filepath: Path, post: frontmatter.Post) -> None:
        filepath.write_text(frontmatter.dumps(post))

    def create(
        self,
        content: str,
        entry_type: str = "daily",
        title: Optional[str] = None,
        tags: Optional[list[str]] = None,
        metadata: Optional[dict] = None,
        now: Optional[datetime] = None,
    ) -> Path:
        """Create new journal entry.

        Args:
            content: Main body text
            entry_type: daily, reflection, gratitude, note
            title: Optional title (defaults to the date)
            tags: Optional list of tags
            metadata: Extra frontmatter, usually the mood analysis
                (score, sentiment, emotions)
            now: Creation time, defaults to current time

        Returns:
            Path to created file

        Raises:
            ValueError: If entry_type invalid or content too long
        """
        if entry_type not in ALLOWED_ENTRY_TYPES:
            raise ValueError(
                f"Invalid entry_type '{entry_type}'. Must be one of {ALLOWED_ENTRY_TYPES}"
            )
        if len(content) > MAX_CONTENT_LENGTH:
            raise ValueError(f"Content exceeds max length ({MAX_CONTENT_LENGTH} chars)")

        now = now or datetime.now()
        title = title or now.strftime("%B %d, %Y")

        post = frontmatter.Post(
            content,
            title=title,
            type=entry_type,
            created=now.isoformat(),
            tags=_clean_tags(tags),
        )
        post.metadata.update(metadata or {})

        filepath = self._free_path(f"{now:%Y-%m-%d}_{_slug(entry_type)}_{_slug(title)}")
        self._write(filepath, post)

        logger.info(
            "journal.entry_created",
            filename=filepath.name,
            type=entry_type,
            sentiment=post.get("sentiment"),
        )
        return filepath

    def read(self, filepath: str | Path) -> frontmatter.Post:
        """Load an entry.

        Raises:
            FileNotFoundError: If entry does not exist
            ValueError: If path escapes journal dir
        """
        return frontmatter.load(self._validate_path(filepath))

    def update(
        self,
        filepath: str | Path,
        content: Optional[str] = None,
        metadata: Optional[dict] = None,
    ) -> Path:
        """Replace content and/or merge frontmatter; stamps `updated`."""
        filepath = self._validate_path(filepath)
        post = frontmatter.load(filepath)
        if content is not None:
            post.content = content
        post.metadata.update(metadata or {})
        post["updated"] = datetime.now().isoformat()
        self._write(filepath, post)
        return filepath

    def delete(self, filepath: str | Path) -> bool:
        """Delete an entry. False if it was already gone."""
        filepath = self._validate_path(filepath)
        if not filepath.exists():
            return False
        filepath.unlink()
        logger.info("journal.entry_deleted", filename=filepath.name)
        return True

    def resolve(self, filename: str) -> Optional[Path]:
        """Find an entry by exact filename or partial match.

        Returns None if nothing matches or the name escapes the journal dir.
        """
        try:
            filepath = self._validate_path(filename)
        except ValueError:
            return None
        if filepath.exists():
            return filepath

        matches = sorted(
            m for m in self.journal_dir.glob(f"*{filename}*")
            if m.resolve().is_relative_to(self.journal_dir)
        )
        return matches[0] if matches else None

    @staticmethod
    def _summarize(path: Path, post: frontmatter.Post) -> dict:
        summary = {
            "path": path,
            "title": post.get("title", path.stem),
            "type": post.get("type", "unknown"),
            "created": _iso(post.get("created")),
            "tags": post.get("tags") or [],
            "preview": post.content[:PREVIEW_LENGTH] if post.content else "",
        }
        for field in MOOD_FIELDS:
            summary[field] = post.get(field)
        summary["emotions"] = summary["emotions"] or []
        return summary

    def list_entries(
        self,
        entry_type: Optional[str] = None,
        tags: Optional[list[str]] = None,
        limit: int = 50,
    ) -> list[dict]:
        """List entry summaries, newest first.

        Args:
            entry_type: Only entries of this type
            tags: Only entries carrying at least one of these tags
            limit: Max entries returned
        """
        entries = []
        # Filenames start with the date, so reverse name order is newest first
        for path in sorted(self.journal_dir.glob("*.md"), reverse=True):
            if len(entries) >= limit:
                break
            try:
                entry = self._summarize(path, frontmatter.load(path))
            except (OSError, ValueError) as e:
                logger.warning("journal.entry_unreadable", filename=path.name, error=str(e))
                continue

            if entry_type and entry["type"] != entry_type:
                continue
            if tags and not set(tags) & set(entry["tags"]):
                continue
            entries.append(entry)

        return entries
