"""Export journal entries (with their mood fields) to JSON, Markdown or CSV."""

import csv
import json
from datetime import datetime, timedelta
from pathlib import Path
from typing import Callable, Optional, TextIO

import structlog

from .forecast import to_local_datetime
from .storage import JournalStorage

logger = structlog.get_logger()

CSV_FIELDS = ["date", "title", "type", "sentiment", "score", "emotions", "tags", "content"]
MAX_EXPORT = 1000


def _day(record: dict) -> str:
    return record["created"][:10] if record.get("created") else ""


def _write_json(f: TextIO, records: list[dict]) -> None:
    json.dump(
        {"exported_at": datetime.now().isoformat(), "count": len(records), "entries": records},
        f,
        indent=2,
        default=str,
    )


def _mood_line(record: dict) -> str:
    line = f"**Type:** {record['type']} | **Date:** {_day(record) or 'N/A'}"
    if record.get("sentiment"):
        line += f" | **Mood:** {record['sentiment']}"
        if record.get("score") is not None:
            line += f" ({record['score']:+.2f})"
    return line


def _write_markdown(f: TextIO, records: list[dict]) -> None:
    parts = [
        "# Mood Journal Export\n",
        f"Exported: {datetime.now():%Y-%m-%d %H:%M}",
        f"Entries: {len(records)}\n",
        "---\n",
    ]
    for record in records:
        parts.append(f"## {record['title']}\n")
        parts.append(_mood_line(record))
        if record.get("tags"):
            parts.append(f"**Tags:** {', '.join(record['tags'])}")
        parts.append(f"\n{record['content']}\n")
        parts.append("---\n")
    f.write("\n".join(parts))


def _write_csv(f: TextIO, records: list[dict]) -> None:
    writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
    writer.writeheader()
    for record in records:
        writer.writerow({
            "date": _day(record),
            "title": record["title"],
            "type": record["type"],
            "sentiment": record.get("sentiment") or "",
            "score": "" if record.get("score") is None else record["score"],
            "emotions": ", ".join(record["emotions"]),
            "tags": ", ".join(record["tags"]),
            "content": record["content"],
        })


class JournalExporter:
    """Export journal entries to various formats.

    Every export method takes the same filters and returns the number of
    entries written:

        entry_type: only entries of this type
        days: only entries created in the last N days (undated entries kept)
        limit: max entries, newest first
    """

    def __init__(self, storage: JournalStorage):
        self.storage = storage

    def export_json(self, output_path: Path, entry_type=None, days=None, limit=None) -> int:
        """Export entries to JSON: {exported_at, count, entries}."""
        return self._export("json", _write_json, output_path, entry_type, days, limit)

    def export_markdown(self, output_path: Path, entry_type=None, days=None, limit=None) -> int:
        """Export entries to a single Markdown document."""
        return self._export("markdown", _write_markdown, output_path, entry_type, days, limit)

    def export_csv(self, output_path: Path, entry_type=None, days=None, limit=None) -> int:
        """Export entries to CSV, one row per entry."""
        return self._export("csv", _write_csv, output_path, entry_type, days, limit)

    def _export(
        self,
        fmt: str,
        writer: Callable[[TextIO, list[dict]], None],
        output_path: Path,
        entry_type: Optional[str],
        days: Optional[int],
        limit: Optional[int],
    ) -> int:
        records = self._records(entry_type, days, limit)

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", newline="" if fmt == "csv" else None) as f:
            writer(f, records)

        logger.info("export.written", format=fmt, path=str(output_path), count=len(records))
        return len(records)

    def _records(
        self,
        entry_type: Optional[str],
        days: Optional[int],
        limit: Optional[int],
    ) -> list[dict]:
        """Filtered entries with full content."""
        entries = self.storage.list_entries(entry_type=entry_type, limit=limit or MAX_EXPORT)

        cutoff = datetime.now() - timedelta(days=days) if days else None
        records = []
        for entry in entries:
            created = to_local_datetime(entry.get("created"))
            if cutoff and created is not None and created < cutoff:
                continue
            try:
                content = self.storage.read(entry["path"]).content
            except (OSError, ValueError) as e:
                logger.warning("export.entry_skipped", path=str(entry["path"]), error=str(e))
                continue
            records.append({
                "title": entry["title"],
                "type": entry["type"],
                "created": entry.get("created"),
                "tags": entry["tags"],
                "score": entry.get("score"),
                "sentiment": entry.get("sentiment"),
                "emotions": entry["emotions"],
                "content": content,
            })
        return records
