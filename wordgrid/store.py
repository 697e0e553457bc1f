import json
import logging
import os
import tempfile
from datetime import date, datetime
from pathlib import Path
from zoneinfo import ZoneInfo

from wordgrid.generator import PuzzleRecord

logger = logging.getLogger("wordgrid")


def puzzle_date(tz_name: str, now: datetime | None = None) -> str:
    """Calendar date (YYYY-MM-DD) in the given time zone."""
    now = now or datetime.now(ZoneInfo("UTC"))
    return now.astimezone(ZoneInfo(tz_name)).date().isoformat()


def _check_date(date_str: str) -> str:
    try:
        parsed = date.fromisoformat(date_str)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid puzzle date {date_str!r}, expected YYYY-MM-DD") from None
    if parsed.isoformat() != date_str:
        raise ValueError(f"Invalid puzzle date {date_str!r}, expected YYYY-MM-DD")
    return date_str


class PuzzleStore:
    """One JSON document per day under a directory, keyed by date."""

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def path_for(self, date_str: str) -> Path:
        return self.directory / f"{_check_date(date_str)}.json"

    def save(self, date_str: str, record: PuzzleRecord) -> Path:
        path = self.path_for(date_str)
        self.directory.mkdir(parents=True, exist_ok=True)
        # One temp file per writer; concurrent saves of a date must not share it
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=self.directory, prefix=f"{date_str}.", suffix=".json.tmp", delete=False,
        ) as f:
            json.dump(record.to_dict(), f, indent=2)
        os.replace(f.name, path)
        logger.info("Saved puzzle for %s to %s", date_str, path)
        return path

    def load(self, date_str: str) -> dict | None:
        path = self.path_for(date_str)
        if not path.exists():
            return None
        with open(path, encoding="utf-8") as f:
            return json.load(f)

    def dates(self) -> list[str]:
        if not self.directory.exists():
            return []
        return sorted(p.stem for p in self.directory.glob("*.json"))
