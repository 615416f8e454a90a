"""Analysis history persisted as a JSON file."""

import logging
from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from snipcheck.models import Language, ReviewReport, Severity
from snipcheck.rules.engine import severity_counts

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 20
SUMMARY_LENGTH = 50


class HistoryError(Exception):
  """History file could not be read or written."""


class SeverityStats(BaseModel):
  critical: int = 0
  high: int = 0
  medium: int = 0
  low: int = 0


class HistoryEntry(BaseModel):
  """Summary of one past analysis. Findings themselves are not stored."""

  timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
  code: str
  language: Language
  summary: str
  stats: SeverityStats

  @classmethod
  def from_report(cls, report: ReviewReport) -> "HistoryEntry":
    counts = severity_counts(report.findings)
    return cls(
      code=report.source,
      language=report.language,
      summary=report.source[:SUMMARY_LENGTH] + "...",
      stats=SeverityStats(**{sev.value: counts[sev] for sev in Severity}),
    )


_entries_adapter = TypeAdapter(list[HistoryEntry])


def default_history_path() -> Path:
  return Path.home() / ".snipcheck" / "history.json"


class HistoryStore:
  """Newest-first list of history entries, capped at ``limit``.

  New entries go to the head; once the cap is exceeded the oldest entry at
  the tail is dropped.
  """

  def __init__(self, path: Path | None = None, limit: int = DEFAULT_LIMIT):
    if limit < 1:
      raise ValueError("History limit must be at least 1")
    self.path = path or default_history_path()
    self.limit = limit

  def load(self) -> list[HistoryEntry]:
    """Read all entries, newest first. A missing file means no history."""
    if not self.path.exists():
      return []

    try:
      raw = self.path.read_text()
      entries = _entries_adapter.validate_json(raw) if raw.strip() else []
    except (OSError, ValidationError) as e:
      raise HistoryError(f"Cannot read history {self.path}: {e}") from e

    return entries[:self.limit]

  def record(self, entry: HistoryEntry) -> list[HistoryEntry]:
    """Add an entry at the head and persist. Returns the stored entries."""
    entries = [entry, *self.load()][:self.limit]
    self._save(entries)
    logger.debug("Recorded history entry (%d stored)", len(entries))
    return entries

  def clear(self) -> None:
    if self.path.exists():
      try:
        self.path.unlink()
      except OSError as e:
        raise HistoryError(f"Cannot clear history {self.path}: {e}") from e

  def _save(self, entries: list[HistoryEntry]) -> None:
    # Atomic swap: readers see either the old list or the new one
    tmp = self.path.with_name(self.path.name + ".tmp")
    try:
      self.path.parent.mkdir(parents=True, exist_ok=True)
      tmp.write_bytes(_entries_adapter.dump_json(entries, indent=2))
      tmp.replace(self.path)
    except OSError as e:
      tmp.unlink(missing_ok=True)
      raise HistoryError(f"Cannot write history {self.path}: {e}") from e
