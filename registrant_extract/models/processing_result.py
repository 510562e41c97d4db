from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from .records import Category, ExportFormat, IftarRecord, ProgrammingRecord

"""Result models for extraction runs.

ExtractionResult is the output of one pass over a file's rows. FileStat and
RunResult aggregate per-file and per-run metrics for the SUMMARY line.
"""

ALL_EVENTS = "all"


@dataclass(frozen=True)
class ExtractionResult:
    """Immutable output of a single extraction pass over one row table."""
    iftar_records: tuple[IftarRecord, ...] = ()
    programming_records: tuple[ProgrammingRecord, ...] = ()
    iftar_events: tuple[str, ...] = ()  # Distinct non-empty items, first-seen order
    programming_events: tuple[str, ...] = ()
    detected_format: ExportFormat | None = None  # None when the row set was empty
    total_rows: int = 0
    skipped_rows: int = 0  # Rows without modifiers or without a category

    def records(
        self, category: Category, event: str = ALL_EVENTS
    ) -> tuple[IftarRecord, ...] | tuple[ProgrammingRecord, ...]:
        """Records of one category, optionally restricted to a single event."""
        pool = self.iftar_records if category is Category.IFTAR else self.programming_records
        if event == ALL_EVENTS:
            return pool
        return tuple(r for r in pool if r.event == event)  # type: ignore[return-value]

    def events(self, category: Category) -> tuple[str, ...]:
        return self.iftar_events if category is Category.IFTAR else self.programming_events


@dataclass(frozen=True)
class FileStat:
    """Per-file processing statistics."""
    file_name: str
    status: str  # success/failed
    iftar_rows: int = 0
    programming_rows: int = 0
    skipped_rows: int = 0
    elapsed_seconds: float = 0.0
    detected_format: str | None = None
    outputs: list[Path] = field(default_factory=list)
    error: str | None = None  # Failure reason summary


@dataclass(frozen=True)
class RunResult:
    """Aggregated results for the SUMMARY output line."""
    success_files: int
    failed_files: int
    iftar_rows: int
    programming_rows: int
    skipped_rows: int
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    file_stats: list[FileStat] | None = None
