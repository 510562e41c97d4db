from __future__ import annotations

import logging
from collections.abc import Sequence

from ..extract.classifier import extract_row
from ..extract.format_detector import detect_rows_format
from ..models.config_models import CategoryLabels
from ..models.processing_result import ALL_EVENTS, ExtractionResult
from ..models.records import Category, IftarRecord, ProgrammingRecord, RawRow, RegistrantRecord

"""Record accumulation and the single extraction pass.

A RecordAccumulator is owned by one pass over one row table and is frozen
into an ExtractionResult at the end, so nothing is shared between runs.
"""

__all__ = [
    "RecordAccumulator",
    "extract_rows",
]

logger = logging.getLogger(__name__)


class RecordAccumulator:
    """Collects records per category and the distinct events seen for each."""

    def __init__(self) -> None:
        self._iftar: list[IftarRecord] = []
        self._programming: list[ProgrammingRecord] = []
        # dict keeps insertion order, used as an ordered set
        self._events: dict[Category, dict[str, None]] = {
            Category.IFTAR: {},
            Category.PROGRAMMING: {},
        }

    def add(self, record: RegistrantRecord) -> None:
        if isinstance(record, IftarRecord):
            self._iftar.append(record)
        else:
            self._programming.append(record)
        if record.event:
            self._events[record.category].setdefault(record.event, None)

    def records(
        self, category: Category, event: str = ALL_EVENTS
    ) -> list[IftarRecord] | list[ProgrammingRecord]:
        pool: list = self._iftar if category is Category.IFTAR else self._programming
        if event == ALL_EVENTS:
            return list(pool)
        return [r for r in pool if r.event == event]

    def events(self, category: Category) -> list[str]:
        return list(self._events[category])

    def __len__(self) -> int:
        return len(self._iftar) + len(self._programming)

    def freeze(self, **extra: object) -> ExtractionResult:
        return ExtractionResult(
            iftar_records=tuple(self._iftar),
            programming_records=tuple(self._programming),
            iftar_events=tuple(self._events[Category.IFTAR]),
            programming_events=tuple(self._events[Category.PROGRAMMING]),
            **extra,  # type: ignore[arg-type]
        )


def extract_rows(rows: Sequence[RawRow], labels: CategoryLabels | None = None) -> ExtractionResult:
    """Run format detection and per-row extraction over a full row table.

    An empty table yields an empty result with no detected format.
    """
    fmt = detect_rows_format(rows)
    if fmt is None:
        return ExtractionResult()

    acc = RecordAccumulator()
    skipped = 0
    for index, row in enumerate(rows, start=1):
        record = extract_row(row, fmt, labels)
        if record is None:
            skipped += 1
            logger.debug(f"row {index}: skipped (no modifiers or no category)")
            continue
        acc.add(record)

    logger.debug(
        f"format={fmt.value} rows={len(rows)} records={len(acc)} skipped={skipped}"
    )
    return acc.freeze(detected_format=fmt, total_rows=len(rows), skipped_rows=skipped)
