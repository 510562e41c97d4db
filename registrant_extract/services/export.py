from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from pathlib import Path

from ..models.processing_result import ALL_EVENTS
from ..models.records import Category, IftarRecord, ProgrammingRecord, RegistrantRecord

"""Tab-separated export of extracted records.

The output is meant to be pasted into a spreadsheet: one header row, one line
per record, no quoting. Tabs and line breaks inside a value would shift
columns, so each one becomes a space.
"""

__all__ = [
    "IFTAR_HEADERS",
    "PROGRAMMING_HEADERS",
    "clean_cell",
    "filter_records",
    "render_tsv",
    "write_tsv",
]

IFTAR_HEADERS = ("#", "Full Name", "Email", "Dietary Restrictions")
PROGRAMMING_HEADERS = (
    "Full Name", "Email", "Gender", "Status", "Year", "Photo Consent", "Accessibility",
)

_CONTROL_RE = re.compile(r"[\t\n\r]")


def clean_cell(value: str | None) -> str:
    return _CONTROL_RE.sub(" ", value or "").strip()


def filter_records(records: Iterable[RegistrantRecord], event: str = ALL_EVENTS) -> list:
    """Records for one event; ``"all"`` keeps every record."""
    if event == ALL_EVENTS:
        return list(records)
    return [r for r in records if r.event == event]


def _iftar_rows(records: Sequence[IftarRecord]) -> list[list[str]]:
    # Iftar lists carry a visible 1-based position
    return [
        [str(i), clean_cell(r.full_name), clean_cell(r.email), clean_cell(r.dietary_restrictions)]
        for i, r in enumerate(records, start=1)
    ]


def _programming_rows(records: Sequence[ProgrammingRecord]) -> list[list[str]]:
    return [
        [
            clean_cell(r.full_name),
            clean_cell(r.email),
            clean_cell(r.gender),
            clean_cell(r.status),
            clean_cell(r.year),
            clean_cell(r.photo_consent),
            clean_cell(r.accessibility),
        ]
        for r in records
    ]


def render_tsv(category: Category, records: Sequence[RegistrantRecord]) -> str:
    if category is Category.IFTAR:
        headers = IFTAR_HEADERS
        rows = _iftar_rows(records)  # type: ignore[arg-type]
    else:
        headers = PROGRAMMING_HEADERS
        rows = _programming_rows(records)  # type: ignore[arg-type]
    lines = ["\t".join(headers)]
    lines.extend("\t".join(row) for row in rows)
    return "\n".join(lines)


def write_tsv(path: Path, category: Category, records: Sequence[RegistrantRecord]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_tsv(category, records) + "\n", encoding="utf-8")
    return path
