from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..models.records import ExportFormat, RawRow

__all__ = [
    "ORDERS_V2_MARKER",
    "detect_format",
    "detect_rows_format",
]

# Only the orders export has this column
ORDERS_V2_MARKER = "Item Name"


def detect_format(first_row_keys: Iterable[str]) -> ExportFormat:
    """Decide the export layout from the column names of the first row."""
    if ORDERS_V2_MARKER in set(first_row_keys):
        return ExportFormat.ORDERS_V2
    return ExportFormat.LEGACY


def detect_rows_format(rows: Sequence[RawRow]) -> ExportFormat | None:
    """Detect the layout of a row table; None for an empty table."""
    if not rows:
        return None
    return detect_format(rows[0].keys())
