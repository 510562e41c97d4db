from __future__ import annotations

from ..models.config_models import CategoryLabels
from ..models.records import (
    Category,
    ClassifiedRow,
    ExportFormat,
    IftarRecord,
    ProgrammingRecord,
    RawRow,
    RegistrantRecord,
)
from .labeled import extract_labeled
from .positional import parse_positional
from .splitter import split_modifiers

"""Row classification and record construction.

``extract_row`` is a pure function of one row, the detected export format and
the legacy category labels. It returns a record or None when the row is
skipped (no modifiers, no category). Skips are not errors.
"""

__all__ = [
    "IFTAR_KEYWORD",
    "classify_row",
    "build_record",
    "extract_row",
]

IFTAR_KEYWORD = "iftar"

# Column names per export layout
ORDERS_ITEM = "Item Name"
ORDERS_MODIFIERS = "Item Modifiers"
ORDERS_RECIPIENT_EMAIL = "Recipient Email"
ORDERS_RECIPIENT_NAME = "Recipient Name"
LEGACY_CATEGORY = "Category"
LEGACY_ITEM = "Item"
LEGACY_MODIFIERS = "Modifiers Applied"


def _cell(row: RawRow, column: str) -> str:
    value = row.get(column)
    if value is None:
        return ""
    return str(value).strip()


def classify_row(
    row: RawRow, fmt: ExportFormat, labels: CategoryLabels | None = None
) -> ClassifiedRow | None:
    """Decide the category of a row and collect its source fields."""
    category: Category | None
    if fmt is ExportFormat.ORDERS_V2:
        item = _cell(row, ORDERS_ITEM)
        modifiers = _cell(row, ORDERS_MODIFIERS)
        fallback_email = _cell(row, ORDERS_RECIPIENT_EMAIL)
        fallback_name = _cell(row, ORDERS_RECIPIENT_NAME)
        if IFTAR_KEYWORD in item.lower():
            category = Category.IFTAR
        elif item:
            category = Category.PROGRAMMING
        else:
            category = None
    else:
        labels = labels or CategoryLabels()
        raw_category = _cell(row, LEGACY_CATEGORY)
        item = _cell(row, LEGACY_ITEM)
        modifiers = _cell(row, LEGACY_MODIFIERS)
        fallback_email = ""
        fallback_name = ""
        if raw_category == labels.iftar:
            category = Category.IFTAR
        elif raw_category == labels.programming:
            category = Category.PROGRAMMING
        else:
            category = None

    if not modifiers or category is None:
        return None
    return ClassifiedRow(
        category=category,
        item=item,
        modifiers=modifiers,
        fallback_name=fallback_name,
        fallback_email=fallback_email,
    )


def build_record(classified: ClassifiedRow) -> RegistrantRecord:
    """Split and extract the modifier string of a classified row."""
    clauses = split_modifiers(classified.modifiers)
    labeled = extract_labeled(clauses, classified.category)
    full_name = labeled.values.get("full_name") or classified.fallback_name
    email = labeled.values.get("email") or classified.fallback_email

    if classified.category is Category.IFTAR:
        # Leftover clauses (acknowledgment tokens) carry no field
        return IftarRecord(
            full_name=full_name,
            email=email,
            dietary_restrictions=labeled.values.get("dietary_restrictions", ""),
            event=classified.item,
        )

    positional = parse_positional(labeled.unlabeled)
    return ProgrammingRecord(
        full_name=full_name,
        email=email,
        gender=positional.gender,
        status=positional.status,
        year=positional.year,
        photo_consent=positional.photo_consent,
        accessibility=labeled.values.get("accessibility", ""),
        event=classified.item,
    )


def extract_row(
    row: RawRow, fmt: ExportFormat, labels: CategoryLabels | None = None
) -> RegistrantRecord | None:
    classified = classify_row(row, fmt, labels)
    if classified is None:
        return None
    return build_record(classified)
