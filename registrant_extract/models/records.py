from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Union

"""Registrant domain models.

Rows of a point-of-sale export are classified into one of two categories and
turned into immutable records. Every field is a string and defaults to "",
never None, so that records can be rendered and exported without checks.
"""

__all__ = [
    "RawRow",
    "ExportFormat",
    "Category",
    "ClassifiedRow",
    "IftarRecord",
    "ProgrammingRecord",
    "RegistrantRecord",
]

RawRow = Mapping[str, str]


class ExportFormat(Enum):
    """Column layout of an export file, detected once per file.

    - LEGACY: "items" export (Category, Item, Modifiers Applied)
    - ORDERS_V2: "orders" export (Item Name, Item Modifiers, Recipient *)
    """
    LEGACY = "legacy"
    ORDERS_V2 = "orders_v2"


class Category(Enum):
    IFTAR = "iftar"
    PROGRAMMING = "programming"


@dataclass(frozen=True)
class ClassifiedRow:
    """A row that passed classification and is ready for field extraction."""
    category: Category
    item: str  # Item / Item Name, becomes the record's event
    modifiers: str  # Non-empty, trimmed modifier string
    fallback_name: str = ""  # Recipient Name (OrdersV2 only)
    fallback_email: str = ""  # Recipient Email (OrdersV2 only)


@dataclass(frozen=True)
class IftarRecord:
    full_name: str = ""
    email: str = ""
    dietary_restrictions: str = ""
    event: str = ""

    category = Category.IFTAR


@dataclass(frozen=True)
class ProgrammingRecord:
    full_name: str = ""
    email: str = ""
    gender: str = ""  # Optional in the positional grammar
    status: str = ""
    year: str = ""  # Optional in the positional grammar
    photo_consent: str = ""
    accessibility: str = ""
    event: str = ""

    category = Category.PROGRAMMING


RegistrantRecord = Union[IftarRecord, ProgrammingRecord]
