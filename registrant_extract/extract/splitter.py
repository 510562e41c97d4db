from __future__ import annotations

import re

"""Modifier string splitting.

Two clause styles exist and the choice is made per string, not per file:

    quantity-prefixed:  "1 x Full Name: X, 1 x Male, 1 x Yes"
    plain:              "Full Name: X, Male, Yes"
"""

__all__ = [
    "split_modifiers",
    "is_quantity_prefixed",
]

_QUANTITY_PREFIX_RE = re.compile(r"^1\s*x\s", re.IGNORECASE)
_QUANTITY_SEPARATOR_RE = re.compile(r",\s*1\s*x\s", re.IGNORECASE)
_PLAIN_SEPARATOR_RE = re.compile(r",\s*")


def is_quantity_prefixed(text: str) -> bool:
    return _QUANTITY_PREFIX_RE.match(text) is not None


def split_modifiers(text: str) -> list[str]:
    """Split a modifier string into ordered, trimmed, non-empty clauses."""
    if is_quantity_prefixed(text):
        body = _QUANTITY_PREFIX_RE.sub("", text, count=1)
        parts = _QUANTITY_SEPARATOR_RE.split(body)
    else:
        parts = _PLAIN_SEPARATOR_RE.split(text)
    clauses = []
    for part in parts:
        clause = part.strip()
        if clause:
            clauses.append(clause)
    return clauses
