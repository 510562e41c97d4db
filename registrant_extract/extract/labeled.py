from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from ..models.records import Category

"""Labeled field extraction.

Clauses are matched against an ordered list of rules, first match wins. A
matched clause leaves the unlabeled pool even when its rule stores nothing
(phone numbers) or finds no value (a dietary question without an answer).
When a rule matches several clauses, the last one's value is kept.
"""

__all__ = [
    "LabelRule",
    "LabeledFields",
    "LABEL_RULES",
    "rules_for",
    "extract_labeled",
]

_BOTH = frozenset({Category.IFTAR, Category.PROGRAMMING})

_FULL_NAME_RE = re.compile(r"^Full Name:\s*", re.IGNORECASE)
_ACCESSIBILITY_RE = re.compile(r"^Accessibility Needs?:\s*", re.IGNORECASE)
_EMAIL_LABEL_RE = re.compile(r"^Email:", re.IGNORECASE)
_CONFIRM_EMAIL_LABEL_RE = re.compile(r"^Confirm Email:", re.IGNORECASE)
_CONFIRM_EMAIL_PREFIX_RE = re.compile(r"^Confirm Email:\s*", re.IGNORECASE)
_EMAIL_PREFIX_RE = re.compile(r"^Email:\s*", re.IGNORECASE)
_DIETARY_RE = re.compile(r"dietary|food allerg", re.IGNORECASE)
_PHONE_LABEL_RE = re.compile(r"^Phone Number:", re.IGNORECASE)
_PHONE_DIGITS_RE = re.compile(r"^\d[\d\s-]{6,}$")

ANSWER_SEPARATOR = ": "


@dataclass(frozen=True)
class LabelRule:
    """One (predicate, extractor) pair of the labeled-field cascade.

    ``field`` is the record attribute the value goes to; None discards the
    clause. ``extract`` may return None to consume without assigning.
    """
    name: str
    field: str | None
    matches: Callable[[str], bool]
    extract: Callable[[str], str | None]
    categories: frozenset[Category] = _BOTH


@dataclass(frozen=True)
class LabeledFields:
    values: dict[str, str]
    unlabeled: tuple[str, ...]


def _is_full_name(clause: str) -> bool:
    return _FULL_NAME_RE.match(clause) is not None


def _full_name_value(clause: str) -> str:
    return _FULL_NAME_RE.sub("", clause, count=1).strip()


def _is_accessibility(clause: str) -> bool:
    return _ACCESSIBILITY_RE.match(clause) is not None


def _accessibility_value(clause: str) -> str:
    return _ACCESSIBILITY_RE.sub("", clause, count=1).strip()


def _is_email(clause: str) -> bool:
    # Some exports carry a bare address with no label
    return (
        _EMAIL_LABEL_RE.match(clause) is not None
        or _CONFIRM_EMAIL_LABEL_RE.match(clause) is not None
        or "@" in clause
    )


def _email_value(clause: str) -> str:
    value = _CONFIRM_EMAIL_PREFIX_RE.sub("", clause, count=1)
    value = _EMAIL_PREFIX_RE.sub("", value, count=1)
    return value.strip()


def _is_dietary(clause: str) -> bool:
    return _DIETARY_RE.search(clause) is not None


def _dietary_value(clause: str) -> str | None:
    # The question text may itself contain ": ", the answer follows the last one
    idx = clause.rfind(ANSWER_SEPARATOR)
    if idx == -1:
        return None
    return clause[idx + len(ANSWER_SEPARATOR):].strip()


def _is_phone(clause: str) -> bool:
    return _PHONE_LABEL_RE.match(clause) is not None or _PHONE_DIGITS_RE.match(clause) is not None


def _discard(clause: str) -> None:
    return None


LABEL_RULES: tuple[LabelRule, ...] = (
    LabelRule("full_name", "full_name", _is_full_name, _full_name_value),
    LabelRule(
        "accessibility", "accessibility", _is_accessibility, _accessibility_value,
        frozenset({Category.PROGRAMMING}),
    ),
    LabelRule("email", "email", _is_email, _email_value),
    LabelRule(
        "dietary", "dietary_restrictions", _is_dietary, _dietary_value,
        frozenset({Category.IFTAR}),
    ),
    LabelRule("phone", None, _is_phone, _discard),
)


def rules_for(category: Category) -> tuple[LabelRule, ...]:
    """Rules active for a category, in evaluation order."""
    return tuple(rule for rule in LABEL_RULES if category in rule.categories)


def extract_labeled(clauses: Iterable[str], category: Category) -> LabeledFields:
    """Pull labeled values out of ``clauses``, keeping the rest in order."""
    rules = rules_for(category)
    values: dict[str, str] = {}
    unlabeled: list[str] = []
    for clause in clauses:
        clause = clause.strip()
        if not clause:
            continue
        for rule in rules:
            if rule.matches(clause):
                value = rule.extract(clause)
                if rule.field is not None and value is not None:
                    values[rule.field] = value
                break
        else:
            unlabeled.append(clause)
    return LabeledFields(values=values, unlabeled=tuple(unlabeled))
