from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

"""Positional parsing of unlabeled Programming answers.

After labeled fields are removed, the remaining clauses follow a fixed order:

    [Gender], Status, [Year], Photo Consent

Gender may be absent for single-gender events, Year for graduates or "Other"
status. Order is the only signal, so the cursor moves strictly left to right
and never backtracks. A status that happens to equal a gender word, or the
literal "Yes", is misread without any error.
"""

__all__ = [
    "GENDER_VALUES",
    "ParseState",
    "PositionalFields",
    "is_gender",
    "is_year",
    "is_yes_no",
    "is_status",
    "parse_positional",
]

GENDER_VALUES = frozenset({"male", "female", "non-binary", "nonbinary", "prefer not to say"})

_YEAR_RE = re.compile(r"^\d\+?$")
_YES_NO_RE = re.compile(r"^(yes|no)$", re.IGNORECASE)


class ParseState(Enum):
    AWAIT_GENDER = "await_gender"
    AWAIT_STATUS = "await_status"
    AWAIT_YEAR = "await_year"
    AWAIT_PHOTO_CONSENT = "await_photo_consent"
    DONE = "done"


@dataclass(frozen=True)
class PositionalFields:
    gender: str = ""
    status: str = ""
    year: str = ""
    photo_consent: str = ""
    dropped: tuple[str, ...] = ()  # Clauses left after the grammar finished


def is_gender(clause: str) -> bool:
    return clause.lower() in GENDER_VALUES


def is_year(clause: str) -> bool:
    return _YEAR_RE.match(clause) is not None


def is_yes_no(clause: str) -> bool:
    return _YES_NO_RE.match(clause) is not None


def is_status(clause: str) -> bool:
    # No vocabulary: whatever is not a year or a yes/no answer
    return not is_year(clause) and not is_yes_no(clause)


# state -> (field filled on a match, guard, next state)
_TRANSITIONS = {
    ParseState.AWAIT_GENDER: ("gender", is_gender, ParseState.AWAIT_STATUS),
    ParseState.AWAIT_STATUS: ("status", is_status, ParseState.AWAIT_YEAR),
    ParseState.AWAIT_YEAR: ("year", is_year, ParseState.AWAIT_PHOTO_CONSENT),
    ParseState.AWAIT_PHOTO_CONSENT: ("photo_consent", is_yes_no, ParseState.DONE),
}


def parse_positional(clauses: Sequence[str]) -> PositionalFields:
    """Assign unlabeled clauses to gender/status/year/photo consent.

    Each state looks at the clause under the cursor only. On a guard match the
    clause is consumed; either way the machine moves to the next state.
    """
    values: dict[str, str] = {}
    cursor = 0
    state = ParseState.AWAIT_GENDER
    while state is not ParseState.DONE:
        field_name, guard, next_state = _TRANSITIONS[state]
        if cursor < len(clauses) and guard(clauses[cursor]):
            values[field_name] = clauses[cursor]
            cursor += 1
        state = next_state
    return PositionalFields(dropped=tuple(clauses[cursor:]), **values)
