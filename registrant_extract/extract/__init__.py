"""Row-to-record extraction: format detection, splitting, labeled and positional fields."""

from .classifier import build_record, classify_row, extract_row
from .format_detector import detect_format, detect_rows_format
from .labeled import LABEL_RULES, LabeledFields, LabelRule, extract_labeled
from .positional import ParseState, PositionalFields, parse_positional
from .splitter import split_modifiers

__all__ = [
    "LABEL_RULES",
    "LabelRule",
    "LabeledFields",
    "ParseState",
    "PositionalFields",
    "build_record",
    "classify_row",
    "detect_format",
    "detect_rows_format",
    "extract_labeled",
    "extract_row",
    "parse_positional",
    "split_modifiers",
]
