"""Domain models for the registrant extraction tool.

This package contains the record types produced from export rows and the
result/statistics models used by the orchestration layer.
"""

from .config_models import CategoryLabels, ExtractConfig
from .error_record import ErrorRecord
from .processing_result import ALL_EVENTS, ExtractionResult, FileStat, RunResult
from .records import (
    Category,
    ClassifiedRow,
    ExportFormat,
    IftarRecord,
    ProgrammingRecord,
    RawRow,
    RegistrantRecord,
)

__all__ = [
    # Configuration models
    "CategoryLabels",
    "ExtractConfig",
    # Record models
    "Category",
    "ClassifiedRow",
    "ExportFormat",
    "IftarRecord",
    "ProgrammingRecord",
    "RawRow",
    "RegistrantRecord",
    # Processing models
    "ALL_EVENTS",
    "ErrorRecord",
    "ExtractionResult",
    "FileStat",
    "RunResult",
]
