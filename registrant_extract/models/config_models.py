from __future__ import annotations

from dataclasses import dataclass, field

"""Config dataclasses for the registrant extraction tool.

These are the typed form of ``config/extract.yml``; parsing and validation
live in registrant_extract.config.loader.
"""

DEFAULT_IFTAR_CATEGORY = "Ramadan Iftars 2026"
DEFAULT_PROGRAMMING_CATEGORY = "Ramadan Programming 2026"


@dataclass(frozen=True)
class CategoryLabels:
    """Exact ``Category`` column values used by the legacy items export."""
    iftar: str = DEFAULT_IFTAR_CATEGORY
    programming: str = DEFAULT_PROGRAMMING_CATEGORY


@dataclass(frozen=True)
class ExtractConfig:
    """Root configuration object for an extraction run."""
    source_directory: str  # Directory scanned for *.csv exports
    output_directory: str = "./out"  # Where TSV files are written
    encoding: str = "utf-8-sig"  # CSV text encoding (BOM tolerant)
    legacy_categories: CategoryLabels = field(default_factory=CategoryLabels)
