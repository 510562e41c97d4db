from __future__ import annotations

import codecs
import json
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.config_models import CategoryLabels, ExtractConfig

"""Config loader.

Responsibilities:
- Load YAML config (config/extract.yml by default)
- Validate against the bundled JSON schema (unknown keys rejected)
- Apply defaults for optional keys
- Reject text encodings Python has no codec for
"""

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "SCHEMA_PATH",
    "default_config",
    "load_config",
]

DEFAULT_CONFIG_PATH = Path("config/extract.yml")
SCHEMA_PATH = Path(__file__).parent / "config_schema.json"


class ConfigError(Exception):
    pass


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: If the schema file is missing or not valid JSON, or the
            config data fails validation (missing or unknown keys, wrong types).
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def default_config() -> ExtractConfig:
    return ExtractConfig(source_directory="./data")


def load_config(path: Path) -> ExtractConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping: {path}")

    _validate_config_schema(data)

    defaults = default_config()
    labels_raw = data.get("legacy_categories", {})
    labels = CategoryLabels(
        iftar=labels_raw.get("iftar", defaults.legacy_categories.iftar),
        programming=labels_raw.get("programming", defaults.legacy_categories.programming),
    )
    encoding = data.get("encoding", defaults.encoding)
    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise ConfigError(f"unknown encoding: {encoding}") from e

    return ExtractConfig(
        source_directory=data["source_directory"],
        output_directory=data.get("output_directory", defaults.output_directory),
        encoding=encoding,
        legacy_categories=labels,
    )
