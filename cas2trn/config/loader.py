from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.column_mapping import ColumnMapping

"""Column mapping configuration loader.

Responsibilities:
- Load a YAML mapping file (``--config`` / CAS2TRN_CONFIG)
- Validate its shape against config/mapping_schema.json (types, known keys)
- Merge file values with command-line overrides into a ColumnMapping

Range and combination rules (field count 3-20, unique indexes, amount source,
...) are NOT in the schema: MappingValidator owns them so that a mapping gets
the same error whether it came from flags or from a file.

Example file::

    field_count: 5
    date_index: 1
    date_format: DD/MM/YYYY
    memo_index: 2
    debit_index: 3
    credit_index: 4
    this_account: Assets:Current:PCUS1
"""

__all__ = [
    "ConfigError",
    "SCHEMA_PATH",
    "load_config",
    "build_mapping",
]

SCHEMA_PATH = Path(__file__).with_name("mapping_schema.json")


class ConfigError(Exception):
    pass


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: the schema file is missing or not valid JSON, or the data
            fails validation (wrong types, unknown keys, negative indexes)
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


def load_config(path: Path) -> dict[str, Any]:
    """Read and validate a YAML mapping file, returning its key/values."""
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"config must be a mapping, got {type(data).__name__}")

    _validate_config_schema(data)
    return data


def build_mapping(
    file_values: Mapping[str, Any] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> ColumnMapping:
    """Merge file values and overrides (None == not given) into a ColumnMapping.

    An override wins over the file; keys set nowhere fall back to 0 / "".
    """
    merged: dict[str, Any] = dict(file_values or {})
    for key, value in (overrides or {}).items():
        if value is not None:
            merged[key] = value
    return ColumnMapping.from_values(merged)
