from __future__ import annotations

import json

import jsonschema
import pytest

from cas2trn.models.error_record import ErrorRecord

"""Rejected-record log JSON schema contract test."""

ERROR_LOG_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": False,
    "required": ["timestamp", "source", "line", "error_type", "message"],
    "properties": {
        "timestamp": {"type": "string", "pattern": "^[0-9]{4}-[0-9]{2}-[0-9]{2}T.*Z$"},
        "source": {"type": "string"},
        "line": {"type": "integer", "minimum": -1},
        "error_type": {"type": "string", "pattern": "^[A-Z_]+$"},
        "message": {"type": "string"},
    },
}


def test_error_log_entry_matches_schema():
    record = ErrorRecord.create("pcu.csv", 1, "DATE_PARSE_ERROR", "transact: cannot parse date")
    jsonschema.validate(json.loads(record.to_json_line()), ERROR_LOG_SCHEMA)


def test_statement_level_entry_matches_schema():
    record = ErrorRecord.create("<stdin>", -1, "STATEMENT_READ_ERROR", "line 3: field larger than field limit")
    jsonschema.validate(json.loads(record.to_json_line()), ERROR_LOG_SCHEMA)


def test_error_log_schema_rejects_extra_key():
    entry = json.loads(ErrorRecord.create("pcu.csv", 2, "ZERO_AMOUNT", "transact: amount cannot be zero").to_json_line())
    entry["extra"] = "not allowed"
    with pytest.raises(jsonschema.exceptions.ValidationError):
        jsonschema.validate(entry, ERROR_LOG_SCHEMA)
