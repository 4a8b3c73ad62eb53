from __future__ import annotations

import json

from cas2trn.models.error_record import ErrorRecord

"""Unit tests for ErrorRecord."""

KEYS = {"timestamp", "source", "line", "error_type", "message"}


def test_error_record_statement_level_line_minus_one():
    rec = ErrorRecord.create(
        source="missing.csv",
        line=-1,
        error_type="STATEMENT_OPEN_ERROR",
        message="cannot open statement: No such file or directory",
    )
    assert rec.line == -1
    data = json.loads(rec.to_json_line())
    assert data["line"] == -1
    assert data["source"] == "missing.csv"
    assert data["timestamp"].endswith("Z")
    assert set(data.keys()) == KEYS


def test_error_record_record_level():
    rec = ErrorRecord.create("pcu.csv", 42, "ZERO_AMOUNT", "transact: amount cannot be zero")
    data = json.loads(rec.to_json_line())
    assert data["line"] == 42
    assert data["error_type"] == "ZERO_AMOUNT"
    assert data["message"] == "transact: amount cannot be zero"


def test_error_record_keeps_non_ascii():
    rec = ErrorRecord.create("café.csv", 1, "EMPTY_MEMO", "transact: memo cannot be empty string")
    assert "café.csv" in rec.to_json_line()
