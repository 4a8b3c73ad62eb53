from __future__ import annotations

import json
from pathlib import Path

import pytest

from cas2trn.logging import error_log
from cas2trn.logging.error_log import ErrorLogBuffer
from cas2trn.models.error_record import ErrorRecord


def test_error_log_buffer_flush(tmp_path: Path):
    buf = ErrorLogBuffer(tmp_path / "logs")
    buf.append(ErrorRecord.create("pcu.csv", 1, "DATE_PARSE_ERROR", "header"))
    buf.append(ErrorRecord.create("pcu.csv", 4, "CREDIT_DEBIT_CONFLICT", "both set"))
    path = buf.flush()
    assert path is not None and path.exists()
    assert path.parent == tmp_path / "logs"
    assert path.name.startswith("errors-") and path.suffix == ".log"
    lines = path.read_text(encoding="utf-8").strip().splitlines()
    assert len(lines) == 2
    for raw in lines:
        assert set(json.loads(raw).keys()) == {"timestamp", "source", "line", "error_type", "message"}
    # flush 後バッファクリア
    assert len(buf) == 0


def test_error_log_buffer_multiple_flushes_append(tmp_path: Path):
    buf = ErrorLogBuffer(tmp_path)
    buf.append(ErrorRecord.create("a.csv", 1, "ZERO_AMOUNT", "zero"))
    path = buf.flush()
    size1 = path.stat().st_size
    buf.append(ErrorRecord.create("a.csv", 2, "ZERO_AMOUNT", "zero"))
    path2 = buf.flush()
    assert path == path2
    assert path2.stat().st_size > size1


def test_error_log_buffer_empty_flush_creates_nothing(tmp_path: Path):
    buf = ErrorLogBuffer(tmp_path / "logs")
    assert buf.flush() is None
    assert not (tmp_path / "logs").exists()


def test_directory_is_required():
    # the log directory always comes from --error-log
    with pytest.raises(TypeError):
        ErrorLogBuffer()  # type: ignore[call-arg]
    assert error_log.__all__ == ["ErrorLogBuffer"]
