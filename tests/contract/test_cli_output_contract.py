from __future__ import annotations

import io
import json
import os
import sys
from pathlib import Path
from unittest.mock import patch

from cas2trn.cli import main as cli_main

"""Output contract: canonical lines on stdout, labeled diagnostics on stderr."""

PCU_OUT = (
    "2019-11-28,Assets:Current:PCUS1,,HealthAndLif eInsuranceAn dSubs ARNHEMCR BP,123\n"
    "2020-01-07,Assets:Current:PCUS1,,554PHP 18832946 Best of Health,-16.92\n"
    "2019-12-24,Assets:Current:PCUS1,,Brumby's,-6.5\n"
)


def test_flags_only(temp_workdir: Path, pcu_statement: Path, capsys):
    code = cli_main([
        "--thisacct=Assets:Current:PCUS1", "--nfields=5", "--datei=1", "--dateformat=DD/MM/YYYY",
        "--memoi=2", "--debiti=3", "--crediti=4", str(pcu_statement),
    ])
    captured = capsys.readouterr()
    assert code == 0
    assert captured.out == PCU_OUT
    assert f"WARN {pcu_statement}: transact: cannot parse date" in captured.err
    assert "on line 1" in captured.err
    assert "SUMMARY statements=1 success=1 failed=0 records=4 written=3 rejected=1" in captured.err


def test_config_file(write_config: Path, pcu_statement: Path, capsys):
    code = cli_main(["--config", str(write_config), str(pcu_statement)])
    assert code == 0
    assert capsys.readouterr().out == PCU_OUT


def test_flag_overrides_config_file(write_config: Path, pcu_statement: Path, capsys):
    code = cli_main(["--config", str(write_config), "--thisacct=PCUS1", str(pcu_statement)])
    assert code == 0
    assert capsys.readouterr().out.splitlines()[-1] == "2019-12-24,PCUS1,,Brumby's,-6.5"


def test_config_from_environment(write_config: Path, pcu_statement: Path, monkeypatch, capsys):
    monkeypatch.setenv("CAS2TRN_CONFIG", str(write_config))
    code = cli_main([str(pcu_statement)])
    assert code == 0
    assert capsys.readouterr().out == PCU_OUT


def test_config_from_dotenv_file(temp_workdir: Path, write_config: Path, pcu_statement: Path, capsys):
    (temp_workdir / ".env").write_text(f"CAS2TRN_CONFIG={write_config}\n", encoding="utf-8")
    try:
        code = cli_main([str(pcu_statement)])
        assert code == 0
        assert capsys.readouterr().out == PCU_OUT
    finally:
        # load_dotenv writes to os.environ
        os.environ.pop("CAS2TRN_CONFIG", None)


def test_mini_from_stdin(temp_workdir: Path, capsys):
    stdin = io.TextIOWrapper(io.BytesIO(b"2025-04-17,A penny for your thoughts.,.01\n"), encoding="utf-8")
    with patch.object(sys, "stdin", stdin):
        code = cli_main([
            "--nfields=3", "--datei=1", "--memoi=2", "--amounti=3",
            "--dateformat=YYYY-MM-DD", "--thisacct=Mini",
        ])
    captured = capsys.readouterr()
    assert code == 0
    assert captured.out == "2025-04-17,Mini,,A penny for your thoughts.,0.01\n"


def test_error_log_directory(temp_workdir: Path, write_config: Path, pcu_statement: Path, capsys):
    code = cli_main(["--config", str(write_config), "--error-log", "logs", str(pcu_statement)])
    assert code == 0
    logs = list((temp_workdir / "logs").glob("errors-*.log"))
    assert len(logs) == 1
    (entry,) = [json.loads(line) for line in logs[0].read_text(encoding="utf-8").splitlines()]
    assert entry["source"] == str(pcu_statement)
    assert entry["line"] == 1
    assert entry["error_type"] == "DATE_PARSE_ERROR"
    assert "rejected records written to" in capsys.readouterr().err


def test_debug_logs_accepted_records(write_config: Path, pcu_statement: Path, capsys):
    code = cli_main(["--debug", "--config", str(write_config), str(pcu_statement)])
    err = capsys.readouterr().err
    assert code == 0
    assert "DEBUG debug mode enabled" in err
    assert f"DEBUG {pcu_statement}: line 5 -> 2019-12-24,Assets:Current:PCUS1,,Brumby's,-6.5" in err
