# Shared pytest fixtures
from __future__ import annotations

import tempfile
from pathlib import Path

import pytest

from cas2trn.logging.init import reset_logging
from cas2trn.mapping.validator import validate_mapping
from cas2trn.models.column_mapping import ColumnMapping

# Kiwibank full CSV statement: amount wins over credit/debit, this account from column 1
KB_FULL = ColumnMapping(
    field_count=16,
    amount_index=15, credit_index=13, date_index=2, debit_index=14,
    memo_index=3, other_account_index=12, this_account_index=1,
    date_format="DD-MM-YYYY", this_account="",
)

# minimal CSV statement
MINI = ColumnMapping(
    field_count=3,
    amount_index=3, date_index=1, memo_index=2,
    date_format="YYYY-MM-DD", this_account="Mini",
)

# Police Credit Union account CSV statement: debit, credit, balance
PCU = ColumnMapping(
    field_count=5,
    credit_index=4, date_index=1, debit_index=3, memo_index=2,
    date_format="DD/MM/YYYY", this_account="Assets:Current:PCUS1",
)

KB_FULL_FIELDS = [
    "ZZ-YYYY-XXXXXXX-WW", "29-12-2023", "Automatic Payment Rates MISS E MACD ;Ref: Rates MISS E MACD",
    "AP", "Rates", "E", "", "", "", "", "MISS E MACD", "AA-BBBB-CCCCCCC-DD", "162.00", "", "162.00", "1434.23",
]

PCU_STATEMENT = """Date,Transaction Details,Debit,Credit,Balance
28/11/2019,HealthAndLif eInsuranceAn dSubs ARNHEMCR BP,,123.00,316.69
07/01/2020,554PHP 18832946 Best of Health,16.92,,265.01

24/12/2019,Brumby's,6.50,,330.04
"""

PCU_CONFIG_YAML = """field_count: 5
date_index: 1
date_format: DD/MM/YYYY
memo_index: 2
debit_index: 3
credit_index: 4
this_account: Assets:Current:PCUS1
"""


@pytest.fixture(autouse=True)
def _clean_logging():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        monkeypatch.delenv("CAS2TRN_CONFIG", raising=False)
        yield p


@pytest.fixture()
def kb_full_plan():
    return validate_mapping(KB_FULL)


@pytest.fixture()
def mini_plan():
    return validate_mapping(MINI)


@pytest.fixture()
def pcu_plan():
    return validate_mapping(PCU)


@pytest.fixture()
def write_config(temp_workdir: Path) -> Path:
    cfg = temp_workdir / "config" / "pcu.yml"
    cfg.write_text(PCU_CONFIG_YAML, encoding="utf-8")
    return cfg


@pytest.fixture()
def pcu_statement(temp_workdir: Path) -> Path:
    f = temp_workdir / "data" / "pcu.csv"
    f.write_text(PCU_STATEMENT, encoding="utf-8")
    return f


@pytest.fixture()
def kb_full() -> ColumnMapping:
    return KB_FULL


@pytest.fixture()
def mini() -> ColumnMapping:
    return MINI


@pytest.fixture()
def pcu() -> ColumnMapping:
    return PCU


@pytest.fixture()
def kb_full_fields() -> list[str]:
    return list(KB_FULL_FIELDS)
