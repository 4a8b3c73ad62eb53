from __future__ import annotations

from dataclasses import dataclass

from .date_layout import DateLayout

"""Resolved field-source strategies.

MappingValidator turns a valid ColumnMapping into a RecordPlan once per run.
The plan says where each transaction field comes from, so the record
transformer never has to ask "is this index configured?" per row. Columns in
a plan are 1-based, exactly as configured.
"""

__all__ = [
    "DirectAmount",
    "CreditDebitAmount",
    "AmountSource",
    "LiteralAccount",
    "ColumnAccount",
    "AccountSource",
    "RecordPlan",
]


@dataclass(frozen=True)
class DirectAmount:
    """Signed amount read from a single column."""
    column: int


@dataclass(frozen=True)
class CreditDebitAmount:
    """Amount derived from separate credit and debit columns.

    Exactly one of the two must be non-empty in each record; debits are
    always made negative.
    """
    credit_column: int
    debit_column: int


AmountSource = DirectAmount | CreditDebitAmount


@dataclass(frozen=True)
class LiteralAccount:
    """The same account name for every record."""
    name: str


@dataclass(frozen=True)
class ColumnAccount:
    """Account name read from a column of each record."""
    column: int


AccountSource = LiteralAccount | ColumnAccount


@dataclass(frozen=True)
class RecordPlan:
    field_count: int
    date_column: int
    date_layout: DateLayout
    memo_column: int
    amount: AmountSource
    this_account: AccountSource
    other_account_column: int | None = None
