from __future__ import annotations

from dataclasses import dataclass
from decimal import MAX_EMAX, MIN_EMIN, Context, Decimal

"""Canonical transaction model.

Every input record that passes the record transformer becomes one Transaction,
written as a single line of the canonical CSV format:

    date,this_account,other_account,memo,amount

Fields are joined as-is; values containing a comma are NOT quoted, so such a
value shifts the columns of that output line.
"""

__all__ = [
    "Transaction",
    "format_amount",
]

FIELD_SEPARATOR = ","


def format_amount(amount: Decimal) -> str:
    """Shortest exact decimal rendering without exponent or trailing zeros.

    >>> format_amount(Decimal(".01"))
    '0.01'
    >>> format_amount(Decimal("123.00"))
    '123'
    >>> format_amount(Decimal("-16.920"))
    '-16.92'
    """
    # precision of the value itself, so normalize never rounds
    ctx = Context(prec=max(len(amount.as_tuple().digits), 1), Emax=MAX_EMAX, Emin=MIN_EMIN)
    return format(amount.normalize(ctx), "f")


@dataclass(frozen=True)
class Transaction:
    """One financial transaction in the canonical layout.

    All fields except other_account are mandatory and non-empty; amount is
    never zero and is negative for debits.
    """
    date: str  # ISO 8601, YYYY-MM-DD
    this_account: str
    other_account: str  # optional, may be ""
    memo: str
    amount: Decimal

    def to_csv_line(self) -> str:
        flds = [self.date, self.this_account, self.other_account, self.memo, format_amount(self.amount)]
        return FIELD_SEPARATOR.join(flds)

    def __str__(self) -> str:  # pragma: no cover (alias)
        return self.to_csv_line()
