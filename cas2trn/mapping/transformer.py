from __future__ import annotations

import re
from collections.abc import Sequence
from decimal import Decimal

from ..models.transaction import Transaction
from .errors import RecordError, RecordErrorKind
from .plan import ColumnAccount, CreditDebitAmount, DirectAmount, LiteralAccount, RecordPlan

"""Record transformer: one tokenized CSV record -> one Transaction.

Checks run in the order arity, date, amount, memo, this account; the first
failure is raised as RecordError and nothing is emitted for that record.
The plan is trusted to come from MappingValidator and is not re-checked.
"""

__all__ = [
    "MAX_AMOUNT_EXPONENT",
    "MIN_AMOUNT_EXPONENT",
    "parse_amount",
    "transform_record",
]

_AMOUNT_SYNTAX = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?", re.ASCII)

# Range of a double precision float; anything outside is a parse error
MAX_AMOUNT_EXPONENT = 308
MIN_AMOUNT_EXPONENT = -324


def _column(fields: Sequence[str], column: int | None) -> str:
    # 1-based; an absent column reads as empty
    if column is None:
        return ""
    return fields[column - 1]


def _parse_decimal(value: str) -> Decimal:
    # ASCII digits only; no spaces, underscores, NaN or Infinity
    if not _AMOUNT_SYNTAX.fullmatch(value):
        raise RecordError(RecordErrorKind.AMOUNT_PARSE_ERROR, repr(value))
    try:
        amount = Decimal(value)
    except ArithmeticError as e:
        raise RecordError(RecordErrorKind.AMOUNT_PARSE_ERROR, repr(value)) from e
    if not amount.is_finite():
        raise RecordError(RecordErrorKind.AMOUNT_PARSE_ERROR, repr(value))
    if amount and not MIN_AMOUNT_EXPONENT <= amount.adjusted() <= MAX_AMOUNT_EXPONENT:
        raise RecordError(RecordErrorKind.AMOUNT_PARSE_ERROR, f"{value!r}: value out of range")
    return amount


def parse_amount(fields: Sequence[str], plan: RecordPlan) -> Decimal:
    """Return the signed amount of a record.

    The amount comes from:
     1. the amount column, or
     2. the credit column if the debit column is empty, or
     3. the debit column, made negative, if the credit column is empty
    """
    source = plan.amount
    if isinstance(source, DirectAmount):
        return _parse_decimal(_column(fields, source.column))

    assert isinstance(source, CreditDebitAmount)
    credit = _column(fields, source.credit_column)
    debit = _column(fields, source.debit_column)
    if debit == "" and credit != "":
        return _parse_decimal(credit)
    if credit == "" and debit != "":
        # a negative debit stays negative; copy_* never rounds or traps
        return _parse_decimal(debit).copy_abs().copy_negate()
    if credit == "":
        raise RecordError(RecordErrorKind.CREDIT_DEBIT_CONFLICT, "credit and debit are both empty")
    raise RecordError(RecordErrorKind.CREDIT_DEBIT_CONFLICT, "credit and debit are both set")


def transform_record(fields: Sequence[str], plan: RecordPlan) -> Transaction:
    """Parse a transaction from the fields of one input record.

    Raises:
        RecordError: for the first check the record fails
    """
    # The tokenizer does not enforce a fixed column count
    if len(fields) != plan.field_count:
        raise RecordError(
            RecordErrorKind.WRONG_FIELD_COUNT,
            f"expected {plan.field_count}, got {len(fields)}",
        )

    raw_date = _column(fields, plan.date_column)
    try:
        date = plan.date_layout.parse(raw_date)
    except ValueError as e:
        raise RecordError(RecordErrorKind.DATE_PARSE_ERROR, str(e)) from e

    amount = parse_amount(fields, plan)
    if amount == 0:
        raise RecordError(RecordErrorKind.ZERO_AMOUNT)

    memo = _column(fields, plan.memo_column)
    if memo == "":
        raise RecordError(RecordErrorKind.EMPTY_MEMO)

    other_account = _column(fields, plan.other_account_column)

    source = plan.this_account
    if isinstance(source, LiteralAccount):
        this_account = source.name
    else:
        assert isinstance(source, ColumnAccount)
        this_account = _column(fields, source.column)
        if this_account == "":
            raise RecordError(RecordErrorKind.EMPTY_THIS_ACCOUNT)

    return Transaction(
        date=date,
        this_account=this_account,
        other_account=other_account,
        memo=memo,
        amount=amount,
    )
