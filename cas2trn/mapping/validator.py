from __future__ import annotations

import logging

from ..models.column_mapping import ColumnMapping
from .date_layout import compile_date_format
from .errors import MappingError, MappingErrorKind
from .plan import (
    AccountSource,
    AmountSource,
    ColumnAccount,
    CreditDebitAmount,
    DirectAmount,
    LiteralAccount,
    RecordPlan,
)

"""Column mapping validation.

The checks run in a fixed order and the first violation is raised; callers
(and tests) rely on which error wins when several rules are broken at once:

1. date format non-empty
2. field count in range
3. every index in range and unique (amount, credit, date, debit, memo,
   other account, this account)
4. date index present
5. memo index present
6. this account (literal or index) present, then an amount source present
"""

__all__ = [
    "MappingValidator",
    "validate_mapping",
]

logger = logging.getLogger(__name__)


class MappingValidator:
    """Validates a ColumnMapping and resolves it into a RecordPlan."""

    # Inclusive limits for the number of fields in an input CSV record
    MIN_FIELD_COUNT = 3  # date, memo and amount
    MAX_FIELD_COUNT = 20

    def validate(self, mapping: ColumnMapping) -> RecordPlan:
        """Return the RecordPlan for a valid mapping.

        Raises:
            MappingError: for the first rule the mapping violates
        """
        if mapping.date_format == "":
            raise MappingError(MappingErrorKind.INVALID_DATE_FORMAT)

        if not self.MIN_FIELD_COUNT <= mapping.field_count <= self.MAX_FIELD_COUNT:
            raise MappingError(
                MappingErrorKind.FIELD_COUNT_OUT_OF_RANGE,
                f"{mapping.field_count} not in [{self.MIN_FIELD_COUNT}, {self.MAX_FIELD_COUNT}]",
            )

        self._check_indexes(mapping)

        if mapping.date_index is None:
            raise MappingError(MappingErrorKind.MISSING_DATE_INDEX)

        if mapping.memo_index is None:
            raise MappingError(MappingErrorKind.MISSING_MEMO_INDEX)

        this_account = self._resolve_this_account(mapping)
        amount = self._resolve_amount(mapping)

        plan = RecordPlan(
            field_count=mapping.field_count,
            date_column=mapping.date_index,
            date_layout=compile_date_format(mapping.date_format),
            memo_column=mapping.memo_index,
            amount=amount,
            this_account=this_account,
            other_account_column=mapping.other_account_index,
        )
        logger.debug(f"mapping resolved: {plan}")
        return plan

    def _check_indexes(self, mapping: ColumnMapping) -> None:
        in_use: set[int] = set()
        for name, index in mapping.indexes():
            if index is None:
                continue  # record does not contain this field
            if index < 1 or index > mapping.field_count:
                raise MappingError(MappingErrorKind.INDEX_OUT_OF_RANGE, f"{name}={index}")
            if index in in_use:
                raise MappingError(MappingErrorKind.DUPLICATE_INDEX, f"{name}={index}")
            in_use.add(index)

    @staticmethod
    def _resolve_this_account(mapping: ColumnMapping) -> AccountSource:
        if mapping.this_account != "":
            return LiteralAccount(mapping.this_account)
        if mapping.this_account_index is None:
            raise MappingError(MappingErrorKind.MISSING_THIS_ACCOUNT)
        return ColumnAccount(mapping.this_account_index)

    @staticmethod
    def _resolve_amount(mapping: ColumnMapping) -> AmountSource:
        if mapping.amount_index is not None:
            return DirectAmount(mapping.amount_index)
        if mapping.credit_index is None or mapping.debit_index is None:
            raise MappingError(MappingErrorKind.MISSING_AMOUNT_SOURCE)
        return CreditDebitAmount(credit_column=mapping.credit_index, debit_column=mapping.debit_index)


def validate_mapping(mapping: ColumnMapping) -> RecordPlan:
    """Convenience wrapper around MappingValidator().validate()."""
    return MappingValidator().validate(mapping)
