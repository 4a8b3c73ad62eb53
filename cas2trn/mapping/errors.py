from __future__ import annotations

from enum import Enum

"""Error kinds raised by the mapping validator and the record transformer.

Configuration errors (MappingError) are fatal to a run; record errors
(RecordError) only reject the record at hand. Kind values are UPPER_SNAKE and
double as the ``error_type`` of the JSON Lines error log.
"""

__all__ = [
    "MappingErrorKind",
    "RecordErrorKind",
    "MappingError",
    "RecordError",
]


class MappingErrorKind(Enum):
    INVALID_DATE_FORMAT = "INVALID_DATE_FORMAT"
    FIELD_COUNT_OUT_OF_RANGE = "FIELD_COUNT_OUT_OF_RANGE"
    INDEX_OUT_OF_RANGE = "INDEX_OUT_OF_RANGE"
    DUPLICATE_INDEX = "DUPLICATE_INDEX"
    MISSING_DATE_INDEX = "MISSING_DATE_INDEX"
    MISSING_MEMO_INDEX = "MISSING_MEMO_INDEX"
    MISSING_THIS_ACCOUNT = "MISSING_THIS_ACCOUNT"
    MISSING_AMOUNT_SOURCE = "MISSING_AMOUNT_SOURCE"


class RecordErrorKind(Enum):
    WRONG_FIELD_COUNT = "WRONG_FIELD_COUNT"
    DATE_PARSE_ERROR = "DATE_PARSE_ERROR"
    AMOUNT_PARSE_ERROR = "AMOUNT_PARSE_ERROR"
    CREDIT_DEBIT_CONFLICT = "CREDIT_DEBIT_CONFLICT"
    ZERO_AMOUNT = "ZERO_AMOUNT"
    EMPTY_MEMO = "EMPTY_MEMO"
    EMPTY_THIS_ACCOUNT = "EMPTY_THIS_ACCOUNT"


_MAPPING_MESSAGES = {
    MappingErrorKind.INVALID_DATE_FORMAT: "date format cannot be empty",
    MappingErrorKind.FIELD_COUNT_OUT_OF_RANGE: "number of fields in input CSV record is out of range",
    MappingErrorKind.INDEX_OUT_OF_RANGE: "field index is out of range",
    MappingErrorKind.DUPLICATE_INDEX: "field indexes cannot share a non-zero value",
    MappingErrorKind.MISSING_DATE_INDEX: "date field index cannot be zero",
    MappingErrorKind.MISSING_MEMO_INDEX: "memo field index cannot be zero",
    MappingErrorKind.MISSING_THIS_ACCOUNT: (
        "this account and this account index cannot be empty string and zero respectively"
    ),
    MappingErrorKind.MISSING_AMOUNT_SOURCE: (
        "amount field index, or credit and debit indexes cannot both be zero"
    ),
}

_RECORD_MESSAGES = {
    RecordErrorKind.WRONG_FIELD_COUNT: "wrong number of fields",
    RecordErrorKind.DATE_PARSE_ERROR: "cannot parse date",
    RecordErrorKind.AMOUNT_PARSE_ERROR: "cannot parse amount",
    RecordErrorKind.CREDIT_DEBIT_CONFLICT: "exactly one of credit and debit must be non-empty",
    RecordErrorKind.ZERO_AMOUNT: "amount cannot be zero",
    RecordErrorKind.EMPTY_MEMO: "memo cannot be empty string",
    RecordErrorKind.EMPTY_THIS_ACCOUNT: "this account cannot be empty string",
}


class MappingError(Exception):
    """Raised when a ColumnMapping violates a configuration rule."""

    def __init__(self, kind: MappingErrorKind, detail: str | None = None) -> None:
        self.kind = kind
        self.detail = detail
        message = _MAPPING_MESSAGES[kind]
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class RecordError(Exception):
    """Raised when one input record cannot become a Transaction."""

    def __init__(self, kind: RecordErrorKind, detail: str | None = None) -> None:
        self.kind = kind
        self.detail = detail
        message = f"transact: {_RECORD_MESSAGES[kind]}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
