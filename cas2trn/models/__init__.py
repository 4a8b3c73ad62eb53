"""Domain models for the CSV statement translator."""

from .column_mapping import ColumnMapping
from .error_record import ErrorRecord
from .processing_result import RunResult, StatementStat, StatementStatus
from .raw_record import RawRecord
from .transaction import Transaction

__all__ = [
    # Configuration models
    "ColumnMapping",
    # Processing models
    "RawRecord",
    "Transaction",
    "ErrorRecord",
    "StatementStat",
    "StatementStatus",
    "RunResult",
]
