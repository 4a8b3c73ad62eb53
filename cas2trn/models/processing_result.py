from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

"""Processing result models for the CSV statement translator.

StatementStat holds the counters of one input statement (a file or standard
input); RunResult aggregates them for the SUMMARY line and the exit code.
"""

__all__ = [
    "StatementStatus",
    "StatementStat",
    "RunResult",
]


class StatementStatus(Enum):
    """Outcome of reading one statement.

    A statement whose records were all rejected is still SUCCESS: it was read
    to the end. FAILED means it could not be opened or tokenized.
    """
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class StatementStat:
    """Per-statement counters."""
    source: str
    status: StatementStatus
    records: int  # records read (blank lines excluded)
    written: int  # canonical lines written
    rejected: int  # records that failed transformation
    elapsed_seconds: float
    error: str | None = None  # reason when status is FAILED


@dataclass(frozen=True)
class RunResult:
    """Aggregated results of one run over all statements."""
    success_statements: int
    failed_statements: int
    total_records: int
    total_written: int
    total_rejected: int
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    statement_stats: list[StatementStat] = field(default_factory=list)

    @classmethod
    def from_stats(cls, stats: list[StatementStat], start_time: datetime, end_time: datetime) -> RunResult:
        return cls(
            success_statements=sum(1 for s in stats if s.status is StatementStatus.SUCCESS),
            failed_statements=sum(1 for s in stats if s.status is StatementStatus.FAILED),
            total_records=sum(s.records for s in stats),
            total_written=sum(s.written for s in stats),
            total_rejected=sum(s.rejected for s in stats),
            start_time=start_time,
            end_time=end_time,
            elapsed_seconds=(end_time - start_time).total_seconds(),
            statement_stats=list(stats),
        )

    @property
    def total_statements(self) -> int:
        return self.success_statements + self.failed_statements
