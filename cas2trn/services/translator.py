from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from datetime import UTC, datetime
from pathlib import Path
from typing import TextIO

from ..csvio.reader import STDIN_NAME, StatementReadError, open_statement, open_stdin, read_records
from ..logging.error_log import ErrorLogBuffer
from ..mapping.errors import RecordError
from ..mapping.plan import RecordPlan
from ..mapping.transformer import transform_record
from ..models.error_record import ErrorRecord
from ..models.processing_result import RunResult, StatementStat, StatementStatus
from .progress import ProgressTracker

"""Statement translation service.

Drives the run: statements are handled one after the other, and within a
statement records are read, transformed and written one at a time in input
order. A rejected record is reported on standard error and skipped; a
statement that cannot be opened or tokenized is reported and counted as
failed, and the run goes on with the next one.
"""

__all__ = [
    "STATEMENT_OPEN_ERROR",
    "STATEMENT_READ_ERROR",
    "translate_statement",
    "translate_all",
]

logger = logging.getLogger(__name__)

# error_type values for statement-level ErrorRecords (line=-1)
STATEMENT_OPEN_ERROR = "STATEMENT_OPEN_ERROR"
STATEMENT_READ_ERROR = "STATEMENT_READ_ERROR"


def translate_statement(
    stream: TextIO,
    plan: RecordPlan,
    *,
    source: str,
    out: TextIO,
    error_log: ErrorLogBuffer | None = None,
) -> StatementStat:
    """Translate every record of one statement, writing canonical lines to out.

    Lines already written stay written if tokenizing fails part way; the
    statement is then returned as FAILED.
    """
    started = time.perf_counter()
    records = written = rejected = 0
    status = StatementStatus.SUCCESS
    error: str | None = None

    try:
        for record in read_records(stream):
            records += 1
            try:
                trn = transform_record(record.fields, plan)
            except RecordError as e:
                rejected += 1
                logger.warning(f"{source}: {e} on line {record.line_number}")
                if error_log is not None:
                    error_log.append(ErrorRecord.create(source, record.line_number, e.kind.value, str(e)))
                continue
            line = trn.to_csv_line()
            out.write(line + "\n")
            written += 1
            logger.debug(f"{source}: line {record.line_number} -> {line}")
    except StatementReadError as e:
        status = StatementStatus.FAILED
        error = str(e)
        logger.error(f"{source}: cannot read statement: {e}")
        if error_log is not None:
            error_log.append(ErrorRecord.create(source, -1, STATEMENT_READ_ERROR, error))

    return StatementStat(
        source=source,
        status=status,
        records=records,
        written=written,
        rejected=rejected,
        elapsed_seconds=time.perf_counter() - started,
        error=error,
    )


def _open_failure(path: Path, exc: OSError, error_log: ErrorLogBuffer | None) -> StatementStat:
    message = f"cannot open statement: {exc.strerror or exc}"
    logger.error(f"{path}: {message}")
    if error_log is not None:
        error_log.append(ErrorRecord.create(str(path), -1, STATEMENT_OPEN_ERROR, message))
    return StatementStat(
        source=str(path),
        status=StatementStatus.FAILED,
        records=0,
        written=0,
        rejected=0,
        elapsed_seconds=0.0,
        error=message,
    )


def translate_all(
    sources: Sequence[Path],
    plan: RecordPlan,
    *,
    out: TextIO,
    error_log: ErrorLogBuffer | None = None,
) -> RunResult:
    """Translate the named statements in order, or standard input if none."""
    start_time = datetime.now(UTC)
    stats: list[StatementStat] = []

    if not sources:
        logger.info(f"Reading statement from {STDIN_NAME}")
        stats.append(translate_statement(open_stdin(), plan, source=STDIN_NAME, out=out, error_log=error_log))
    else:
        with ProgressTracker(len(sources)) as progress:
            for path in sources:
                progress.start_statement(path.name)
                logger.info(f"Reading statement from {path}")
                try:
                    stream = open_statement(path)
                except OSError as e:
                    stats.append(_open_failure(path, e, error_log))
                    progress.finish_statement()
                    continue
                with stream:
                    stat = translate_statement(stream, plan, source=str(path), out=out, error_log=error_log)
                stats.append(stat)
                progress.set_postfix(written=stat.written, rejected=stat.rejected)
                progress.finish_statement()

    out.flush()
    return RunResult.from_stats(stats, start_time, datetime.now(UTC))
