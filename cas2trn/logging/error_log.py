from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from cas2trn.models.error_record import ErrorRecord

"""Rejected-record log (JSON Lines).

Enabled with ``--error-log DIR``. Records are buffered in memory while the
statements are translated and appended to ``DIR/errors-YYYYMMDD-HHMMSS.log``
(UTC) on flush. The file name is fixed on first access, so one run writes one
file.
"""

__all__ = [
    "ErrorLogBuffer",
]

TIMESTAMP_FMT = "%Y%m%d-%H%M%S"


class ErrorLogBuffer:
    """In-memory buffer for error records. flush() writes JSON Lines.

    Single-threaded use only.
    """

    def __init__(self, directory: Path) -> None:
        self.directory = directory
        self._records: list[ErrorRecord] = []
        self._file_path: Path | None = None

    @property
    def file_path(self) -> Path:
        if self._file_path is None:
            self.directory.mkdir(parents=True, exist_ok=True)
            stamp = datetime.now(UTC).strftime(TIMESTAMP_FMT)
            self._file_path = self.directory / f"errors-{stamp}.log"
        return self._file_path

    def append(self, record: ErrorRecord) -> None:
        self._records.append(record)

    def __len__(self) -> int:  # pragma: no cover (trivial)
        return len(self._records)

    def flush(self) -> Path | None:
        """Append buffered records to the log file and clear the buffer.

        Returns the file path, or None when there was nothing to write (no
        file is created for a clean run).
        """
        if not self._records:
            return None
        fp = self.file_path
        with fp.open("a", encoding="utf-8") as f:
            for r in self._records:
                f.write(r.to_json_line() + "\n")
        self._records.clear()
        return fp
