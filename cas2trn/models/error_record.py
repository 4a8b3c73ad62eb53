from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime

"""ErrorRecord model for the rejected-record log.

Each CSV record that fails transformation (and each statement that cannot be
read at all) is described by one ErrorRecord, serialized as a JSON Lines entry
with a fixed key set. line=-1 is used for statement-level errors where no
record line applies.
"""

__all__ = [
    "ErrorRecord",
]


@dataclass(frozen=True)
class ErrorRecord:
    """Structured error record for JSON Lines logging.

    Attributes:
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
        source: statement file name, or "<stdin>"
        line: 1-based line on which the record starts. -1 for statement-level errors
        error_type: error kind in UPPER_SNAKE_CASE (e.g. ZERO_AMOUNT)
        message: human readable description
    """
    timestamp: str
    source: str
    line: int
    error_type: str
    message: str

    @staticmethod
    def create(source: str, line: int, error_type: str, message: str) -> ErrorRecord:
        """Create a new ErrorRecord stamped with the current UTC time."""
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return ErrorRecord(
            timestamp=ts,
            source=source,
            line=line,
            error_type=error_type,
            message=message,
        )

    def to_json_line(self) -> str:
        """Serialize to one JSON Lines entry (no extra keys)."""
        return json.dumps(asdict(self), ensure_ascii=False)
