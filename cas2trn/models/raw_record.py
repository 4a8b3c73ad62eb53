from __future__ import annotations

from dataclasses import dataclass

"""RawRecord model: one tokenized input CSV record before transformation."""

__all__ = [
    "RawRecord",
]


@dataclass(frozen=True)
class RawRecord:
    """Fields of one input record and the line it started on.

    The line number is what diagnostics report, so for a quoted field that
    spans several lines it is the first of them.
    """
    line_number: int  # 1-based
    fields: list[str]
