from __future__ import annotations

import csv
import io
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from ..models.raw_record import RawRecord

"""Statement reader: CSV text -> RawRecord stream.

Tokenizing is left to the standard csv module (comma separated, optional
double quotes, quoted fields may span lines). The reader does NOT check the
number of fields per record; the record transformer does.
"""

__all__ = [
    "StatementReadError",
    "STDIN_NAME",
    "open_statement",
    "open_stdin",
    "read_records",
]

STDIN_NAME = "<stdin>"
# utf-8-sig drops the byte-order mark some banks put in their exports
STATEMENT_ENCODING = "utf-8-sig"


class StatementReadError(Exception):
    """Raised when the CSV text cannot be tokenized."""


def open_statement(path: Path) -> TextIO:
    """Open a statement file for read_records (caller closes it)."""
    return path.open("r", encoding=STATEMENT_ENCODING, newline="")


def open_stdin() -> TextIO:
    """Return standard input set up for read_records (never closed here)."""
    stdin = sys.stdin
    if isinstance(stdin, io.TextIOWrapper):
        stdin.reconfigure(encoding=STATEMENT_ENCODING, newline="")
    return stdin


def read_records(stream: TextIO) -> Iterator[RawRecord]:
    """Yield the records of a CSV text stream in input order.

    Blank lines are skipped. line_number is the line on which each record
    starts.

    Raises:
        StatementReadError: the csv module rejects the input, or it is not UTF-8
    """
    reader = csv.reader(stream)
    last_line = 0
    while True:
        try:
            fields = next(reader)
        except StopIteration:
            return
        except (csv.Error, UnicodeDecodeError) as e:
            raise StatementReadError(f"line {reader.line_num}: {e}") from e
        start_line = last_line + 1
        last_line = reader.line_num
        if not fields:
            continue
        yield RawRecord(line_number=start_line, fields=fields)
