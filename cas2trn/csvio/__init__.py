from .reader import STDIN_NAME, StatementReadError, open_statement, open_stdin, read_records

__all__ = [
    "STDIN_NAME",
    "StatementReadError",
    "open_statement",
    "open_stdin",
    "read_records",
]
