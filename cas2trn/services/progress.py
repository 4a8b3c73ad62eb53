from __future__ import annotations

import sys
from typing import Any

from tqdm import tqdm
from tqdm.std import tqdm as TqdmType

"""Statement progress display with tqdm (TTY only).

The bar is drawn on standard error, next to the diagnostics; standard output
carries canonical CSV lines and must stay clean. When standard error is not a
TTY (pipes, CI, redirected logs) no bar is created at all.
"""

__all__ = [
    "ProgressTracker",
    "is_tty_enabled",
]


def is_tty_enabled() -> bool:
    """True if standard error is a TTY and progress should be displayed."""
    return sys.stderr.isatty()


class ProgressTracker:
    """One tqdm bar counting statements."""

    def __init__(self, total_statements: int, *, description: str = "Translating statements") -> None:
        self.total_statements = total_statements
        self.description = description
        self.current_statement = 0

        self.enabled = is_tty_enabled()
        self.pbar: TqdmType[Any] | None
        if self.enabled:
            self.pbar = tqdm(
                total=total_statements,
                desc=description,
                unit="file",
                file=sys.stderr,
                leave=False,
                ncols=80,
                ascii=True,
            )
        else:
            self.pbar = None

    def start_statement(self, source: str) -> None:
        self.current_statement += 1
        if self.enabled and self.pbar is not None:
            self.pbar.set_description(f"{self.description} ({source})")

    def finish_statement(self) -> None:
        if self.enabled and self.pbar is not None:
            self.pbar.update(1)
            self.pbar.set_description(self.description)

    def set_postfix(self, **kwargs: Any) -> None:
        if self.enabled and self.pbar is not None:
            self.pbar.set_postfix(**kwargs)

    def close(self) -> None:
        if self.enabled and self.pbar is not None:
            self.pbar.close()
            self.pbar = None

    def __enter__(self) -> ProgressTracker:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
