from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime

"""Date pattern dialects for the date column.

A date format is compiled once into a ``strptime`` format. Three spellings are
accepted, chosen by the first rule that matches:

1. contains ``%``      -> strptime format, used as-is     ("%d/%m/%Y")
2. contains a digit    -> reference-date layout            ("02/01/2006 15:04")
3. anything else       -> token pattern                    ("DD/MM/YYYY")

Characters that are not tokens are literals. The pattern itself is not checked
here; a bad pattern shows up as a parse failure on the first date.
"""

__all__ = [
    "DateLayout",
    "compile_date_format",
]

# Longest alternatives first
_LAYOUT_TOKENS = re.compile(
    r"January|Jan|Monday|Mon|MST|2006|Z07:00|Z0700|-07:00|-0700|_2|15|06|05|04|03|01|02|PM|pm|1|2|3|4|5"
)
_LAYOUT_DIRECTIVES = {
    "January": "%B",
    "Jan": "%b",
    "Monday": "%A",
    "Mon": "%a",
    "MST": "%Z",
    "2006": "%Y",
    "06": "%y",
    "01": "%m",
    "1": "%m",
    "02": "%d",
    "_2": "%d",
    "2": "%d",
    "15": "%H",
    "03": "%I",
    "3": "%I",
    "04": "%M",
    "4": "%M",
    "05": "%S",
    "5": "%S",
    "PM": "%p",
    "pm": "%p",
    "Z07:00": "%z",
    "Z0700": "%z",
    "-07:00": "%z",
    "-0700": "%z",
}

_PATTERN_TOKENS = re.compile(r"YYYY|YY|MMMM|MMM|MM|M|DD|D")
_PATTERN_DIRECTIVES = {
    "YYYY": "%Y",
    "YY": "%y",
    "MMMM": "%B",
    "MMM": "%b",
    "MM": "%m",
    "M": "%m",
    "DD": "%d",
    "D": "%d",
}


def _translate(pattern: str, tokens: re.Pattern[str], directives: dict[str, str]) -> str:
    out: list[str] = []
    pos = 0
    for m in tokens.finditer(pattern):
        out.append(pattern[pos:m.start()].replace("%", "%%"))
        out.append(directives[m.group(0)])
        pos = m.end()
    out.append(pattern[pos:].replace("%", "%%"))
    return "".join(out)


@dataclass(frozen=True)
class DateLayout:
    """A compiled date format."""
    pattern: str  # as configured
    strptime_format: str

    def parse(self, value: str) -> str:
        """Parse value and return it as YYYY-MM-DD.

        Raises:
            ValueError: value does not match, or the format is malformed
        """
        try:
            parsed = datetime.strptime(value, self.strptime_format)
        except re.error as e:
            # a directive used twice, e.g. "DD/MM/YYYY D"
            raise ValueError(f"malformed date format {self.pattern!r}: {e}") from e
        return parsed.date().isoformat()


def compile_date_format(pattern: str) -> DateLayout:
    if "%" in pattern:
        fmt = pattern
    elif any(ch.isdigit() for ch in pattern):
        fmt = _translate(pattern, _LAYOUT_TOKENS, _LAYOUT_DIRECTIVES)
    else:
        fmt = _translate(pattern, _PATTERN_TOKENS, _PATTERN_DIRECTIVES)
    return DateLayout(pattern=pattern, strptime_format=fmt)
