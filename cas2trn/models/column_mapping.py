from __future__ import annotations

from dataclasses import dataclass, fields

"""ColumnMapping model for the CSV statement translator.

A ColumnMapping describes which column of an input CSV record holds which
semantic field of a transaction. It is built once from the command line and/or
a YAML file, validated once by MappingValidator, and never mutated afterwards.

Column indexes are 1-based. ``None`` means the record does not contain that
field; external sources spell this as ``0``, which ``from_values`` maps to
``None``.
"""

__all__ = [
    "ColumnMapping",
    "INDEX_FIELDS",
]

# Fixed iteration order of the index-set check
INDEX_FIELDS: tuple[str, ...] = (
    "amount_index",
    "credit_index",
    "date_index",
    "debit_index",
    "memo_index",
    "other_account_index",
    "this_account_index",
)


def _as_column(value: int | None) -> int | None:
    if value is None or value == 0:
        return None
    return int(value)


@dataclass(frozen=True)
class ColumnMapping:
    """Declarative column layout of one kind of account statement.

    Mandatory: field_count, date_index, memo_index, date_format.
    Optional: amount_index (if absent, credit_index and debit_index are required),
    other_account_index, this_account_index (required when this_account is empty).
    """
    field_count: int  # number of fields in every input CSV record
    date_format: str = ""  # e.g. "DD/MM/YYYY", "%d/%m/%Y" or "02/01/2006"
    amount_index: int | None = None
    credit_index: int | None = None
    date_index: int | None = None
    debit_index: int | None = None
    memo_index: int | None = None  # or description
    other_account_index: int | None = None
    this_account_index: int | None = None
    this_account: str = ""  # literal account name, wins over this_account_index

    @classmethod
    def from_values(cls, values: dict[str, object]) -> ColumnMapping:
        """Build a mapping from flag/YAML style values (index 0 == absent).

        Unknown keys are ignored; missing keys take their defaults.
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, object] = {k: v for k, v in values.items() if k in known}
        for name in INDEX_FIELDS:
            kwargs[name] = _as_column(kwargs.get(name))  # type: ignore[arg-type]
        kwargs["field_count"] = int(kwargs.get("field_count") or 0)  # type: ignore[arg-type]
        kwargs["date_format"] = str(kwargs.get("date_format") or "")
        kwargs["this_account"] = str(kwargs.get("this_account") or "")
        return cls(**kwargs)  # type: ignore[arg-type]

    def indexes(self) -> list[tuple[str, int | None]]:
        """(name, index) pairs in the fixed validation order."""
        return [(name, getattr(self, name)) for name in INDEX_FIELDS]
