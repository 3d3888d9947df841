"""Cross-row uniqueness tracking for groups of columns."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping, Sequence

from .rules import stringify
from .schema import constraint_key
from .types import CellValidationError, ErrorType


@dataclass
class UniqueGroup:
    """Value map of one constraint group.

    Attributes:
        columns: Columns whose combined values must be distinct
        key: Constraint key reported as the error column
        rows_by_value: Composite value -> row numbers, in first-seen order
    """

    columns: tuple[str, ...]
    key: str
    rows_by_value: dict[str, list[int]] = field(default_factory=dict)

    def duplicates(self) -> Iterator[CellValidationError]:
        """One DUPLICATE error per row of every repeated composite value."""
        for value, rows in self.rows_by_value.items():
            if len(rows) <= 1:
                continue
            message = f"Duplicate value found: {value} in rows {', '.join(str(r) for r in rows)}"
            for row in rows:
                yield CellValidationError(
                    row=row,
                    column=self.key,
                    message=message,
                    error_type=ErrorType.DUPLICATE,
                )


class UniquenessTracker:
    """Collects composite keys for every constraint group across all rows.

    Duplicates can only be resolved once every row has been recorded.
    """

    def __init__(
        self,
        constraints: Sequence[Sequence[str]],
        *,
        null_sentinel: str = "NULL",
        separator: str = "-",
    ) -> None:
        self.null_sentinel = null_sentinel
        self.separator = separator
        self.groups = [
            UniqueGroup(columns=tuple(columns), key=constraint_key(columns))
            for columns in constraints
        ]

    def composite_value(self, row: Mapping[str, Any], columns: Sequence[str]) -> str:
        parts = []
        for column in columns:
            value = row.get(column)
            if isinstance(value, str):
                parts.append(value.strip())
            elif value is None:
                parts.append(self.null_sentinel)
            else:
                parts.append(stringify(value))
        return self.separator.join(parts)

    def reset(self) -> None:
        """Forget every recorded row so the groups can be filled again."""
        for group in self.groups:
            group.rows_by_value.clear()

    def record(self, row: Mapping[str, Any], row_number: int) -> None:
        """Register *row* under every group."""
        for group in self.groups:
            value = self.composite_value(row, group.columns)
            group.rows_by_value.setdefault(value, []).append(row_number)
