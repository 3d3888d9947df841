"""Value kinds, error records and custom-validator fragments."""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping


class CellKind(str, Enum):
    """Closed set of primitive kinds a decoded cell can carry."""

    string = "string"
    number = "number"
    boolean = "boolean"
    null = "null"
    unset = "unset"


# bool is checked before the numeric types since it subclasses int.
_KIND_BY_TYPE: tuple[tuple[tuple[type, ...], CellKind], ...] = (
    ((str,), CellKind.string),
    ((bool,), CellKind.boolean),
    ((int, float, Decimal), CellKind.number),
    # Spreadsheets store dates as serial numbers.
    ((datetime.date, datetime.time, datetime.timedelta), CellKind.number),
)


def cell_kind(value: Any) -> CellKind | None:
    """Tag a decoded cell value with its ``CellKind``.

    Returns ``None`` for values outside the closed set (e.g. lists).
    """
    if value is None:
        return CellKind.null
    for types_, kind in _KIND_BY_TYPE:
        if isinstance(value, types_):
            return kind
    return None


def describe_kind(value: Any) -> str:
    """Name of the kind of *value*, falling back to its Python type name."""
    kind = cell_kind(value)
    return kind.value if kind is not None else type(value).__name__


class ErrorType(str, Enum):
    """Category of a validation error."""

    REQUIRED = "required"
    TYPE_MISMATCH = "type_mismatch"
    EMAIL_RULE = "email_rule"
    MOBILE_RULE = "mobile_rule"
    EMPLOYEE_RULE = "employee_rule"
    ACCEPTED_VALUES = "accepted_values"
    CUSTOM_VALIDATION = "custom_validation"
    DUPLICATE = "duplicate"


@dataclass(frozen=True)
class CellValidationError:
    """A single validation problem found in the data.

    Attributes:
        row: Sheet row number (header is row 1), or a list of them
        column: Column name, or the constraint key for duplicates
        message: Human readable description
        error_type: Category of the error
    """

    row: int | list[int]
    column: str
    message: str
    error_type: ErrorType

    def to_dict(self) -> dict[str, Any]:
        """Export in the camel-case shape used by front-end consumers."""
        row = list(self.row) if isinstance(self.row, list) else self.row
        return {
            "row": row,
            "column": self.column,
            "message": self.message,
            "errorType": self.error_type.value,
        }


@dataclass(frozen=True)
class ErrorFragment:
    """Partial error returned by a custom validator.

    The engine fills in ``row`` and ``column`` to build a full
    ``CellValidationError``.
    """

    message: str
    error_type: ErrorType = ErrorType.CUSTOM_VALIDATION

    @classmethod
    def coerce(cls, result: Any) -> "ErrorFragment":
        """Build a fragment from whatever a custom validator returned.

        Accepts an ``ErrorFragment``, a mapping with ``message`` and
        ``errorType``/``error_type`` keys, a plain message string, or any
        other falsy-ish value (which yields a generic message).
        """
        if isinstance(result, ErrorFragment):
            return result
        if isinstance(result, CellValidationError):
            return cls(message=result.message, error_type=result.error_type)
        if isinstance(result, Mapping):
            raw_type = result.get("errorType", result.get("error_type"))
            error_type = ErrorType(raw_type) if raw_type else ErrorType.CUSTOM_VALIDATION
            message = result.get("message") or "Custom validation failed"
            return cls(message=str(message), error_type=error_type)
        if isinstance(result, str) and result:
            return cls(message=result)
        return cls(message="Custom validation failed")

    def to_error(self, row: int, column: str) -> CellValidationError:
        return CellValidationError(
            row=row,
            column=column,
            message=self.message,
            error_type=self.error_type,
        )
