"""Built-in format checks."""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Any

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
# Optional +91 or 0 trunk prefix, then a 10 digit subscriber number.
MOBILE_PATTERN = re.compile(r"(?:\+91|0)?\d{10}", re.ASCII)
EMPLOYEE_NUMBER_PATTERN = re.compile(r"\d{7,9}", re.ASCII)
_WHITESPACE = re.compile(r"\s+")


def is_text_or_number(value: Any) -> bool:
    """True for strings and non-boolean numbers."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (str, int, float, Decimal))


def stringify(value: Any) -> str:
    """Render a cell value the way a spreadsheet displays it.

    Integral floats drop their fractional part (``1234567.0`` -> ``"1234567"``)
    and booleans render as ``true`` / ``false``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def is_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.fullmatch(value))


def is_mobile_number(value: str | int | float) -> bool:
    return bool(MOBILE_PATTERN.fullmatch(_WHITESPACE.sub("", stringify(value))))


def is_employee_number(value: str | int | float) -> bool:
    return bool(EMPLOYEE_NUMBER_PATTERN.fullmatch(stringify(value)))
