"""Cast helpers for config values.

Turns raw values from environment variables or the JSON settings file into
the types ``ValidationSettings`` expects.
"""

from __future__ import annotations

import re
from typing import Any


# ---------------------------------------------------------------------------
# File sizes
# ---------------------------------------------------------------------------

_SIZE_UNITS = {
    "": 1,
    "B": 1,
    "KB": 1024,
    "MB": 1024**2,
    "GB": 1024**3,
}

_SIZE_PATTERN = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*([KMG]?B?)\s*$", re.IGNORECASE)


def parse_file_size(value: Any) -> int | None:
    """Parse a human file size into bytes.

    >>> parse_file_size("10MB")
    10485760
    >>> parse_file_size(2048)
    2048

    ``None`` and empty strings mean "no limit" and return ``None``.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"Cannot cast {value!r} to a file size")
    if isinstance(value, (int, float)):
        if value < 0:
            raise ValueError("File size must be >= 0")
        return int(value)
    if isinstance(value, str):
        if not value.strip():
            return None
        match = _SIZE_PATTERN.match(value)
        if match is None:
            raise ValueError(f"Cannot parse file size {value!r}")
        number, unit = match.groups()
        unit = unit.upper()
        if unit in ("K", "M", "G"):
            unit += "B"
        return int(float(number) * _SIZE_UNITS[unit])
    raise ValueError(f"Cannot cast {type(value).__name__} to a file size")
