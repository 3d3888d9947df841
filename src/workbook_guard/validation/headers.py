"""Header row reconciliation against a validation schema."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

logger = logging.getLogger(__name__)


def normalize_header(value: Any) -> str:
    """Trimmed string form of a header cell (blank cells become ``""``)."""
    if value is None:
        return ""
    return str(value).strip()


def reconcile_headers(schema: Mapping[str, Any], headers: Iterable[Any]) -> bool:
    """Check that every schema column is present in the sheet's header row.

    Missing columns are logged as a warning and make the header invalid.
    Extra columns are logged and otherwise ignored.

    Args:
        schema: Validation schema (only its keys are used)
        headers: Literal first row of the sheet

    Returns:
        True if all expected columns are present
    """
    expected = list(schema.keys())
    found = [normalize_header(header) for header in headers]
    found_set = set(found)

    missing = [column for column in expected if column not in found_set]
    if missing:
        logger.warning(
            "Missing columns detected. Missing: %s. Expected headers: %s. Found headers: %s",
            ", ".join(missing),
            ", ".join(expected),
            ", ".join(found),
        )
        return False

    expected_set = set(expected)
    extra = [header for header in found if header not in expected_set]
    if extra:
        logger.info(
            "Additional columns are present in the file: %s. These columns will be ignored.",
            ",".join(extra),
        )

    return True


def missing_headers(schema: Mapping[str, Any], headers: Iterable[Any]) -> list[str]:
    """Schema columns absent from *headers*, in schema order."""
    found = {normalize_header(header) for header in headers}
    return [column for column in schema if column not in found]
