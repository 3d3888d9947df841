"""User-facing rendering of validation errors."""

from __future__ import annotations

from typing import Any, Literal, Sequence

from ..validation.types import CellValidationError


def _row_label(row: int | list[int]) -> str:
    if isinstance(row, list):
        return "Rows " + ", ".join(str(r) for r in row)
    return f"Row {row}"


def _sort_key(row: int | list[int]) -> int:
    if isinstance(row, list):
        return min(row) if row else 0
    return row


def build_validation_error_messages(
    errors: Sequence[CellValidationError],
    *,
    total_rows: int | None = None,
    max_errors: int = 50,
    format_style: Literal["flat", "structured"] = "flat",
) -> tuple[list[str], dict[str, Any]]:
    """Build user-friendly error messages from validation errors.

    Args:
        errors: Errors returned by ``validate_data`` / ``validate_file``
        total_rows: Number of data rows, used in the structured summary line
        max_errors: Maximum number of errors (flat) or rows (structured) to show
        format_style: "flat" for one line per error, or "structured" for a
            summary followed by errors grouped under each row

    Returns:
        Tuple of (formatted_messages, error_details):
        - formatted_messages: List of strings ready to show to a user
        - error_details: Dict with grouped error information for programmatic access

    Example:
        >>> result = validate_file(content, schema)
        >>> messages, details = build_validation_error_messages(result.errors)
    """
    errors_by_row: dict[int, list[CellValidationError]] = {}
    labels: dict[int, str] = {}
    errors_by_type: dict[str, int] = {}

    for error in errors:
        key = _sort_key(error.row)
        errors_by_row.setdefault(key, []).append(error)
        labels.setdefault(key, _row_label(error.row))
        errors_by_type[error.error_type.value] = errors_by_type.get(error.error_type.value, 0) + 1

    formatted_messages: list[str] = []
    error_count = len(errors)

    if format_style == "flat":
        errors_shown = 0
        for row_key in sorted(errors_by_row):
            for error in errors_by_row[row_key]:
                if errors_shown >= max_errors:
                    break
                formatted_messages.append(
                    f"{_row_label(error.row)}, {error.column}: {error.message}"
                )
                errors_shown += 1

        if error_count > max_errors:
            remaining = error_count - max_errors
            formatted_messages.append(
                f"... and {remaining} more error(s). Please fix the errors above and try again."
            )

    elif format_style == "structured":
        if total_rows is not None:
            summary = (
                f"File validation failed: {len(errors_by_row)} row(s) "
                f"with {error_count} error(s) out of {total_rows} total row(s)."
            )
        else:
            summary = (
                f"File validation failed: {len(errors_by_row)} row(s) "
                f"with {error_count} error(s)."
            )
        formatted_messages.append(summary)
        formatted_messages.append("")

        rows_shown = 0
        for row_key in sorted(errors_by_row):
            if rows_shown >= max_errors:
                remaining_rows = len(errors_by_row) - rows_shown
                formatted_messages.append(
                    f"... and {remaining_rows} more row(s) with errors. "
                    f"Please fix the errors above and try again."
                )
                break

            row_errors = errors_by_row[row_key]
            formatted_messages.append(f"{labels[row_key]} ({len(row_errors)} error(s)):")
            for error in row_errors:
                formatted_messages.append(f"  • {error.column}: {error.message}")
            formatted_messages.append("")
            rows_shown += 1

    else:
        raise ValueError(f"Unknown format_style {format_style!r}; use 'flat' or 'structured'")

    error_details = {
        "error_count": error_count,
        "errors_by_row": {
            row_key: [error.to_dict() for error in row_errors]
            for row_key, row_errors in sorted(errors_by_row.items())
        },
        "errors_by_type": errors_by_type,
        "invalid_row_numbers": sorted(errors_by_row),
    }

    return formatted_messages, error_details
