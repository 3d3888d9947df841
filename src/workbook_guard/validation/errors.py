"""Exceptions raised by the validation engine and file orchestrator."""

from __future__ import annotations

from typing import Sequence

from .types import CellValidationError


class WorkbookGuardError(Exception):
    """Base exception for workbook-guard."""


class WorkbookStructureError(WorkbookGuardError):
    """A fatal precondition failed before any row was validated."""


class DecodeError(WorkbookStructureError):
    """The file could not be parsed as a spreadsheet."""


class EmptyDataError(WorkbookStructureError):
    """The sheet has a header but no data rows."""

    def __init__(self, message: str = "No data found in the file.") -> None:
        super().__init__(message)


class HeaderMismatchError(WorkbookStructureError):
    """The sheet's header row is missing columns the schema expects."""

    def __init__(
        self,
        missing: Sequence[str] = (),
        message: str = "Invalid file format. Please check the sample template.",
    ) -> None:
        self.missing = list(missing)
        super().__init__(message)


class FileTooLargeError(WorkbookStructureError):
    """The file exceeds the configured size limit."""

    def __init__(self, size: int, limit: int) -> None:
        self.size = size
        self.limit = limit
        super().__init__(
            f"File size exceeds maximum limit. "
            f"File is {size / (1024 * 1024):.2f} MB, "
            f"but maximum allowed size is {limit / (1024 * 1024):.2f} MB."
        )


class ValidationCancelled(WorkbookGuardError):
    """The run was stopped through the cancellation flag.

    Attributes:
        errors: Errors accumulated before the cancellation was observed
    """

    def __init__(self, errors: Sequence[CellValidationError] = ()) -> None:
        self.errors = list(errors)
        super().__init__("Validation stopped. The process was interrupted before completion.")
