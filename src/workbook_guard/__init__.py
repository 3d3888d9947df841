from ._version import __version__
from .validation import (
    CellKind,
    CellValidationError,
    ErrorFragment,
    ErrorType,
    FieldRule,
    ValidationCancelled,
    ValidationState,
    reconcile_headers,
    validate_data,
)
from .validator import WorkbookValidator
from .workbook import validate_file

__all__ = [
    "__version__",
    "CellKind",
    "CellValidationError",
    "ErrorFragment",
    "ErrorType",
    "FieldRule",
    "ValidationCancelled",
    "ValidationState",
    "WorkbookValidator",
    "reconcile_headers",
    "validate_data",
    "validate_file",
]
