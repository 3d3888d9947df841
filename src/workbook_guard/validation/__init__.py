"""Schema-driven validation of decoded spreadsheet rows."""

from __future__ import annotations

from .engine import (
    DataValidationResult,
    ValidationRun,
    ValidationStep,
    avalidate_data,
    validate_data,
)
from .errors import (
    DecodeError,
    EmptyDataError,
    FileTooLargeError,
    HeaderMismatchError,
    ValidationCancelled,
    WorkbookGuardError,
    WorkbookStructureError,
)
from .headers import missing_headers, reconcile_headers
from .rules import is_email, is_employee_number, is_mobile_number
from .schema import BuiltinValidators, FieldRule, ValidationSchema, build_schema, constraint_key
from .state import ValidationState
from .types import CellKind, CellValidationError, ErrorFragment, ErrorType, cell_kind
from .uniqueness import UniquenessTracker

__all__ = [
    "BuiltinValidators",
    "CellKind",
    "CellValidationError",
    "DataValidationResult",
    "DecodeError",
    "EmptyDataError",
    "ErrorFragment",
    "ErrorType",
    "FieldRule",
    "FileTooLargeError",
    "HeaderMismatchError",
    "UniquenessTracker",
    "ValidationCancelled",
    "ValidationRun",
    "ValidationSchema",
    "ValidationState",
    "ValidationStep",
    "WorkbookGuardError",
    "WorkbookStructureError",
    "avalidate_data",
    "build_schema",
    "cell_kind",
    "constraint_key",
    "is_email",
    "is_employee_number",
    "is_mobile_number",
    "missing_headers",
    "reconcile_headers",
    "validate_data",
]
