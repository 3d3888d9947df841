"""Workbook decoding and file-level validation for workbook-guard.

This module decodes CSV/XLSX uploads and runs them through the validation
engine.
"""

from __future__ import annotations

from .core import (
    DecodedSheet,
    TabularFormat,
    WorkbookConfig,
    decode_workbook,
    detect_format,
)
from .files import FileValidationResult, avalidate_file, validate_file
from .messages import build_validation_error_messages

__all__ = [
    "DecodedSheet",
    "FileValidationResult",
    "TabularFormat",
    "WorkbookConfig",
    "avalidate_file",
    "build_validation_error_messages",
    "decode_workbook",
    "detect_format",
    "validate_file",
]
