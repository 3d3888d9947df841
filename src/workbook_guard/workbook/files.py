"""File-level validation: decode, check structure, then validate rows."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from ..config import ValidationSettings
from ..validation.engine import StepCallback, avalidate_data, validate_data
from ..validation.errors import EmptyDataError, FileTooLargeError, HeaderMismatchError
from ..validation.headers import missing_headers, reconcile_headers
from ..validation.schema import FieldRule, build_schema
from ..validation.state import ValidationState
from ..validation.types import CellValidationError
from .core import BinarySource, DecodedSheet, WorkbookConfig, decode_workbook, read_bytes

logger = logging.getLogger(__name__)


@dataclass
class FileValidationResult:
    """Complete result of validating a workbook file.

    Attributes:
        raw_rows: Records as decoded, untouched
        processed_rows: Cleaned rows restricted to schema columns
        errors: Per-cell and duplicate errors
    """

    raw_rows: list[dict[str, Any]] = field(default_factory=list)
    processed_rows: list[dict[str, Any]] = field(default_factory=list)
    errors: list[CellValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _load_sheet(
    source: BinarySource,
    schema: Mapping[str, FieldRule],
    settings: ValidationSettings,
    file_name: str | None,
) -> DecodedSheet:
    content = read_bytes(source)

    if settings.max_file_size is not None and len(content) > settings.max_file_size:
        raise FileTooLargeError(len(content), settings.max_file_size)

    config = WorkbookConfig(sheet_name=settings.sheet_name, infer_types=settings.infer_csv_types)
    sheet = decode_workbook(content, config=config, file_name=file_name)

    if not sheet.rows:
        raise EmptyDataError()

    if not reconcile_headers(schema, sheet.header):
        raise HeaderMismatchError(missing=missing_headers(schema, sheet.header))

    logger.debug("Decoded %d data row(s) with headers %s", len(sheet.rows), sheet.header)
    return sheet


def validate_file(
    source: BinarySource,
    schema: Mapping[str, FieldRule | Mapping[str, Any]],
    unique: Sequence[Sequence[str]] = (),
    *,
    state: ValidationState | None = None,
    settings: ValidationSettings | None = None,
    file_name: str | None = None,
    on_step: StepCallback | None = None,
) -> FileValidationResult:
    """Decode a workbook and validate its first sheet.

    Args:
        source: File content as bytes or a binary file object
        schema: Column rules
        unique: Column groups whose combined values must be distinct
        state: Shared progress/cancellation state
        settings: Engine and decoding settings
        file_name: Optional filename to help with format detection
        on_step: Called after every row and constraint group

    Returns:
        FileValidationResult with raw rows, processed rows and errors

    Raises:
        FileTooLargeError: If the file exceeds ``settings.max_file_size``
        DecodeError: If the file cannot be parsed
        EmptyDataError: If the sheet has no data rows
        HeaderMismatchError: If schema columns are missing from the header
        ValidationCancelled: If the run was cancelled
    """
    settings = settings if settings is not None else ValidationSettings()
    rules = build_schema(schema)
    sheet = _load_sheet(source, rules, settings, file_name)

    result = validate_data(
        sheet.rows, rules, unique, state=state, settings=settings, on_step=on_step
    )
    return FileValidationResult(
        raw_rows=sheet.rows, processed_rows=result.processed_rows, errors=result.errors
    )


async def avalidate_file(
    source: BinarySource,
    schema: Mapping[str, FieldRule | Mapping[str, Any]],
    unique: Sequence[Sequence[str]] = (),
    *,
    state: ValidationState | None = None,
    settings: ValidationSettings | None = None,
    file_name: str | None = None,
    on_step: StepCallback | None = None,
) -> FileValidationResult:
    """Async ``validate_file``: the row pass yields to the event loop per step."""
    settings = settings if settings is not None else ValidationSettings()
    rules = build_schema(schema)
    sheet = _load_sheet(source, rules, settings, file_name)

    result = await avalidate_data(
        sheet.rows, rules, unique, state=state, settings=settings, on_step=on_step
    )
    return FileValidationResult(
        raw_rows=sheet.rows, processed_rows=result.processed_rows, errors=result.errors
    )
