"""Spreadsheet decoding.

Turns raw CSV/XLSX bytes into the first sheet's data rows (keyed by the
header) plus the literal header row. This module knows nothing about
validation rules.
"""

from __future__ import annotations

import csv
import io
import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, BinaryIO, Iterable, Sequence, Union
from zipfile import BadZipFile

from ..validation.errors import DecodeError

logger = logging.getLogger(__name__)

BinarySource = Union[bytes, bytearray, memoryview, BinaryIO]

EMPTY_HEADER = "__EMPTY"


class TabularFormat(str, Enum):
    """Supported workbook formats."""

    auto = "auto"
    csv = "csv"
    xlsx = "xlsx"


@dataclass
class WorkbookConfig:
    """Configuration for decoding a workbook."""

    format: TabularFormat = TabularFormat.auto
    delimiter: str = ","  # CSV delimiter
    encoding: str = "utf-8-sig"  # CSV text encoding
    sheet_name: str | None = None  # default: first sheet for XLSX
    infer_types: bool = True  # parse CSV numbers and TRUE/FALSE

    def __post_init__(self):
        if len(self.delimiter) != 1:
            raise ValueError("delimiter must be a single character")


@dataclass
class DecodedSheet:
    """Contents of one decoded sheet.

    Attributes:
        rows: Data rows as ``{header: value}``; empty cells are omitted
        header: Literal first row of the sheet
    """

    rows: list[dict[str, Any]] = field(default_factory=list)
    header: list[Any] = field(default_factory=list)


def read_bytes(source: BinarySource) -> bytes:
    """Return the full content of a bytes-like object or binary stream."""
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)
    if hasattr(source, "read"):
        try:
            source.seek(0)
        except (AttributeError, OSError):
            pass
        content = source.read()
        if isinstance(content, str):
            raise TypeError("Workbook input must be binary, got a text stream")
        return bytes(content)
    raise TypeError(f"Expected bytes or a binary file object, got {type(source).__name__}")


def detect_format(content: bytes, file_name: str | None = None) -> TabularFormat:
    """Detect workbook format from file name or content.

    Args:
        content: Raw file bytes
        file_name: Optional filename to help with detection

    Returns:
        Detected TabularFormat (csv or xlsx)
    """
    if file_name:
        file_name_lower = file_name.lower()
        if file_name_lower.endswith((".xlsx", ".xlsm")):
            return TabularFormat.xlsx
        elif file_name_lower.endswith(".csv"):
            return TabularFormat.csv

    # XLSX files are ZIP archives: PK\x03\x04
    if content[:4] == b"PK\x03\x04":
        return TabularFormat.xlsx
    return TabularFormat.csv


def header_keys(header: Sequence[Any], width: int) -> list[str]:
    """Build unique record keys for *width* columns from the header row.

    Blank header cells become ``__EMPTY``; repeated names get ``_1``,
    ``_2`` ... suffixes in order of appearance.
    """
    keys: list[str] = []
    seen: dict[str, int] = {}
    for index in range(width):
        value = header[index] if index < len(header) else None
        base = EMPTY_HEADER if value is None or str(value) == "" else str(value)
        key = base
        if base in seen:
            seen[base] += 1
            key = f"{base}_{seen[base]}"
            while key in seen:
                seen[base] += 1
                key = f"{base}_{seen[base]}"
        seen.setdefault(key, 0)
        keys.append(key)
    return keys


def _is_empty_row(values: Sequence[Any]) -> bool:
    return all(value is None or value == "" for value in values)


def rows_to_records(rows: Iterable[Sequence[Any]]) -> DecodedSheet:
    """Split raw sheet rows into the header row and keyed data records.

    Leading empty rows are skipped; the first non-empty row is the header.
    Fully empty data rows are dropped.
    """
    iterator = iter(rows)
    header: list[Any] | None = None
    for values in iterator:
        if not _is_empty_row(values):
            header = list(values)
            break

    sheet = DecodedSheet(header=header or [])
    if header is None:
        return sheet

    while sheet.header and (sheet.header[-1] is None or sheet.header[-1] == ""):
        sheet.header.pop()

    keys = header_keys(sheet.header, len(sheet.header))
    for values in iterator:
        if _is_empty_row(values):
            continue
        if len(values) > len(keys):
            keys = header_keys(sheet.header, len(values))
        record = {
            keys[index]: value
            for index, value in enumerate(values)
            if value is not None and value != ""
        }
        sheet.rows.append(record)

    return sheet


# ---------------------------------------------------------------------------
# CSV
# ---------------------------------------------------------------------------

_INT_PATTERN = re.compile(r"-?(?:0|[1-9]\d*)", re.ASCII)
_FLOAT_PATTERN = re.compile(r"-?(?:0|[1-9]\d*)?\.\d+(?:[eE][+-]?\d+)?|-?(?:0|[1-9]\d*)[eE][+-]?\d+", re.ASCII)


def infer_cell(value: str) -> Any:
    """Convert a CSV cell to a number or boolean when it clearly is one.

    Numbers with leading zeros (``"0123"``) stay strings so phone and
    employee numbers keep their digits.
    """
    candidate = value.strip()
    if _INT_PATTERN.fullmatch(candidate):
        return int(candidate)
    if _FLOAT_PATTERN.fullmatch(candidate):
        return float(candidate)
    upper = candidate.upper()
    if upper == "TRUE":
        return True
    if upper == "FALSE":
        return False
    return value


def _iter_csv_rows(content: bytes, config: WorkbookConfig) -> Iterable[list[Any]]:
    try:
        text = content.decode(config.encoding)
    except UnicodeDecodeError as e:
        raise DecodeError(f"Invalid Excel file format: {e}") from e

    try:
        for values in csv.reader(io.StringIO(text, newline=""), delimiter=config.delimiter):
            if config.infer_types:
                yield [infer_cell(value) if value != "" else None for value in values]
            else:
                yield [value if value != "" else None for value in values]
    except csv.Error as e:
        raise DecodeError(f"Invalid Excel file format: {e}") from e


# ---------------------------------------------------------------------------
# XLSX
# ---------------------------------------------------------------------------


def _decode_xlsx(content: bytes, config: WorkbookConfig) -> DecodedSheet:
    try:
        from openpyxl import load_workbook
        from openpyxl.utils.exceptions import InvalidFileException
    except ImportError:
        raise ImportError(
            "openpyxl is required for XLSX support. Install it with: pip install openpyxl"
        )

    try:
        wb = load_workbook(io.BytesIO(content), read_only=True, data_only=True)
    except (InvalidFileException, BadZipFile, KeyError, OSError, ValueError, SyntaxError) as e:
        raise DecodeError(f"Invalid Excel file format: {e}") from e

    try:
        if config.sheet_name:
            if config.sheet_name not in wb.sheetnames:
                raise DecodeError(
                    f"Sheet '{config.sheet_name}' not found in workbook. "
                    f"Available sheets: {wb.sheetnames}"
                )
            ws = wb[config.sheet_name]
        elif wb.worksheets:
            ws = wb.worksheets[0]
        else:
            return DecodedSheet()

        # Read-only sheets parse their XML lazily, while rows are iterated.
        try:
            return rows_to_records(ws.iter_rows(values_only=True))
        except (SyntaxError, KeyError, ValueError, BadZipFile) as e:
            raise DecodeError(f"Invalid Excel file format: {e}") from e
    finally:
        wb.close()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def decode_workbook(
    source: BinarySource,
    *,
    config: WorkbookConfig | None = None,
    file_name: str | None = None,
) -> DecodedSheet:
    """Decode the first (or configured) sheet of a CSV/XLSX file.

    Args:
        source: File content as bytes or a binary file object
        config: Decoding options
        file_name: Optional filename to help with format detection

    Returns:
        DecodedSheet with data records and the literal header row

    Raises:
        DecodeError: If the content cannot be parsed
    """
    if config is None:
        config = WorkbookConfig()

    content = read_bytes(source)

    if config.format == TabularFormat.auto:
        format_to_use = detect_format(content, file_name)
    else:
        format_to_use = TabularFormat(config.format)

    logger.debug("Decoding %d byte(s) as %s", len(content), format_to_use.value)

    try:
        if format_to_use == TabularFormat.xlsx:
            return _decode_xlsx(content, config)
        return rows_to_records(_iter_csv_rows(content, config))
    except DecodeError as e:
        logger.warning("Could not decode workbook: %s", e)
        raise
