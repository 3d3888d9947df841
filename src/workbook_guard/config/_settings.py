"""Engine settings resolved through the config layer."""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from ._app_config import AppConfig
from ._casters import parse_file_size
from ._repository import ConfigRepository


class ValidationSettings(AppConfig):
    """Tunables for header reconciliation, row validation and decoding.

    Every field can be overridden with a ``WORKBOOK_GUARD_<FIELD>``
    environment variable or a top-level key in the settings file.
    """

    class Meta:
        prefix = ""
        env_prefix = "WORKBOOK_GUARD"

    null_sentinel: str = "NULL"
    key_separator: str = Field(default="-", min_length=1)
    row_number_offset: int = Field(default=2, ge=0)
    max_file_size: int | None = None
    sheet_name: str | None = None
    infer_csv_types: bool = True

    @field_validator("max_file_size", mode="before")
    @classmethod
    def _parse_max_file_size(cls, value: Any) -> int | None:
        return parse_file_size(value)

    @field_validator("sheet_name", mode="before")
    @classmethod
    def _blank_sheet_name_is_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


def load_settings(repo: ConfigRepository | None = None) -> ValidationSettings:
    """Load ``ValidationSettings`` from the active config repository."""
    return ValidationSettings.load(repo=repo)  # type: ignore[return-value]
