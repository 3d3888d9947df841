"""One-object entry point bundling the validation functions with shared state."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping, Sequence, Union

from .config import ValidationSettings, load_settings
from .validation.engine import DataValidationResult, Row, StepCallback, avalidate_data, validate_data
from .validation.headers import reconcile_headers
from .validation.schema import FieldRule
from .validation.state import ProgressListener, ValidationState
from .workbook.core import BinarySource
from .workbook.files import FileValidationResult, avalidate_file, validate_file

Schema = Mapping[str, Union[FieldRule, Mapping[str, Any]]]


class WorkbookValidator:
    """Validation functions sharing one progress/cancellation state.

    Usage::

        validator = WorkbookValidator()
        validator.on_progress(lambda percent: print(f"{percent}%"))

        try:
            result = validator.validate_file(content, schema, [["email"], ["name", "department"]])
        except ValidationCancelled as e:
            print("Partial errors:", e.errors)

    ``cancel()`` may be called from another thread or, with the async
    methods, from another task while a run is in progress.
    """

    def __init__(
        self,
        settings: ValidationSettings | None = None,
        state: ValidationState | None = None,
    ) -> None:
        self.settings = settings if settings is not None else load_settings()
        self.state = state if state is not None else ValidationState()

    @property
    def progress(self) -> int:
        return self.state.progress

    @property
    def is_cancelled(self) -> bool:
        return self.state.is_cancelled

    def cancel(self) -> None:
        self.state.cancel()

    def on_progress(self, listener: ProgressListener) -> Callable[[], None]:
        return self.state.on_progress(listener)

    def validate_header(self, schema: Schema, headers: Iterable[Any]) -> bool:
        return reconcile_headers(schema, headers)

    def validate_data(
        self,
        rows: Sequence[Row],
        schema: Schema,
        unique: Sequence[Sequence[str]] = (),
        *,
        on_step: StepCallback | None = None,
    ) -> DataValidationResult:
        return validate_data(
            rows, schema, unique, state=self.state, settings=self.settings, on_step=on_step
        )

    async def avalidate_data(
        self,
        rows: Sequence[Row],
        schema: Schema,
        unique: Sequence[Sequence[str]] = (),
        *,
        on_step: StepCallback | None = None,
    ) -> DataValidationResult:
        return await avalidate_data(
            rows, schema, unique, state=self.state, settings=self.settings, on_step=on_step
        )

    def validate_file(
        self,
        source: BinarySource,
        schema: Schema,
        unique: Sequence[Sequence[str]] = (),
        *,
        file_name: str | None = None,
        on_step: StepCallback | None = None,
    ) -> FileValidationResult:
        return validate_file(
            source,
            schema,
            unique,
            state=self.state,
            settings=self.settings,
            file_name=file_name,
            on_step=on_step,
        )

    async def avalidate_file(
        self,
        source: BinarySource,
        schema: Schema,
        unique: Sequence[Sequence[str]] = (),
        *,
        file_name: str | None = None,
        on_step: StepCallback | None = None,
    ) -> FileValidationResult:
        return await avalidate_file(
            source,
            schema,
            unique,
            state=self.state,
            settings=self.settings,
            file_name=file_name,
            on_step=on_step,
        )
