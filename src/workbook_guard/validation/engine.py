"""Row and uniqueness validation engine.

A run walks the rows in input order, checks every schema column of every
row, records composite keys for the uniqueness groups and, once all rows
are seen, resolves duplicates group by group. After each row and each
group the run yields a ``ValidationStep``: this is where observers get a
chance to run and where a cancellation request takes effect.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Literal, Mapping, Sequence

from ..config import ValidationSettings
from .errors import ValidationCancelled
from .rules import is_email, is_employee_number, is_mobile_number, is_text_or_number, stringify
from .schema import FieldRule, build_schema
from .state import ProgressTracker, ValidationState
from .types import CellKind, CellValidationError, ErrorFragment, ErrorType, cell_kind, describe_kind
from .uniqueness import UniquenessTracker

logger = logging.getLogger(__name__)

Row = Mapping[str, Any]


@dataclass(frozen=True)
class ValidationStep:
    """Emitted after each completed row or constraint group."""

    kind: Literal["row", "constraint"]
    index: int
    completed_steps: int
    total_steps: int
    progress: int


@dataclass
class DataValidationResult:
    """Errors found in a run plus the cleaned copy of the rows.

    Attributes:
        errors: Per-cell and duplicate errors, in emission order
        processed_rows: One dict per input row restricted to schema columns
    """

    errors: list[CellValidationError] = field(default_factory=list)
    processed_rows: list[dict[str, Any]] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def error_dicts(self) -> list[dict[str, Any]]:
        return [error.to_dict() for error in self.errors]


StepCallback = Callable[[ValidationStep], None]


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


def _is_accepted(value: Any, accepted: Sequence[Any]) -> bool:
    # True == 1 in Python; a boolean cell never matches a numeric literal.
    if isinstance(value, bool):
        return False
    return value in accepted


class ValidationRun:
    """State of a single validation pass over a set of rows."""

    def __init__(
        self,
        rows: Sequence[Row],
        schema: Mapping[str, FieldRule | Mapping[str, Any]],
        unique: Sequence[Sequence[str]] = (),
        *,
        state: ValidationState | None = None,
        settings: ValidationSettings | None = None,
    ) -> None:
        self.rows = rows
        self.schema = build_schema(schema)
        self.state = state if state is not None else ValidationState()
        self.settings = settings if settings is not None else ValidationSettings()
        self.tracker = UniquenessTracker(
            unique,
            null_sentinel=self.settings.null_sentinel,
            separator=self.settings.key_separator,
        )
        self.total_steps = len(rows) + len(self.tracker.groups)
        self.errors: list[CellValidationError] = []
        self.processed_rows: list[dict[str, Any]] = []

    def row_number(self, index: int) -> int:
        return index + self.settings.row_number_offset

    def result(self) -> DataValidationResult:
        return DataValidationResult(errors=self.errors, processed_rows=self.processed_rows)

    def _raise_if_cancelled(self) -> None:
        if self.state.is_cancelled:
            logger.info("Validation cancelled with %d error(s) collected", len(self.errors))
            raise ValidationCancelled(self.errors)

    def steps(self) -> Iterator[ValidationStep]:
        """Run the validation, yielding after every row and constraint group.

        Raises:
            ValidationCancelled: If the state's cancellation flag is set at
                the start of a row or a group
        """
        self.state.reset()
        self.errors = []
        self.processed_rows = []
        self.tracker.reset()
        tracker = ProgressTracker(self.state, self.total_steps)

        logger.debug(
            "Validating %d row(s) against %d column(s) and %d unique group(s)",
            len(self.rows),
            len(self.schema),
            len(self.tracker.groups),
        )

        for index, row in enumerate(self.rows):
            self._raise_if_cancelled()

            row_number = self.row_number(index)
            self.processed_rows.append(self.validate_row(row, row_number))
            self.tracker.record(row, row_number)

            percent = tracker.advance()
            yield ValidationStep("row", index, tracker.completed_steps, self.total_steps, percent)

        for index, group in enumerate(self.tracker.groups):
            self._raise_if_cancelled()

            self.errors.extend(group.duplicates())

            percent = tracker.advance()
            yield ValidationStep(
                "constraint", index, tracker.completed_steps, self.total_steps, percent
            )

        logger.debug(
            "Validation finished: %d row(s), %d error(s)", len(self.processed_rows), len(self.errors)
        )

    def validate_row(self, row: Row, row_number: int) -> dict[str, Any]:
        """Check every schema column of *row* and return its processed copy."""
        processed: dict[str, Any] = {}

        for column, rule in self.schema.items():
            raw_value = row.get(column)
            value = raw_value.strip() if isinstance(raw_value, str) else raw_value
            processed[column] = value
            self.errors.extend(self._check_cell(column, rule, value, row, row_number))

        return processed

    def _check_cell(
        self,
        column: str,
        rule: FieldRule,
        value: Any,
        row: Row,
        row_number: int,
    ) -> list[CellValidationError]:
        def error(message: str, error_type: ErrorType) -> CellValidationError:
            return CellValidationError(
                row=row_number, column=column, message=message, error_type=error_type
            )

        if rule.required and _is_blank(value):
            return [error("This field is required", ErrorType.REQUIRED)]

        if value is None:
            return []

        if rule.type is not CellKind.unset and cell_kind(value) is not rule.type:
            return [
                error(
                    f"Expected type {rule.type.value}, got {describe_kind(value)}",
                    ErrorType.TYPE_MISMATCH,
                )
            ]

        found: list[CellValidationError] = []

        validators = rule.validators
        if validators.is_email and isinstance(value, str) and not is_email(value):
            found.append(error("Invalid email address", ErrorType.EMAIL_RULE))
        if validators.is_mobile_number and is_text_or_number(value) and not is_mobile_number(value):
            found.append(error("Invalid mobile number", ErrorType.MOBILE_RULE))
        if (
            validators.is_employee_number
            and is_text_or_number(value)
            and not is_employee_number(value)
        ):
            found.append(error("Invalid employee number", ErrorType.EMPLOYEE_RULE))

        if rule.accepted_values is not None and not _is_accepted(value, rule.accepted_values):
            allowed = ", ".join(stringify(v) for v in rule.accepted_values)
            found.append(error(f"Value must be one of: {allowed}", ErrorType.ACCEPTED_VALUES))

        if rule.custom_validator is not None:
            outcome = rule.custom_validator(value, row)
            if outcome is not True:
                found.append(ErrorFragment.coerce(outcome).to_error(row_number, column))

        return found


def validate_data(
    rows: Sequence[Row],
    schema: Mapping[str, FieldRule | Mapping[str, Any]],
    unique: Sequence[Sequence[str]] = (),
    *,
    state: ValidationState | None = None,
    settings: ValidationSettings | None = None,
    on_step: StepCallback | None = None,
) -> DataValidationResult:
    """Validate *rows* against *schema* and the *unique* column groups.

    Args:
        rows: Decoded data rows keyed by header
        schema: Column rules (``FieldRule`` or plain dict definitions)
        unique: Column groups whose combined values must be distinct
        state: Shared progress/cancellation state; a private one by default
        settings: Engine settings; defaults when omitted
        on_step: Called after every row and constraint group

    Returns:
        DataValidationResult with errors and processed rows

    Raises:
        ValidationCancelled: If ``state.cancel()`` was observed mid-run
    """
    run = ValidationRun(rows, schema, unique, state=state, settings=settings)
    for step in run.steps():
        if on_step is not None:
            on_step(step)
    return run.result()


async def avalidate_data(
    rows: Sequence[Row],
    schema: Mapping[str, FieldRule | Mapping[str, Any]],
    unique: Sequence[Sequence[str]] = (),
    *,
    state: ValidationState | None = None,
    settings: ValidationSettings | None = None,
    on_step: StepCallback | None = None,
) -> DataValidationResult:
    """Async ``validate_data``: yields to the event loop after every step."""
    run = ValidationRun(rows, schema, unique, state=state, settings=settings)
    for step in run.steps():
        if on_step is not None:
            on_step(step)
        await asyncio.sleep(0)
    return run.result()
