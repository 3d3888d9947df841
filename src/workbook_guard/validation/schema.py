"""Declarative column rules.

A validation schema maps column names to ``FieldRule`` instances::

    schema = build_schema({
        "email": {"type": "string", "required": True, "validators": {"isEmail": True}},
        "age": FieldRule(type="number"),
        "status": {"acceptedValues": ["active", "inactive"]},
    })

Both snake_case and the camelCase spellings used by front-end schema
definitions are accepted.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Sequence

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from .types import CellKind

CustomValidator = Callable[[Any, Mapping[str, Any]], Any]


class BuiltinValidators(BaseModel):
    """Toggles for the built-in format checks."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    is_email: bool = Field(
        default=False,
        validation_alias=AliasChoices("is_email", "isEmail"),
    )
    is_mobile_number: bool = Field(
        default=False,
        validation_alias=AliasChoices("is_mobile_number", "isMobileNumber", "isMobileNo"),
    )
    is_employee_number: bool = Field(
        default=False,
        validation_alias=AliasChoices("is_employee_number", "isEmployeeNumber"),
    )


class FieldRule(BaseModel):
    """Rules applied to every cell of one column.

    Attributes:
        type: Expected value kind; ``unset`` skips the type check
        required: Whether empty cells are reported
        validators: Built-in format checks to run
        accepted_values: Closed set of allowed literals
        custom_validator: ``(value, row) -> True | ErrorFragment``
    """

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    type: CellKind = CellKind.unset
    required: bool = False
    validators: BuiltinValidators = Field(default_factory=BuiltinValidators)
    accepted_values: list[str | int | float] | None = Field(
        default=None,
        validation_alias=AliasChoices("accepted_values", "acceptedValues"),
    )
    custom_validator: CustomValidator | None = Field(
        default=None,
        validation_alias=AliasChoices("custom_validator", "customValidator"),
    )

    @field_validator("type", mode="before")
    @classmethod
    def _normalize_type(cls, value: Any) -> Any:
        if value is None:
            return CellKind.unset
        # "object" is the legacy spelling for a null-only column
        if isinstance(value, str) and value.strip().lower() == "object":
            return CellKind.null
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("validators", mode="before")
    @classmethod
    def _none_means_no_validators(cls, value: Any) -> Any:
        return {} if value is None else value


ValidationSchema = Dict[str, FieldRule]
UniqueConstraints = Sequence[Sequence[str]]


def build_schema(schema: Mapping[str, FieldRule | Mapping[str, Any]]) -> ValidationSchema:
    """Normalize a schema definition into ``{column: FieldRule}``.

    Column order is preserved; it is the order cells are checked in.

    Raises:
        TypeError: If a column name is not a string
        pydantic.ValidationError: If a rule definition is invalid
    """
    normalized: ValidationSchema = {}
    for column, rule in schema.items():
        if not isinstance(column, str):
            raise TypeError(f"Schema column names must be strings, got {type(column).__name__}")
        normalized[column] = rule if isinstance(rule, FieldRule) else FieldRule.model_validate(rule)
    return normalized


def constraint_key(columns: Sequence[str]) -> str:
    """Name of a uniqueness group, used as the ``column`` of duplicate errors."""
    return "-".join(columns).strip()
