"""Tests for value kinds, error records and fragments."""

import datetime
from decimal import Decimal

import pytest

from workbook_guard.validation.types import (
    CellKind,
    CellValidationError,
    ErrorFragment,
    ErrorType,
    cell_kind,
    describe_kind,
)


class TestCellKind:
    @pytest.mark.parametrize(
        "value, kind",
        [
            ("text", CellKind.string),
            ("", CellKind.string),
            (1, CellKind.number),
            (1.5, CellKind.number),
            (Decimal("2.5"), CellKind.number),
            (datetime.datetime(2024, 1, 1), CellKind.number),
            (datetime.date(2024, 1, 1), CellKind.number),
            (True, CellKind.boolean),
            (False, CellKind.boolean),
            (None, CellKind.null),
        ],
    )
    def test_tags(self, value, kind):
        assert cell_kind(value) is kind

    def test_unknown_values(self):
        assert cell_kind([1, 2]) is None
        assert describe_kind([1, 2]) == "list"
        assert describe_kind("x") == "string"


class TestCellValidationError:
    def test_to_dict_uses_camel_case(self):
        error = CellValidationError(
            row=3, column="email", message="Invalid email address", error_type=ErrorType.EMAIL_RULE
        )

        assert error.to_dict() == {
            "row": 3,
            "column": "email",
            "message": "Invalid email address",
            "errorType": "email_rule",
        }

    def test_error_type_values(self):
        assert ErrorType.DUPLICATE.value == "duplicate"
        assert ErrorType("type_mismatch") is ErrorType.TYPE_MISMATCH


class TestErrorFragment:
    def test_fragment_passthrough(self):
        fragment = ErrorFragment("Too young")
        assert ErrorFragment.coerce(fragment) is fragment
        assert fragment.error_type is ErrorType.CUSTOM_VALIDATION

    def test_from_mapping(self):
        fragment = ErrorFragment.coerce({"message": "Bad code", "errorType": "accepted_values"})
        assert fragment == ErrorFragment("Bad code", ErrorType.ACCEPTED_VALUES)

    def test_from_snake_case_mapping(self):
        fragment = ErrorFragment.coerce({"message": "Bad", "error_type": ErrorType.EMAIL_RULE})
        assert fragment.error_type is ErrorType.EMAIL_RULE

    def test_from_string(self):
        assert ErrorFragment.coerce("Nope").message == "Nope"

    @pytest.mark.parametrize("result", [False, None, 0, ""])
    def test_falsy_results_get_generic_message(self, result):
        assert ErrorFragment.coerce(result).message == "Custom validation failed"

    def test_to_error_fills_row_and_column(self):
        error = ErrorFragment("Too young").to_error(5, "age")
        assert error == CellValidationError(
            row=5, column="age", message="Too young", error_type=ErrorType.CUSTOM_VALIDATION
        )
