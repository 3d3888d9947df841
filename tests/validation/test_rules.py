"""Tests for the built-in format checks."""

import pytest

from workbook_guard.validation.rules import (
    is_email,
    is_employee_number,
    is_mobile_number,
    is_text_or_number,
    stringify,
)


class TestIsEmail:
    @pytest.mark.parametrize("value", ["a@b.com", "first.last@example.co.in", "a@b.c"])
    def test_valid(self, value):
        assert is_email(value)

    @pytest.mark.parametrize(
        "value", ["not-an-email", "a@b", "@b.com", "a@.com", "a b@c.com", "a@@b.com", ""]
    )
    def test_invalid(self, value):
        assert not is_email(value)


class TestIsMobileNumber:
    @pytest.mark.parametrize(
        "value",
        ["9876543210", "+919876543210", "09876543210", "98765 43210", "+91 98765 43210", 9876543210],
    )
    def test_valid(self, value):
        assert is_mobile_number(value)

    def test_integral_float_is_valid(self):
        assert is_mobile_number(9876543210.0)

    @pytest.mark.parametrize(
        "value", ["12345", "+9198765", "+9298765432100", "98765432101", "98765-43210", "٩٨٧٦٥٤٣٢١٠"]
    )
    def test_invalid(self, value):
        assert not is_mobile_number(value)


class TestIsEmployeeNumber:
    @pytest.mark.parametrize("value", ["1234567", "12345678", "123456789", 1234567, 1234567.0])
    def test_valid(self, value):
        assert is_employee_number(value)

    @pytest.mark.parametrize("value", ["123456", "1234567890", "12a4567", "EMP1234567", 1234567.5])
    def test_invalid(self, value):
        assert not is_employee_number(value)


class TestHelpers:
    def test_stringify_drops_integral_fraction(self):
        assert stringify(10.0) == "10"
        assert stringify(10.5) == "10.5"
        assert stringify("10.0") == "10.0"

    def test_stringify_lowercases_booleans(self):
        assert stringify(True) == "true"
        assert stringify(False) == "false"

    def test_is_text_or_number_excludes_bool(self):
        assert is_text_or_number("x")
        assert is_text_or_number(3)
        assert not is_text_or_number(True)
        assert not is_text_or_number(None)
