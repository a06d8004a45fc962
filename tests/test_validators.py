# tests/test_validators.py
"""
Validator Tests - Unit Tests for Form and Key Validation

This module contains unit tests for the input validation helpers: delivery
counts typed into the entry form, fuel expense amounts and ledger keys.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- quinzena.shared.validators (functions to test)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from decimal import Decimal

from quinzena.shared.validators import (
    parse_count_input,
    validate_count,
    validate_count_input,
    validate_expense_input,
    validate_expense_key,
    validate_month_key,
)


class TestCountInput:
    @pytest.mark.parametrize("value", ["", "0", "7", "012", "150"])
    def test_valid(self, value):
        assert validate_count_input(value)

    @pytest.mark.parametrize("value", ["-1", "1.5", "abc", " 3", "3\n", "٣", None, 3, b"3"])
    def test_invalid(self, value):
        assert not validate_count_input(value)

    def test_parse(self):
        assert parse_count_input("") == 0
        assert parse_count_input("012") == 12
        assert parse_count_input("40") == 40

    def test_parse_rejects_negative(self):
        with pytest.raises(ValueError, match="Invalid delivery count"):
            parse_count_input("-3")


class TestCount:
    def test_valid(self):
        assert validate_count(0)
        assert validate_count(12)

    @pytest.mark.parametrize("value", [-1, 1.0, "1", True, None])
    def test_invalid(self, value):
        assert not validate_count(value)


class TestExpenseInput:
    @pytest.mark.parametrize("value", ["0", "45.90", "120"])
    def test_valid(self, value):
        assert validate_expense_input(value)

    @pytest.mark.parametrize("value", ["", "-5", "abc", "NaN", "Infinity"])
    def test_invalid(self, value):
        assert not validate_expense_input(value)

    def test_max(self):
        assert validate_expense_input("99.99", max_val=Decimal("100"))
        assert not validate_expense_input("100.01", max_val=Decimal("100"))


class TestKeys:
    def test_month_key(self):
        assert validate_month_key("2024-01")
        assert validate_month_key("2024-12")
        assert not validate_month_key("2024-13")
        assert not validate_month_key("2024-1")
        assert not validate_month_key(202401)

    def test_expense_key(self):
        assert validate_expense_key("2024-05-1")
        assert validate_expense_key("2024-05-2")
        assert not validate_expense_key("2024-05-3")
        assert not validate_expense_key("2024-05")
