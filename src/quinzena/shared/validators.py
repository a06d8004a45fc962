# src/quinzena/shared/validators.py
"""
Input Validation Utilities - Form and Data Validation

This module provides the validation that keeps malformed values out of the
earnings engine: delivery counts typed into the entry form, fuel expense
amounts, and the month/expense keys used by the ledger.

Files that USE this module:
- quinzena.application.periods (month and expense key checks)
- quinzena.adapters.serialization.records (count and amount checks while decoding)

Files that this module USES:
- None (pure utility functions)
"""
import re
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

_MONTH_KEY = re.compile(r'([0-9]{4})-([0-9]{2})')
_EXPENSE_KEY = re.compile(r'([0-9]{4})-([0-9]{2})-([12])')


def validate_count_input(value: str) -> bool:
    """
    Validate a delivery count as typed into the entry form.

    Only digits are accepted; an empty field is allowed and means zero.

    Args:
        value: Raw text from the form field

    Returns:
        True if valid, False otherwise
    """
    if not isinstance(value, str):
        return False
    return re.fullmatch(r'[0-9]*', value) is not None


def parse_count_input(value: str) -> int:
    """
    Parse a delivery count typed into the entry form.

    Args:
        value: Raw text from the form field ('' means zero)

    Returns:
        Non-negative integer count

    Raises:
        ValueError: If the text is not a non-negative integer
    """
    if not validate_count_input(value):
        raise ValueError(f"Invalid delivery count: {value!r}")
    return int(value) if value else 0


def validate_count(value: Any) -> bool:
    """Check a decoded count: a non-negative int (bools rejected)."""
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def validate_expense_input(value: str, max_val: Optional[Decimal] = None) -> bool:
    """
    Validate a fuel expense amount.

    Args:
        value: Amount as text (decimal point, no currency symbol)
        max_val: Maximum allowed value

    Returns:
        True if valid, False otherwise
    """
    if not value:
        return False

    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return False

    if not amount.is_finite() or amount < 0:
        return False
    if max_val is not None and amount > max_val:
        return False
    return True


def validate_month_key(key: str) -> bool:
    """
    Validate a ledger month key ('YYYY-MM').

    Args:
        key: Month key to validate

    Returns:
        True if valid, False otherwise
    """
    if not isinstance(key, str):
        return False
    match = _MONTH_KEY.fullmatch(key)
    return bool(match) and 1 <= int(match.group(2)) <= 12


def validate_expense_key(key: str) -> bool:
    """Validate a quinzena expense key ('YYYY-MM-1' or 'YYYY-MM-2')."""
    if not isinstance(key, str):
        return False
    match = _EXPENSE_KEY.fullmatch(key)
    return bool(match) and 1 <= int(match.group(2)) <= 12
