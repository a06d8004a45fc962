# src/quinzena/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from quinzena.shared.validators import (
    parse_count_input,
    validate_count,
    validate_count_input,
    validate_expense_input,
    validate_expense_key,
    validate_month_key,
)

__all__ = [
    "parse_count_input",
    "validate_count",
    "validate_count_input",
    "validate_expense_input",
    "validate_expense_key",
    "validate_month_key",
]
