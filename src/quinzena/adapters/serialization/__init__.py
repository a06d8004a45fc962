# src/quinzena/adapters/serialization/__init__.py
"""
Serialization Adapters - Stored Data Shapes

This package converts the stored ledger and expense data to domain objects.
"""

from quinzena.adapters.serialization.records import (
    decode_expenses,
    decode_ledger,
    decode_record,
    encode_record,
    is_legacy,
)

__all__ = [
    "decode_expenses",
    "decode_ledger",
    "decode_record",
    "encode_record",
    "is_legacy",
]
