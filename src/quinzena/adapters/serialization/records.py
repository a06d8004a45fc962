# src/quinzena/adapters/serialization/records.py
"""
Record Serialization - Raw Stored Data to Domain Records

This module converts the JSON-shaped data the persistence side stores into
domain objects, and back. It is the one place where the two daily record
formats are told apart:
- legacy: {"isExpress": true, "flash": 3, "ecommerce": 1, ...}
- canonical: {"flash": {"normal": 10, "express": 2}, ...}

A record carrying a boolean "isExpress" is legacy; anything else is
canonical. Everything past this module works with the explicit
DailyRecord / LegacyDailyRecord types.

Files that USE this module:
- Persistence collaborators loading the ledger and expenses
- tests.test_serialization (unit tests)

Files that this module USES:
- quinzena.application.migration (canonical form for encoding)
- quinzena.application.periods (month/expense key parsing, month length)
- quinzena.domain.models (DailyRecord, LegacyDailyRecord, DeliveryCategory)
- quinzena.shared.validators (count and amount validation)
"""
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional

from quinzena.application.migration import migrate_entry
from quinzena.application.periods import days_in_month, parse_expense_key, parse_month_key
from quinzena.domain.errors import InvalidRecordError
from quinzena.domain.models import (
    CATEGORIES,
    DailyRecord,
    DeliveryCategory,
    LegacyDailyRecord,
    RawRecord,
    TierCounts,
)
from quinzena.shared.validators import validate_count, validate_expense_input

logger = logging.getLogger(__name__)

LEGACY_FLAG = "isExpress"


def _decode_count(value: Any, where: str) -> int:
    """Decode a stored count; missing/null counts are zero."""
    if value is None:
        return 0
    # JSON numbers written by other tools may come back as 3.0
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not validate_count(value):
        raise InvalidRecordError(f"Invalid delivery count for {where}: {value!r}")
    return value


def _category(key: str) -> Optional[DeliveryCategory]:
    try:
        return DeliveryCategory(key)
    except ValueError:
        logger.warning("Ignoring unknown delivery category in record: %r", key)
        return None


def is_legacy(data: Mapping[str, Any]) -> bool:
    """True if the stored record is in the legacy single-flag format."""
    return isinstance(data.get(LEGACY_FLAG), bool)


def _decode_legacy(data: Mapping[str, Any]) -> LegacyDailyRecord:
    counts = {}
    for key, value in data.items():
        if key == LEGACY_FLAG:
            continue
        category = _category(key)
        if category is not None:
            counts[category] = _decode_count(value, category.value)
    return LegacyDailyRecord(is_express=data[LEGACY_FLAG], counts=counts)


def _decode_canonical(data: Mapping[str, Any]) -> DailyRecord:
    counts = {}
    for key, value in data.items():
        category = _category(key)
        if category is None:
            continue
        if value is None:
            value = {}
        if not isinstance(value, Mapping):
            raise InvalidRecordError(f"Expected normal/express counts for {category.value}, got {value!r}")
        counts[category] = TierCounts(
            normal=_decode_count(value.get("normal"), f"{category.value}.normal"),
            express=_decode_count(value.get("express"), f"{category.value}.express"),
        )
    return DailyRecord(counts)


def decode_record(data: Optional[Mapping[str, Any]]) -> RawRecord:
    """
    Decode one stored daily record.

    Args:
        data: Stored record (legacy or canonical shape), or None

    Returns:
        LegacyDailyRecord, DailyRecord, or None when nothing is stored

    Raises:
        InvalidRecordError: If the record or one of its counts is malformed
    """
    if data is None:
        return None
    if not isinstance(data, Mapping):
        raise InvalidRecordError(f"Daily record must be an object, got {type(data).__name__}")
    if LEGACY_FLAG in data and not is_legacy(data):
        raise InvalidRecordError(f"{LEGACY_FLAG} must be a boolean, got {data[LEGACY_FLAG]!r}")

    if is_legacy(data):
        return _decode_legacy(data)
    return _decode_canonical(data)


def encode_record(record: RawRecord) -> Dict[str, Dict[str, int]]:
    """
    Encode a daily record in the canonical stored shape.

    Legacy and partial records are migrated first, so the output always
    lists every category.

    Args:
        record: Record to encode (None encodes as an all-zero day)

    Returns:
        {category: {"normal": n, "express": m}} for all categories
    """
    entry = migrate_entry(record)
    return {
        category.value: {"normal": entry.get(category).normal, "express": entry.get(category).express}
        for category in CATEGORIES
    }


def decode_ledger(data: Mapping[str, Mapping[str, Any]]) -> Dict[str, Dict[int, RawRecord]]:
    """
    Decode the whole stored ledger.

    Args:
        data: {"YYYY-MM": {"<day>": record}}

    Returns:
        {"YYYY-MM": {day: record}}, days without record left out

    Raises:
        InvalidPeriodError: If a month key is malformed
        InvalidRecordError: If a day key or a record is malformed
    """
    ledger: Dict[str, Dict[int, RawRecord]] = {}
    for key, month_data in data.items():
        year, month = parse_month_key(key)
        last_day = days_in_month(year, month)
        days: Dict[int, RawRecord] = {}
        for day_key, raw in (month_data or {}).items():
            try:
                day = int(day_key)
            except (TypeError, ValueError) as e:
                raise InvalidRecordError(f"Invalid day {day_key!r} in {key}") from e
            if not 1 <= day <= last_day:
                raise InvalidRecordError(f"Day {day} out of range for {key}")
            record = decode_record(raw)
            if record is not None:
                days[day] = record
        ledger[key] = days

    logger.debug("Decoded ledger with %d months", len(ledger))
    return ledger


def decode_expenses(data: Mapping[str, Any]) -> Dict[str, Decimal]:
    """
    Decode stored fuel expenses.

    Args:
        data: {"YYYY-MM-q": amount}

    Returns:
        {"YYYY-MM-q": Decimal amount}

    Raises:
        InvalidPeriodError: If a key is malformed
        InvalidRecordError: If an amount is not a non-negative number
    """
    expenses: Dict[str, Decimal] = {}
    for key, amount in data.items():
        parse_expense_key(key)
        if isinstance(amount, bool) or not validate_expense_input(str(amount)):
            raise InvalidRecordError(f"Invalid expense amount for {key}: {amount!r}")
        expenses[key] = Decimal(str(amount))
    return expenses
