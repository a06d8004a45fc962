# src/quinzena/application/periods.py
"""
Period Selection - Which Daily Records Belong to a Period

The ledger holds one record per calendar day, keyed by month ("YYYY-MM")
and day of month. This module picks the records of a day, a quinzena, a
month or a rolling window out of it, always in calendar order.

A quinzena is days 1-15 or day 16 to the end of the month. The split day
is fixed at 15/16 whatever the month length; the second quinzena is 13 to
16 days long.

Files that USE this module:
- quinzena.application.reports (feeds the aggregators)
- quinzena.adapters.serialization (month key validation)
- tests.test_periods (unit tests)

Files that this module USES:
- quinzena.domain.models (RawRecord)
- quinzena.domain.errors (InvalidPeriodError)
- quinzena.shared.validators (key format checks)
"""
from __future__ import annotations

import calendar
from datetime import date, timedelta
from typing import Iterable, List, Mapping, Tuple

from quinzena.domain.errors import InvalidPeriodError
from quinzena.domain.models import RawRecord
from quinzena.shared.validators import validate_expense_key, validate_month_key

# month key -> day of month -> record
Ledger = Mapping[str, Mapping[int, RawRecord]]

QUINZENA_SPLIT_DAY = 15
FIRST_QUINZENA = 1
SECOND_QUINZENA = 2


def days_in_month(year: int, month: int) -> int:
    """Number of days in a month (28, 29, 30 or 31)."""
    return calendar.monthrange(year, month)[1]


def month_key(value: date) -> str:
    """Ledger key of the month containing a date, e.g. '2024-05'."""
    return f"{value.year:04d}-{value.month:02d}"


def parse_month_key(key: str) -> Tuple[int, int]:
    """
    Split a month key into (year, month).

    Raises:
        InvalidPeriodError: If the key is not 'YYYY-MM' with a valid month
    """
    if not validate_month_key(key):
        raise InvalidPeriodError(f"Invalid month key: {key!r}")
    year, month = key.split("-")
    return int(year), int(month)


def expense_key(year: int, month: int, quinzena: int) -> str:
    """Key of a quinzena's expense, e.g. '2024-05-2'."""
    _check_quinzena(quinzena)
    return f"{year:04d}-{month:02d}-{quinzena}"


def parse_expense_key(key: str) -> Tuple[int, int, int]:
    """
    Split an expense key into (year, month, quinzena).

    Raises:
        InvalidPeriodError: If the key is not 'YYYY-MM-q' with q in (1, 2)
    """
    if not validate_expense_key(key):
        raise InvalidPeriodError(f"Invalid expense key: {key!r}")
    year, month, quinzena = key.split("-")
    return int(year), int(month), int(quinzena)


def _check_quinzena(quinzena: int) -> None:
    if quinzena not in (FIRST_QUINZENA, SECOND_QUINZENA):
        raise InvalidPeriodError(f"Quinzena must be 1 or 2, got {quinzena!r}")


def quinzena_of(value: date) -> int:
    """1 for days 1-15, 2 for day 16 onwards."""
    return FIRST_QUINZENA if value.day <= QUINZENA_SPLIT_DAY else SECOND_QUINZENA


def quinzena_days(year: int, month: int, quinzena: int) -> range:
    """Days of month covered by a quinzena."""
    _check_quinzena(quinzena)
    if quinzena == FIRST_QUINZENA:
        return range(1, QUINZENA_SPLIT_DAY + 1)
    return range(QUINZENA_SPLIT_DAY + 1, days_in_month(year, month) + 1)


def quinzena_start(year: int, month: int, quinzena: int) -> date:
    """First calendar day of a quinzena."""
    return date(year, month, quinzena_days(year, month, quinzena)[0])


def select_day(ledger: Ledger, value: date) -> RawRecord:
    """The record of one calendar day, None when nothing was recorded."""
    return ledger.get(month_key(value), {}).get(value.day)


def select_days(ledger: Ledger, year: int, month: int, days: Iterable[int]) -> List[RawRecord]:
    """Records of the given days of a month, skipping days without record."""
    month_data = ledger.get(f"{year:04d}-{month:02d}", {})
    records = []
    for day in days:
        record = month_data.get(day)
        if record is not None:
            records.append(record)
    return records


def select_quinzena_of(ledger: Ledger, year: int, month: int, quinzena: int) -> List[RawRecord]:
    """Records of a quinzena given by year, month and index."""
    return select_days(ledger, year, month, quinzena_days(year, month, quinzena))


def select_quinzena(ledger: Ledger, value: date) -> List[RawRecord]:
    """Records of the quinzena containing a date."""
    return select_quinzena_of(ledger, value.year, value.month, quinzena_of(value))


def select_month(ledger: Ledger, value: date) -> List[RawRecord]:
    """Records of the whole month containing a date."""
    days = range(1, days_in_month(value.year, value.month) + 1)
    return select_days(ledger, value.year, value.month, days)


def select_last_days(ledger: Ledger, today: date, days: int = 30) -> List[RawRecord]:
    """
    Records of today and the preceding days, most recent first.

    Args:
        ledger: Date-keyed records
        today: Last day of the window
        days: Window length in days, today included

    Returns:
        Records found in the window
    """
    if days < 1:
        raise InvalidPeriodError(f"Window must cover at least one day, got {days}")

    records = []
    for offset in range(days):
        record = select_day(ledger, today - timedelta(days=offset))
        if record is not None:
            records.append(record)
    return records


def trailing_months(reference: date, count: int = 12) -> List[Tuple[int, int]]:
    """
    The `count` calendar months ending with the reference month, oldest first.

    Returns:
        List of (year, month) tuples
    """
    if count < 1:
        raise InvalidPeriodError(f"Month count must be at least 1, got {count}")

    last = reference.year * 12 + reference.month - 1
    months = []
    for index in range(last - count + 1, last + 1):
        months.append((index // 12, index % 12 + 1))
    return months
