# src/quinzena/application/earnings.py
"""
Earnings Service - Entry Totals and Period Aggregation

This module contains the core earnings computations:
- totalize_entry: count and earnings of a single day
- aggregate_period: normal / express / total over a sequence of days
- aggregate_by_category: the same, kept per delivery category, plus a grand total

All three go through the same per-record step (_entry_terms), so the grand
total of a category breakdown is exactly the period aggregate of the same
records. Money is accumulated as Decimal and never rounded here.

Files that USE this module:
- quinzena.application.reports (summaries, history, charts)
- tests.test_earnings (unit tests)

Files that this module USES:
- quinzena.application.migration (migrate_entry before every computation)
- quinzena.domain.models (Totals, PeriodTotals, CategoryBreakdown)
- quinzena.domain.rates (RateTable, DEFAULT_RATES)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import logging
from typing import Dict, Iterable, Iterator, Tuple  # Type hints for record sequences

from quinzena.application.migration import migrate_entry  # Canonical form of any raw record
from quinzena.domain.models import (
    CATEGORIES,
    TIERS,
    CategoryBreakdown,
    DailyRecord,
    DeliveryCategory,
    PeriodTotals,
    RawRecord,
    ServiceTier,
    Totals,
)
from quinzena.domain.rates import DEFAULT_RATES, RateTable  # Per-unit rates

logger = logging.getLogger(__name__)

_Accumulator = Dict[DeliveryCategory, Dict[ServiceTier, Totals]]


def _entry_terms(
    entry: DailyRecord, rates: RateTable
) -> Iterator[Tuple[DeliveryCategory, ServiceTier, Totals]]:
    """Yield the count × rate term of every (category, tier) of a migrated record."""
    for category in CATEGORIES:
        counts = entry.get(category)
        for tier in TIERS:
            count = counts.for_tier(tier)
            yield category, tier, Totals(count=count, earnings=count * rates.rate(tier, category))


def _accumulate(records: Iterable[RawRecord], rates: RateTable) -> _Accumulator:
    """Sum the terms of every record, keyed by category and tier."""
    sums: _Accumulator = {
        category: {tier: Totals() for tier in TIERS} for category in CATEGORIES
    }
    processed = 0
    for raw in records:
        if raw is None:
            continue
        entry = migrate_entry(raw)
        for category, tier, term in _entry_terms(entry, rates):
            sums[category][tier] += term
        processed += 1

    logger.debug("Accumulated %d daily records", processed)
    return sums


def _collapse(sums: _Accumulator) -> PeriodTotals:
    normal = Totals()
    express = Totals()
    for category in CATEGORIES:
        normal += sums[category][ServiceTier.NORMAL]
        express += sums[category][ServiceTier.EXPRESS]
    return PeriodTotals.from_tiers(normal, express)


def totalize_entry(raw: RawRecord, rates: RateTable = DEFAULT_RATES) -> Totals:
    """
    Count and earnings of a single daily record.

    Args:
        raw: Daily record (canonical, legacy or None)
        rates: Rate table to price deliveries with

    Returns:
        Totals over all eight (category, tier) pairs; zero for None
    """
    if raw is None:
        return Totals()

    total = Totals()
    for _, _, term in _entry_terms(migrate_entry(raw), rates):
        total += term
    return total


def aggregate_period(records: Iterable[RawRecord], rates: RateTable = DEFAULT_RATES) -> PeriodTotals:
    """
    Aggregate a sequence of daily records into normal / express / total.

    The result does not depend on the order of the records. Missing days
    (None) contribute nothing.

    Args:
        records: Daily records of the period
        rates: Rate table to price deliveries with

    Returns:
        PeriodTotals; all zero for an empty sequence
    """
    return _collapse(_accumulate(records, rates))


def aggregate_by_category(
    records: Iterable[RawRecord], rates: RateTable = DEFAULT_RATES
) -> CategoryBreakdown:
    """
    Aggregate a sequence of daily records per delivery category.

    Each category's total is its own normal + express; the grand total is
    the sum over categories and equals aggregate_period() of the same records.

    Args:
        records: Daily records of the period
        rates: Rate table to price deliveries with

    Returns:
        CategoryBreakdown with all four categories and a grand total
    """
    sums = _accumulate(records, rates)
    categories = {
        category: PeriodTotals.from_tiers(
            sums[category][ServiceTier.NORMAL],
            sums[category][ServiceTier.EXPRESS],
        )
        for category in CATEGORIES
    }
    return CategoryBreakdown(categories=categories, grand_total=_collapse(sums))
