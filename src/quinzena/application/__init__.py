# src/quinzena/application/__init__.py
"""
Application Layer - Use Cases and Services

This package contains the earnings computations, period selection and
report services. No I/O; inputs are already-decoded domain objects.
"""

from quinzena.application.migration import empty_record, migrate_entry
from quinzena.application.earnings import aggregate_by_category, aggregate_period, totalize_entry
from quinzena.application.reports import (
    EarningsReportService,
    EarningsShare,
    PeriodSummary,
    QuinzenaHistoryItem,
    RollingSummary,
    earnings_share,
)

__all__ = [
    "empty_record",
    "migrate_entry",
    "totalize_entry",
    "aggregate_period",
    "aggregate_by_category",
    "EarningsReportService",
    "EarningsShare",
    "PeriodSummary",
    "QuinzenaHistoryItem",
    "RollingSummary",
    "earnings_share",
]
