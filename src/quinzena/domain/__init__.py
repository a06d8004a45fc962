# src/quinzena/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains domain models, the rate table and business errors.
No dependencies on infrastructure or external systems.
"""

from quinzena.domain.models import (
    CATEGORIES,
    NORMAL_ONLY_CATEGORIES,
    TIERS,
    CategoryBreakdown,
    DailyRecord,
    DeliveryCategory,
    LegacyDailyRecord,
    PeriodTotals,
    RawRecord,
    ServiceTier,
    TierCounts,
    Totals,
)
from quinzena.domain.rates import DEFAULT_RATES, RateTable
from quinzena.domain.errors import (
    DomainError,
    InvalidPeriodError,
    InvalidRecordError,
    RateTableError,
)

__all__ = [
    "CATEGORIES",
    "NORMAL_ONLY_CATEGORIES",
    "TIERS",
    "DeliveryCategory",
    "ServiceTier",
    "TierCounts",
    "DailyRecord",
    "LegacyDailyRecord",
    "RawRecord",
    "Totals",
    "PeriodTotals",
    "CategoryBreakdown",
    "RateTable",
    "DEFAULT_RATES",
    "DomainError",
    "RateTableError",
    "InvalidRecordError",
    "InvalidPeriodError",
]
