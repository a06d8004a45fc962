# src/quinzena/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains domain models representing core business concepts:
- Delivery categories (carriers) and service tiers
- Daily delivery records, canonical and legacy
- Count/earnings totals at every aggregation level

Files that USE this module:
- quinzena.domain.rates (rate table keyed by tier and category)
- quinzena.application.* (all services consume and produce domain models)
- quinzena.adapters.serialization (decodes raw data into domain models)
- tests.* (tests use domain models for test data)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass, field  # Decorator for creating data classes
from decimal import Decimal  # Exact decimal arithmetic for money
from enum import Enum  # Closed sets of categories and tiers
from types import MappingProxyType  # Read-only views over normalized mappings
from typing import Mapping, Optional, Tuple, Union  # Type hints

ZERO = Decimal("0")


class DeliveryCategory(str, Enum):
    """Delivery carrier/channel. Closed set."""
    FLASH = "flash"
    INTERLOG = "interlog"
    ECOMMERCE = "ecommerce"
    LOGGI = "loggi"


class ServiceTier(str, Enum):
    """Service level; each tier has its own per-unit rate."""
    NORMAL = "normal"
    EXPRESS = "express"


CATEGORIES: Tuple[DeliveryCategory, ...] = tuple(DeliveryCategory)
TIERS: Tuple[ServiceTier, ...] = tuple(ServiceTier)

# The entry form only takes a single (normal) count for these carriers.
NORMAL_ONLY_CATEGORIES = frozenset({DeliveryCategory.ECOMMERCE, DeliveryCategory.LOGGI})


def freeze_mapping(mapping: Mapping) -> Mapping:
    """Read-only copy of a mapping, for fields of frozen values."""
    return MappingProxyType(dict(mapping))


def _mapping_hash(mapping: Mapping) -> int:
    return hash(frozenset(mapping.items()))


@dataclass(frozen=True)
class TierCounts:
    """Number of deliveries of one category on one day, per tier."""
    normal: int = 0
    express: int = 0

    def for_tier(self, tier: ServiceTier) -> int:
        return self.normal if tier is ServiceTier.NORMAL else self.express

    @property
    def total(self) -> int:
        return self.normal + self.express


def _coerce_counts(value) -> TierCounts:
    if isinstance(value, TierCounts):
        return value
    normal, express = value
    return TierCounts(normal=normal, express=express)


@dataclass(frozen=True)
class DailyRecord:
    """
    Canonical daily record: category -> (normal, express) counts.

    Input records may be partial; ``quinzena.application.migration.migrate_entry``
    fills the missing categories. Keys may be given as category values
    ("flash") and counts as ``(normal, express)`` tuples.

    Attributes:
        counts: Mapping from DeliveryCategory to TierCounts
    """
    counts: Mapping[DeliveryCategory, TierCounts] = field(default_factory=dict)

    def __post_init__(self) -> None:
        normalized = {
            DeliveryCategory(key): _coerce_counts(value)
            for key, value in self.counts.items()
        }
        object.__setattr__(self, "counts", freeze_mapping(normalized))

    def __hash__(self) -> int:
        return _mapping_hash(self.counts)

    def get(self, category: DeliveryCategory) -> TierCounts:
        """Counts for a category, zero when the category is absent."""
        return self.counts.get(category, TierCounts())

    @property
    def is_complete(self) -> bool:
        """True when every category is present."""
        return all(category in self.counts for category in CATEGORIES)


@dataclass(frozen=True)
class LegacyDailyRecord:
    """
    Deprecated daily record: one count per category plus a single flag
    telling whether the whole day was express or normal.

    Attributes:
        is_express: True if every count of the day was an express delivery
        counts: Mapping from DeliveryCategory to a single count
    """
    is_express: bool
    counts: Mapping[DeliveryCategory, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        normalized = {DeliveryCategory(key): value for key, value in self.counts.items()}
        object.__setattr__(self, "counts", freeze_mapping(normalized))

    def __hash__(self) -> int:
        return hash((self.is_express, _mapping_hash(self.counts)))

    def get(self, category: DeliveryCategory) -> int:
        return self.counts.get(category, 0) or 0


# What the persistence side hands over for one calendar day.
RawRecord = Optional[Union[DailyRecord, LegacyDailyRecord]]


@dataclass(frozen=True)
class Totals:
    """
    Delivery count and earnings.

    Attributes:
        count: Number of deliveries
        earnings: Gross earnings (exact Decimal, not rounded)
    """
    count: int = 0
    earnings: Decimal = ZERO

    def __add__(self, other: Totals) -> Totals:
        if not isinstance(other, Totals):
            return NotImplemented
        return Totals(count=self.count + other.count, earnings=self.earnings + other.earnings)


@dataclass(frozen=True)
class PeriodTotals:
    """
    Normal / express / combined totals for a period.

    Attributes:
        normal: Totals of normal-tier deliveries
        express: Totals of express-tier deliveries
        total: normal + express
    """
    normal: Totals = field(default_factory=Totals)
    express: Totals = field(default_factory=Totals)
    total: Totals = field(default_factory=Totals)

    @classmethod
    def from_tiers(cls, normal: Totals, express: Totals) -> PeriodTotals:
        """Build the triple, deriving ``total`` from the two tiers."""
        return cls(normal=normal, express=express, total=normal + express)

    def __add__(self, other: PeriodTotals) -> PeriodTotals:
        if not isinstance(other, PeriodTotals):
            return NotImplemented
        return PeriodTotals(
            normal=self.normal + other.normal,
            express=self.express + other.express,
            total=self.total + other.total,
        )


@dataclass(frozen=True)
class CategoryBreakdown:
    """
    Per-category period totals plus their grand total.

    Attributes:
        categories: Mapping from DeliveryCategory to PeriodTotals
        grand_total: Sum over all categories
    """
    categories: Mapping[DeliveryCategory, PeriodTotals]
    grand_total: PeriodTotals

    def __post_init__(self) -> None:
        object.__setattr__(self, "categories", freeze_mapping(self.categories))

    def __hash__(self) -> int:
        return hash((_mapping_hash(self.categories), self.grand_total))

    def __getitem__(self, category: DeliveryCategory) -> PeriodTotals:
        return self.categories[DeliveryCategory(category)]
