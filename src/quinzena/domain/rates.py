# src/quinzena/domain/rates.py
"""
Rate Table - Per-Unit Delivery Rates

Maps (service tier, delivery category) to the amount paid per delivery.
A RateTable is an immutable value passed into every earnings computation,
so alternate tables (another region, a rate change) can be used without
touching the aggregation code.

Files that USE this module:
- quinzena.application.earnings (rate lookups while accumulating)
- quinzena.config.settings (builds the configured table)
- tests.* (alternate tables in tests)

Files that this module USES:
- quinzena.domain.models (DeliveryCategory, ServiceTier)
- quinzena.domain.errors (RateTableError)
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Mapping, Union

from quinzena.domain.errors import RateTableError
from quinzena.domain.models import CATEGORIES, DeliveryCategory, ServiceTier, freeze_mapping

RateValue = Union[Decimal, int, str]


def _to_decimal(value: RateValue) -> Decimal:
    # str() keeps floats like 1.5 from dragging binary noise into the Decimal
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        raise RateTableError(f"Invalid rate value: {value!r}") from e


def _normalize(tier: ServiceTier, rates: Mapping) -> Mapping[DeliveryCategory, Decimal]:
    normalized: dict[DeliveryCategory, Decimal] = {}
    for key, value in rates.items():
        try:
            category = DeliveryCategory(key)
        except ValueError as e:
            raise RateTableError(f"Unknown delivery category in {tier.value} rates: {key!r}") from e
        normalized[category] = _to_decimal(value)

    missing = [c.value for c in CATEGORIES if c not in normalized]
    if missing:
        raise RateTableError(f"Missing {tier.value} rates for: {', '.join(missing)}")

    negative = [c.value for c, rate in normalized.items() if rate < 0]
    if negative:
        raise RateTableError(f"Negative {tier.value} rates for: {', '.join(negative)}")
    return freeze_mapping(normalized)


@dataclass(frozen=True)
class RateTable:
    """
    Per-unit rates for each (tier, category).

    Attributes:
        normal: Mapping from DeliveryCategory to normal-tier rate
        express: Mapping from DeliveryCategory to express-tier rate

    Raises:
        RateTableError: If a category is missing, unknown or negative
    """
    normal: Mapping[DeliveryCategory, Decimal]
    express: Mapping[DeliveryCategory, Decimal]

    def __post_init__(self) -> None:
        object.__setattr__(self, "normal", _normalize(ServiceTier.NORMAL, self.normal))
        object.__setattr__(self, "express", _normalize(ServiceTier.EXPRESS, self.express))

    def __hash__(self) -> int:
        return hash((frozenset(self.normal.items()), frozenset(self.express.items())))

    @classmethod
    def from_mapping(cls, normal: Mapping, express: Mapping) -> RateTable:
        """
        Build a table from plain mappings.

        Args:
            normal: category (enum or value string) -> rate
            express: category (enum or value string) -> rate

        Returns:
            RateTable with Decimal rates
        """
        return cls(normal=dict(normal), express=dict(express))

    def rate(self, tier: ServiceTier, category: DeliveryCategory) -> Decimal:
        """Per-unit rate for a tier and category."""
        table = self.normal if ServiceTier(tier) is ServiceTier.NORMAL else self.express
        return table[DeliveryCategory(category)]


# Ecommerce and Loggi are normal-only in the entry form; their express rate
# matches the normal one so legacy all-express days keep their value.
DEFAULT_RATES = RateTable.from_mapping(
    normal={
        DeliveryCategory.FLASH: "3.50",
        DeliveryCategory.INTERLOG: "3.00",
        DeliveryCategory.ECOMMERCE: "2.50",
        DeliveryCategory.LOGGI: "2.80",
    },
    express={
        DeliveryCategory.FLASH: "5.00",
        DeliveryCategory.INTERLOG: "4.50",
        DeliveryCategory.ECOMMERCE: "2.50",
        DeliveryCategory.LOGGI: "2.80",
    },
)
