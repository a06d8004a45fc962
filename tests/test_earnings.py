# tests/test_earnings.py
"""
Earnings Tests - Unit Tests for Entry Totals and Period Aggregation

This module contains unit tests for totalize_entry, aggregate_period and
aggregate_by_category, including the rate table they price with, order
independence, additivity and the category breakdown cross-check.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- quinzena.application.earnings (functions to test)
- quinzena.domain.models (record types and totals)
- quinzena.domain.rates (RateTable, DEFAULT_RATES)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from decimal import Decimal  # Exact money values in assertions

from quinzena.application.earnings import (  # Functions to test
    aggregate_by_category,
    aggregate_period,
    totalize_entry,
)
from quinzena.domain.errors import RateTableError
from quinzena.domain.models import (
    CATEGORIES,
    DailyRecord,
    DeliveryCategory,
    LegacyDailyRecord,
    PeriodTotals,
    ServiceTier,
    Totals,
)
from quinzena.domain.rates import DEFAULT_RATES, RateTable

RATES = RateTable.from_mapping(
    normal={"flash": "1.50", "interlog": "2.00", "ecommerce": "0.10", "loggi": "3.00"},
    express={"flash": "2.50", "interlog": "4.00", "ecommerce": "0.20", "loggi": "0"},
)


def _records():
    return [
        DailyRecord({"flash": (10, 2)}),
        DailyRecord({"interlog": (3, 1), "ecommerce": (7, 0)}),
        LegacyDailyRecord(is_express=True, counts={"flash": 3, "ecommerce": 1}),
        None,
        DailyRecord({"loggi": (5, 0), "ecommerce": (1, 0)}),
        LegacyDailyRecord(is_express=False, counts={"interlog": 2, "loggi": 1}),
    ]


class TestRateTable:
    def test_lookup(self):
        assert RATES.rate(ServiceTier.NORMAL, DeliveryCategory.FLASH) == Decimal("1.50")
        assert RATES.rate(ServiceTier.EXPRESS, DeliveryCategory.FLASH) == Decimal("2.50")
        assert RATES.rate("express", "loggi") == Decimal("0")

    def test_default_table_is_total(self):
        for category in CATEGORIES:
            for tier in ServiceTier:
                assert DEFAULT_RATES.rate(tier, category) >= 0

    def test_float_rates_are_exact(self):
        table = RateTable.from_mapping(
            normal={c: 0.1 for c in CATEGORIES},
            express={c: 0.2 for c in CATEGORIES},
        )
        assert table.rate(ServiceTier.NORMAL, DeliveryCategory.FLASH) == Decimal("0.1")

    def test_missing_category_rejected(self):
        with pytest.raises(RateTableError, match="Missing normal rates for: loggi"):
            RateTable.from_mapping(
                normal={"flash": 1, "interlog": 1, "ecommerce": 1},
                express={c: 1 for c in CATEGORIES},
            )

    def test_negative_rate_rejected(self):
        with pytest.raises(RateTableError, match="Negative express rates"):
            RateTable.from_mapping(
                normal={c: 1 for c in CATEGORIES},
                express={"flash": -1, "interlog": 1, "ecommerce": 1, "loggi": 1},
            )

    def test_unknown_category_rejected(self):
        with pytest.raises(RateTableError, match="Unknown delivery category"):
            RateTable.from_mapping(
                normal={**{c: 1 for c in CATEGORIES}, "ifood": 1},
                express={c: 1 for c in CATEGORIES},
            )

    def test_default_table_is_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_RATES.normal[DeliveryCategory.FLASH] = Decimal("-100")
        with pytest.raises(TypeError):
            DEFAULT_RATES.express[DeliveryCategory.FLASH] = Decimal("0")

        assert totalize_entry(DailyRecord({"flash": (1, 0)})).earnings == Decimal("3.50")

    def test_source_mapping_changes_do_not_leak(self):
        normal = {c: 1 for c in CATEGORIES}
        table = RateTable.from_mapping(normal=normal, express={c: 2 for c in CATEGORIES})

        normal[DeliveryCategory.FLASH] = 99

        assert table.rate(ServiceTier.NORMAL, DeliveryCategory.FLASH) == Decimal("1")
        assert hash(table) == hash(RateTable.from_mapping(normal={c: 1 for c in CATEGORIES}, express={c: 2 for c in CATEGORIES}))


class TestTotalizeEntry:
    def test_single_day(self):
        result = totalize_entry(DailyRecord({"flash": (10, 2)}), RATES)
        assert result == Totals(count=12, earnings=Decimal("20.00"))

    def test_none_is_zero(self):
        assert totalize_entry(None, RATES) == Totals(count=0, earnings=Decimal("0"))

    def test_legacy_express_day(self):
        legacy = LegacyDailyRecord(is_express=True, counts={"flash": 3, "ecommerce": 1})
        result = totalize_entry(legacy, RATES)
        # 3 × 2.50 + 1 × 0.20
        assert result == Totals(count=4, earnings=Decimal("7.70"))

    def test_all_eight_terms(self):
        record = DailyRecord({
            "flash": (1, 1), "interlog": (1, 1), "ecommerce": (1, 1), "loggi": (1, 1),
        })
        result = totalize_entry(record, RATES)
        assert result.count == 8
        assert result.earnings == Decimal("13.30")

    def test_default_rates(self):
        result = totalize_entry(DailyRecord({"flash": (2, 1)}))
        assert result.earnings == Decimal("12.00")


class TestAggregatePeriod:
    def test_empty(self):
        result = aggregate_period([], RATES)
        assert result == PeriodTotals()
        assert result.total.count == 0
        assert result.total.earnings == 0

    def test_tiers_and_total(self):
        result = aggregate_period(_records(), RATES)

        # normal: flash 10, interlog 3+2, ecommerce 7+1, loggi 5+1
        assert result.normal.count == 29
        assert result.normal.earnings == Decimal("15.00") + Decimal("10.00") + Decimal("0.80") + Decimal("18.00")
        # express: flash 2+3, interlog 1, ecommerce 1
        assert result.express.count == 7
        assert result.express.earnings == Decimal("12.50") + Decimal("4.00") + Decimal("0.20")
        assert result.total == result.normal + result.express

    def test_matches_sum_of_entry_totals(self):
        records = _records()
        result = aggregate_period(records, RATES)

        expected = Totals()
        for record in records:
            expected += totalize_entry(record, RATES)
        assert result.total == expected

    def test_order_does_not_matter(self):
        a = DailyRecord({"flash": (10, 2)})
        b = LegacyDailyRecord(is_express=True, counts={"interlog": 4})
        assert aggregate_period([a, b], RATES) == aggregate_period([b, a], RATES)
        assert aggregate_period(_records(), RATES) == aggregate_period(list(reversed(_records())), RATES)

    def test_additivity(self):
        records = _records()
        first, second = records[:2], records[2:]
        combined = aggregate_period(first, RATES) + aggregate_period(second, RATES)
        assert aggregate_period(records, RATES) == combined

    def test_no_float_drift(self):
        table = RateTable.from_mapping(
            normal={c: "0.10" for c in CATEGORIES},
            express={c: "0.20" for c in CATEGORIES},
        )
        records = [DailyRecord({"flash": (1, 0)})] * 1000
        assert aggregate_period(records, table).total.earnings == Decimal("100")

    def test_accepts_generator(self):
        result = aggregate_period((r for r in _records()), RATES)
        assert result == aggregate_period(_records(), RATES)


class TestAggregateByCategory:
    def test_empty(self):
        result = aggregate_by_category([], RATES)
        assert result.grand_total == PeriodTotals()
        assert result.grand_total.total.count == 0
        for category in CATEGORIES:
            assert result[category] == PeriodTotals()

    def test_per_category(self):
        result = aggregate_by_category(_records(), RATES)

        flash = result[DeliveryCategory.FLASH]
        assert flash.normal == Totals(10, Decimal("15.00"))
        assert flash.express == Totals(5, Decimal("12.50"))
        assert flash.total == Totals(15, Decimal("27.50"))

        loggi = result["loggi"]
        assert loggi.total == Totals(6, Decimal("18.00"))

    def test_breakdown_is_read_only(self):
        result = aggregate_by_category(_records(), RATES)
        with pytest.raises(TypeError):
            result.categories[DeliveryCategory.FLASH] = PeriodTotals()
        assert hash(result) == hash(aggregate_by_category(_records(), RATES))

    def test_grand_total_matches_period_aggregate(self):
        records = _records()
        assert aggregate_by_category(records, RATES).grand_total == aggregate_period(records, RATES)

    def test_grand_total_is_sum_of_categories(self):
        result = aggregate_by_category(_records(), RATES)
        summed = PeriodTotals()
        for category in CATEGORIES:
            summed += result[category]
        assert result.grand_total == summed
        assert result.grand_total.total.count == sum(result[c].total.count for c in CATEGORIES)

    def test_alternate_rate_table(self):
        doubled = RateTable.from_mapping(
            normal={c: RATES.rate("normal", c) * 2 for c in CATEGORIES},
            express={c: RATES.rate("express", c) * 2 for c in CATEGORIES},
        )
        base = aggregate_by_category(_records(), RATES).grand_total.total
        result = aggregate_by_category(_records(), doubled).grand_total.total
        assert result.count == base.count
        assert result.earnings == base.earnings * 2
