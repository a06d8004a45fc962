# src/quinzena/application/reports.py
"""
Earnings Reports - Summaries, History and Chart Series

This module composes period selection and the earnings aggregators into
the figures the dashboard, history, report and chart views show:
- day / quinzena / month summaries with fuel expenses and net earnings
- per-category breakdown of a quinzena or month
- history of completed quinzenas
- daily and trailing-month earnings series
- rolling 30-day summary

Fuel expenses are recorded per quinzena under 'YYYY-MM-q' keys; net
earnings are gross total earnings minus the expense of the same period.

Files that USE this module:
- Presentation collaborators (dashboard, history, charts, assistant summary)
- tests.test_reports (unit tests)

Files that this module USES:
- quinzena.application.earnings (aggregate_period, aggregate_by_category, totalize_entry)
- quinzena.application.periods (record selection and period keys)
- quinzena.config (default rate table and window lengths)
- quinzena.domain.models (result types)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import logging
from dataclasses import dataclass  # Decorator for creating data classes
from datetime import date  # Calendar dates for period selection
from decimal import Decimal  # Exact money arithmetic
from typing import Dict, List, Mapping, Optional, Tuple  # Type hints

from quinzena.application.earnings import aggregate_by_category, aggregate_period, totalize_entry
from quinzena.application.periods import (
    FIRST_QUINZENA,
    SECOND_QUINZENA,
    QUINZENA_SPLIT_DAY,
    Ledger,
    days_in_month,
    expense_key,
    parse_expense_key,
    parse_month_key,
    quinzena_days,
    quinzena_of,
    quinzena_start,
    select_day,
    select_days,
    select_last_days,
    select_month,
    select_quinzena,
    select_quinzena_of,
    trailing_months,
)
from quinzena.config import settings
from quinzena.domain.models import ZERO, CategoryBreakdown, DeliveryCategory, PeriodTotals, Totals
from quinzena.domain.rates import RateTable

logger = logging.getLogger(__name__)

_HUNDRED = Decimal("100")


@dataclass(frozen=True)
class PeriodSummary:
    """
    Gross totals of a period together with its fuel expense.

    Attributes:
        totals: Normal / express / total aggregate of the period
        expense: Fuel expense charged to the period
    """
    totals: PeriodTotals
    expense: Decimal = ZERO

    @property
    def net_earnings(self) -> Decimal:
        return self.totals.total.earnings - self.expense


@dataclass(frozen=True)
class QuinzenaHistoryItem:
    """
    One completed quinzena in the history list.

    Attributes:
        year: Calendar year
        month: Calendar month (1-12)
        quinzena: 1 or 2
        totals: Count and gross earnings of the quinzena
        expense: Fuel expense of the quinzena
    """
    year: int
    month: int
    quinzena: int
    totals: Totals
    expense: Decimal = ZERO

    @property
    def key(self) -> str:
        return expense_key(self.year, self.month, self.quinzena)

    @property
    def net_earnings(self) -> Decimal:
        return self.totals.earnings - self.expense


@dataclass(frozen=True)
class RollingSummary:
    """
    Totals of the trailing window ending today.

    Attributes:
        totals: Aggregate of the records in the window
        expense: Expenses of quinzenas starting inside the window
        days: Window length in days
        has_data: False when no day of the window has a record
    """
    totals: PeriodTotals
    expense: Decimal
    days: int
    has_data: bool

    @property
    def net_earnings(self) -> Decimal:
        return self.totals.total.earnings - self.expense


@dataclass(frozen=True)
class EarningsShare:
    """Percentage of total earnings coming from each tier."""
    normal_pct: Decimal
    express_pct: Decimal


def earnings_share(totals: PeriodTotals) -> Optional[EarningsShare]:
    """
    Split of total earnings between normal and express deliveries.

    Args:
        totals: Period aggregate

    Returns:
        EarningsShare in percent, or None when the period earned nothing
    """
    total = totals.total.earnings
    if total == 0:
        return None
    return EarningsShare(
        normal_pct=totals.normal.earnings / total * _HUNDRED,
        express_pct=totals.express.earnings / total * _HUNDRED,
    )


class EarningsReportService:
    """
    Report-level computations over a ledger of daily records and a map of
    quinzena fuel expenses.
    """

    def __init__(
        self,
        ledger: Ledger,
        expenses: Optional[Mapping[str, Decimal]] = None,
        rates: Optional[RateTable] = None,
        rolling_window_days: Optional[int] = None,
        months: Optional[int] = None,
    ):
        """
        Initialize the report service.

        Args:
            ledger: Daily records keyed by month key and day of month
            expenses: Fuel expense per quinzena key ('YYYY-MM-q')
            rates: Rate table (defaults to the configured one)
            rolling_window_days: Rolling window length (defaults to settings)
            months: Number of months in the trailing series (defaults to settings)
        """
        self.ledger = ledger
        self.expenses = dict(expenses or {})
        self.rates = rates if rates is not None else settings.rate_table()
        self.rolling_window_days = rolling_window_days or settings.rolling_window_days
        self.months = months or settings.trailing_months

    # --- Expenses ---

    def expense_for(self, year: int, month: int, quinzena: int) -> Decimal:
        """Fuel expense of a quinzena, zero when none was recorded."""
        return self.expenses.get(expense_key(year, month, quinzena), ZERO)

    def month_expense(self, year: int, month: int) -> Decimal:
        """Fuel expense of a month: both quinzenas together."""
        return self.expense_for(year, month, FIRST_QUINZENA) + self.expense_for(year, month, SECOND_QUINZENA)

    # --- Summaries ---

    def entry_totals(self, value: date) -> Totals:
        """Count and earnings of a single day."""
        return totalize_entry(select_day(self.ledger, value), self.rates)

    def day_totals(self, value: date) -> PeriodTotals:
        """Normal / express / total of a single day."""
        return aggregate_period([select_day(self.ledger, value)], self.rates)

    def quinzena_summary(self, value: date) -> PeriodSummary:
        """Totals and expense of the quinzena containing a date."""
        totals = aggregate_period(select_quinzena(self.ledger, value), self.rates)
        expense = self.expense_for(value.year, value.month, quinzena_of(value))
        return PeriodSummary(totals=totals, expense=expense)

    def month_summary(self, value: date) -> PeriodSummary:
        """Totals and expense of the month containing a date."""
        totals = aggregate_period(select_month(self.ledger, value), self.rates)
        return PeriodSummary(totals=totals, expense=self.month_expense(value.year, value.month))

    # --- Breakdowns ---

    def quinzena_breakdown(self, year: int, month: int, quinzena: int) -> CategoryBreakdown:
        """Per-category totals of a quinzena (the quinzena report)."""
        return aggregate_by_category(select_quinzena_of(self.ledger, year, month, quinzena), self.rates)

    def month_breakdown(self, value: date) -> CategoryBreakdown:
        """Per-category totals of the month containing a date."""
        return aggregate_by_category(select_month(self.ledger, value), self.rates)

    def category_earnings(self, value: date) -> Dict[DeliveryCategory, Decimal]:
        """Earnings per category for a month, leaving out categories that earned nothing."""
        breakdown = self.month_breakdown(value)
        return {
            category: totals.total.earnings
            for category, totals in breakdown.categories.items()
            if totals.total.earnings > 0
        }

    # --- Series ---

    def daily_series(self, value: date) -> List[Tuple[int, Totals]]:
        """Totals of every day of the month containing a date; days without record are zero."""
        series = []
        for day in range(1, days_in_month(value.year, value.month) + 1):
            series.append((day, self.entry_totals(date(value.year, value.month, day))))
        return series

    def monthly_series(self, value: date) -> List[Tuple[int, int, PeriodTotals]]:
        """
        Aggregates of the trailing months ending with the month of a date.

        Returns:
            List of (year, month, PeriodTotals), oldest month first
        """
        series = []
        for year, month in trailing_months(value, self.months):
            records = select_days(self.ledger, year, month, range(1, days_in_month(year, month) + 1))
            series.append((year, month, aggregate_period(records, self.rates)))
        return series

    # --- History ---

    def completed_quinzenas(self, today: date) -> List[QuinzenaHistoryItem]:
        """
        Quinzenas that are over and had at least one delivery, newest first.

        A second quinzena is over once its month is past; a first quinzena
        is over once its month is past or today is after day 15.

        Args:
            today: Current date

        Returns:
            List of QuinzenaHistoryItem in reverse chronological order
        """
        history = []
        for key in sorted(self.ledger, reverse=True):
            year, month = parse_month_key(key)
            month_past = (year, month) < (today.year, today.month)
            current_month = (year, month) == (today.year, today.month)

            candidates = []
            if month_past:
                candidates.append(SECOND_QUINZENA)
            if month_past or (current_month and today.day > QUINZENA_SPLIT_DAY):
                candidates.append(FIRST_QUINZENA)

            for quinzena in candidates:
                records = select_days(self.ledger, year, month, quinzena_days(year, month, quinzena))
                totals = aggregate_period(records, self.rates).total
                if totals.count > 0:
                    history.append(
                        QuinzenaHistoryItem(
                            year=year,
                            month=month,
                            quinzena=quinzena,
                            totals=totals,
                            expense=self.expense_for(year, month, quinzena),
                        )
                    )

        logger.debug("Found %d completed quinzenas up to %s", len(history), today)
        return history

    # --- Rolling window ---

    def rolling_summary(self, today: date) -> RollingSummary:
        """
        Totals of the trailing window (today included) with the expenses of
        every quinzena that started less than that many days ago.

        Args:
            today: Last day of the window

        Returns:
            RollingSummary; has_data is False when the window holds no record
        """
        days = self.rolling_window_days
        records = select_last_days(self.ledger, today, days)

        expense = ZERO
        for key, amount in self.expenses.items():
            start = quinzena_start(*parse_expense_key(key))
            if (today - start).days < days:
                expense += amount

        summary = RollingSummary(
            totals=aggregate_period(records, self.rates),
            expense=expense,
            days=days,
            has_data=bool(records),
        )
        logger.debug("Rolling %d-day summary: %d records, expense %s", days, len(records), expense)
        return summary
