#!/usr/bin/env python3
"""
Unit tests for entry aggregation.

Totals, per-type breakdown and the monthly cumulative series, all anchored
on a fixed "today" so windows are deterministic.
"""

from datetime import date

import pytest

from pft.analysis import (
    DEFAULT_LOOKBACK_MONTHS,
    category_breakdown,
    compute_totals,
    monthly_cumulative_series,
)
from pft.core.dates import YearMonth
from pft.core.money import Money
from pft.entries import EntryType
from tests.fixtures.sample_entries import make_entry, month_timestamp


@pytest.mark.analysis
class TestComputeTotals:
    """Test income, expense and balance totals."""

    def test_empty(self):
        totals = compute_totals([])
        assert totals.income == totals.expense == totals.balance == Money.zero()

    def test_income_and_expense(self, anchor_day):
        """Test 100 income and 40 expense balance to 60."""
        entries = [
            make_entry("a", "Pay", "100", "income", month_timestamp(anchor_day, 0)),
            make_entry("b", "Food", "40", "expense", month_timestamp(anchor_day, 0)),
        ]

        totals = compute_totals(entries)

        assert totals.income == Money.from_major("100")
        assert totals.expense == Money.from_major("40")
        assert totals.balance == Money.from_major("60")

    @pytest.mark.currency
    def test_balance_invariant(self, sample_entries):
        """Test balance is exactly income minus expense."""
        totals = compute_totals(sample_entries)

        assert totals.income.to_minor() == 295000
        assert totals.expense.to_minor() == 124550
        assert totals.balance == totals.income - totals.expense

    @pytest.mark.currency
    def test_no_float_drift(self, anchor_day):
        """Test many small amounts sum exactly."""
        entries = [
            make_entry(str(i), "Coin", "0.10", "income", month_timestamp(anchor_day, 0)) for i in range(30)
        ]
        assert compute_totals(entries).income == Money.from_minor(300)

    def test_totals_include_unparseable_dates(self):
        """Test totals count every entry regardless of its date."""
        entries = [make_entry("x", "Mystery", "5", "income", "not-a-date")]
        assert compute_totals(entries).income == Money.from_minor(500)


@pytest.mark.analysis
class TestCategoryBreakdown:
    """Test per-type sums."""

    def test_empty_input_is_empty(self):
        assert category_breakdown([]) == {}

    def test_income_first_and_missing_types_omitted(self, sample_entries):
        """Test ordering and omission."""
        breakdown = category_breakdown(sample_entries)
        assert list(breakdown) == [EntryType.INCOME, EntryType.EXPENSE]
        assert breakdown[EntryType.INCOME] == Money.from_major("2950")

        only_expense = [e for e in sample_entries if e.type is EntryType.EXPENSE]
        assert category_breakdown(only_expense) == {EntryType.EXPENSE: Money.from_major("1245.50")}


@pytest.mark.analysis
class TestMonthlyCumulativeSeries:
    """Test the running balance series."""

    def test_empty_gives_zero_window(self, anchor_day):
        """Test no entries still gives the full window of zeros."""
        series = monthly_cumulative_series([], today=anchor_day)

        assert len(series) == DEFAULT_LOOKBACK_MONTHS
        assert all(point.net == Money.zero() and point.cumulative == Money.zero() for point in series)
        assert series[0].month == YearMonth(2024, 3)
        assert series[-1].month == YearMonth(2024, 10)

    def test_running_balance_carries_forward(self, anchor_day):
        """Test 100 income and 40 expense two months ago give 60 repeated after."""
        entries = [
            make_entry("a", "Pay", "100", "income", month_timestamp(anchor_day, -2)),
            make_entry("b", "Food", "40", "expense", month_timestamp(anchor_day, -2)),
        ]

        series = monthly_cumulative_series(entries, today=anchor_day)
        cumulative = [point.cumulative.to_minor() for point in series]

        assert cumulative == [0, 0, 0, 0, 0, 6000, 6000, 6000]
        assert series[5].net == Money.from_minor(6000)
        assert series[6].net == Money.zero()

    def test_sample_entries(self, sample_entries, anchor_day):
        """Test the final cumulative value equals the balance when all entries are in range."""
        series = monthly_cumulative_series(sample_entries, today=anchor_day)

        assert [str(point.cumulative) for point in series] == [
            "0.00",
            "0.00",
            "0.00",
            "0.00",
            "150.00",
            "150.00",
            "1450.00",
            "1704.50",
        ]
        assert series[-1].cumulative == compute_totals(sample_entries).balance

    def test_negative_balance(self, anchor_day):
        """Test the series can dip below zero."""
        entries = [make_entry("a", "Rent", "500", "expense", month_timestamp(anchor_day, 0))]
        series = monthly_cumulative_series(entries, months=2, today=anchor_day)
        assert [point.cumulative.to_minor() for point in series] == [0, -50000]

    def test_unparseable_and_out_of_window_dates_are_excluded(self, anchor_day):
        """Test entries that can't be bucketed into the window don't contribute."""
        entries = [
            make_entry("a", "In window", "10", "income", month_timestamp(anchor_day, 0)),
            make_entry("b", "Garbage date", "999", "income", "sometime"),
            make_entry("c", "Too old", "999", "income", month_timestamp(anchor_day, -8)),
            make_entry("d", "Future", "999", "income", month_timestamp(anchor_day, 1)),
        ]

        series = monthly_cumulative_series(entries, today=anchor_day)

        assert series[-1].cumulative == Money.from_major("10")

    def test_custom_window(self, anchor_day):
        """Test non-default window width crossing a year boundary."""
        series = monthly_cumulative_series([], months=12, today=date(2024, 2, 1))

        assert len(series) == 12
        assert series[0].month == YearMonth(2023, 3)
        assert series[0].label == "Mar 2023"

    @pytest.mark.parametrize("months", [0, -3])
    def test_rejects_empty_window(self, months):
        with pytest.raises(ValueError):
            monthly_cumulative_series([], months=months)
