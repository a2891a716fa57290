#!/usr/bin/env python3
"""Tests for entry search and type filtering."""

import pytest

from pft.entries import TypeFilter, filter_entries, parse_type_filter


@pytest.mark.unit
class TestFilterEntries:
    """Test filter_entries."""

    def test_no_filters_returns_everything_in_order(self, sample_entries):
        assert filter_entries(sample_entries) == sample_entries

    def test_search_is_case_insensitive_substring(self, sample_entries):
        """Test "rent" matches both "Rent" and "Rental deposit refund"."""
        result = filter_entries(sample_entries, "RENT")
        assert [e.id for e in result] == ["e3", "e1"]

    def test_blank_search_matches_all(self, sample_entries):
        assert filter_entries(sample_entries, "   ") == sample_entries
        assert filter_entries(sample_entries, None) == sample_entries

    def test_type_filter(self, sample_entries):
        """Test income and expense selections."""
        assert [e.id for e in filter_entries(sample_entries, type_filter="expense")] == ["e4", "e3"]
        assert [e.id for e in filter_entries(sample_entries, type_filter=TypeFilter.INCOME)] == ["e5", "e2", "e1"]

    def test_both_predicates_must_hold(self, sample_entries):
        """Test search and type combine with AND."""
        result = filter_entries(sample_entries, "rent", "income")
        assert [e.id for e in result] == ["e1"]

    def test_no_match_is_empty(self, sample_entries):
        assert filter_entries(sample_entries, "lottery") == []

    def test_input_is_not_modified(self, sample_entries):
        before = list(sample_entries)
        filter_entries(sample_entries, "rent", "expense")
        assert sample_entries == before


class TestParseTypeFilter:
    """Test raw filter selection parsing."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("all", TypeFilter.ALL),
            ("Income", TypeFilter.INCOME),
            (" expense ", TypeFilter.EXPENSE),
            (TypeFilter.EXPENSE, TypeFilter.EXPENSE),
            (None, TypeFilter.ALL),
            ("bogus", TypeFilter.ALL),
        ],
    )
    def test_parse(self, raw, expected):
        assert parse_type_filter(raw) is expected
