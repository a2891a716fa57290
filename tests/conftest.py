"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

from datetime import date
from pathlib import Path

import pytest

from pft.core import config as config_module
from pft.entries import EntryStore, open_entry_store
from pft.tips import FavoritesStore, open_favorites_store
from tests.fixtures.sample_entries import make_entry, month_timestamp


@pytest.fixture
def temp_dir(tmp_path) -> Path:
    """Temporary directory for test files."""
    return tmp_path


@pytest.fixture
def entries_file(temp_dir) -> Path:
    """Path for the entries record (not created)."""
    return temp_dir / "pft_transactions_v1.json"


@pytest.fixture
def favorites_file(temp_dir) -> Path:
    """Path for the favorites record (not created)."""
    return temp_dir / "pft_tips_favs_v1.json"


@pytest.fixture
def entry_store(entries_file) -> EntryStore:
    """Empty entry store backed by a temp file."""
    return open_entry_store(entries_file)


@pytest.fixture
def favorites_store(favorites_file) -> FavoritesStore:
    """Empty favorites store backed by a temp file."""
    return open_favorites_store(favorites_file)


@pytest.fixture
def anchor_day() -> date:
    """Fixed "today" for monthly series tests."""
    return date(2024, 10, 15)


@pytest.fixture
def sample_entries(anchor_day):
    """Mixed entries across the lookback window, newest first."""
    return [
        make_entry("e5", "Freelance project", "300", "income", month_timestamp(anchor_day, 0)),
        make_entry("e4", "Groceries", "45.50", "expense", month_timestamp(anchor_day, 0)),
        make_entry("e3", "Rent", "1200", "expense", month_timestamp(anchor_day, -1)),
        make_entry("e2", "Salary", "2500", "income", month_timestamp(anchor_day, -1)),
        make_entry("e1", "Rental deposit refund", "150", "income", month_timestamp(anchor_day, -3)),
    ]


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Isolate configuration: test environment, temp data dir, fresh config."""
    monkeypatch.setenv("PFT_ENV", "test")
    monkeypatch.setenv("PFT_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.delenv("PFT_LOOKBACK_MONTHS", raising=False)
    monkeypatch.delenv("PFT_CURRENCY_SYMBOL", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setattr(config_module, "_config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for currency handling and precision")
    config.addinivalue_line("markers", "storage: Tests for persisted records")
    config.addinivalue_line("markers", "analysis: Tests for aggregation and reports")
    config.addinivalue_line("markers", "tips: Tests for the tip catalog and favorites")
