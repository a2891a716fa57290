#!/usr/bin/env python3
"""
Integration tests for configuration module.

Tests environment-driven configuration loading and record path resolution.
"""

import pytest

from pft.core.config import (
    ENTRIES_RECORD,
    FAVORITES_RECORD,
    Environment,
    get_config,
    reload_config,
)


@pytest.mark.integration
class TestConfigLoading:
    """Test configuration loading and structure."""

    def test_config_loads_test_environment(self, tmp_path):
        """Test the test environment uses the isolated data directory."""
        config = get_config()

        assert config.environment == Environment.TEST
        assert config.data_dir == tmp_path / "data"
        assert config.data_dir.is_dir()

    def test_record_paths(self):
        """Test both records live directly in the data directory."""
        config = get_config()

        assert config.storage.entries_file == config.data_dir / ENTRIES_RECORD
        assert config.storage.favorites_file == config.data_dir / FAVORITES_RECORD
        assert config.reports.output_dir == config.data_dir / "exports"

    def test_defaults(self):
        config = get_config()

        assert config.reports.lookback_months == 8
        assert config.reports.currency_symbol == "₦"
        assert config.log_level == "INFO"
        assert config.debug is False

    def test_get_config_is_cached(self):
        assert get_config() is get_config()


@pytest.mark.integration
class TestConfigOverrides:
    """Test environment variable overrides."""

    def test_reload_picks_up_environment_changes(self, monkeypatch):
        get_config()
        monkeypatch.setenv("PFT_LOOKBACK_MONTHS", "12")
        monkeypatch.setenv("PFT_CURRENCY_SYMBOL", "$")
        monkeypatch.setenv("CHART_DPI", "72")

        config = reload_config()

        assert config.reports.lookback_months == 12
        assert config.reports.currency_symbol == "$"
        assert config.reports.chart_dpi == 72

    def test_invalid_lookback_fails_validation(self, monkeypatch):
        monkeypatch.setenv("PFT_LOOKBACK_MONTHS", "0")

        with pytest.raises(ValueError, match="PFT_LOOKBACK_MONTHS"):
            reload_config()

    def test_to_dict_is_plain(self):
        data = get_config().to_dict()

        assert data["environment"] == "test"
        assert isinstance(data["data_dir"], str)
        assert isinstance(data["storage"]["entries_file"], str)
        assert data["reports"]["lookback_months"] == 8
