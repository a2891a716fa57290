#!/usr/bin/env python3
"""
Configuration Management for the Personal Finance Tracker

Handles environment-based configuration with sensible defaults and validation.
Supports multiple environments (development, test, production).
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .currency import DEFAULT_CURRENCY_SYMBOL

# Load environment variables from .env file
load_dotenv()

# Record file names; changing them orphans existing data
ENTRIES_RECORD = "pft_transactions_v1.json"
FAVORITES_RECORD = "pft_tips_favs_v1.json"


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class StorageConfig:
    """Locations of the persisted records."""

    entries_file: Path
    favorites_file: Path


@dataclass
class ReportConfig:
    """Reporting, chart and export settings."""

    output_dir: Path
    lookback_months: int = 8
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    chart_width: int = 12
    chart_height: int = 5
    chart_dpi: int = 150


@dataclass
class Config:
    """
    Main configuration class for the tracker.

    Loads configuration from environment variables with defaults and
    validation for each environment type.
    """

    environment: Environment
    data_dir: Path

    storage: StorageConfig
    reports: ReportConfig

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("PFT_ENV", "development"))

        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_pft"
            data_dir = Path(os.getenv("PFT_DATA_DIR", str(default_test_dir)))
        else:
            data_dir = Path(os.getenv("PFT_DATA_DIR", "./data")).expanduser().resolve()

        data_dir.mkdir(parents=True, exist_ok=True)

        storage = StorageConfig(
            entries_file=data_dir / ENTRIES_RECORD,
            favorites_file=data_dir / FAVORITES_RECORD,
        )

        reports = ReportConfig(
            output_dir=data_dir / "exports",
            lookback_months=int(os.getenv("PFT_LOOKBACK_MONTHS", "8")),
            currency_symbol=os.getenv("PFT_CURRENCY_SYMBOL", DEFAULT_CURRENCY_SYMBOL),
            chart_width=int(os.getenv("CHART_WIDTH", "12")),
            chart_height=int(os.getenv("CHART_HEIGHT", "5")),
            chart_dpi=int(os.getenv("CHART_DPI", "150")),
        )

        return cls(
            environment=env,
            data_dir=data_dir,
            storage=storage,
            reports=reports,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        if not self.data_dir.exists():
            errors.append(f"data_dir does not exist: {self.data_dir}")

        if self.reports.lookback_months < 1:
            errors.append("PFT_LOOKBACK_MONTHS must be at least 1")
        if self.reports.chart_dpi <= 0:
            errors.append("CHART_DPI must be positive")
        if self.reports.chart_width <= 0 or self.reports.chart_height <= 0:
            errors.append("Chart dimensions must be positive")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

        # Chart rendering is chatty at DEBUG
        logging.getLogger("matplotlib").setLevel(logging.WARNING)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a plain dictionary."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if hasattr(field_value, "__dict__") and not isinstance(field_value, (Path, Enum)):
                nested: dict[str, Any] = {}
                for nested_name, nested_value in field_value.__dict__.items():
                    nested[nested_name] = str(nested_value) if isinstance(nested_value, Path) else nested_value
                result[field_name] = nested
            elif isinstance(field_value, Path):
                result[field_name] = str(field_value)
            elif isinstance(field_value, Enum):
                result[field_name] = field_value.value
            else:
                result[field_name] = field_value

        return result


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_environment()

        errors = _config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()

