"""Shared test fixtures."""

from __future__ import annotations

import pytest

from money_field.config import MoneyFieldConfig
from money_field.engine import MoneyEngine


@pytest.fixture
def us_config() -> MoneyFieldConfig:
    """Dot decimal separator, comma grouping, 2 decimals."""
    return MoneyFieldConfig()


@pytest.fixture
def euro_config() -> MoneyFieldConfig:
    """Comma decimal separator, dot grouping, 2 decimals."""
    return MoneyFieldConfig(decimal_separator=",")


@pytest.fixture
def signed_config() -> MoneyFieldConfig:
    """Comma decimal separator with negative amounts allowed."""
    return MoneyFieldConfig(decimal_separator=",", allow_negative=True)


@pytest.fixture
def integer_config() -> MoneyFieldConfig:
    """Decimals disabled through a precision of 0."""
    return MoneyFieldConfig(decimal_precision=0)


@pytest.fixture
def euro_engine(euro_config: MoneyFieldConfig) -> MoneyEngine:
    """An engine for the Euro-style configuration."""
    return MoneyEngine(euro_config)


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point the config.toml path at a temporary file that does not exist yet."""
    config_path = tmp_path / ".config" / "money-field" / "config.toml"
    monkeypatch.setattr("money_field.config._CONFIG_PATH", config_path)
    return config_path
