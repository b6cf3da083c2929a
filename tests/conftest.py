"""Shared pytest fixtures."""

from decimal import Decimal

import pytest

from app_config import reset_config
from rebalance_calculator import clear_pricelist


@pytest.fixture(autouse=True)
def clean_global_state():
    """Reset the default pricelist and the config singleton around every test."""
    clear_pricelist()
    reset_config()
    yield
    clear_pricelist()
    reset_config()


@pytest.fixture
def two_asset_prices() -> dict:
    """ETH/BTC pricelist used across the account tests."""
    return {"ETH": Decimal("200"), "BTC": Decimal("5000")}


@pytest.fixture
def five_asset_prices() -> dict:
    """Pricelist for rebalancing a single holding into new assets."""
    return {
        "ETH": Decimal("200"),
        "BTC": Decimal("2000"),
        "IOTA": Decimal("0.3"),
        "BAT": Decimal("0.12"),
        "XLM": Decimal("0.2"),
    }
