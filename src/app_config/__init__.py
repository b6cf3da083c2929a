"""Application configuration management for the rebalance calculator."""

from .models import (
    AppConfig,
    CalculationConfig,
    LoggingConfig,
)
from .loader import load_config, get_config, reset_config

__all__ = [
    "AppConfig",
    "CalculationConfig",
    "LoggingConfig",
    "load_config",
    "get_config",
    "reset_config",
]
