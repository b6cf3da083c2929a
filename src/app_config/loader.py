"""Configuration loader with validation and singleton access."""

import logging
import yaml
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .models import AppConfig

logger = logging.getLogger(__name__)

# Process-wide calculation and logging settings
_config: Optional[AppConfig] = None


def load_config(config_path: str | Path) -> AppConfig:
    """
    Read calculation and logging settings from a YAML file and make them current.

    An empty file yields the defaults. Sections or keys left out of the file
    keep their default values.

    Raises:
        FileNotFoundError: If config_path does not exist
        ValueError: If the document is not a mapping or fails validation
        yaml.YAMLError: If the document is not valid YAML
    """
    global _config

    config_path = Path(config_path)
    if not config_path.is_file():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    logger.info(f"Loading configuration from: {config_path}")
    document = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}

    if not isinstance(document, dict):
        raise ValueError(f"Invalid configuration: expected a mapping, got {type(document).__name__}")

    try:
        config = AppConfig.model_validate(document)
    except ValidationError as e:
        logger.error(f"Configuration validation failed: {e}")
        raise ValueError(f"Invalid configuration: {e}") from e

    for section, settings in config.model_dump().items():
        logger.info(f"  {section}: " + ", ".join(f"{key}={value}" for key, value in settings.items()))

    _config = config
    return _config


def get_config() -> AppConfig:
    """
    Current settings, or the defaults when load_config() was never called.

    The calculator is a library, so it has to work without a config file.
    """
    global _config

    if _config is None:
        logger.debug("No configuration loaded, using defaults")
        _config = AppConfig()
    return _config


def reset_config() -> None:
    """Forget the loaded configuration."""
    global _config
    _config = None
