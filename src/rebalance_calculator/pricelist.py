"""Shared pricelist used when an account is opened without explicit prices."""

import logging
import threading
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional

from .validation import validate_pricelist


class PricelistStore:
    """
    Thread-safe holder of a validated pricelist.

    Updates replace the whole map at once; readers always receive a copy of
    either the previous or the new pricelist, never a mix of both.
    """

    def __init__(self, pricelist: Optional[Mapping[str, Any]] = None, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self._lock = threading.Lock()
        self._pricelist: Dict[str, Decimal] = {}
        if pricelist is not None:
            self.set(pricelist)

    def set(self, pricelist: Mapping[str, Any]) -> None:
        """Validate and install a new pricelist. The current one is kept if validation fails."""
        validated = validate_pricelist(pricelist)
        with self._lock:
            self._pricelist = validated
        self.logger.debug(f"Pricelist updated: {len(validated)} assets")

    def get(self) -> Dict[str, Decimal]:
        with self._lock:
            return dict(self._pricelist)

    def clear(self) -> None:
        with self._lock:
            self._pricelist = {}
        self.logger.debug("Pricelist cleared")


# Process-wide default store
_default_store = PricelistStore()


def default_store() -> PricelistStore:
    return _default_store


def set_pricelist(pricelist: Mapping[str, Any]) -> None:
    """Validate and set the process-wide pricelist"""
    _default_store.set(pricelist)


def get_pricelist() -> Dict[str, Decimal]:
    """Return a copy of the process-wide pricelist"""
    return _default_store.get()


def clear_pricelist() -> None:
    """Reset the process-wide pricelist to empty"""
    _default_store.clear()
