"""Structural checks for pricelists, holdings and target indexes.

Every check raises an InputValidationError subclass on the first offending
entry. Iteration follows the input mapping's order, so callers must not rely
on which of several simultaneous violations gets reported.
"""

from decimal import Decimal, InvalidOperation, localcontext
from typing import Any, Dict, Mapping

from .exceptions import (
    AssetMissingFromPricelistError,
    EmptyInputError,
    IndexSumError,
    InputKind,
    InvalidAmountError,
    InvalidAssetError,
)
from .valuation import exact_context

ONE = Decimal(1)


def to_decimal(asset: str, value: Any) -> Decimal:
    """Convert a user supplied amount to Decimal without binary float error.

    Floats go through their shortest repr, so 0.1 becomes Decimal("0.1").
    """
    if isinstance(value, bool):
        raise InvalidAmountError(asset, value)
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(repr(value))
    if isinstance(value, str):
        try:
            return Decimal(value.strip())
        except InvalidOperation:
            raise InvalidAmountError(asset, value) from None
    raise InvalidAmountError(asset, value)


def validate_asset(asset: Any) -> str:
    if not isinstance(asset, str) or not asset or asset != asset.upper():
        raise InvalidAssetError(asset)
    return asset


def validate_amount(asset: str, value: Any) -> Decimal:
    """Return value as a Decimal, rejecting anything that is not a finite number above zero."""
    amount = to_decimal(asset, value)
    if not amount.is_finite() or amount <= 0:
        raise InvalidAmountError(asset, amount)
    return amount


def _validate_entries(mapping: Mapping[str, Any], kind: InputKind) -> Dict[str, Decimal]:
    if not mapping:
        raise EmptyInputError(kind)

    validated = {}
    for asset, value in mapping.items():
        validate_asset(asset)
        validated[asset] = validate_amount(asset, value)
    return validated


def _check_priced(assets, pricelist: Mapping[str, Decimal]) -> None:
    for asset in assets:
        if asset not in pricelist:
            raise AssetMissingFromPricelistError(asset)


def validate_pricelist(pricelist: Mapping[str, Any]) -> Dict[str, Decimal]:
    """Validate a pricelist: non-empty, uppercase assets, prices above zero."""
    return _validate_entries(pricelist, InputKind.PRICELIST)


def validate_holdings(holdings: Mapping[str, Any], pricelist: Mapping[str, Decimal]) -> Dict[str, Decimal]:
    """Validate holdings against an already validated pricelist."""
    validated = _validate_entries(holdings, InputKind.HOLDINGS)
    _check_priced(validated, pricelist)
    return validated


def validate_index(index: Mapping[str, Any], pricelist: Mapping[str, Decimal]) -> Dict[str, Decimal]:
    """
    Validate a target index against an already validated pricelist.

    Weights must be above zero, every asset must be priced and the weights
    must sum to exactly 1 (decimal equality, so 1.00 is accepted).
    """
    validated = _validate_entries(index, InputKind.INDEX)
    _check_priced(validated, pricelist)

    with localcontext(exact_context()):
        total = sum(validated.values(), Decimal(0))
    if total != ONE:
        raise IndexSumError(total)
    return validated
