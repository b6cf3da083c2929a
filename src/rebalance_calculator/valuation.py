"""Portfolio valuation helpers"""

from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    Context,
    Decimal,
    DivisionByZero,
    Inexact,
    InvalidOperation,
    Overflow,
    localcontext,
)
from typing import Dict, Mapping


def exact_context() -> Context:
    """
    Context for additions, subtractions and multiplications that never round.

    Inexact is trapped, so any rounding raises instead of slipping through.
    Never divide in this context.
    """
    return Context(
        prec=MAX_PREC,
        Emax=MAX_EMAX,
        Emin=MIN_EMIN,
        traps=[InvalidOperation, DivisionByZero, Overflow, Inexact],
    )


def total_value(holdings: Mapping[str, Decimal], pricelist: Mapping[str, Decimal]) -> Decimal:
    """
    Exact sum of quantity * price over all holdings.

    Every held asset must be priced; a missing price raises KeyError since
    holdings are validated against the pricelist before valuation.
    """
    value = Decimal(0)
    with localcontext(exact_context()):
        for asset, quantity in holdings.items():
            value += quantity * pricelist[asset]
    return value


def current_weights(holdings: Mapping[str, Decimal], pricelist: Mapping[str, Decimal]) -> Dict[str, Decimal]:
    """Share of total value held in each asset, divided in the caller's decimal context"""
    value = total_value(holdings, pricelist)
    if value == 0:
        return {}
    with localcontext(exact_context()):
        asset_values = {asset: quantity * pricelist[asset] for asset, quantity in holdings.items()}
    return {asset: asset_value / value for asset, asset_value in asset_values.items()}
