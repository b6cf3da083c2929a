"""Trade calculation logic for rebalancing an account to a target index"""

from decimal import Decimal, localcontext
from typing import TYPE_CHECKING, Any, Dict, Iterable, Mapping, Optional
import logging
from app_config import AppConfig, get_config
from .models import Trade, TradeAction
from .validation import validate_index
from .valuation import exact_context

if TYPE_CHECKING:
    from .account import Account


class TradeCalculator:
    """Calculate trades needed for rebalancing"""

    def __init__(self, logger: Optional[logging.Logger] = None, config: Optional[AppConfig] = None):
        self.logger = logger or logging.getLogger(__name__)
        self.config = config if config is not None else get_config()

    def calculate_trades(self, account: "Account", index: Mapping[str, Any]) -> Dict[str, Trade]:
        """
        Calculate one trade per asset in the target index.

        Assets held by the account but missing from the index get no trade and
        stay as they are. Raises an InputValidationError if the index is invalid.
        """
        target_index = validate_index(index, account.pricelist)

        self.logger.debug(
            f"Rebalancing account worth {account.total_value} across {len(target_index)} assets"
        )

        trades = {}
        for asset, weight in target_index.items():
            trades[asset] = self._calculate_trade(
                asset=asset,
                weight=weight,
                total_value=account.total_value,
                price=account.pricelist[asset],
                current_quantity=account.holdings.get(asset, Decimal(0))
            )

        untouched = set(account.holdings) - set(target_index)
        if untouched:
            self.logger.info(f"Leaving holdings outside the target index unchanged: {', '.join(sorted(untouched))}")

        return trades

    def _calculate_trade(self, asset: str, weight: Decimal, total_value: Decimal,
                         price: Decimal, current_quantity: Decimal) -> Trade:
        """
        Compare the quantity the weight calls for against the current quantity.

        Only the division by price runs in the configured context; everything
        else is exact.
        """
        with localcontext(exact_context()):
            target_value = total_value * weight
        with localcontext(self.config.calculation.decimal_context()):
            target_quantity = target_value / price
        with localcontext(exact_context()):
            delta = target_quantity - current_quantity

        # A zero delta is reported as a buy of nothing
        action = TradeAction.SELL if delta < 0 else TradeAction.BUY
        trade = Trade(asset=asset, action=action, amount=delta.copy_abs())

        self.logger.debug(
            f"{asset}: weight={weight} price={price} held={current_quantity} "
            f"target={target_quantity} -> {trade}"
        )
        return trade


def rebalance(account: "Account", index: Mapping[str, Any]) -> Dict[str, Trade]:
    """Calculate rebalancing trades with a default calculator"""
    return TradeCalculator().calculate_trades(account, index)


def apply_trades(holdings: Mapping[str, Decimal], trades: Iterable[Trade] | Mapping[str, Trade]) -> Dict[str, Decimal]:
    """
    Simulate trades against holdings and return the resulting holdings.

    Buys add to and sells subtract from the held quantity. Positions that end
    at exactly zero are dropped; holdings without a trade are kept as is.
    """
    if isinstance(trades, Mapping):
        trades = trades.values()

    result = dict(holdings)
    with localcontext(exact_context()):
        for trade in trades:
            quantity = result.get(trade.asset, Decimal(0)) + trade.signed_amount
            if quantity == 0:
                result.pop(trade.asset, None)
            else:
                result[trade.asset] = quantity
    return result
