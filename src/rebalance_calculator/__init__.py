from .account import Account
from .calculator import TradeCalculator, apply_trades, rebalance
from .exceptions import (
    AssetMissingFromPricelistError,
    EmptyInputError,
    IndexSumError,
    InputKind,
    InputValidationError,
    InvalidAmountError,
    InvalidAssetError,
    RebalancerError,
)
from .logger import StructuredFormatter, configure_root_logger
from .models import Trade, TradeAction
from .pricelist import (
    PricelistStore,
    clear_pricelist,
    default_store,
    get_pricelist,
    set_pricelist,
)
from .validation import validate_holdings, validate_index, validate_pricelist
from .valuation import current_weights, total_value

__version__ = "1.0.0"

__all__ = [
    "Account",
    "TradeCalculator",
    "apply_trades",
    "rebalance",
    "Trade",
    "TradeAction",
    "PricelistStore",
    "default_store",
    "set_pricelist",
    "get_pricelist",
    "clear_pricelist",
    "validate_pricelist",
    "validate_holdings",
    "validate_index",
    "total_value",
    "current_weights",
    "StructuredFormatter",
    "configure_root_logger",
    "RebalancerError",
    "InputValidationError",
    "InputKind",
    "EmptyInputError",
    "InvalidAssetError",
    "InvalidAmountError",
    "AssetMissingFromPricelistError",
    "IndexSumError",
    "__version__",
]
