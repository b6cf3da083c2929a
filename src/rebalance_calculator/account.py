from decimal import Decimal, localcontext
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional
import logging
from pydantic import BaseModel, ConfigDict, field_serializer, model_validator
from app_config import get_config
from .calculator import TradeCalculator
from .exceptions import EmptyInputError, InputKind
from .models import Trade
from .pricelist import PricelistStore, default_store
from .validation import validate_holdings, validate_pricelist
from .valuation import current_weights, total_value

logger = logging.getLogger(__name__)


class Account(BaseModel):
    """
    Immutable snapshot of holdings, the prices they are valued at and their total value.

    holdings and pricelist are read-only mappings. total_value is always
    derived from them exactly; a value passed in by the caller is ignored.
    Build a new Account (or use model_copy) to reflect new holdings or prices.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    holdings: MappingProxyType
    pricelist: MappingProxyType
    total_value: Decimal = Decimal(0)

    @model_validator(mode="before")
    @classmethod
    def _validate_inputs(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data

        pricelist = validate_pricelist(data.get("pricelist") or {})
        holdings = validate_holdings(data.get("holdings") or {}, pricelist)

        return {
            "holdings": MappingProxyType(holdings),
            "pricelist": MappingProxyType(pricelist),
            "total_value": total_value(holdings, pricelist),
        }

    @field_serializer("holdings", "pricelist")
    def _serialize_mapping(self, value: Mapping[str, Decimal]) -> Dict[str, Decimal]:
        return dict(value)

    @classmethod
    def open(cls, holdings: Mapping[str, Any], pricelist: Optional[Mapping[str, Any]] = None,
             store: Optional[PricelistStore] = None) -> "Account":
        """
        Validate holdings and open an account.

        Uses the explicit pricelist when given, otherwise the pricelist held by
        store, otherwise the process-wide default store.
        """
        if pricelist is None:
            pricelist = (store or default_store()).get()
            if not pricelist:
                raise EmptyInputError(InputKind.PRICELIST)

        account = cls(holdings=holdings, pricelist=pricelist)
        logger.debug(f"Opened account with {len(account.holdings)} holdings worth {account.total_value}")
        return account

    def model_copy(self, *, update: Optional[Mapping[str, Any]] = None, deep: bool = False) -> "Account":
        """
        Copy the account, validating any updated holdings or pricelist.

        total_value is re-derived, so it cannot be set through update.
        """
        data = {"holdings": self.holdings, "pricelist": self.pricelist}
        if update:
            data.update(update)
        return type(self)(**data)

    def __deepcopy__(self, memo: Optional[Dict[int, Any]] = None) -> "Account":
        # Nothing inside can change, so the account is its own deep copy
        return self

    @property
    def weights(self) -> Dict[str, Decimal]:
        """Current share of total value per held asset"""
        with localcontext(get_config().calculation.decimal_context()):
            return current_weights(self.holdings, self.pricelist)

    def rebalance(self, index: Mapping[str, Any], calculator: Optional[TradeCalculator] = None) -> Dict[str, Trade]:
        """Return the trades that bring this account in line with the target index"""
        return (calculator or TradeCalculator()).calculate_trades(self, index)
