from decimal import Decimal
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class TradeAction(str, Enum):
    """Direction of a trade"""
    BUY = "buy"
    SELL = "sell"


class Trade(BaseModel):
    """A buy or sell of a non-negative amount of one asset"""
    model_config = ConfigDict(frozen=True)

    asset: str
    action: TradeAction
    amount: Decimal = Field(ge=0)

    @property
    def signed_amount(self) -> Decimal:
        """Change to the held quantity: positive for buys, negative for sells"""
        return self.amount.copy_negate() if self.action == TradeAction.SELL else self.amount

    def __str__(self) -> str:
        return f"{self.action.value} {self.amount} {self.asset}"
