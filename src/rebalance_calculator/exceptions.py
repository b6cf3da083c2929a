from enum import Enum


class InputKind(str, Enum):
    """Mappings accepted by the calculator"""
    PRICELIST = "pricelist"
    HOLDINGS = "holdings"
    INDEX = "index"


class RebalancerError(Exception):
    """Base class for rebalance calculator errors"""
    pass


# Raised from pydantic validators, so must not be a ValueError (those get wrapped)
class InputValidationError(RebalancerError):
    """Raised when a pricelist, holdings or index fails validation"""
    pass


class EmptyInputError(InputValidationError):
    """Raised when a required mapping is empty"""

    def __init__(self, kind: InputKind):
        self.kind = kind
        super().__init__(f"{kind.value} must not be empty")


class InvalidAssetError(InputValidationError):
    """Raised when an asset identifier is not uppercase: "eth" vs "ETH" """

    def __init__(self, asset):
        self.asset = asset
        super().__init__(f"assets must be uppercase, got {asset!r}")


class InvalidAmountError(InputValidationError):
    """Raised when an asset amount is zero, negative or not a number"""

    def __init__(self, asset: str, amount):
        self.asset = asset
        self.amount = amount
        super().__init__(f"{asset} needs positive amount, not {amount}")


class AssetMissingFromPricelistError(InputValidationError):
    """Raised when holdings or an index reference an asset without a price"""

    def __init__(self, asset: str):
        self.asset = asset
        super().__init__(f"{asset} is missing from the pricelist")


class IndexSumError(InputValidationError):
    """Raised when index values do not sum to exactly 1"""

    def __init__(self, total):
        self.total = total
        super().__init__(f"index values must sum to 1, got {total}")
