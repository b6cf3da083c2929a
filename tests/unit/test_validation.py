"""Unit tests for pricelist, holdings and index validation."""

from decimal import Decimal

import pytest

from rebalance_calculator.exceptions import (
    AssetMissingFromPricelistError,
    EmptyInputError,
    IndexSumError,
    InputKind,
    InvalidAmountError,
    InvalidAssetError,
)
from rebalance_calculator.validation import (
    to_decimal,
    validate_asset,
    validate_holdings,
    validate_index,
    validate_pricelist,
)


PRICES = {"ETH": Decimal("200"), "BTC": Decimal("5000")}


class TestToDecimal:
    """Test cases for amount coercion."""

    def test_decimal_passes_through(self) -> None:
        """Test Decimal values are returned unchanged."""
        value = Decimal("1.25")
        assert to_decimal("ETH", value) is value

    def test_int_and_str(self) -> None:
        """Test ints and numeric strings convert exactly."""
        assert to_decimal("ETH", 42) == Decimal("42")
        assert to_decimal("ETH", "0.3") == Decimal("0.3")
        assert to_decimal("ETH", " 12.5 ") == Decimal("12.5")

    def test_float_uses_shortest_repr(self) -> None:
        """Test floats avoid their binary expansion."""
        assert to_decimal("ETH", 0.1) == Decimal("0.1")
        assert to_decimal("ETH", 0.2) + to_decimal("BTC", 0.1) == Decimal("0.3")

    def test_unparseable_string(self) -> None:
        """Test non-numeric strings are invalid amounts."""
        with pytest.raises(InvalidAmountError) as exc_info:
            to_decimal("ETH", "lots")

        assert exc_info.value.asset == "ETH"
        assert exc_info.value.amount == "lots"

    @pytest.mark.parametrize("value", [True, None, [1], object()])
    def test_unsupported_types(self, value) -> None:
        """Test booleans and non-numeric types are rejected."""
        with pytest.raises(InvalidAmountError):
            to_decimal("ETH", value)


class TestValidateAsset:
    """Test cases for asset identifier validation."""

    def test_uppercase_accepted(self) -> None:
        """Test uppercase and numeric identifiers are valid."""
        assert validate_asset("ETH") == "ETH"
        assert validate_asset("1INCH") == "1INCH"

    @pytest.mark.parametrize("asset", ["eth", "Eth", "", 5])
    def test_invalid_identifiers(self, asset) -> None:
        """Test lowercase, mixed case, empty and non-string identifiers."""
        with pytest.raises(InvalidAssetError):
            validate_asset(asset)


class TestValidatePricelist:
    """Test cases for pricelist validation."""

    def test_valid_pricelist(self) -> None:
        """Test a valid pricelist is returned as a fresh dict of Decimals."""
        source = {"ETH": "200", "BTC": 5000}
        result = validate_pricelist(source)

        assert result == PRICES
        assert result is not source
        assert all(isinstance(v, Decimal) for v in result.values())

    def test_empty_pricelist(self) -> None:
        """Test an empty pricelist is rejected."""
        with pytest.raises(EmptyInputError) as exc_info:
            validate_pricelist({})

        assert exc_info.value.kind is InputKind.PRICELIST

    def test_lowercase_asset(self) -> None:
        """Test pricelist asset keys must be uppercase."""
        with pytest.raises(InvalidAssetError):
            validate_pricelist({"ETH": Decimal("200"), "btc": Decimal("5000")})

    @pytest.mark.parametrize("price", [Decimal("-5"), Decimal("0"), Decimal("NaN"), Decimal("Infinity")])
    def test_price_must_be_positive(self, price: Decimal) -> None:
        """Test pricelist entries must have a finite value above 0."""
        with pytest.raises(InvalidAmountError) as exc_info:
            validate_pricelist({"ETH": Decimal("200"), "BTC": price})

        assert exc_info.value.asset == "BTC"
        if price.is_finite():
            assert exc_info.value.amount == price


class TestValidateHoldings:
    """Test cases for holdings validation."""

    def test_valid_holdings(self) -> None:
        """Test valid holdings are returned as Decimals."""
        assert validate_holdings({"ETH": "5"}, PRICES) == {"ETH": Decimal("5")}

    def test_empty_holdings(self) -> None:
        """Test empty holdings are rejected."""
        with pytest.raises(EmptyInputError) as exc_info:
            validate_holdings({}, PRICES)

        assert exc_info.value.kind is InputKind.HOLDINGS

    def test_lowercase_asset(self) -> None:
        """Test holdings cannot contain invalid asset keys."""
        with pytest.raises(InvalidAssetError):
            validate_holdings({"eth": Decimal("5")}, PRICES)

    def test_asset_missing_from_pricelist(self) -> None:
        """Test holdings cannot contain unpriced assets."""
        with pytest.raises(AssetMissingFromPricelistError) as exc_info:
            validate_holdings({"XLM": Decimal("5")}, PRICES)

        assert exc_info.value.asset == "XLM"

    @pytest.mark.parametrize("amount", [Decimal("-5"), Decimal("0")])
    def test_amount_must_be_positive(self, amount: Decimal) -> None:
        """Test holdings cannot contain values of zero or less."""
        with pytest.raises(InvalidAmountError) as exc_info:
            validate_holdings({"ETH": amount}, PRICES)

        assert exc_info.value.asset == "ETH"
        assert exc_info.value.amount == amount


class TestValidateIndex:
    """Test cases for target index validation."""

    def test_valid_index(self) -> None:
        """Test a valid index is returned as Decimals."""
        result = validate_index({"ETH": "0.3", "BTC": "0.7"}, PRICES)

        assert result == {"ETH": Decimal("0.3"), "BTC": Decimal("0.7")}

    def test_trailing_zeros_still_sum_to_one(self) -> None:
        """Test sum comparison is decimal equality, not representation."""
        result = validate_index({"ETH": Decimal("0.50"), "BTC": Decimal("0.500")}, PRICES)

        assert sum(result.values()) == 1

    def test_empty_index(self) -> None:
        """Test an empty index is rejected."""
        with pytest.raises(EmptyInputError) as exc_info:
            validate_index({}, PRICES)

        assert exc_info.value.kind is InputKind.INDEX

    def test_lowercase_asset(self) -> None:
        """Test index cannot contain invalid asset keys."""
        with pytest.raises(InvalidAssetError):
            validate_index({"eth": Decimal("1")}, PRICES)

    def test_asset_missing_from_pricelist(self) -> None:
        """Test index cannot contain unpriced assets."""
        with pytest.raises(AssetMissingFromPricelistError) as exc_info:
            validate_index({"ETH": Decimal("0.5"), "XLM": Decimal("0.5")}, PRICES)

        assert exc_info.value.asset == "XLM"

    @pytest.mark.parametrize("weight", [Decimal("-0.5"), Decimal("0")])
    def test_weight_must_be_positive(self, weight: Decimal) -> None:
        """Test index cannot contain values of zero or less."""
        with pytest.raises(InvalidAmountError) as exc_info:
            validate_index({"ETH": Decimal("1"), "BTC": weight}, PRICES)

        assert exc_info.value.asset == "BTC"
        assert exc_info.value.amount == weight

    def test_values_must_sum_to_one(self) -> None:
        """Test an index of 0.2 + 0.2 is rejected with the actual sum."""
        with pytest.raises(IndexSumError) as exc_info:
            validate_index({"ETH": Decimal("0.2"), "BTC": Decimal("0.2")}, PRICES)

        assert exc_info.value.total == Decimal("0.4")

    def test_sum_above_one(self) -> None:
        """Test an index summing above one is rejected."""
        with pytest.raises(IndexSumError):
            validate_index({"ETH": Decimal("0.6"), "BTC": Decimal("0.6")}, PRICES)

    def test_sum_is_exact(self) -> None:
        """Test a sum that is only approximately one is rejected."""
        third = Decimal(1) / Decimal(3)
        with pytest.raises(IndexSumError):
            validate_index({"ETH": third, "BTC": 1 - third - Decimal("1E-20")}, PRICES)

    def test_sum_is_not_rounded(self) -> None:
        """Test weights with more than 28 significant digits are summed without rounding."""
        with pytest.raises(IndexSumError) as exc_info:
            validate_index({"ETH": Decimal("0.5"), "BTC": Decimal("0.50000000000000000000000000001")}, PRICES)

        assert exc_info.value.total == Decimal("1.00000000000000000000000000001")

    def test_long_weights_summing_to_one(self) -> None:
        """Test long weights that do sum to exactly one are accepted."""
        index = {"ETH": Decimal("0.49999999999999999999999999999"), "BTC": Decimal("0.50000000000000000000000000001")}

        assert validate_index(index, PRICES) == index
