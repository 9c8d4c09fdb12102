"""Tests for quote request/response models and the Uint256 type."""

import pytest
from pydantic import ValidationError

from bonding_curve.curve import DEFAULT_CURVE_CONFIG, InvalidRange, TransactionTooLarge
from bonding_curve.models import (
    CurveConfigResponse,
    CurveErrorResponse,
    PriceImpactResponse,
    TradeQuoteRequest,
    validate_uint256,
)
from bonding_curve.safe_int import UINT256_MAX


class TestValidateUint256:
    """Tests for the Uint256 validator."""

    def test_accepts_int_and_string(self):
        """Ints and decimal strings normalize to strings."""
        assert validate_uint256(42) == "42"
        assert validate_uint256("42") == "42"
        assert validate_uint256(str(UINT256_MAX)) == str(UINT256_MAX)

    def test_normalizes_leading_zeros(self):
        """Leading zeros are dropped."""
        assert validate_uint256("007") == "7"

    @pytest.mark.parametrize(
        "value,match",
        [
            (-1, "negative"),
            ("-1", "negative"),
            (UINT256_MAX + 1, "overflow"),
            (str(UINT256_MAX + 1), "overflow"),
            ("1e18", "decimal integer"),
            (1.0, "string or int"),
            (False, "bool"),
        ],
    )
    def test_rejects_invalid(self, value, match):
        """Negative, oversized, non-decimal and non-int values are rejected."""
        with pytest.raises(ValueError, match=match):
            validate_uint256(value)


class TestRequests:
    """Tests for quote request models."""

    def test_trade_request(self):
        """Amounts are stored as decimal strings."""
        request = TradeQuoteRequest(supply=10, amount="5")
        assert (request.supply, request.amount) == ("10", "5")

    def test_trade_request_rejects_negative(self):
        """Negative amounts fail validation."""
        with pytest.raises(ValidationError):
            TradeQuoteRequest(supply="-10", amount="5")


class TestResponses:
    """Tests for quote response models."""

    def test_price_impact_serializes_alias(self):
        """impact_bps serializes as impactBps."""
        response = PriceImpactResponse(supply=1, amount=2, impact_bps=15)
        assert response.model_dump(by_alias=True) == {
            "supply": "1",
            "amount": "2",
            "impactBps": 15,
        }

    def test_config_response_from_curve(self):
        """Every config bound is exposed under its camelCase alias."""
        response = CurveConfigResponse.from_curve(3, 4, DEFAULT_CURVE_CONFIG)
        dumped = response.model_dump(by_alias=True)
        assert dumped["a"] == "3"
        assert dumped["maxTxSize"] == str(DEFAULT_CURVE_CONFIG.max_tx_size)
        assert dumped["minGrowthRate"] == str(DEFAULT_CURVE_CONFIG.min_growth_rate)

    def test_error_response_carries_value_and_bound(self):
        """The error body carries the class name, value and bound."""
        body = CurveErrorResponse.from_error(TransactionTooLarge(11, 10))
        assert body.error == "TransactionTooLarge"
        assert (body.value, body.bound) == ("11", "10")
        assert "exceeds maximum 10" in body.detail

    def test_error_response_for_range(self):
        """InvalidRange maps to its own error name."""
        body = CurveErrorResponse.from_error(InvalidRange(6, 5))
        assert body.error == "InvalidRange"
