"""Pydantic models for the quote API."""

from bonding_curve.models.quote import (
    AmountOutResponse,
    CurveConfigResponse,
    CurveErrorResponse,
    FundsQuoteRequest,
    FundsResponse,
    PriceImpactResponse,
    PriceRequest,
    PriceResponse,
    TradeQuoteRequest,
)
from bonding_curve.models.types import Uint256, validate_uint256

__all__ = [
    "PriceRequest",
    "TradeQuoteRequest",
    "FundsQuoteRequest",
    "PriceResponse",
    "FundsResponse",
    "AmountOutResponse",
    "PriceImpactResponse",
    "CurveConfigResponse",
    "CurveErrorResponse",
    "Uint256",
    "validate_uint256",
]
