"""Request and response models for the quote API.

Amounts are wad integers carried as decimal strings, since JSON numbers
cannot hold uint256 values losslessly.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from bonding_curve.curve import CurveConfig, CurveError

from .types import Uint256


class PriceRequest(BaseModel):
    """Supply to price."""

    supply: Uint256 = Field(description="Circulating supply (wad)")


class TradeQuoteRequest(BaseModel):
    """Supply and a token delta."""

    supply: Uint256 = Field(description="Circulating supply before the trade (wad)")
    amount: Uint256 = Field(description="Token amount moved by the trade (wad)")


class FundsQuoteRequest(BaseModel):
    """Supply and a reserve amount to spend."""

    supply: Uint256 = Field(description="Circulating supply before the trade (wad)")
    funds: Uint256 = Field(description="Reserve amount to spend (wad)")


class PriceResponse(BaseModel):
    supply: Uint256
    price: Uint256


class FundsResponse(BaseModel):
    supply: Uint256
    amount: Uint256
    funds: Uint256


class AmountOutResponse(BaseModel):
    supply: Uint256
    funds: Uint256
    amount: Uint256


class PriceImpactResponse(BaseModel):
    supply: Uint256
    amount: Uint256
    impact_bps: int = Field(alias="impactBps", description="Price impact in basis points")

    model_config = {"populate_by_name": True}


class CurveConfigResponse(BaseModel):
    """Curve parameters and every configured bound, for pre-flight checks."""

    a: Uint256
    b: Uint256
    max_supply: Uint256 = Field(alias="maxSupply")
    max_tx_size: Uint256 = Field(alias="maxTxSize")
    min_remaining_supply: Uint256 = Field(alias="minRemainingSupply")
    max_exp_value: Uint256 = Field(alias="maxExpValue")
    min_parameter: Uint256 = Field(alias="minParameter")
    max_parameter: Uint256 = Field(alias="maxParameter")
    min_growth_rate: Uint256 = Field(alias="minGrowthRate")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_curve(cls, a: int, b: int, config: CurveConfig) -> CurveConfigResponse:
        return cls(a=a, b=b, **config.to_dict())


class CurveErrorResponse(BaseModel):
    """Body returned when the curve rejects a request."""

    error: str = Field(description="Error class name, e.g. SupplyExceedsMaximum")
    detail: str
    value: str
    bound: str

    @classmethod
    def from_error(cls, err: CurveError) -> CurveErrorResponse:
        return cls(
            error=type(err).__name__,
            detail=str(err),
            value=str(err.value),
            bound=str(err.bound),
        )
