"""API endpoints for the curve quote service.

The service is read-only: it prices requests against the configured curve
and never records trades or touches balances.
"""

import os
from functools import lru_cache

import structlog
from fastapi import APIRouter, Depends

from bonding_curve.curve import ExponentialCurve, config_from_env
from bonding_curve.models import (
    AmountOutResponse,
    CurveConfigResponse,
    FundsQuoteRequest,
    FundsResponse,
    PriceImpactResponse,
    PriceRequest,
    PriceResponse,
    TradeQuoteRequest,
)

logger = structlog.get_logger()

router = APIRouter()

# Default curve: A = 1e-12 reserve per token, B = 1e-6 per token
DEFAULT_A = 10**6
DEFAULT_B = 10**12


def _create_default_curve() -> ExponentialCurve:
    """Create the curve from CURVE_* environment variables.

    CURVE_A and CURVE_B set the parameters (wad); the remaining CURVE_*
    variables override individual bounds of the default config.
    """
    a = int(os.environ.get("CURVE_A", str(DEFAULT_A)))
    b = int(os.environ.get("CURVE_B", str(DEFAULT_B)))
    config = config_from_env(os.environ)
    curve = ExponentialCurve.from_values(a, b, config)
    logger.info("curve_configured", a=a, b=b, **config.to_dict())
    return curve


@lru_cache(maxsize=1)
def get_default_curve() -> ExponentialCurve:
    return _create_default_curve()


def get_curve() -> ExponentialCurve:
    """Dependency provider for the curve instance.

    Override this in tests to inject a different curve:
        app.dependency_overrides[get_curve] = lambda: curve
    """
    return get_default_curve()


@router.get("/config")
async def get_config(curve: ExponentialCurve = Depends(get_curve)) -> CurveConfigResponse:
    """Curve parameters and bounds, for pre-flight checks by callers."""
    return CurveConfigResponse.from_curve(curve.a, curve.b, curve.config)


@router.post("/quote/price")
async def quote_price(
    request: PriceRequest,
    curve: ExponentialCurve = Depends(get_curve),
) -> PriceResponse:
    """Instantaneous price at a supply."""
    price = curve.get_current_price(int(request.supply))
    logger.info("quoted_price", supply=request.supply, price=price)
    return PriceResponse(supply=request.supply, price=price)


@router.post("/quote/sell")
async def quote_sell(
    request: TradeQuoteRequest,
    curve: ExponentialCurve = Depends(get_curve),
) -> FundsResponse:
    """Reserve released by selling `amount` tokens at `supply`."""
    funds = curve.get_funds_received(int(request.supply), int(request.amount))
    logger.info("quoted_sell", supply=request.supply, amount=request.amount, funds=funds)
    return FundsResponse(supply=request.supply, amount=request.amount, funds=funds)


@router.post("/quote/buy")
async def quote_buy(
    request: TradeQuoteRequest,
    curve: ExponentialCurve = Depends(get_curve),
) -> FundsResponse:
    """Reserve required to buy `amount` tokens at `supply`."""
    funds = curve.get_buy_cost(int(request.supply), int(request.amount))
    logger.info("quoted_buy", supply=request.supply, amount=request.amount, funds=funds)
    return FundsResponse(supply=request.supply, amount=request.amount, funds=funds)


@router.post("/quote/amount-out")
async def quote_amount_out(
    request: FundsQuoteRequest,
    curve: ExponentialCurve = Depends(get_curve),
) -> AmountOutResponse:
    """Tokens obtained by spending `funds` at `supply`."""
    amount = curve.get_amount_out(int(request.supply), int(request.funds))
    logger.info("quoted_amount_out", supply=request.supply, funds=request.funds, amount=amount)
    return AmountOutResponse(supply=request.supply, funds=request.funds, amount=amount)


@router.post("/quote/price-impact")
async def quote_price_impact(
    request: TradeQuoteRequest,
    curve: ExponentialCurve = Depends(get_curve),
) -> PriceImpactResponse:
    """Price impact, in basis points, of adding `amount` to `supply`."""
    impact = curve.simulate_price_impact(int(request.supply), int(request.amount))
    logger.info(
        "quoted_price_impact", supply=request.supply, amount=request.amount, impact_bps=impact
    )
    return PriceImpactResponse(supply=request.supply, amount=request.amount, impact_bps=impact)
