"""FastAPI application for the curve quote service.

Curve rejections are returned as 422 with the violated bound. Kernel
arithmetic failures should be unreachable behind the curve's own checks; if
one surfaces it is logged with its traceback and returned as 500.
"""

import os

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from bonding_curve import __version__
from bonding_curve.api.endpoints import router
from bonding_curve.curve import CurveError
from bonding_curve.models import CurveErrorResponse

logger = structlog.get_logger()

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("CURVE_HOST", "0.0.0.0")
PORT = int(os.environ.get("CURVE_PORT", "8000"))
DEBUG = os.environ.get("CURVE_DEBUG", "false").lower() in ("true", "1", "yes")

app = FastAPI(
    title="Exponential Bonding Curve",
    description="Deterministic price and trade quotes for P(x) = A * e^(B * x)",
    version=__version__,
)


@app.exception_handler(CurveError)
async def curve_error_handler(request: Request, exc: CurveError) -> JSONResponse:
    """Return a curve rejection with its offending value and bound."""
    logger.warning(
        "quote_rejected",
        path=request.url.path,
        error=type(exc).__name__,
        value=exc.value,
        bound=exc.bound,
    )
    body = CurveErrorResponse.from_error(exc)
    return JSONResponse(status_code=422, content=body.model_dump())


@app.exception_handler(ArithmeticError)
async def arithmetic_error_handler(request: Request, exc: ArithmeticError) -> JSONResponse:
    """Kernel failure behind a passed bound check."""
    logger.exception(
        "quote_arithmetic_error",
        path=request.url.path,
        error=type(exc).__name__,
    )
    return JSONResponse(
        status_code=500,
        content={"error": type(exc).__name__, "detail": str(exc)},
    )


app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok"}


def run() -> None:
    """Run the quote API server.

    Configuration via environment variables:
    - CURVE_HOST: Host to bind to (default: 0.0.0.0)
    - CURVE_PORT: Port to bind to (default: 8000)
    - CURVE_DEBUG: Enable debug/reload mode (default: false)
    - CURVE_A, CURVE_B and CURVE_<BOUND>: curve parameters and bounds
    """
    uvicorn.run(
        "bonding_curve.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
