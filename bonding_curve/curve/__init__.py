"""Exponential bonding curve engine.

Pricing for P(x) = A * e^(B * x) over the fixed-point kernel in
bonding_curve.math, with configurable economic bounds.
"""

# Config and parameters
from .config import DEFAULT_CURVE_CONFIG, CurveConfig, CurveParameters, config_from_env

# Engine
from .engine import ExponentialCurve

# Errors
from .errors import (
    CurveError,
    ExponentTooLarge,
    InsufficientRemainingSupply,
    InvalidRange,
    ParameterOutOfRange,
    SupplyExceedsMaximum,
    TransactionTooLarge,
)

__all__ = [
    # Engine
    "ExponentialCurve",
    # Config
    "CurveConfig",
    "CurveParameters",
    "DEFAULT_CURVE_CONFIG",
    "config_from_env",
    # Errors
    "CurveError",
    "ParameterOutOfRange",
    "SupplyExceedsMaximum",
    "TransactionTooLarge",
    "ExponentTooLarge",
    "InsufficientRemainingSupply",
    "InvalidRange",
]
