"""Exponential bonding curve pricing engine."""

from bonding_curve.curve import CurveConfig, CurveParameters, ExponentialCurve

__version__ = "0.1.0"
__all__ = ["ExponentialCurve", "CurveConfig", "CurveParameters", "__version__"]
