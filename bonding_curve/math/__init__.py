"""Mathematical primitives for the bonding curve engine.

This package provides the 18-decimal fixed-point kernel:
- mul_wad / div_wad / full_mul_div: checked scaled arithmetic
- exp_wad / ln_wad: natural exponential and logarithm
"""

from bonding_curve.math.fixed_point import (
    MAX_EXP_INPUT,
    MIN_EXP_INPUT,
    WAD,
    FixedPointError,
    InvalidExponent,
    LnUndefined,
    div_wad,
    exp_wad,
    full_mul_div,
    ln_wad,
    mul_wad,
)

__all__ = [
    "WAD",
    "MAX_EXP_INPUT",
    "MIN_EXP_INPUT",
    "FixedPointError",
    "InvalidExponent",
    "LnUndefined",
    "mul_wad",
    "div_wad",
    "full_mul_div",
    "exp_wad",
    "ln_wad",
]
