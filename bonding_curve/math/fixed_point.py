"""18-decimal fixed-point (wad) math kernel.

All values are integers scaled by 10^18 and every result is rounded down
(toward zero for the signed logarithm). Python integers never wrap, so the
uint256 range of the on-chain representation is enforced explicitly: any
input or result outside it raises instead of being truncated.

The exponential and logarithm use the digit-extraction scheme of Balancer's
LogExpMath.sol: large powers of e are divided out using precomputed
constants, and the small remainder is handled by a Taylor series (exp) or an
arctanh series (ln) at 20- or 36-decimal working precision.
"""

from __future__ import annotations

from bonding_curve.safe_int import UINT256_MAX, DivideByZero, Overflow, S, Underflow

__all__ = [
    # Errors
    "FixedPointError",
    "InvalidExponent",
    "LnUndefined",
    # Functions
    "mul_wad",
    "div_wad",
    "full_mul_div",
    "exp_wad",
    "ln_wad",
    # Constants
    "WAD",
    "ONE_18",
    "ONE_20",
    "ONE_36",
    "MAX_EXP_INPUT",
    "MIN_EXP_INPUT",
]

# =============================================================================
# Constants
# =============================================================================

ONE_18 = 10**18
ONE_20 = 10**20
ONE_36 = 10**36
WAD = ONE_18

# e^130 * 10^18 still fits in uint256; e^-41 rounds to zero at 18 decimals
MAX_EXP_INPUT = 130 * ONE_18
MIN_EXP_INPUT = -41 * ONE_18

LN_36_LOWER_BOUND = ONE_18 - 10**17  # 0.9
LN_36_UPPER_BOUND = ONE_18 + 10**17  # 1.1

# Powers of e used for digit extraction. X_* hold exponents, A_* hold e^x.

# 18-decimal precision constants (for large values). A_18 entries are plain
# integers, not fixed-point.
X_18 = {
    0: 128 * ONE_18,  # 2^7
    1: 64 * ONE_18,  # 2^6
}
A_18 = {
    0: 38877084059945950922200000000000000000000000000000000000,  # e^128
    1: 6235149080811616882910000000,  # e^64
}

# 20-decimal precision constants (for medium values)
X_20 = {
    2: 3_200_000_000_000_000_000_000,  # 2^5
    3: 1_600_000_000_000_000_000_000,  # 2^4
    4: 800_000_000_000_000_000_000,  # 2^3
    5: 400_000_000_000_000_000_000,  # 2^2
    6: 200_000_000_000_000_000_000,  # 2^1
    7: 100_000_000_000_000_000_000,  # 2^0
    8: 50_000_000_000_000_000_000,  # 2^-1
    9: 25_000_000_000_000_000_000,  # 2^-2
    10: 12_500_000_000_000_000_000,  # 2^-3
    11: 6_250_000_000_000_000_000,  # 2^-4
}
A_20 = {
    2: 7_896_296_018_268_069_516_100_000_000_000_000,  # e^32
    3: 888_611_052_050_787_263_676_000_000,  # e^16
    4: 298_095_798_704_172_827_474_000,  # e^8
    5: 5_459_815_003_314_423_907_810,  # e^4
    6: 738_905_609_893_065_022_723,  # e^2
    7: 271_828_182_845_904_523_536,  # e^1
    8: 164_872_127_070_012_814_685,  # e^0.5
    9: 128_402_541_668_774_148_407,  # e^0.25
    10: 113_314_845_306_682_631_683,  # e^0.125
    11: 106_449_445_891_785_942_956,  # e^0.0625
}


# =============================================================================
# Error classes
# =============================================================================


class FixedPointError(ArithmeticError):
    """Base error for kernel domain violations."""

    pass


class InvalidExponent(FixedPointError):
    """Exponent is outside [MIN_EXP_INPUT, MAX_EXP_INPUT]."""

    def __init__(self, exponent: int) -> None:
        self.exponent = exponent
        super().__init__(
            f"Exponent {exponent} outside valid range [{MIN_EXP_INPUT}, {MAX_EXP_INPUT}]"
        )


class LnUndefined(FixedPointError):
    """Logarithm of a non-positive value."""

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"ln undefined for non-positive input {value}")


# =============================================================================
# Arithmetic primitives
# =============================================================================


def _require_uint256(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")
    if value < 0:
        raise Underflow(f"{name} cannot be negative: {value}")
    if value > UINT256_MAX:
        raise Overflow(f"{name} exceeds uint256 max: {value}")
    return value


def mul_wad(a: int, b: int) -> int:
    """Multiply two wad values: (a * b) // 10^18.

    Raises:
        Overflow: If the unscaled product a * b exceeds uint256
    """
    return ((S(a) * S(b)) // WAD).value


def div_wad(a: int, b: int) -> int:
    """Divide two wad values: (a * 10^18) // b.

    Raises:
        DivideByZero: If b is zero
        Overflow: If a * 10^18 exceeds uint256
    """
    if b == 0:
        raise DivideByZero(f"Division by zero: div_wad({a}, 0)")
    return ((S(a) * WAD) // S(b)).value


def full_mul_div(a: int, b: int, c: int) -> int:
    """Compute (a * b) // c with a full-width intermediate product.

    The product may exceed uint256; only the quotient has to fit.

    Raises:
        DivideByZero: If c is zero
        Overflow: If the quotient exceeds uint256
    """
    _require_uint256(a, "a")
    _require_uint256(b, "b")
    _require_uint256(c, "c")
    if c == 0:
        raise DivideByZero(f"Division by zero: full_mul_div({a}, {b}, 0)")
    result = (a * b) // c
    if result > UINT256_MAX:
        raise Overflow(f"full_mul_div({a}, {b}, {c}) exceeds uint256 max")
    return result


def _div_trunc(a: int, b: int) -> int:
    """Integer division with truncation toward zero.

    Python's // rounds toward negative infinity; the kernel's signed results
    truncate toward zero so that ln(1/x) == -ln(x) holds at every precision.
    """
    if b == 0:
        raise DivideByZero("Division by zero in _div_trunc")
    if (a >= 0) == (b >= 0):
        return a // b
    return -(abs(a) // abs(b))


# =============================================================================
# Exponential and logarithm
# =============================================================================


def exp_wad(x: int) -> int:
    """Compute e^x where x is an 18-decimal fixed-point exponent.

    Args:
        x: Exponent in wad, within [MIN_EXP_INPUT, MAX_EXP_INPUT].

    Returns:
        e^x as a wad integer, rounded down.

    Raises:
        InvalidExponent: If x is outside the supported domain
    """
    if isinstance(x, bool) or not isinstance(x, int):
        raise TypeError(f"exp_wad requires int, got {type(x).__name__}")
    if not (MIN_EXP_INPUT <= x <= MAX_EXP_INPUT):
        raise InvalidExponent(x)

    if x < 0:
        # e^-x = 1 / e^x
        return (ONE_18 * ONE_18) // exp_wad(-x)

    # Extract large powers of e (18-decimal)
    if x >= X_18[0]:
        x -= X_18[0]
        first_an = A_18[0]
    elif x >= X_18[1]:
        x -= X_18[1]
        first_an = A_18[1]
    else:
        first_an = 1

    # Scale to 20-decimal precision
    x *= 100

    # Extract medium powers of e (20-decimal)
    product = ONE_20
    for i in range(2, 10):
        if x >= X_20[i]:
            x -= X_20[i]
            product = (product * A_20[i]) // ONE_20

    # Taylor series: e^x = 1 + x + x^2/2! + ... + x^12/12!
    series_sum = ONE_20
    term = x
    series_sum += term

    for i in range(2, 13):
        term = ((term * x) // ONE_20) // i
        series_sum += term

    return (((product * series_sum) // ONE_20) * first_an) // 100


def ln_wad(x: int) -> int:
    """Compute ln(x) where x is an 18-decimal fixed-point value.

    Inputs close to 1 use the 36-decimal series for accuracy. The result is
    negative for x < 10^18.

    Raises:
        LnUndefined: If x <= 0
        Overflow: If x exceeds uint256
    """
    if isinstance(x, bool) or not isinstance(x, int):
        raise TypeError(f"ln_wad requires int, got {type(x).__name__}")
    if x <= 0:
        raise LnUndefined(x)
    if x > UINT256_MAX:
        raise Overflow(f"ln_wad input exceeds uint256 max: {x}")

    if LN_36_LOWER_BOUND < x < LN_36_UPPER_BOUND:
        return _div_trunc(_ln_36(x), ONE_18)
    return _ln(x)


def _ln(a: int) -> int:
    """Natural logarithm of a positive wad value at 20-decimal working precision."""
    if a < ONE_18:
        # ln(a) = -ln(1/a)
        return -_ln((ONE_18 * ONE_18) // a)

    sum_val = 0

    # Extract large powers of e (18-decimal precision)
    for i in range(2):
        if a >= A_18[i] * ONE_18:
            a //= A_18[i]
            sum_val += X_18[i]

    # Scale up to 20-decimal precision
    sum_val *= 100
    a *= 100

    for i in range(2, 12):
        if a >= A_20[i]:
            a = (a * ONE_20) // A_20[i]
            sum_val += X_20[i]

    # ln(a) = 2 * arctanh((a-1)/(a+1)) = 2 * (z + z^3/3 + z^5/5 + ...)
    z = ((a - ONE_20) * ONE_20) // (a + ONE_20)
    z_squared = (z * z) // ONE_20

    num = z
    series_sum = num

    for i in range(3, 12, 2):
        num = (num * z_squared) // ONE_20
        series_sum += num // i

    series_sum *= 2

    return (sum_val + series_sum) // 100


def _ln_36(x: int) -> int:
    """Natural logarithm of a wad value near 1, returned at 36 decimals."""
    x *= ONE_18

    # z is negative for x < 1
    z = _div_trunc((x - ONE_36) * ONE_36, x + ONE_36)
    z_squared = _div_trunc(z * z, ONE_36)

    num = z
    series_sum = num

    for i in range(3, 16, 2):
        num = _div_trunc(num * z_squared, ONE_36)
        series_sum += _div_trunc(num, i)

    return series_sum * 2
