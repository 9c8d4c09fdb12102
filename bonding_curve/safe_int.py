"""Checked uint256 integer wrapper for curve arithmetic.

This module provides SafeInt, a lightweight wrapper that gives plain Python
integers the failure behavior of unsigned 256-bit arithmetic, without the
wraparound:
- Division by zero raises DivideByZero
- Subtraction below zero raises Underflow
- Addition or multiplication past 2^256-1 raises Overflow

Usage pattern:
    from bonding_curve.safe_int import S

    def calculate(a: int, b: int, c: int) -> int:
        # Wrap at entry
        sa, sb, sc = S(a), S(b), S(c)

        # Natural arithmetic - every step is checked
        result = (sa * sb) // sc  # Raises if sc == 0 or sa * sb > 2^256-1
        remainder = sa - sb       # Raises if sb > sa

        # Unwrap at exit
        return result.value
"""

from __future__ import annotations

UINT256_MAX = 2**256 - 1


class SafeIntError(ArithmeticError):
    """Base class for checked arithmetic errors."""

    pass


class DivideByZero(SafeIntError):
    """Division by zero."""

    pass


class Underflow(SafeIntError):
    """Result would be negative."""

    pass


class Overflow(SafeIntError):
    """Result exceeds the uint256 maximum."""

    pass


def _check_upper(value: int, expression: str) -> int:
    if value > UINT256_MAX:
        raise Overflow(f"Overflow: {expression} exceeds uint256 max")
    return value


class SafeInt:
    """Integer with checked uint256 arithmetic.

    Wraps a non-negative integer and provides arithmetic operators that raise
    descriptive errors instead of producing values a uint256 could not hold:
    - Division by zero raises DivideByZero
    - Negative results from subtraction raise Underflow
    - Sums and products above 2^256-1 raise Overflow

    Attributes:
        value: The underlying integer value (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | SafeInt) -> None:
        """Create a SafeInt from an integer or another SafeInt.

        Args:
            value: Integer value to wrap, or SafeInt to copy

        Raises:
            TypeError: If value is not an int or SafeInt (bool is rejected)
            Underflow: If value is negative
            Overflow: If value exceeds 2^256-1
        """
        if isinstance(value, SafeInt):
            self._value = value._value
            return
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")
        if value < 0:
            raise Underflow(f"Negative value cannot be uint256: {value}")
        self._value = _check_upper(value, str(value))

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    def __repr__(self) -> str:
        return f"SafeInt({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def __hash__(self) -> int:
        return hash(self._value)

    # --- Arithmetic operations ---

    def __add__(self, other: SafeInt | int) -> SafeInt:
        """Add two values.

        Raises:
            Overflow: If the sum exceeds 2^256-1
        """
        other_val = _extract_value(other)
        return SafeInt(_check_upper(self._value + other_val, f"{self._value} + {other_val}"))

    def __radd__(self, other: int) -> SafeInt:
        return SafeInt(_check_upper(other + self._value, f"{other} + {self._value}"))

    def __sub__(self, other: SafeInt | int) -> SafeInt:
        """Subtract other from self.

        Raises:
            Underflow: If result would be negative
        """
        other_val = _extract_value(other)
        result = self._value - other_val
        if result < 0:
            raise Underflow(f"Underflow: {self._value} - {other_val} = {result}")
        return SafeInt(result)

    def __rsub__(self, other: int) -> SafeInt:
        result = other - self._value
        if result < 0:
            raise Underflow(f"Underflow: {other} - {self._value} = {result}")
        return SafeInt(result)

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        """Multiply two values.

        Raises:
            Overflow: If the product exceeds 2^256-1
        """
        other_val = _extract_value(other)
        return SafeInt(_check_upper(self._value * other_val, f"{self._value} * {other_val}"))

    def __rmul__(self, other: int) -> SafeInt:
        return SafeInt(_check_upper(other * self._value, f"{other} * {self._value}"))

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        """Integer division, rounding down.

        Raises:
            DivideByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivideByZero(f"Division by zero: {self._value} // 0")
        return SafeInt(self._value // other_val)

    def __rfloordiv__(self, other: int) -> SafeInt:
        if self._value == 0:
            raise DivideByZero(f"Division by zero: {other} // 0")
        return SafeInt(other // self._value)

    # --- Comparison operations ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeInt):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: SafeInt | int) -> bool:
        return self._value < _extract_value(other)

    def __le__(self, other: SafeInt | int) -> bool:
        return self._value <= _extract_value(other)

    def __gt__(self, other: SafeInt | int) -> bool:
        return self._value > _extract_value(other)

    def __ge__(self, other: SafeInt | int) -> bool:
        return self._value >= _extract_value(other)

    # --- Conversion ---

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __index__(self) -> int:
        return self._value

    # --- Named operations ---

    def saturating_sub(self, other: SafeInt | int) -> SafeInt:
        """Subtract, clamping result to zero instead of raising.

        Unlike __sub__, this never raises Underflow.
        """
        other_val = _extract_value(other)
        return SafeInt(max(0, self._value - other_val))


def _extract_value(x: SafeInt | int) -> int:
    """Extract integer value from SafeInt or int."""
    if isinstance(x, SafeInt):
        return x._value
    if isinstance(x, bool) or not isinstance(x, int):
        raise TypeError(f"SafeInt operand must be int, got {type(x).__name__}")
    return x


# Convenience alias for concise code
S = SafeInt
