"""Exponential bonding curve engine.

Prices a token against a reserve asset with P(x) = A * e^(B * x), where x is
circulating supply. The reserve moved by a supply change is the integral of
P between the two supplies:

    funds(x0 -> x1) = (A / B) * (e^(B * x1) - e^(B * x0))

and its inverse gives the supply reachable with a given amount of funds:

    x1 = ln(e^(B * x0) + funds * B / A) / B

All values are wad integers. The engine holds only its parameters and bounds;
supply is always supplied by the caller.
"""

from __future__ import annotations

import structlog

from bonding_curve.constants import BPS_DENOMINATOR
from bonding_curve.math.fixed_point import div_wad, exp_wad, full_mul_div, ln_wad, mul_wad
from bonding_curve.safe_int import DivideByZero, S, SafeInt

from .config import DEFAULT_CURVE_CONFIG, CurveConfig, CurveParameters
from .errors import (
    ExponentTooLarge,
    InsufficientRemainingSupply,
    InvalidRange,
    SupplyExceedsMaximum,
    TransactionTooLarge,
)

logger = structlog.get_logger()


class ExponentialCurve:
    """Stateless pricing engine for P(x) = A * e^(B * x).

    Every operation is a pure function of (A, B, config, inputs) and either
    returns a wad integer or raises a CurveError (or, for inputs that are not
    uint256, a SafeIntError). Nothing is clamped or retried.
    """

    __slots__ = ("_params", "_config")

    def __init__(
        self,
        parameters: CurveParameters,
        config: CurveConfig = DEFAULT_CURVE_CONFIG,
    ) -> None:
        """Create an engine, validating A and B against the config band.

        Raises:
            ParameterOutOfRange: If A or B is outside
                [config.min_parameter, config.max_parameter]
        """
        parameters.validate(config)
        self._params = parameters
        self._config = config

    @classmethod
    def from_values(
        cls, a: int, b: int, config: CurveConfig = DEFAULT_CURVE_CONFIG
    ) -> ExponentialCurve:
        """Create an engine from raw wad values of A and B."""
        return cls(CurveParameters(a=a, b=b), config)

    @property
    def parameters(self) -> CurveParameters:
        return self._params

    @property
    def config(self) -> CurveConfig:
        return self._config

    @property
    def a(self) -> int:
        return self._params.a

    @property
    def b(self) -> int:
        return self._params.b

    def __repr__(self) -> str:
        return f"ExponentialCurve(a={self.a}, b={self.b})"

    # =========================================================================
    # Validation helpers
    # =========================================================================

    def _check_supply(self, supply: SafeInt) -> None:
        if supply > self._config.max_supply:
            logger.debug(
                "curve_supply_exceeds_maximum",
                supply=supply.value,
                max_supply=self._config.max_supply,
            )
            raise SupplyExceedsMaximum(supply.value, self._config.max_supply)

    def _check_tx_size(self, amount: SafeInt) -> None:
        if amount > self._config.max_tx_size:
            logger.debug(
                "curve_transaction_too_large",
                amount=amount.value,
                max_tx_size=self._config.max_tx_size,
            )
            raise TransactionTooLarge(amount.value, self._config.max_tx_size)

    def _exponent(self, supply: SafeInt) -> int:
        """B * supply, gated by max_exp_value."""
        exponent = mul_wad(self.b, supply.value)
        if exponent > self._config.max_exp_value:
            logger.debug(
                "curve_exponent_too_large",
                supply=supply.value,
                exponent=exponent,
                max_exp_value=self._config.max_exp_value,
            )
            raise ExponentTooLarge(exponent, self._config.max_exp_value)
        return exponent

    def _raised_supply(self, supply: SafeInt, amount: SafeInt) -> SafeInt:
        """supply + amount, rejected against max_supply before it is wrapped.

        A sum past 2^256-1 is reported as SupplyExceedsMaximum too.
        """
        total = supply.value + amount.value
        if total > self._config.max_supply:
            logger.debug(
                "curve_supply_exceeds_maximum",
                supply=total,
                max_supply=self._config.max_supply,
            )
            raise SupplyExceedsMaximum(total, self._config.max_supply)
        return S(total)

    # =========================================================================
    # Public operations
    # =========================================================================

    def get_current_price(self, supply: int) -> int:
        """Instantaneous price A * e^(B * supply).

        Args:
            supply: Circulating supply (wad)

        Returns:
            Price in reserve units per token (wad), rounded down.
            get_current_price(0) == A exactly.

        Raises:
            SupplyExceedsMaximum: If supply > max_supply
            ExponentTooLarge: If B * supply > max_exp_value
        """
        x = S(supply)
        self._check_supply(x)
        exponent = self._exponent(x)
        return mul_wad(self.a, exp_wad(exponent))

    def get_funds_received(self, supply: int, amount: int) -> int:
        """Reserve released by burning `amount` tokens starting at `supply`.

        Formula:
            funds = A * (e^(B * supply) - e^(B * (supply - amount))) / B

        The same integral prices a buy; see get_buy_cost.

        Args:
            supply: Supply before the sell (wad)
            amount: Tokens removed from supply (wad)

        Returns:
            Reserve amount (wad), rounded down. Never negative.

        Raises:
            SupplyExceedsMaximum: If supply > max_supply
            TransactionTooLarge: If amount > max_tx_size
            InvalidRange: If amount > supply
            ExponentTooLarge: If either exponent exceeds max_exp_value
        """
        x0 = S(supply)
        dx = S(amount)

        self._check_supply(x0)
        self._check_tx_size(dx)
        if dx > x0:
            logger.debug("curve_invalid_range", supply=x0.value, amount=dx.value)
            raise InvalidRange(dx.value, x0.value)

        e0 = self._exponent(x0)
        e1 = self._exponent(x0 - dx)

        # exp_wad is monotonic, so this only underflows on a kernel defect
        delta = S(exp_wad(e0)) - S(exp_wad(e1))
        return full_mul_div(self.a, delta.value, self.b)

    def get_buy_cost(self, supply: int, amount: int) -> int:
        """Reserve required to mint `amount` tokens starting at `supply`.

        Buys and sells integrate the same curve segment, so this is the
        funds released by selling `amount` back from `supply + amount`.

        Raises:
            SupplyExceedsMaximum: If supply + amount > max_supply
            TransactionTooLarge: If amount > max_tx_size
            ExponentTooLarge: If B * (supply + amount) > max_exp_value
        """
        x1 = self._raised_supply(S(supply), S(amount))
        return self.get_funds_received(x1.value, amount)

    def get_amount_out(self, supply: int, funds: int) -> int:
        """Tokens minted by spending `funds` of reserve at `supply`.

        Formula:
            amount = ln(e^(B * supply) + funds * B / A) / B - supply

        When rounding puts the new supply at or below the current one the
        result is 0.

        Args:
            supply: Supply before the buy (wad)
            funds: Reserve spent (wad)

        Returns:
            Token amount (wad), rounded down.

        Raises:
            InsufficientRemainingSupply: If max_supply - supply < min_remaining_supply (checked first)
            SupplyExceedsMaximum: If supply >= max_supply, or supply + amount > max_supply
            ExponentTooLarge: If B * supply > max_exp_value
            TransactionTooLarge: If the resulting amount > max_tx_size
        """
        x0 = S(supply)
        dy = S(funds)

        remaining = S(self._config.max_supply).saturating_sub(x0)
        if remaining < self._config.min_remaining_supply:
            logger.debug(
                "curve_insufficient_remaining_supply",
                supply=x0.value,
                remaining=remaining.value,
                min_remaining_supply=self._config.min_remaining_supply,
            )
            raise InsufficientRemainingSupply(remaining.value, self._config.min_remaining_supply)

        if x0 >= self._config.max_supply:
            logger.debug(
                "curve_supply_exceeds_maximum",
                supply=x0.value,
                max_supply=self._config.max_supply,
            )
            raise SupplyExceedsMaximum(x0.value, self._config.max_supply)

        e0 = self._exponent(x0)
        target = S(exp_wad(e0)) + full_mul_div(dy.value, self.b, self.a)
        x1 = S(div_wad(ln_wad(target.value), self.b))
        dx = x1.saturating_sub(x0)

        self._check_tx_size(dx)
        self._raised_supply(x0, dx)
        return dx.value

    def simulate_price_impact(self, supply: int, amount: int) -> int:
        """Price change, in basis points, from adding `amount` to `supply`.

        Returns:
            (price(supply + amount) - price(supply)) * 10000 // price(supply)

        Raises:
            SupplyExceedsMaximum: If supply + amount > max_supply
            DivideByZero: If the starting price is 0
            Any error raised by get_current_price for either supply
        """
        x0 = S(supply)
        p0 = self.get_current_price(x0.value)
        p1 = self.get_current_price(self._raised_supply(x0, S(amount)).value)
        if p0 == 0:
            raise DivideByZero(f"Price at supply {x0.value} is zero")
        return (((S(p1) - p0) * BPS_DENOMINATOR) // p0).value
