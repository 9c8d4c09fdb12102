"""Curve parameters and configuration profiles."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields

from bonding_curve.constants import (
    MAX_EXP_VALUE,
    MAX_PARAMETER,
    MAX_SUPPLY,
    MAX_TX_SIZE,
    MIN_GROWTH_RATE,
    MIN_PARAMETER,
    MIN_REMAINING_SUPPLY,
)
from bonding_curve.math.fixed_point import MAX_EXP_INPUT

from .errors import ParameterOutOfRange

ENV_PREFIX = "CURVE_"


def _require_int(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")


@dataclass(frozen=True)
class CurveConfig:
    """Economic and safety bounds for an exponential curve.

    Historical deployments of this curve disagree on these values, so each
    set of bounds is a profile rather than a fixed law. All values are wad.

    Attributes:
        max_supply: Largest supply any operation accepts
        max_tx_size: Largest supply delta a single quote may move
        min_remaining_supply: Buys are refused once headroom under
            max_supply falls below this
        max_exp_value: Largest B * x passed to exp_wad
        min_parameter: Lower bound for A and B (1 means plain positivity)
        max_parameter: Upper bound for A and B
        min_growth_rate: Lower bound for B alone. Below it the floored
            exponent B * x is too coarse to price sub-token trades
    """

    max_supply: int = MAX_SUPPLY
    max_tx_size: int = MAX_TX_SIZE
    min_remaining_supply: int = MIN_REMAINING_SUPPLY
    max_exp_value: int = MAX_EXP_VALUE
    min_parameter: int = MIN_PARAMETER
    max_parameter: int = MAX_PARAMETER
    min_growth_rate: int = MIN_GROWTH_RATE

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            _require_int(f.name, value)
            if value < 0:
                raise ValueError(f"{f.name} cannot be negative: {value}")
        if self.min_parameter < 1:
            raise ValueError(f"min_parameter must be at least 1, got {self.min_parameter}")
        if self.min_parameter > self.max_parameter:
            raise ValueError(
                f"min_parameter {self.min_parameter} exceeds max_parameter {self.max_parameter}"
            )
        if self.min_growth_rate > self.max_parameter:
            raise ValueError(
                f"min_growth_rate {self.min_growth_rate} exceeds max_parameter {self.max_parameter}"
            )
        if self.max_exp_value > MAX_EXP_INPUT:
            raise ValueError(
                f"max_exp_value {self.max_exp_value} exceeds exp_wad domain {MAX_EXP_INPUT}"
            )

    @property
    def min_b(self) -> int:
        """Effective lower bound for B."""
        return max(self.min_parameter, self.min_growth_rate)

    def to_dict(self) -> dict[str, int]:
        """Return all bounds keyed by field name."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


# Default configuration instance
DEFAULT_CURVE_CONFIG = CurveConfig()


@dataclass(frozen=True)
class CurveParameters:
    """Immutable curve parameters for P(x) = A * e^(B * x).

    Attributes:
        a: Starting price A (wad)
        b: Growth rate B (wad)
    """

    a: int
    b: int

    def __post_init__(self) -> None:
        _require_int("a", self.a)
        _require_int("b", self.b)

    def validate(self, config: CurveConfig) -> None:
        """Check A and B against the configured parameter band.

        A must lie in [min_parameter, max_parameter]; B in
        [max(min_parameter, min_growth_rate), max_parameter].

        Raises:
            ParameterOutOfRange: If either parameter is outside its band
        """
        bands = (
            ("A", self.a, config.min_parameter),
            ("B", self.b, config.min_b),
        )
        for name, value, minimum in bands:
            if not (minimum <= value <= config.max_parameter):
                raise ParameterOutOfRange(name, value, minimum, config.max_parameter)


def config_from_env(environ: Mapping[str, str]) -> CurveConfig:
    """Build a CurveConfig from CURVE_* variables, keeping defaults for missing ones.

    For example CURVE_MAX_SUPPLY overrides max_supply.

    Raises:
        ValueError: If a variable is not a decimal integer or the resulting
            config is invalid
    """
    overrides: dict[str, int] = {}
    for f in fields(CurveConfig):
        key = ENV_PREFIX + f.name.upper()
        raw = environ.get(key)
        if raw is None or raw.strip() == "":
            continue
        try:
            overrides[f.name] = int(raw)
        except ValueError as err:
            raise ValueError(f"{key} must be a decimal integer: '{raw}'") from err
    return CurveConfig(**overrides)
