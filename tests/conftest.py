"""Pytest configuration and fixtures."""

import pytest

from bonding_curve.curve import CurveConfig, ExponentialCurve
from bonding_curve.math.fixed_point import WAD
from tests.helpers.constants import SCENARIO_A, SCENARIO_B, STEEP_A, STEEP_B


@pytest.fixture
def scenario_curve() -> ExponentialCurve:
    """Curve with the reference scenario parameters and default bounds."""
    return ExponentialCurve.from_values(SCENARIO_A, SCENARIO_B)


@pytest.fixture
def steep_curve() -> ExponentialCurve:
    """Curve reaching e^1 at 1000 tokens, with default bounds."""
    return ExponentialCurve.from_values(STEEP_A, STEEP_B)


@pytest.fixture
def small_config() -> CurveConfig:
    """Tight bounds for exercising validation near the caps."""
    return CurveConfig(
        max_supply=1_500 * WAD,
        max_tx_size=1_000 * WAD,
        min_remaining_supply=100 * WAD,
        max_exp_value=2 * WAD,
    )
