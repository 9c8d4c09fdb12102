"""Test helpers module for shared test utilities.

- constants: Curve parameters and amounts shared across tests
"""

from tests.helpers.constants import SCENARIO_A, SCENARIO_B, STEEP_A, STEEP_B, within_rel

__all__ = [
    "SCENARIO_A",
    "SCENARIO_B",
    "STEEP_A",
    "STEEP_B",
    "within_rel",
]
