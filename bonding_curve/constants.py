"""Default economic and safety bounds for the exponential curve.

All values are 18-decimal fixed-point (wad) integers. These are the defaults
of DEFAULT_CURVE_CONFIG; deployments with different bounds build their own
CurveConfig instead of editing these.
"""

from bonding_curve.math.fixed_point import WAD

# Hard cap on circulating supply (1 billion tokens)
MAX_SUPPLY = 1_000_000_000 * WAD

# Largest supply delta a single quote may move (10 million tokens)
MAX_TX_SIZE = 10_000_000 * WAD

# Purchases are refused once fewer than this many tokens remain below MAX_SUPPLY
MIN_REMAINING_SUPPLY = 1_000 * WAD

# Largest B * x accepted before calling exp_wad. Kept well under the kernel's
# 130 so that A * e^MAX_EXP_VALUE fits in uint256 for every A <= MAX_PARAMETER:
# 1000e18 * e^80 * 1e18 ~= 5.5e73 < 2^256 ~= 1.16e77
MAX_EXP_VALUE = 80 * WAD

# Allowed band for the curve parameters A and B. A lower bound of 1 wei is
# plain positivity.
MIN_PARAMETER = 1
MAX_PARAMETER = 1_000 * WAD

# Smallest growth rate B. B * x is floored to whole wad units, so the exponent
# only resolves supply in steps of WAD / B; at 1e12 a step is 1e-12 tokens.
MIN_GROWTH_RATE = 10**12

# Price impact is reported in basis points
BPS_DENOMINATOR = 10_000
