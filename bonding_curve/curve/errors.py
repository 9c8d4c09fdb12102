"""Curve error classes.

Every error carries the offending value and the bound it violated so a
settlement layer can report the rejection without parsing the message.
"""


class CurveError(Exception):
    """Base error for rejected curve requests.

    Attributes:
        value: The offending input or derived value
        bound: The configured bound that was violated
    """

    def __init__(self, message: str, value: int, bound: int) -> None:
        super().__init__(message)
        self.value = value
        self.bound = bound


class ParameterOutOfRange(CurveError):
    """Curve parameter A or B is outside [minimum, maximum]."""

    def __init__(self, name: str, value: int, minimum: int, maximum: int) -> None:
        self.name = name
        self.minimum = minimum
        self.maximum = maximum
        bound = minimum if value < minimum else maximum
        super().__init__(
            f"Parameter {name}={value} outside allowed range [{minimum}, {maximum}]",
            value,
            bound,
        )


class SupplyExceedsMaximum(CurveError):
    """Supply is above max_supply."""

    def __init__(self, supply: int, max_supply: int) -> None:
        super().__init__(f"Supply {supply} exceeds maximum {max_supply}", supply, max_supply)


class TransactionTooLarge(CurveError):
    """Trade delta is above max_tx_size."""

    def __init__(self, amount: int, max_tx_size: int) -> None:
        super().__init__(
            f"Transaction amount {amount} exceeds maximum {max_tx_size}", amount, max_tx_size
        )


class ExponentTooLarge(CurveError):
    """B * x is above max_exp_value."""

    def __init__(self, exponent: int, max_exp_value: int) -> None:
        super().__init__(
            f"Exponent {exponent} exceeds maximum {max_exp_value}", exponent, max_exp_value
        )


class InsufficientRemainingSupply(CurveError):
    """Headroom below max_supply is under min_remaining_supply."""

    def __init__(self, remaining: int, min_remaining_supply: int) -> None:
        super().__init__(
            f"Remaining supply {remaining} below minimum {min_remaining_supply}",
            remaining,
            min_remaining_supply,
        )


class InvalidRange(CurveError):
    """Sell amount is larger than the current supply."""

    def __init__(self, amount: int, supply: int) -> None:
        super().__init__(
            f"Cannot remove {amount} from supply {supply}: amount exceeds supply",
            amount,
            supply,
        )
