"""Money value with a non-negative magnitude and a direction-derived sign."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Union

from classfund.domain.entities import Direction
from classfund.domain.errors import InvalidAmount, invalid_amount

CENTS = Decimal("0.01")
# Largest value the Numeric(10, 2) amount columns can hold
MAX_AMOUNT = Decimal("99999999.99")

AmountLike = Union[Decimal, int, float, str]


@dataclass(frozen=True, init=False)
class Money:
    """Non-negative amount in the classroom's single currency unit."""

    amount: Decimal

    def __init__(self, value: AmountLike):
        """Create a money value.

        Args:
            value: Decimal, int, float or numeric string

        Raises:
            InvalidAmount: If the value is not numeric, not finite, negative,
                or larger than MAX_AMOUNT
        """
        if isinstance(value, bool):
            raise InvalidAmount(invalid_amount(value))
        try:
            # floats go through str so 0.1 stays 0.1
            amount = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
        except (InvalidOperation, TypeError, ValueError):
            raise InvalidAmount(invalid_amount(value))
        if not amount.is_finite() or amount < 0:
            raise InvalidAmount(invalid_amount(value))
        try:
            amount = amount.quantize(CENTS)
        except InvalidOperation:
            # too many digits to represent in cents
            amount = None
        if amount is None or amount > MAX_AMOUNT:
            raise InvalidAmount(f"Amount {value} exceeds the maximum of {MAX_AMOUNT:,}")
        object.__setattr__(self, "amount", amount)

    def signed_value(self, direction: Direction) -> Decimal:
        """Return the amount signed by direction (deposits positive)."""
        if Direction(direction) is Direction.DEPOSIT:
            return self.amount
        return -self.amount

    def is_zero(self) -> bool:
        return self.amount == 0

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return Money(self.amount + other.amount)

    def __str__(self) -> str:
        return f"{self.amount:,.2f}"


def positive_money(value: AmountLike) -> Money:
    """Build a Money value that must be strictly positive."""
    money = Money(value)
    if money.is_zero():
        raise InvalidAmount(f"Amount must be greater than 0, got {value}")
    return money
