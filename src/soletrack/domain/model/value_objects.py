"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from soletrack.domain.exceptions import ValidationError

_CENTS = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount.

    Uses Decimal to avoid floating-point rounding errors. The shop works
    in a single currency; the symbol is chosen by Settings at display time.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __sub__(self, other: Money) -> Money:
        result = self.amount - other.amount
        if result < Decimal("0"):
            raise ValidationError("Money subtraction would result in a negative amount")
        return Money(result)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor)

    def __truediv__(self, divisor: int) -> Money:
        if not isinstance(divisor, int) or divisor <= 0:
            raise ValidationError(f"Can only divide Money by a positive int, got {divisor!r}")
        return Money((self.amount / divisor).quantize(_CENTS, rounding=ROUND_HALF_UP))

    def __lt__(self, other: Money) -> bool:
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        return self.amount >= other.amount

    @property
    def is_zero(self) -> bool:
        return self.amount == 0

    # --- Display --------------------------------------------------------------

    def format(self, symbol: str = "") -> str:
        return f"{symbol}{self.amount:,.2f}"

    def __str__(self) -> str:
        return f"{self.amount:.2f}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            return Money(Decimal(str(amount).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot sell zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)
