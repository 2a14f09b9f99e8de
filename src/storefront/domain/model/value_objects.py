"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from storefront.domain.exceptions import ValidationError

# Matches the DECIMAL(10,2) columns prices and totals are stored in.
MONEY_SCALE = 2
MAX_AMOUNT = Decimal("99999999.99")


@dataclass(frozen=True)
class Money:
    """Non-negative fixed-point amount with two decimal places.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.  Amounts with more than two
    decimal places are rejected rather than rounded.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount.is_signed():
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )
        if self.amount > MAX_AMOUNT:
            raise ValidationError(
                f"Money amount {self.amount} exceeds maximum {MAX_AMOUNT}"
            )
        if self.amount != self.amount.quantize(Decimal(1).scaleb(-MONEY_SCALE)):
            raise ValidationError(
                f"Money amount has more than {MONEY_SCALE} decimal places: {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0.00"))


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot order zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}",
                field="quantity",
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive", field="quantity")

    def __str__(self) -> str:
        return str(self.value)
