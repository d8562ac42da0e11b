"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import (
    ROUND_HALF_UP,
    Context,
    Decimal,
    DivisionByZero,
    Inexact,
    InvalidOperation,
    Overflow,
)

from pricing.domain.exceptions import InvalidAmount

CENT = Decimal("0.01")

# Bounds on amounts accepted by Money.of(). Within them MONEY_CONTEXT keeps
# every sum, difference and half exact; anything inexact raises instead of
# rounding silently.
MAX_INTEGER_DIGITS = 15
MAX_DECIMAL_PLACES = 10

MONEY_CONTEXT = Context(
    prec=60,
    rounding=ROUND_HALF_UP,
    Emax=999,
    Emin=-999,
    traps=[InvalidOperation, DivisionByZero, Overflow, Inexact],
)

# Same precision, but rounding is expected here.
ROUNDING_CONTEXT = Context(
    prec=60,
    rounding=ROUND_HALF_UP,
    Emax=999,
    Emin=-999,
    traps=[InvalidOperation, DivisionByZero, Overflow],
)


def _decimal_places(value: Decimal) -> int:
    """Significant decimal places, ignoring trailing zeros."""
    if value == 0:
        return 0
    _, digits, exponent = value.as_tuple()
    digits = list(digits)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1
    return max(0, -exponent)


def normalize_code(code: object) -> str:
    """Canonical form of a product code: stripped and upper-cased.

    Anything that is not a string normalizes to the empty string.
    """
    if not isinstance(code, str):
        return ""
    return code.strip().upper()


@dataclass(frozen=True)
class Money:
    """Currency-agnostic monetary amount.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations. Arithmetic keeps full
    precision; only ``round_to_cents()`` rounds.

    Direct construction accepts any finite Decimal, including negative
    intermediates produced by subtraction. Use ``Money.of()`` for
    external input, which also rejects negative amounts.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise InvalidAmount(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise InvalidAmount(f"Money amount must be finite, got {self.amount}")

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(MONEY_CONTEXT.add(self.amount, self._coerce(other).amount))

    def __sub__(self, other: Money) -> Money:
        return Money(MONEY_CONTEXT.subtract(self.amount, self._coerce(other).amount))

    def __mul__(self, factor: int | Decimal) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, (int, Decimal)):
            raise TypeError(
                f"Can only multiply Money by int or Decimal, got {type(factor).__name__}"
            )
        return Money(MONEY_CONTEXT.multiply(self.amount, Decimal(factor)))

    def half(self) -> Money:
        return Money(MONEY_CONTEXT.divide(self.amount, Decimal(2)))

    def round_to_cents(self) -> Money:
        """Round half-up to two fractional digits."""
        return Money(self.amount.quantize(CENT, context=ROUNDING_CONTEXT))

    @property
    def is_negative(self) -> bool:
        return self.amount < 0

    @property
    def is_positive(self) -> bool:
        return self.amount > 0

    # --- Comparison -----------------------------------------------------------

    def __lt__(self, other: Money) -> bool:
        return self.amount < self._coerce(other).amount

    def __le__(self, other: Money) -> bool:
        return self.amount <= self._coerce(other).amount

    def __gt__(self, other: Money) -> bool:
        return self.amount > self._coerce(other).amount

    def __ge__(self, other: Money) -> bool:
        return self.amount >= self._coerce(other).amount

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.round_to_cents().amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _coerce(other: object) -> Money:
        if not isinstance(other, Money):
            raise TypeError(f"Expected Money, got {type(other).__name__}")
        return other

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Coerce external input to Money.

        Rejects non-finite and negative values, amounts of 10**MAX_INTEGER_DIGITS
        or more, and amounts with more than MAX_DECIMAL_PLACES significant
        decimal places.
        """
        if isinstance(amount, bool):
            raise InvalidAmount(f"Invalid money amount: {amount!r}")
        try:
            value = Decimal(str(amount).strip())
        except (InvalidOperation, ValueError) as exc:
            raise InvalidAmount(f"Invalid money amount: {amount!r}") from exc
        if not value.is_finite():
            raise InvalidAmount(f"Money amount must be finite, got {amount!r}")
        if value < 0:
            raise InvalidAmount(f"Money amount cannot be negative, got {amount!r}")
        if value.adjusted() >= MAX_INTEGER_DIGITS:
            raise InvalidAmount(
                f"Money amount must be below 1e{MAX_INTEGER_DIGITS}, got {amount!r}"
            )
        if _decimal_places(value) > MAX_DECIMAL_PLACES:
            raise InvalidAmount(
                f"Money amount cannot have more than {MAX_DECIMAL_PLACES} "
                f"decimal places, got {amount!r}"
            )
        return Money(value)

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))

    @staticmethod
    def max(a: Money, b: Money) -> Money:
        return a if a >= b else b
