from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import TYPE_CHECKING

from sales_core.domain.exceptions import CurrencyMismatchError, InvalidArgumentError
from sales_core.domain.value_objects.currency import DEFAULT_LOCALE

if TYPE_CHECKING:
    from sales_core.domain.value_objects.currency import Currency


def to_decimal(value: Decimal | int | float | str, label: str) -> Decimal:
    """Convert a numeric input to a finite Decimal.

    Floats go through ``str()`` so that ``0.1`` becomes ``Decimal("0.1")``.
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{label} must be a number: {value!r}")
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError) as e:
        raise InvalidArgumentError(f"{label} must be a number: {value!r}") from e

    if not result.is_finite():
        raise InvalidArgumentError(f"{label} must be finite: {value!r}")
    return result


@dataclass(frozen=True, slots=True)
class Money:
    """Value object for a non-negative amount in a given currency.

    Arithmetic never mutates; add() and multiply() return new instances.
    """

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        amount = to_decimal(self.amount, "Amount")
        if amount < 0:
            raise InvalidArgumentError(f"Amount cannot be negative: {amount}")
        if amount.is_zero():
            # Decimal keeps the sign of -0
            amount = abs(amount)

        if amount is not self.amount:
            object.__setattr__(self, "amount", amount)

    @classmethod
    def zero(cls, currency: Currency) -> Money:
        """Money with a zero amount in the given currency."""
        return cls(amount=Decimal(0), currency=currency)

    def add(self, other: Money) -> Money:
        """Return the sum of both amounts.

        Raises:
            CurrencyMismatchError: If the currency codes differ.
        """
        if self.currency.code != other.currency.code:
            raise CurrencyMismatchError(
                f"Cannot add amounts with different currencies: "
                f"{self.currency.code} and {other.currency.code}"
            )
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def multiply(self, factor: Decimal | int) -> Money:
        """Return the amount scaled by a non-negative factor.

        Raises:
            InvalidArgumentError: If the factor is negative.
        """
        factor = to_decimal(factor, "Factor")
        if factor < 0:
            raise InvalidArgumentError(f"Factor cannot be negative: {factor}")
        return Money(amount=self.amount * factor, currency=self.currency)

    def format(self, locale: str = DEFAULT_LOCALE) -> str:
        return self.currency.format_amount(self.amount, locale)

    def __str__(self) -> str:
        cents = self.amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        return f"{self.currency.code} {cents}"
