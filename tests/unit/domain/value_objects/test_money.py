"""Tests for the Money value object.

Tests cover:
- Non-negative amount invariant
- add(): same-currency only, commutative and associative
- multiply(): non-negative factors only
- Canonical string and locale formatting
"""

from decimal import Decimal

import pytest

from sales_core.domain.exceptions import CurrencyMismatchError, InvalidArgumentError
from sales_core.domain.value_objects import Currency, Money


class TestMoneyCreation:
    @pytest.mark.parametrize("amount", [0, 1, 100, Decimal("0.01"), Decimal("99999.99")])
    def test_creates_money_with_non_negative_amount(self, amount, usd: Currency) -> None:
        money = Money(amount=amount, currency=usd)

        assert money.amount == Decimal(amount)
        assert money.currency == usd

    def test_converts_int_amount_to_decimal(self, usd: Currency) -> None:
        money = Money(amount=100, currency=usd)  # type: ignore[arg-type]

        assert isinstance(money.amount, Decimal)
        assert money.amount == Decimal("100")

    def test_converts_float_through_str(self, usd: Currency) -> None:
        money = Money(amount=0.1, currency=usd)  # type: ignore[arg-type]

        assert money.amount == Decimal("0.1")

    def test_raises_for_negative_amount(self, usd: Currency) -> None:
        with pytest.raises(InvalidArgumentError):
            Money(amount=Decimal("-0.01"), currency=usd)

    @pytest.mark.parametrize("amount", ["abc", "NaN", "Infinity", None, True])
    def test_raises_for_non_numeric_or_non_finite_amount(self, amount, usd: Currency) -> None:
        with pytest.raises(InvalidArgumentError):
            Money(amount=amount, currency=usd)

    def test_negative_zero_is_stored_as_zero(self, usd: Currency) -> None:
        money = Money(amount=Decimal("-0.00"), currency=usd)

        assert not money.amount.is_signed()
        assert str(money) == "USD 0.00"
        assert money.format() == "$0.00"

    def test_zero(self, usd: Currency) -> None:
        assert Money.zero(usd) == Money(amount=Decimal(0), currency=usd)

    def test_money_is_frozen(self, usd: Currency) -> None:
        money = Money(amount=Decimal(1), currency=usd)

        with pytest.raises(AttributeError):
            money.amount = Decimal(2)  # type: ignore[misc]


class TestMoneyAdd:
    def test_adds_amounts_in_same_currency(self, usd: Currency) -> None:
        result = Money(amount=Decimal("10.50"), currency=usd).add(
            Money(amount=Decimal("4.50"), currency=usd)
        )

        assert result.amount == Decimal("15.00")
        assert result.currency == usd

    def test_returns_new_instance(self, usd: Currency) -> None:
        a = Money(amount=Decimal(1), currency=usd)
        b = Money(amount=Decimal(2), currency=usd)

        result = a.add(b)

        assert result is not a
        assert a.amount == Decimal(1)
        assert b.amount == Decimal(2)

    def test_is_commutative(self, usd: Currency) -> None:
        a = Money(amount=Decimal("3.25"), currency=usd)
        b = Money(amount=Decimal("7.10"), currency=usd)

        assert a.add(b) == b.add(a)

    def test_is_associative(self, usd: Currency) -> None:
        a = Money(amount=Decimal("1.10"), currency=usd)
        b = Money(amount=Decimal("2.20"), currency=usd)
        c = Money(amount=Decimal("3.30"), currency=usd)

        assert a.add(b).add(c) == a.add(b.add(c))

    def test_raises_for_different_currencies(self, usd: Currency, pen: Currency) -> None:
        with pytest.raises(CurrencyMismatchError, match="USD and PEN"):
            Money(amount=Decimal(1), currency=usd).add(Money(amount=Decimal(1), currency=pen))


class TestMoneyMultiply:
    def test_scales_amount(self, usd: Currency) -> None:
        result = Money(amount=Decimal(50), currency=usd).multiply(2)

        assert result.amount == Decimal(100)
        assert result.currency == usd

    def test_multiply_by_zero_yields_zero(self, usd: Currency) -> None:
        assert Money(amount=Decimal(50), currency=usd).multiply(0).amount == Decimal(0)

    def test_multiply_by_one_is_identity(self, usd: Currency) -> None:
        money = Money(amount=Decimal("12.34"), currency=usd)

        assert money.multiply(1) == money

    def test_accepts_decimal_factor(self, usd: Currency) -> None:
        result = Money(amount=Decimal(10), currency=usd).multiply(Decimal("1.5"))

        assert result.amount == Decimal(15)

    def test_multiply_by_negative_zero_yields_unsigned_zero(self, usd: Currency) -> None:
        result = Money(amount=Decimal(100), currency=usd).multiply(Decimal("-0"))

        assert not result.amount.is_signed()
        assert str(result) == "USD 0.00"

    def test_raises_for_negative_factor(self, usd: Currency) -> None:
        with pytest.raises(InvalidArgumentError):
            Money(amount=Decimal(10), currency=usd).multiply(-1)


class TestMoneyRepresentation:
    def test_str_uses_code_and_two_decimals(self, usd: Currency) -> None:
        assert str(Money(amount=Decimal(100), currency=usd)) == "USD 100.00"

    def test_str_rounds_to_two_decimals(self, pen: Currency) -> None:
        assert str(Money(amount=Decimal("150.5"), currency=pen)) == "PEN 150.50"

    @pytest.mark.parametrize(
        ("amount", "expected"),
        [("0.125", "USD 0.13"), ("0.135", "USD 0.14"), ("2.004", "USD 2.00")],
    )
    def test_str_rounds_half_up(self, amount: str, expected: str, usd: Currency) -> None:
        assert str(Money(amount=Decimal(amount), currency=usd)) == expected

    def test_format_delegates_to_currency(self, usd: Currency) -> None:
        money = Money(amount=Decimal(1200), currency=usd)

        assert money.format() == "$1,200.00"
        assert money.format("en_US") == usd.format_amount(Decimal(1200), "en_US")
