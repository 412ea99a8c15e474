from decimal import Decimal

import pytest

from sales_core.domain.entities import Customer
from sales_core.domain.exceptions import InvalidArgumentError
from sales_core.domain.value_objects import Currency, CustomerId, Money


class TestCustomerCreation:
    def test_creates_customer_with_name(self) -> None:
        customer = Customer(name="John Doe")

        assert customer.name == "John Doe"
        assert customer.last_order_price is None

    def test_generates_unique_ids(self) -> None:
        assert Customer(name="A").id != Customer(name="B").id

    def test_uses_supplied_id(self) -> None:
        customer = Customer(name="John Doe", customer_id=CustomerId(value="c-1"))

        assert customer.id == CustomerId(value="c-1")

    @pytest.mark.parametrize("name", ["", "   ", "\t\n"])
    def test_raises_for_blank_name(self, name: str) -> None:
        with pytest.raises(InvalidArgumentError, match="Customer name cannot be empty"):
            Customer(name=name)

    def test_raises_for_missing_name(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Customer(name=None)  # type: ignore[arg-type]


class TestCustomerAccessors:
    def test_id_and_name_are_read_only(self) -> None:
        customer = Customer(name="John Doe")

        with pytest.raises(AttributeError):
            customer.name = "Jane"  # type: ignore[misc]
        with pytest.raises(AttributeError):
            customer.id = CustomerId(value="other")  # type: ignore[misc]

    def test_last_order_price_can_be_assigned(self, usd: Currency) -> None:
        customer = Customer(name="John Doe")
        price = Money(amount=Decimal(150), currency=usd)

        customer.last_order_price = price

        assert customer.last_order_price == price

    def test_last_order_price_can_be_cleared(self, usd: Currency) -> None:
        customer = Customer(name="John Doe")
        customer.last_order_price = Money(amount=Decimal(1), currency=usd)

        customer.last_order_price = None

        assert customer.last_order_price is None

    def test_rejects_unknown_attributes(self) -> None:
        customer = Customer(name="John Doe")

        with pytest.raises(AttributeError):
            customer.email = "john@example.com"  # type: ignore[attr-defined]
