"""Customer aggregate root."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sales_core.domain.exceptions import InvalidArgumentError
from sales_core.domain.value_objects import CustomerId

if TYPE_CHECKING:
    from sales_core.domain.value_objects import Money


class Customer:
    """Customer aggregate holding identity, name and the last order total.

    ``last_order_price`` is assigned by the caller after it has computed an
    order total; the customer does not compute or validate it.
    """

    __slots__ = ("_id", "_name", "_last_order_price")

    def __init__(self, name: str, customer_id: CustomerId | None = None) -> None:
        if not isinstance(name, str) or not name.strip():
            raise InvalidArgumentError(f"Customer name cannot be empty: {name!r}")

        self._id = customer_id if customer_id is not None else CustomerId.generate()
        self._name = name
        self._last_order_price: Money | None = None

    @property
    def id(self) -> CustomerId:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def last_order_price(self) -> Money | None:
        return self._last_order_price

    @last_order_price.setter
    def last_order_price(self, value: Money | None) -> None:
        self._last_order_price = value

    def __repr__(self) -> str:
        return f"Customer(id={self._id.value!r}, name={self._name!r})"
