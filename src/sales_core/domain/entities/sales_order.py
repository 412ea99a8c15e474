"""SalesOrder aggregate root with state machine behavior."""

from __future__ import annotations

from enum import Enum
from functools import reduce
from typing import TYPE_CHECKING

from sales_core.domain.entities.sales_order_item import SalesOrderItem
from sales_core.domain.exceptions import InvalidArgumentError, InvalidStateError
from sales_core.domain.value_objects import (
    CustomerId,
    DateTime,
    Money,
    SalesOrderId,
)
from sales_core.domain.value_objects.money import to_decimal

if TYPE_CHECKING:
    from datetime import datetime
    from decimal import Decimal

    from sales_core.domain.value_objects import Currency, ProductId, SalesOrderItemId


class SalesOrderState(str, Enum):
    """Sales order lifecycle states."""

    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    SHIPPED = "SHIPPED"
    CANCELED = "CANCELED"

    def __str__(self) -> str:
        return self.value


class SalesOrder:
    """Sales order aggregate root.

    The order owns its items: they are created by add_item() and exposed
    as a read-only tuple. State only changes through confirm(), ship() and
    cancel(); every check happens before anything is mutated.

    State machine:
        - PENDING → CONFIRMED (confirm)
        - CONFIRMED → SHIPPED (ship)
        - CONFIRMED → CANCELED, SHIPPED → CANCELED (cancel)
        - PENDING cannot be canceled directly
        - CANCELED is terminal; SHIPPED only allows cancel()
    """

    __slots__ = ("_id", "_customer_id", "_items", "_ordered_at", "_currency", "_state")

    def __init__(
        self,
        customer_id: CustomerId | str,
        currency: Currency,
        ordered_at: DateTime,
        order_id: SalesOrderId | None = None,
    ) -> None:
        if isinstance(customer_id, str):
            customer_id = CustomerId(value=customer_id)
        if customer_id is None or not customer_id.value or not customer_id.value.strip():
            raise InvalidArgumentError(f"Customer ID cannot be empty: {customer_id!r}")

        self._id = order_id if order_id is not None else SalesOrderId.generate()
        self._customer_id = customer_id
        self._items: list[SalesOrderItem] = []
        self._ordered_at = ordered_at
        self._currency = currency
        self._state = SalesOrderState.PENDING

    @classmethod
    def create(
        cls,
        customer_id: CustomerId | str,
        currency: Currency,
        *,
        now: datetime,
        ordered_at: datetime | str | None = None,
        order_id: SalesOrderId | None = None,
    ) -> SalesOrder:
        """Open a new PENDING order.

        Args:
            customer_id: Customer placing the order, must not be blank.
            currency: Currency every item price is expressed in.
            now: Reference instant (UTC) for the "no future dates" rule.
            ordered_at: When the order was placed; defaults to ``now``.
            order_id: Identifier to use; a new one is generated if omitted.

        Raises:
            InvalidArgumentError: If customer_id is blank or ordered_at is
                invalid or in the future.
        """
        return cls(
            customer_id=customer_id,
            currency=currency,
            ordered_at=DateTime.create(ordered_at, now=now),
            order_id=order_id,
        )

    @property
    def id(self) -> SalesOrderId:
        return self._id

    @property
    def customer_id(self) -> CustomerId:
        return self._customer_id

    @property
    def items(self) -> tuple[SalesOrderItem, ...]:
        return tuple(self._items)

    @property
    def ordered_at(self) -> DateTime:
        return self._ordered_at

    @property
    def currency(self) -> Currency:
        return self._currency

    @property
    def state(self) -> SalesOrderState:
        return self._state

    def can_add_items(self) -> bool:
        return self._state not in (SalesOrderState.CANCELED, SalesOrderState.SHIPPED)

    def add_item(
        self,
        product_id: ProductId,
        quantity: int,
        unit_price_amount: Decimal | int | str,
        item_id: SalesOrderItemId | None = None,
    ) -> SalesOrderItem:
        """Append a new line item priced in the order's currency.

        Items keep insertion order; adding the same product twice creates
        two lines.

        Returns:
            The created SalesOrderItem.

        Raises:
            InvalidStateError: If the order is SHIPPED or CANCELED.
            InvalidArgumentError: If product_id is blank, quantity <= 0 or
                unit_price_amount < 0.
        """
        if not self.can_add_items():
            raise InvalidStateError(f"Cannot add items to an order that is {self._state}")

        if product_id is None or not product_id.value or not product_id.value.strip():
            raise InvalidArgumentError("Product ID cannot be empty")

        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise InvalidArgumentError(f"Quantity must be greater than zero: {quantity}")

        if to_decimal(unit_price_amount, "Unit price amount") < 0:
            raise InvalidArgumentError(f"Unit price amount cannot be negative: {unit_price_amount}")

        item = SalesOrderItem.create(
            order_id=self._id,
            product_id=product_id,
            quantity=quantity,
            unit_price=Money(amount=unit_price_amount, currency=self._currency),
            item_id=item_id,
        )
        self._items.append(item)
        return item

    def calculate_total_amount(self) -> Money:
        """Sum of all item totals, zero in the order's currency when empty."""
        return reduce(
            lambda total, item: total.add(item.calculate_item_total()),
            self._items,
            Money.zero(self._currency),
        )

    def get_formatted_ordered_at(self) -> str:
        return self._ordered_at.format()

    def confirm(self) -> None:
        """Transition PENDING → CONFIRMED.

        Raises:
            InvalidStateError: If not in PENDING state.
        """
        if self._state != SalesOrderState.PENDING:
            raise InvalidStateError(f"Cannot confirm an order that is {self._state}")
        self._state = SalesOrderState.CONFIRMED

    def ship(self) -> None:
        """Transition CONFIRMED → SHIPPED.

        Raises:
            InvalidStateError: If not in CONFIRMED state.
        """
        if self._state != SalesOrderState.CONFIRMED:
            raise InvalidStateError(f"Cannot ship an order that is {self._state}")
        self._state = SalesOrderState.SHIPPED

    def cancel(self) -> None:
        """Transition CONFIRMED or SHIPPED → CANCELED.

        A PENDING order cannot be canceled; confirm it first.

        Raises:
            InvalidStateError: If in PENDING or CANCELED state.
        """
        if self._state in (SalesOrderState.PENDING, SalesOrderState.CANCELED):
            raise InvalidStateError(f"Cannot cancel an order that is {self._state}")
        self._state = SalesOrderState.CANCELED

    def __repr__(self) -> str:
        return (
            f"SalesOrder(id={self._id.value!r}, customer_id={self._customer_id.value!r}, "
            f"state={self._state.value}, items={len(self._items)})"
        )
