from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from sales_core.domain.exceptions import InvalidArgumentError
from sales_core.domain.value_objects import SalesOrderItemId

if TYPE_CHECKING:
    from sales_core.domain.value_objects import Money, ProductId, SalesOrderId


@dataclass(frozen=True, slots=True)
class SalesOrderItem:
    """Line item entity owned by a single SalesOrder.

    Items are created by SalesOrder.add_item() and never change afterwards.
    Use the create() factory method to construct instances with validation.
    """

    order_id: SalesOrderId
    item_id: SalesOrderItemId
    product_id: ProductId
    quantity: int
    unit_price: Money

    @classmethod
    def create(
        cls,
        order_id: SalesOrderId,
        product_id: ProductId,
        quantity: int,
        unit_price: Money,
        item_id: SalesOrderItemId | None = None,
    ) -> SalesOrderItem:
        """Factory method to create a SalesOrderItem with validation.

        Args:
            order_id: The order this item belongs to.
            product_id: The product being ordered.
            quantity: Number of units, must be greater than 0.
            unit_price: Price of a single unit.
            item_id: Identifier to use; a new one is generated if omitted.

        Returns:
            A new SalesOrderItem instance.

        Raises:
            InvalidArgumentError: If quantity is not a positive integer.
        """
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise InvalidArgumentError(f"Quantity must be greater than zero: {quantity}")

        return cls(
            order_id=order_id,
            item_id=item_id if item_id is not None else SalesOrderItemId.generate(),
            product_id=product_id,
            quantity=quantity,
            unit_price=unit_price,
        )

    def calculate_item_total(self) -> Money:
        """Unit price times quantity, in the unit price's currency."""
        return self.unit_price.multiply(self.quantity)
