from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sales_core.application.dtos import PlaceSalesOrderResponse
from sales_core.domain.entities import SalesOrder
from sales_core.domain.value_objects import (
    Currency,
    ProductId,
    SalesOrderId,
    SalesOrderItemId,
)

if TYPE_CHECKING:
    from sales_core.application.dtos import PlaceSalesOrderRequest
    from sales_core.application.ports import IdGenerator, TimeProvider

logger = logging.getLogger(__name__)


class PlaceSalesOrderUseCase:
    """Orchestrates the order placement workflow.

    Responsibilities:
    - Fetch the reference time once, from the time provider
    - Open the order and add every requested line
    - Confirm, and ship when requested
    - Record the order total on the customer

    The customer's last order price is only assigned once every step has
    succeeded; any domain error propagates to the caller unchanged.
    """

    def __init__(self, time_provider: TimeProvider, id_generator: IdGenerator) -> None:
        self._time_provider = time_provider
        self._id_generator = id_generator

    def execute(self, request: PlaceSalesOrderRequest) -> PlaceSalesOrderResponse:
        """Execute the order placement workflow.

        Args:
            request: Customer, currency, lines and optional order date.

        Returns:
            PlaceSalesOrderResponse with the order and its total.

        Raises:
            InvalidArgumentError: Invalid currency code, date or line values.
            InvalidStateError: A lifecycle transition was not permitted.
        """
        now = self._time_provider.now()
        customer = request.customer

        order = SalesOrder.create(
            customer_id=customer.id,
            currency=Currency(code=request.currency_code),
            now=now,
            ordered_at=request.ordered_at,
            order_id=SalesOrderId(value=self._id_generator.new_id()),
        )

        for line in request.lines:
            if line.product_id is None:
                product_id = ProductId(value=self._id_generator.new_id())
            else:
                product_id = ProductId(value=line.product_id)

            item = order.add_item(
                product_id=product_id,
                quantity=line.quantity,
                unit_price_amount=line.unit_price_amount,
                item_id=SalesOrderItemId(value=self._id_generator.new_id()),
            )
            logger.debug(
                "Order %s: added %d x %s at %s",
                order.id,
                item.quantity,
                item.product_id,
                item.unit_price,
            )

        order.confirm()
        if request.ship:
            order.ship()

        total = order.calculate_total_amount()
        customer.last_order_price = total

        logger.info(
            "Placed order %s for customer %s: %d item(s), total %s, state %s",
            order.id,
            customer.id,
            len(order.items),
            total,
            order.state,
        )
        return PlaceSalesOrderResponse(order=order, total=total)
