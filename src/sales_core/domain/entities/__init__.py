"""Domain entities - Objects with identity and lifecycle."""

from sales_core.domain.entities.customer import Customer
from sales_core.domain.entities.sales_order import SalesOrder, SalesOrderState
from sales_core.domain.entities.sales_order_item import SalesOrderItem

__all__ = [
    "Customer",
    "SalesOrder",
    "SalesOrderItem",
    "SalesOrderState",
]
