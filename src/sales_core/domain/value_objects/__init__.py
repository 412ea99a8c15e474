"""Value objects - Immutable objects defined by their attributes."""

from sales_core.domain.value_objects.currency import Currency
from sales_core.domain.value_objects.date_time import DateTime
from sales_core.domain.value_objects.identifiers import (
    CustomerId,
    EntityId,
    ProductId,
    SalesOrderId,
    SalesOrderItemId,
)
from sales_core.domain.value_objects.money import Money

__all__ = [
    "Currency",
    "CustomerId",
    "DateTime",
    "EntityId",
    "Money",
    "ProductId",
    "SalesOrderId",
    "SalesOrderItemId",
]
