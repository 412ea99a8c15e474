"""Data Transfer Objects for use case input/output."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime
    from decimal import Decimal

    from sales_core.domain.entities import Customer, SalesOrder
    from sales_core.domain.value_objects import Money


@dataclass(frozen=True)
class RegisterCustomerRequest:
    """Input DTO for the RegisterCustomer use case."""

    name: str


@dataclass(frozen=True)
class OrderLineRequest:
    """One line of a PlaceSalesOrder request.

    A missing product_id means "new product": an id is generated for it.
    """

    quantity: int
    unit_price_amount: Decimal | int | str
    product_id: str | None = None


@dataclass(frozen=True)
class PlaceSalesOrderRequest:
    """Input DTO for the PlaceSalesOrder use case."""

    customer: Customer
    currency_code: str
    lines: tuple[OrderLineRequest, ...] = field(default_factory=tuple)
    ordered_at: datetime | str | None = None
    ship: bool = False


@dataclass(frozen=True)
class PlaceSalesOrderResponse:
    """Output DTO for the PlaceSalesOrder use case."""

    order: SalesOrder
    total: Money
