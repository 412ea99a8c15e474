"""Use cases - Application-specific orchestration of the domain model."""

from sales_core.application.use_cases.place_sales_order import PlaceSalesOrderUseCase
from sales_core.application.use_cases.register_customer import RegisterCustomerUseCase

__all__ = [
    "PlaceSalesOrderUseCase",
    "RegisterCustomerUseCase",
]
