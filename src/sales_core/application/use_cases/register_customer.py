from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sales_core.domain.entities import Customer
from sales_core.domain.value_objects import CustomerId

if TYPE_CHECKING:
    from sales_core.application.dtos import RegisterCustomerRequest
    from sales_core.application.ports import IdGenerator

logger = logging.getLogger(__name__)


class RegisterCustomerUseCase:
    """Creates a Customer whose identifier comes from the injected generator."""

    def __init__(self, id_generator: IdGenerator) -> None:
        self._id_generator = id_generator

    def execute(self, request: RegisterCustomerRequest) -> Customer:
        """Register a new customer.

        Raises:
            InvalidArgumentError: If the name is empty or whitespace-only.
        """
        customer = Customer(
            name=request.name,
            customer_id=CustomerId(value=self._id_generator.new_id()),
        )
        logger.info("Registered customer %s (%s)", customer.id, customer.name)
        return customer
