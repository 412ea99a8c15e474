from __future__ import annotations

from dataclasses import dataclass
from typing import Self
from uuid import uuid4


@dataclass(frozen=True, slots=True)
class EntityId:
    """Base value object for opaque string identifiers.

    Equality and hashing are by value: two instances holding the same
    string refer to the same entity.
    """

    value: str

    @classmethod
    def generate(cls) -> Self:
        """Generate a new unique identifier (UUID v4)."""
        return cls(value=str(uuid4()))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class ProductId(EntityId):
    """Identifier of a product referenced by order lines."""


@dataclass(frozen=True, slots=True)
class CustomerId(EntityId):
    """Identifier of a Customer aggregate."""


@dataclass(frozen=True, slots=True)
class SalesOrderId(EntityId):
    """Identifier of a SalesOrder aggregate."""


@dataclass(frozen=True, slots=True)
class SalesOrderItemId(EntityId):
    """Identifier of a line item inside a SalesOrder."""
