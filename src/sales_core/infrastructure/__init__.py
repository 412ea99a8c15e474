"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Time Provider: Clock abstraction for testability
- Id Generator: Identifier generation (random in production, sequential in tests)

Infrastructure adapters implement the ports defined in the application layer.
"""

from sales_core.infrastructure.id_generator import SequentialIdGenerator, UuidIdGenerator
from sales_core.infrastructure.time_provider import FixedTimeProvider, SystemTimeProvider

__all__ = [
    "FixedTimeProvider",
    "SequentialIdGenerator",
    "SystemTimeProvider",
    "UuidIdGenerator",
]
