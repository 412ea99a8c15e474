"""Ports - Abstract interfaces for external dependencies.

Ports define the contracts that infrastructure adapters must implement.
This allows the application layer to remain decoupled from concrete implementations.
"""

from sales_core.application.ports.id_generator import IdGenerator
from sales_core.application.ports.time_provider import TimeProvider

__all__ = [
    "IdGenerator",
    "TimeProvider",
]
