from itertools import count
from uuid import uuid4

from sales_core.application.ports import IdGenerator


class UuidIdGenerator(IdGenerator):
    """Production id generator returning random UUID v4 strings."""

    def new_id(self) -> str:
        return str(uuid4())


class SequentialIdGenerator(IdGenerator):
    """Deterministic id generator: ``<prefix>-1``, ``<prefix>-2``, ...

    Note: This implementation is NOT thread-safe.
    """

    def __init__(self, prefix: str = "id") -> None:
        if not prefix.strip():
            raise ValueError("prefix cannot be empty")
        self._prefix = prefix
        self._counter = count(1)

    def new_id(self) -> str:
        return f"{self._prefix}-{next(self._counter)}"
