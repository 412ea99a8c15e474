from __future__ import annotations

from abc import ABC, abstractmethod


class IdGenerator(ABC):
    """Port for identifier generation.

    Contract:
    - new_id() MUST return a non-empty string
    - ids MUST NOT repeat within the lifetime of one generator
    """

    @abstractmethod
    def new_id(self) -> str:
        """Return a fresh identifier."""
        ...
