"""Domain exceptions for sales-core.

Exception hierarchy:
    DomainException (base)
    ├── InvalidArgumentError
    ├── InvalidStateError
    └── CurrencyMismatchError

Every check runs before any mutation, so an object that raised one of
these is left exactly as it was.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from programming errors.
    """


class InvalidArgumentError(DomainException):
    """Raised when a precondition on a primitive value fails.

    Examples:
        - empty or whitespace-only customer name / customer id / product id
        - quantity <= 0
        - negative money amount or multiplication factor
        - malformed currency code
        - unparsable date, or a date in the future
    """


class InvalidStateError(DomainException):
    """Raised when an operation is not allowed in the order's current state.

    Valid transitions:
        - PENDING → CONFIRMED (confirm)
        - CONFIRMED → SHIPPED (ship)
        - CONFIRMED → CANCELED, SHIPPED → CANCELED (cancel)

    Items can only be added while the order is PENDING or CONFIRMED.
    """


class CurrencyMismatchError(DomainException):
    """Raised when adding Money amounts expressed in different currencies."""
