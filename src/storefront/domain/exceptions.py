"""Domain-level exceptions.

Business rule violations are subclasses of DomainException so the CLI
layer can catch them uniformly and display user-friendly messages.
Anything else (I/O, corrupt data, broken internal invariants) is left to
propagate as an ordinary failure.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value or input violated a business rule."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    def __init__(self, entity: str, entity_id: object) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} #{entity_id} not found")


class InvalidStateError(DomainException):
    """The aggregate is not in a state that allows the operation."""

    def __init__(self, reason: str, message: str | None = None) -> None:
        self.reason = reason
        super().__init__(message or reason)


class InsufficientInventoryError(DomainException):
    """Requested quantity exceeds the stock on hand."""

    def __init__(self, product_name: str, available: int, requested: int) -> None:
        self.product_name = product_name
        self.available = available
        self.requested = requested
        super().__init__(
            f"Insufficient inventory for {product_name} "
            f"(requested {requested}, {available} available)"
        )


class ConversionIntegrityError(RuntimeError):
    """A cart conversion produced an order that disagrees with its cart.

    Not a business failure: the unit of work is rolled back and the
    error propagates as-is.
    """
