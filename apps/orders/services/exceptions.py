"""
Domain-specific exceptions for the order ledger.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class OrdersServiceError(Exception):
    """Base exception for all order ledger errors."""
    pass


class OrderNotFoundError(OrdersServiceError):
    """Raised when an order does not exist."""
    pass


class InvalidTransitionError(OrdersServiceError):
    """Raised when a status change is not allowed from the current status."""

    def __init__(self, from_status, to_status, message=None):
        self.from_status = from_status
        self.to_status = to_status
        super().__init__(
            message or f"Invalid transition from {from_status} to {to_status}"
        )


class CodeMismatchError(OrdersServiceError):
    """Raised when a presented pickup code does not match."""
    pass


class OrderNotReadyError(OrdersServiceError):
    """Raised when the code matches but the order is not ready for pickup."""
    pass


class PickupCodeExhaustedError(OrdersServiceError):
    """Raised when no unused pickup code could be generated."""
    pass
