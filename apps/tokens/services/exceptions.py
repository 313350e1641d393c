"""
Domain-specific exceptions for the token ledger.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class TokensServiceError(Exception):
    """Base exception for all token ledger errors."""
    pass


class UserNotFoundError(TokensServiceError):
    """Raised when the balance owner does not exist."""
    pass


class InsufficientTokensError(TokensServiceError):
    """
    Raised when a debit exceeds the current balance.

    Kept distinct from other failures so callers can send the user to
    the purchase flow.
    """

    def __init__(self, message="Insufficient tokens", balance=0, required=1):
        super().__init__(message)
        self.balance = balance
        self.required = required


class InvalidPackageError(TokensServiceError):
    """Raised when a token package id is not on the price list."""
    pass
