"""Domain-specific exceptions for accounts services."""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class AuthStartError(AccountsServiceError):
    """Raised when an auth flow cannot be started for the given identity."""
    pass


class InvalidPhoneError(AccountsServiceError):
    """Raised when a phone number is malformed."""
    pass


class OtpError(AccountsServiceError):
    """Base for phone verification failures."""
    pass


class OtpNotRequestedError(OtpError):
    """Raised when no code was generated for the phone number."""
    pass


class OtpExpiredError(OtpError):
    """Raised when the code exists but has expired."""
    pass


class OtpMismatchError(OtpError):
    """Raised when the presented code is wrong."""
    pass


class UserNotFoundError(AccountsServiceError):
    """Raised when user does not exist."""
    pass


class InvalidCardError(AccountsServiceError):
    """Raised when mock card details are incomplete."""
    pass
