"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    AuthStartError,
    InvalidPhoneError,
    OtpError,
    OtpNotRequestedError,
    OtpExpiredError,
    OtpMismatchError,
    UserNotFoundError,
    InvalidCardError,
)
from .auth_flow import start_auth
from .otp_verification import send_otp, verify_otp, normalize_phone
from .sessions import issue_session_tokens
from .payment_methods import add_payment_method

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'AuthStartError',
    'InvalidPhoneError',
    'OtpError',
    'OtpNotRequestedError',
    'OtpExpiredError',
    'OtpMismatchError',
    'UserNotFoundError',
    'InvalidCardError',
    # Services
    'start_auth',
    'send_otp',
    'verify_otp',
    'normalize_phone',
    'issue_session_tokens',
    'add_payment_method',
]
