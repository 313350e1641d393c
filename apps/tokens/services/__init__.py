"""
Token ledger services.

The only code allowed to change a user's token balance.
"""

from .exceptions import (
    TokensServiceError,
    UserNotFoundError,
    InsufficientTokensError,
    InvalidPackageError,
)
from .ledger import (
    get_balance,
    try_debit,
    credit,
    purchase_tokens,
    get_package,
    list_packages,
    list_purchases,
)

__all__ = [
    # Exceptions
    'TokensServiceError',
    'UserNotFoundError',
    'InsufficientTokensError',
    'InvalidPackageError',

    # Ledger
    'get_balance',
    'try_debit',
    'credit',
    'purchase_tokens',
    'get_package',
    'list_packages',
    'list_purchases',
]
