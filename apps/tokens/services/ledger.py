"""
Token ledger service.

Owns every write to ``User.tokens``. Balance changes are single
conditional UPDATE statements, so concurrent debits and credits for the
same user serialize on the row and can never drive a balance negative.
"""

import logging
from typing import List
from uuid import UUID

from django.contrib.auth import get_user_model
from django.db import transaction
from django.db.models import F, QuerySet

from apps.tokens.models import TokenPurchase
from apps.tokens.packages import TOKEN_PACKAGES, TokenPackage

from .exceptions import (
    UserNotFoundError,
    InsufficientTokensError,
    InvalidPackageError,
)

logger = logging.getLogger(__name__)

User = get_user_model()


def get_balance(*, user_id: UUID) -> int:
    """
    Return the user's current token balance.

    Raises:
        UserNotFoundError: If user does not exist
    """
    try:
        return User.objects.values_list('tokens', flat=True).get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError(f"User with ID {user_id} not found")


@transaction.atomic
def try_debit(*, user_id: UUID, amount: int = 1) -> int:
    """
    Atomically take ``amount`` tokens from a user's balance.

    The compare and the write happen in one statement
    (``UPDATE ... SET tokens = tokens - amount WHERE tokens >= amount``).
    Nothing is applied when the balance is too low.

    Args:
        user_id: UUID of the balance owner
        amount: Positive number of tokens to take

    Returns:
        Balance after the debit

    Raises:
        ValueError: If amount is not a positive integer
        UserNotFoundError: If user does not exist
        InsufficientTokensError: If balance < amount
    """
    if not isinstance(amount, int) or isinstance(amount, bool) or amount < 1:
        raise ValueError("Debit amount must be a positive integer")

    updated = (
        User.objects
        .filter(id=user_id, tokens__gte=amount)
        .update(tokens=F('tokens') - amount)
    )

    if not updated:
        balance = get_balance(user_id=user_id)
        logger.info(
            "Rejected debit of %d for user %s (balance %d)",
            amount, user_id, balance
        )
        raise InsufficientTokensError(
            "Insufficient tokens. Please buy more tokens to continue.",
            balance=balance,
            required=amount,
        )

    balance = get_balance(user_id=user_id)
    logger.info("Debited %d token(s) from user %s, balance %d", amount, user_id, balance)
    return balance


def get_package(package_id) -> TokenPackage:
    """
    Look up a package on the fixed price list.

    Raises:
        InvalidPackageError: If the id is unknown
    """
    try:
        return TOKEN_PACKAGES[str(package_id)]
    except KeyError:
        raise InvalidPackageError(f"Unknown token package '{package_id}'")


def list_packages() -> List[TokenPackage]:
    """Return the price list ordered by token amount."""
    return sorted(TOKEN_PACKAGES.values(), key=lambda package: package.tokens)


@transaction.atomic
def credit(*, user_id: UUID, package_id: str) -> TokenPurchase:
    """
    Credit a purchased package to a user.

    Adds ``tokens + bonus_tokens`` to the balance and appends one
    immutable TokenPurchase, both in the same transaction.

    Args:
        user_id: UUID of the buyer
        package_id: Id from the fixed package list

    Returns:
        Created TokenPurchase instance

    Raises:
        InvalidPackageError: If the package id is unknown
        UserNotFoundError: If user does not exist
    """
    package = get_package(package_id)

    updated = (
        User.objects
        .filter(id=user_id)
        .update(tokens=F('tokens') + package.total_tokens)
    )
    if not updated:
        raise UserNotFoundError(f"User with ID {user_id} not found")

    purchase = TokenPurchase.objects.create(
        user_id=user_id,
        package_id=package.id,
        amount=package.tokens,
        price=package.price,
        bonus_tokens=package.bonus_tokens,
    )

    logger.info(
        "Credited %d token(s) to user %s from package %s",
        package.total_tokens, user_id, package.id
    )
    return purchase


# Interface name used by the purchase endpoint
purchase_tokens = credit


def list_purchases(*, user_id: UUID) -> QuerySet[TokenPurchase]:
    """
    Return a user's purchases in creation order.

    Raises:
        UserNotFoundError: If user does not exist
    """
    if not User.objects.filter(id=user_id).exists():
        raise UserNotFoundError(f"User with ID {user_id} not found")

    return TokenPurchase.objects.filter(user_id=user_id).order_by('created_at')
