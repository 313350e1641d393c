"""Mock payment method registration."""

import logging
from uuid import UUID

from django.contrib.auth import get_user_model
from django.db import transaction

from .exceptions import InvalidCardError, UserNotFoundError

logger = logging.getLogger(__name__)

User = get_user_model()

REQUIRED_CARD_FIELDS = ('number', 'name', 'cvv', 'expiry')


@transaction.atomic
def add_payment_method(*, user_id: UUID, card: dict):
    """
    Record that a user registered a card.

    No card data is stored and nothing is charged; a complete set of
    fields marks the user as payment-verified.

    Raises:
        InvalidCardError: If any card field is missing
        UserNotFoundError: If user does not exist
    """
    missing = [field for field in REQUIRED_CARD_FIELDS if not card.get(field)]
    if missing:
        raise InvalidCardError(f"All card fields are required (missing: {', '.join(missing)})")

    try:
        user = User.objects.select_for_update().get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError(f"User with ID {user_id} not found")

    user.payment_verified = True
    user.save(update_fields=['payment_verified'])

    logger.info("User %s added a payment method", user.id)
    return user
