"""
Chat message parsing gated by the token balance.
"""

import logging
from uuid import UUID

from apps.chat.parser import DrinkIntent, parse_drink_intent
from apps.tokens.services import InsufficientTokensError, get_balance

logger = logging.getLogger(__name__)


def parse_message(*, text: str, user_id: UUID) -> DrinkIntent:
    """
    Parse an order message for a user who can pay for it.

    The balance is checked before parsing so an empty wallet is reported
    as such rather than as a parsing problem. Nothing is debited here;
    the token is taken when the order is placed.

    Raises:
        UserNotFoundError: If user does not exist
        InsufficientTokensError: If the balance is zero
        UnrecognizedDrinkError: If no drink keyword is present
    """
    balance = get_balance(user_id=user_id)
    if balance <= 0:
        raise InsufficientTokensError(
            "You have no tokens left. Buy tokens to place an order.",
            balance=balance,
            required=1,
        )

    intent = parse_drink_intent(text)
    logger.info("Parsed '%s' for user %s", intent.drink, user_id)
    return intent
