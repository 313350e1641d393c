"""
Pickup code issuing and verification.
"""

import logging
import secrets
import string
from typing import Optional
from uuid import UUID

from django.conf import settings

from apps.orders.models import Order, OrderStatus, OPEN_STATUSES

from .exceptions import (
    OrderNotFoundError,
    CodeMismatchError,
    OrderNotReadyError,
)

logger = logging.getLogger(__name__)

PICKUP_CODE_ALPHABET = string.digits + string.ascii_uppercase


def generate_pickup_code(length: Optional[int] = None) -> str:
    """Random uppercase base-36 code."""
    length = length or settings.PICKUP_CODE_LENGTH
    return ''.join(secrets.choice(PICKUP_CODE_ALPHABET) for _ in range(length))


def verify_pickup_code(*, code: str, order_id: Optional[UUID] = None) -> Order:
    """
    Check a presented pickup code.

    Matching is exact and case-sensitive. Only orders in ``ready`` can be
    picked up. Verification does not change the order; the caller
    commits the handover with a transition to ``picked``.

    Args:
        code: Code presented by the customer
        order_id: Optional order the code is checked against

    Returns:
        The matching ready Order

    Raises:
        OrderNotFoundError: If order_id is given and does not exist
        CodeMismatchError: If the code does not match
        OrderNotReadyError: If the code matches an order that is not ready
    """
    if order_id is not None:
        try:
            order = Order.objects.select_related('user').get(id=order_id)
        except Order.DoesNotExist:
            raise OrderNotFoundError(f"Order with ID {order_id} not found")

        if order.pickup_code != code:
            logger.info("Pickup code mismatch for order %s", order.id)
            raise CodeMismatchError("Invalid pickup code")

        if order.status != OrderStatus.READY:
            raise OrderNotReadyError(
                f"Order is not ready for pickup (status: {order.status})"
            )
        return order

    # Exact match; the database collation may be case-insensitive
    candidates = [
        order for order in
        Order.objects.select_related('user').filter(pickup_code=code, status__in=OPEN_STATUSES)
        if order.pickup_code == code
    ]

    for order in candidates:
        if order.status == OrderStatus.READY:
            return order

    if candidates:
        raise OrderNotReadyError(
            f"Order is not ready for pickup (status: {candidates[0].status})"
        )

    logger.info("Pickup code matched no open order")
    raise CodeMismatchError("Invalid code or order unavailable")
