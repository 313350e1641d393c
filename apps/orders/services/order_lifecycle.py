"""
Order lifecycle service.

Creates orders against a token debit and moves them through the status
state machine. Every state-changing operation runs in a transaction.
"""

import logging
from typing import Iterable, List, Optional
from uuid import UUID

from django.conf import settings
from django.db import transaction, IntegrityError
from django.db.models import QuerySet
from django.utils import timezone

from apps.orders.models import Order, OrderStatus, DrinkSize
from apps.orders.transitions import can_transition
from apps.tokens.services import try_debit

from .exceptions import (
    OrderNotFoundError,
    InvalidTransitionError,
    PickupCodeExhaustedError,
)
from .pickup_codes import generate_pickup_code

logger = logging.getLogger(__name__)

ORDER_PRICE_TOKENS = 1


@transaction.atomic
def create_order(
    *,
    user_id: UUID,
    drink: str,
    size: str = DrinkSize.MEDIUM,
    ice: bool = True,
    strength: Optional[str] = None,
    extras: Optional[List[str]] = None,
    max_retries: Optional[int] = None
) -> Order:
    """
    Place an order, paying one token.

    The debit runs first; an order is only minted once it succeeded.
    Both happen in one transaction, so a failure afterwards (e.g. no free
    pickup code) rolls the debit back too.

    Pickup codes must be unique among open orders. Each insert runs in a
    savepoint and a collision retries with a fresh code.

    Args:
        user_id: UUID of the customer
        drink: Canonical drink name
        size: small, medium or large
        ice: Whether to serve with ice
        strength: Optional light, normal or strong
        extras: Optional list of extra requests
        max_retries: Attempts at a unique pickup code

    Returns:
        Created Order in ``pending``

    Raises:
        InsufficientTokensError: If the balance is empty (nothing created)
        UserNotFoundError: If user does not exist
        PickupCodeExhaustedError: If no unique pickup code was found
    """
    try_debit(user_id=user_id, amount=ORDER_PRICE_TOKENS)

    max_retries = max_retries or settings.PICKUP_CODE_MAX_RETRIES
    for attempt in range(max_retries):
        pickup_code = generate_pickup_code()
        try:
            with transaction.atomic():
                order = Order.objects.create(
                    user_id=user_id,
                    drink=drink,
                    size=size,
                    ice=ice,
                    strength=strength,
                    extras=list(extras or []),
                    status=OrderStatus.PENDING,
                    pickup_code=pickup_code,
                )
        except IntegrityError:
            logger.warning(
                "Pickup code collision on attempt %d for user %s",
                attempt + 1, user_id
            )
            continue

        logger.info("Created order %s (%s) for user %s", order.id, drink, user_id)
        return order

    raise PickupCodeExhaustedError(
        f"Failed to generate unique pickup code after {max_retries} attempts"
    )


@transaction.atomic
def transition_order(*, order_id: UUID, to_status: str) -> Order:
    """
    Move an order to a new status.

    The row is locked for the duration of the check, and the write is a
    compare-and-swap on the status read, so two racing transitions from
    the same status cannot both commit.

    Args:
        order_id: UUID of the order
        to_status: Target status

    Returns:
        Updated Order instance

    Raises:
        OrderNotFoundError: If order doesn't exist
        InvalidTransitionError: If the transition table forbids the move
    """
    try:
        order = (
            Order.objects
            .select_for_update()
            .get(id=order_id)
        )
    except Order.DoesNotExist:
        raise OrderNotFoundError(f"Order with ID {order_id} not found")

    from_status = order.status
    if not can_transition(from_status, to_status):
        logger.info(
            "Rejected transition %s -> %s for order %s",
            from_status, to_status, order.id
        )
        raise InvalidTransitionError(from_status, to_status)

    updated = (
        Order.objects
        .filter(id=order.id, status=from_status)
        .update(status=to_status, updated_at=timezone.now())
    )
    if not updated:
        # Status moved underneath us
        order.refresh_from_db(fields=['status'])
        raise InvalidTransitionError(order.status, to_status)

    order.refresh_from_db()
    logger.info("Order %s: %s -> %s", order.id, from_status, to_status)
    return order


def get_order(*, order_id: UUID) -> Order:
    """
    Get an order by ID.

    Raises:
        OrderNotFoundError: If order doesn't exist
    """
    try:
        return Order.objects.select_related('user').get(id=order_id)
    except Order.DoesNotExist:
        raise OrderNotFoundError(f"Order with ID {order_id} not found")


def list_orders(
    *,
    statuses: Optional[Iterable[str]] = None,
    user_id: Optional[UUID] = None
) -> QuerySet[Order]:
    """
    Orders filtered by status set and/or owner.

    Empty or missing filters match everything.
    """
    queryset = Order.objects.select_related('user')

    statuses = list(statuses or [])
    if statuses:
        queryset = queryset.filter(status__in=statuses)

    if user_id:
        queryset = queryset.filter(user_id=user_id)

    return queryset
