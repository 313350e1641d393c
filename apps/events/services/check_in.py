"""
Event check-in service.

Entry costs one token, taken through the token ledger in the same
transaction that records the check-in.
"""

import logging
from uuid import UUID

from django.db import transaction, IntegrityError

from apps.events.models import CheckIn, Event
from apps.tokens.services import try_debit

from .exceptions import EventNotFoundError, AlreadyCheckedInError

logger = logging.getLogger(__name__)

CHECK_IN_PRICE_TOKENS = 1


def get_event_by_qr(qr_code: str) -> Event:
    """
    Raises:
        EventNotFoundError: If no active event has this QR code
    """
    try:
        return Event.objects.get(qr_code=qr_code.strip(), is_active=True)
    except Event.DoesNotExist:
        raise EventNotFoundError("Invalid QR code. This event does not exist.")


@transaction.atomic
def check_in(*, qr_code: str, user_id: UUID) -> CheckIn:
    """
    Check a user in to the event behind a QR code.

    Args:
        qr_code: Scanned QR payload
        user_id: UUID of the user entering

    Returns:
        Created CheckIn instance

    Raises:
        EventNotFoundError: If the QR code matches no active event
        AlreadyCheckedInError: If the user already checked in to this event
        UserNotFoundError: If user does not exist
        InsufficientTokensError: If the user has no token left
    """
    event = get_event_by_qr(qr_code)

    if CheckIn.objects.filter(user_id=user_id, event=event).exists():
        raise AlreadyCheckedInError(f"You are already checked in to {event.name}")

    try_debit(user_id=user_id, amount=CHECK_IN_PRICE_TOKENS)

    try:
        with transaction.atomic():
            check_in_record = CheckIn.objects.create(user_id=user_id, event=event)
    except IntegrityError:
        # A concurrent check-in committed first; the debit rolls back with us
        raise AlreadyCheckedInError(f"You are already checked in to {event.name}")

    logger.info("User %s checked in to event %s", user_id, event.id)
    return check_in_record
