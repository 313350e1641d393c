"""Start of the phone/OTP authentication flow."""

import logging
from typing import Optional

from django.contrib.auth import get_user_model
from django.db import transaction, IntegrityError

from .exceptions import AuthStartError
from .otp_verification import normalize_phone

logger = logging.getLogger(__name__)

User = get_user_model()


@transaction.atomic
def start_auth(
    *,
    name: str = '',
    email: Optional[str] = None,
    phone: Optional[str] = None
):
    """
    Create or fetch the user behind an auth attempt.

    Lookup is by phone first, then by email. New users start unverified
    with the client role and an empty token balance.

    Args:
        name: Optional display name
        email: Optional email address
        phone: Optional phone number

    Returns:
        Tuple of (User, created)

    Raises:
        AuthStartError: If neither phone nor email is given
    """
    if not phone and not email:
        raise AuthStartError("Phone or email is required")

    if phone:
        phone = normalize_phone(phone)

    user = None
    if phone:
        user = User.objects.filter(phone=phone).first()
    if user is None and email:
        user = User.objects.filter(email__iexact=email).first()

    if user is not None:
        if phone and not user.phone:
            user.phone = phone
            user.save(update_fields=['phone'])
        return user, False

    try:
        user = User.objects.create_user(
            email=email,
            name=name,
            phone=phone,
        )
    except IntegrityError:
        raise AuthStartError("An account with these details already exists")

    logger.info("Created user %s via auth start", user.id)
    return user, True
