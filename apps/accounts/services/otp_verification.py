"""
Phone verification with one-time codes.

SMS delivery is an external collaborator; here the code is handed to the
log at DEBUG level.
"""

import logging
import re
import secrets
from datetime import timedelta

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import transaction
from django.utils import timezone

from apps.accounts.models import OtpCode
from .exceptions import (
    InvalidPhoneError,
    OtpNotRequestedError,
    OtpExpiredError,
    OtpMismatchError,
)

logger = logging.getLogger(__name__)

User = get_user_model()

MIN_PHONE_DIGITS = 9


def normalize_phone(phone: str) -> str:
    """Strip separators; keep a leading '+'."""
    phone = (phone or '').strip()
    prefix = '+' if phone.startswith('+') else ''
    digits = re.sub(r'\D', '', phone)
    if len(digits) < MIN_PHONE_DIGITS:
        raise InvalidPhoneError("Invalid phone number")
    return prefix + digits


def generate_otp() -> str:
    """Four-digit code in the range 1000-9999."""
    return str(1000 + secrets.randbelow(9000))


@transaction.atomic
def send_otp(*, phone: str) -> OtpCode:
    """
    Generate and store a verification code for a phone number.

    A new request replaces any previous code for the same phone.

    Raises:
        InvalidPhoneError: If the phone number is too short
    """
    phone = normalize_phone(phone)
    otp, _ = OtpCode.objects.update_or_create(
        phone=phone,
        defaults={
            'code': generate_otp(),
            'expires_at': timezone.now() + timedelta(seconds=settings.OTP_TTL_SECONDS),
        },
    )

    logger.debug("OTP for %s: %s", phone, otp.code)
    logger.info("Sent verification code to %s", phone)
    return otp


@transaction.atomic
def verify_otp(*, phone: str, code: str):
    """
    Check a verification code and mark the phone's user as verified.

    The code is consumed on success. A client user is created if no
    account holds the phone yet.

    Returns:
        Verified User instance

    Raises:
        InvalidPhoneError: If the phone number is malformed
        OtpNotRequestedError: If no code was generated for the phone
        OtpExpiredError: If the code has expired
        OtpMismatchError: If the code is wrong
    """
    phone = normalize_phone(phone)

    try:
        otp = OtpCode.objects.select_for_update().get(phone=phone)
    except OtpCode.DoesNotExist:
        raise OtpNotRequestedError("No code was generated for this number")

    if timezone.now() > otp.expires_at:
        raise OtpExpiredError("The code has expired. Please request a new one")

    if otp.code != code:
        raise OtpMismatchError("Incorrect code")

    otp.delete()

    created = False
    try:
        user = User.objects.select_for_update().get(phone=phone)
    except User.DoesNotExist:
        user = User.objects.create_user(phone=phone)
        created = True

    if not user.verified:
        user.verified = True
        user.save(update_fields=['verified'])

    logger.info("Verified phone for user %s (new=%s)", user.id, created)
    return user
