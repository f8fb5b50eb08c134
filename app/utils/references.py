import random
import secrets
import string
from typing import Callable, Optional

from app.core.config import settings

BOOKING_NUMBER_LENGTH = 8


def generate_booking_number(
    exists: Optional[Callable[[str], bool]] = None,
    prefix: Optional[str] = None,
) -> str:
    """
    Generate a 'SKP-XXXXXXXX' booking reference.

    `exists` lets the caller's store reject collisions; without it the first
    candidate is returned.
    """
    prefix = prefix or settings.BOOKING_NUMBER_PREFIX
    chars = string.ascii_uppercase + string.digits
    while True:
        number = f"{prefix}-" + "".join(random.choices(chars, k=BOOKING_NUMBER_LENGTH))
        if exists is None or not exists(number):
            return number


def generate_ticket_number(year: int, sequence: int, prefix: Optional[str] = None) -> str:
    """SKP-2025-000001"""
    prefix = prefix or settings.BOOKING_NUMBER_PREFIX
    return f"{prefix}-{year}-{sequence:06d}"


def generate_qr_token() -> str:
    return secrets.token_urlsafe(24)
