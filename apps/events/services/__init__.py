"""
Events services.
"""

from .exceptions import (
    EventsServiceError,
    EventNotFoundError,
    AlreadyCheckedInError,
)
from .check_in import (
    get_event_by_qr,
    check_in,
)

__all__ = [
    # Exceptions
    'EventsServiceError',
    'EventNotFoundError',
    'AlreadyCheckedInError',

    # Check-in
    'get_event_by_qr',
    'check_in',
]
