"""
Custom exceptions for events services.
"""


class EventsServiceError(Exception):
    """Base exception for events service errors."""
    pass


class EventNotFoundError(EventsServiceError):
    """Raised when no active event matches a QR code."""
    pass


class AlreadyCheckedInError(EventsServiceError):
    """Raised when a user checks in to the same event twice."""
    pass
