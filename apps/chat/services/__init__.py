"""Chat ordering services."""

from apps.chat.parser import UnrecognizedDrinkError

from .message_parsing import parse_message

__all__ = [
    'UnrecognizedDrinkError',
    'parse_message',
]
