"""
Order status state machine.

Pure functions over status values; no database access.
"""

from .models import OrderStatus

PENDING = OrderStatus.PENDING.value
PREPARING = OrderStatus.PREPARING.value
READY = OrderStatus.READY.value
PICKED = OrderStatus.PICKED.value
CANCELLED = OrderStatus.CANCELLED.value

ALLOWED_TRANSITIONS = {
    PENDING: frozenset({PREPARING, CANCELLED}),
    PREPARING: frozenset({READY, CANCELLED}),
    READY: frozenset({PICKED, CANCELLED}),
    PICKED: frozenset(),
    CANCELLED: frozenset(),
}

TERMINAL_STATUSES = frozenset(
    status for status, targets in ALLOWED_TRANSITIONS.items() if not targets
)


def is_terminal(status) -> bool:
    return str(status) in TERMINAL_STATUSES


def can_transition(from_status, to_status) -> bool:
    """True if ``to_status`` is directly reachable from ``from_status``."""
    return str(to_status) in ALLOWED_TRANSITIONS.get(str(from_status), frozenset())


def allowed_targets(from_status):
    """Statuses reachable in one step, in declaration order."""
    targets = ALLOWED_TRANSITIONS.get(str(from_status), frozenset())
    return [status for status in OrderStatus.values if status in targets]
