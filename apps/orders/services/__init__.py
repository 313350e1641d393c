"""
Order ledger services.

Services contain business logic and orchestrate operations across models.
All state-changing operations use transactions and concurrency protection.
"""

from .exceptions import (
    OrdersServiceError,
    OrderNotFoundError,
    InvalidTransitionError,
    CodeMismatchError,
    OrderNotReadyError,
    PickupCodeExhaustedError,
)

from .order_lifecycle import (
    create_order,
    transition_order,
    get_order,
    list_orders,
)

from .pickup_codes import (
    generate_pickup_code,
    verify_pickup_code,
)


__all__ = [
    # Exceptions
    'OrdersServiceError',
    'OrderNotFoundError',
    'InvalidTransitionError',
    'CodeMismatchError',
    'OrderNotReadyError',
    'PickupCodeExhaustedError',

    # Lifecycle
    'create_order',
    'transition_order',
    'get_order',
    'list_orders',

    # Pickup
    'generate_pickup_code',
    'verify_pickup_code',
]
