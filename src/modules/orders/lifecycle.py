"""Order lifecycle: the status values an order may hold.

An order starts as ``Pending`` and can be moved to ``Delivered`` or
``Cancelled``, or back again; every pair of statuses is a valid
transition.  What is enforced is the vocabulary: a requested status
must be exactly one of the three literal strings.
"""

from __future__ import annotations

from typing import Any

from modules.orders.constants import VALID_TRANSITIONS, OrderStatus
from modules.orders.exceptions import InvalidOrderStatus


def resolve_status(value: Any) -> OrderStatus:
    """Return the ``OrderStatus`` named exactly (case-sensitively) by *value*.

    Raises:
        InvalidOrderStatus: *value* is not one of the three status strings.
    """
    if not isinstance(value, str) or value not in OrderStatus.values:
        raise InvalidOrderStatus(f"Invalid status: {value!r}.")
    return OrderStatus(value)


def can_transition(current: str, target: str) -> bool:
    """Check whether an order in *current* may move to *target*."""
    return target in VALID_TRANSITIONS.get(current, set())
