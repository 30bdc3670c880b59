"""Order domain constants.

Defines the status choices and the transition table used by the
order lifecycle (see ``modules.orders.lifecycle``).
"""

from django.db import models


class OrderStatus(models.TextChoices):
    PENDING = "Pending", "Pending"
    DELIVERED = "Delivered", "Delivered"
    CANCELLED = "Cancelled", "Cancelled"


INITIAL_STATUS: str = OrderStatus.PENDING

# Fully connected: operators may move an order from any status to any
# other, including Delivered back to Pending.  This table is the single
# place to restrict moves; OrderService.update_status rejects any pair
# missing from it.
VALID_TRANSITIONS: dict[str, set[str]] = {
    current: set(OrderStatus.values) for current in OrderStatus.values
}

# Line-item defaults applied when a client value has no usable numeric reading.
DEFAULT_QUANTITY = 1.0
DEFAULT_PRICE = 0.0
DEFAULT_MRP = 0.0
