"""Order and OrderItem models.

Rules implemented:
- ``status`` only ever holds Pending, Delivered or Cancelled (model
  choices + ``modules.orders.lifecycle``).
- Line items belong to exactly one order: they are written and
  replaced together with it and removed with it (CASCADE).  They have
  no route of their own.
- ``OrderItem.position`` keeps submission order.
- Amounts are floats computed by ``modules.orders.pricing`` before the
  rows are written; the models never recompute them.
- ``shop_name`` and ``product_name`` are snapshots taken from the
  request, so history stays stable if the source record changes.
- ``shop`` is a reference without a database constraint, and
  ``product_id`` is plain text: neither is checked against stored
  records.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel
from modules.orders.constants import INITIAL_STATUS, OrderStatus
from modules.orders.lifecycle import can_transition


class Order(BaseModel):
    """Order aggregate root."""

    shop: models.ForeignKey = models.ForeignKey(
        "shops.Shop",
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name="orders",
    )
    shop_name: models.TextField = models.TextField(  # noqa: DJ01
        null=True,
        blank=True,
        default=None,
    )
    total_amount: models.FloatField = models.FloatField(default=0.0)
    status: models.CharField = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=INITIAL_STATUS,
    )

    class Meta:
        db_table = "orders"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status"], name="orders_status_idx"),
            models.Index(
                fields=["shop", "-created_at"], name="orders_shop_created_idx"
            ),
            models.Index(fields=["-created_at"], name="orders_created_idx"),
        ]

    def can_transition_to(self, new_status: str) -> bool:
        """Check whether transitioning to *new_status* is valid."""
        return can_transition(self.status, new_status)

    def __str__(self) -> str:
        return f"Order {self.id} ({self.status})"


class OrderItem(models.Model):
    """Line item embedded in an Order.

    ``line_total`` is ``price * qty`` as computed when the order was last
    submitted in full.
    """

    order: models.ForeignKey = models.ForeignKey(
        "orders.Order",
        on_delete=models.CASCADE,
        related_name="items",
    )
    position: models.PositiveIntegerField = models.PositiveIntegerField()
    product_id: models.TextField = models.TextField(  # noqa: DJ01
        null=True, blank=True, default=None
    )
    product_name: models.TextField = models.TextField(  # noqa: DJ01
        null=True, blank=True, default=None
    )
    mrp: models.FloatField = models.FloatField(default=0.0)
    price: models.FloatField = models.FloatField(default=0.0)
    qty: models.FloatField = models.FloatField(default=1.0)
    line_total: models.FloatField = models.FloatField(default=0.0)
    note: models.TextField = models.TextField(blank=True, default="")

    class Meta:
        db_table = "order_items"
        ordering = ["position"]
        constraints = [
            models.UniqueConstraint(
                fields=["order", "position"],
                name="order_items_order_position_uniq",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.product_name or 'item'} x{self.qty} ({self.line_total})"
