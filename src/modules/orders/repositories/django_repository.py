"""Django ORM implementation of the Order repository.

Satisfies ``IOrderRepository`` using Django's QuerySet API.  Writes that
touch line items run in ``transaction.atomic()`` so an order and its
items are never stored half-replaced.

No row locks are taken: two requests writing the same order are not
serialized, and the last write wins.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import models, transaction
from django.utils import timezone

from modules.orders.dtos import OrderLineItem
from modules.orders.models import Order, OrderItem
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    # ------------------------------------------------------------------
    # Create / Replace
    # ------------------------------------------------------------------

    @transaction.atomic
    def create(self, data: Dict[str, Any]) -> Order:
        """Create an order with its items atomically."""
        order = Order(
            shop_id=data["shop_id"],
            shop_name=data.get("shop_name"),
            total_amount=data["total_amount"],
        )
        order.save()
        self._write_items(order, data["items"])

        logger.info(
            "order.persisted", order_id=str(order.id), item_count=len(data["items"])
        )
        return self.get_by_id(str(order.id)) or order

    @transaction.atomic
    def replace(self, id: str, data: Dict[str, Any]) -> Optional[Order]:
        """Swap shop fields, items and total in one transaction."""
        order = self.get_by_id(id)
        if not order:
            return None

        order.shop_id = data["shop_id"]
        order.shop_name = data.get("shop_name")
        order.total_amount = data["total_amount"]
        order.save(update_fields=["shop", "shop_name", "total_amount"])

        order.items.all().delete()
        self._write_items(order, data["items"])

        logger.info(
            "order.items_replaced", order_id=str(id), item_count=len(data["items"])
        )
        return self.get_by_id(id)

    @staticmethod
    def _write_items(order: Order, items: Iterable[OrderLineItem]) -> None:
        OrderItem.objects.bulk_create(
            [
                OrderItem(order=order, position=position, **item.model_dump())
                for position, item in enumerate(items)
            ]
        )

    # ------------------------------------------------------------------
    # Update
    # ------------------------------------------------------------------

    def update_status(self, id: str, status: str) -> Optional[Order]:
        """Write ``status`` with a single UPDATE (no read-modify-write)."""
        try:
            updated = Order.objects.filter(id=id).update(
                status=status, updated_at=timezone.now()
            )
        except (ValueError, ValidationError):
            return None
        if not updated:
            return None
        return self.get_by_id(id)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_by_id(self, id: str) -> Optional[Order]:
        """Retrieve an order with its items prefetched in one extra query.

        Returns ``None`` for non-existent or malformed IDs.
        """
        try:
            return Order.objects.prefetch_related("items").filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> "models.QuerySet[Order]":
        """List orders newest first, items prefetched.

        Supported filter keys:
        - ``shop_id``
        - ``status``
        """
        queryset = Order.objects.prefetch_related("items").order_by(
            "-created_at", "-id"
        )
        if filters:
            queryset = queryset.filter(**filters)
        return queryset

    # ------------------------------------------------------------------
    # Save / Delete
    # ------------------------------------------------------------------

    def save(self, entity: Order) -> Order:
        """Persist (create or update) the order row only."""
        entity.save()
        logger.info("order.saved", order_id=str(entity.id))
        return entity

    @transaction.atomic
    def delete(self, id: str) -> int:
        """Hard-delete an order; its items go with it."""
        try:
            queryset = Order.objects.filter(id=id)
        except (ValueError, ValidationError):
            return 0
        _, per_model = queryset.delete()
        deleted = per_model.get(Order._meta.label, 0)
        logger.info("order.removed", order_id=str(id), deleted_count=deleted)
        return deleted
