"""Order service layer (Use Cases).

Orchestrates order creation, full replacement, status changes and
deletion.  Pricing is delegated to the pure functions in
``modules.orders.pricing`` and status validation to
``modules.orders.lifecycle``; this layer adds persistence, logging and
error translation.

Rules enforced:
- New orders start as Pending.
- A full replace renormalizes items and total but never touches status.
- A status change accepts only Pending / Delivered / Cancelled, from any
  current status.
- Record-store failures surface as ``StorageError``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

import structlog

from modules.core.exceptions import storage_errors
from modules.orders.exceptions import InvalidOrderStatus, OrderNotFound
from modules.orders.lifecycle import resolve_status
from modules.orders.pricing import price_line_items

if TYPE_CHECKING:
    from django.db import models

    from modules.orders.dtos import PricedItems, SaveOrderDTO
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderService:
    """Application service for Order use-cases.

    Receives the repository via constructor injection (DIP).
    ``amount_precision`` is handed to the pricing functions; ``None``
    keeps amounts unrounded.
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        amount_precision: Optional[int] = None,
    ) -> None:
        self._order_repo = order_repository
        self._precision = amount_precision

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_order(self, dto: SaveOrderDTO) -> Order:
        """Normalize the line items, total them and store a Pending order."""
        priced = price_line_items(dto.items, self._precision)
        log = logger.bind(shop_id=str(dto.shop_id), item_count=len(priced.items))

        with storage_errors("Error creating order"):
            order = self._order_repo.create(self._order_fields(dto, priced))

        log.info(
            "order.created",
            order_id=str(order.id),
            total_amount=priced.total_amount,
        )
        return order

    def replace_order(self, order_id: str, dto: SaveOrderDTO) -> Order:
        """Replace shop fields and items of an existing order.

        Raises:
            OrderNotFound: order does not exist.
        """
        priced = price_line_items(dto.items, self._precision)

        with storage_errors("Error updating order"):
            order = self._order_repo.replace(
                order_id, self._order_fields(dto, priced)
            )
        if not order:
            raise OrderNotFound(f"Order {order_id} not found.")

        logger.info(
            "order.replaced",
            order_id=str(order_id),
            item_count=len(priced.items),
            total_amount=priced.total_amount,
            status=order.status,
        )
        return order

    def update_status(self, order_id: str, new_status: Any) -> Order:
        """Move an order to *new_status*.

        The value is checked before anything is read or written.

        Raises:
            InvalidOrderStatus: *new_status* is not a known status.
            OrderNotFound: order does not exist.
        """
        log = logger.bind(order_id=str(order_id), new_status=new_status)
        try:
            target = resolve_status(new_status)
        except InvalidOrderStatus:
            log.warning("order.invalid_status")
            raise

        with storage_errors("Error updating status"):
            current = self._order_repo.get_by_id(order_id)
            if not current:
                raise OrderNotFound(f"Order {order_id} not found.")
            # Never true with the shipped table; see VALID_TRANSITIONS.
            if not current.can_transition_to(target):
                log.warning("order.invalid_transition", current_status=current.status)
                raise InvalidOrderStatus(
                    f"Cannot transition from {current.status} to {target}."
                )
            order = self._order_repo.update_status(order_id, target)

        if not order:
            raise OrderNotFound(f"Order {order_id} not found.")

        log.info("order.status_updated", old_status=current.status)
        return order

    def delete_order(self, order_id: str) -> int:
        """Hard-delete an order; return how many orders were removed."""
        with storage_errors("Error deleting order"):
            deleted = self._order_repo.delete(order_id)
        logger.info("order.deleted", order_id=str(order_id), deleted_count=deleted)
        return deleted

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_orders(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> "models.QuerySet[Order]":
        """Return a lazy queryset of orders, newest first.

        Callers evaluate it inside ``storage_errors`` themselves.
        """
        return self._order_repo.list(filters)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _order_fields(dto: SaveOrderDTO, priced: PricedItems) -> Dict[str, Any]:
        return {
            "shop_id": dto.shop_id,
            "shop_name": dto.shop_name,
            "items": priced.items,
            "total_amount": priced.total_amount,
        }
