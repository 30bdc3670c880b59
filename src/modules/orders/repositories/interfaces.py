"""Order repository interface.

Extends ``IRepository[Order]`` with the writes the Order aggregate
needs: creation with its line items, full replacement, status change
and hard deletion.

The Service Layer depends exclusively on this contract (DIP).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.models import Order


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate root.

    The aggregate includes its OrderItem rows; writes touching items
    must replace them as a whole.
    """

    @abstractmethod
    def create(self, data: Dict[str, Any]) -> Order:
        """Create an order with its items.

        ``data`` must include ``shop_id``, ``shop_name``, ``items`` (a list
        of ``OrderLineItem``) and ``total_amount``.
        """

    @abstractmethod
    def replace(self, id: str, data: Dict[str, Any]) -> Optional[Order]:
        """Overwrite shop fields, items and total; leave ``status`` alone.

        Returns ``None`` when no order has that ID.
        """

    @abstractmethod
    def update_status(self, id: str, status: str) -> Optional[Order]:
        """Set the status of an order; ``None`` when no order has that ID."""

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[Order]:
        """Retrieve an order with its items prefetched."""

    @abstractmethod
    def delete(self, id: str) -> int:
        """Hard-delete an order; return how many orders were removed (0 or 1)."""
