"""Shop repository interface."""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.shops.models import Shop  # noqa: F401


class IShopRepository(IRepository["Shop"]):
    """Repository contract for shops."""
