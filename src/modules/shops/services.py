"""Shop service layer (Use Cases)."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog

from modules.core.exceptions import storage_errors
from modules.shops.models import Shop

if TYPE_CHECKING:
    from modules.shops.dtos import CreateShopDTO
    from modules.shops.repositories.interfaces import IShopRepository

logger = structlog.get_logger(__name__)


class ShopService:
    """Application service for Shop use-cases.

    Receives an ``IShopRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IShopRepository) -> None:
        self._repo = repository

    def create_shop(self, dto: CreateShopDTO) -> Shop:
        with storage_errors("Error creating shop"):
            shop = self._repo.save(Shop(name=dto.name))
        logger.info("shop.created", shop_id=str(shop.id))
        return shop

    def list_shops(self) -> List[Shop]:
        """Return every shop, sorted by name."""
        with storage_errors("Error fetching shops"):
            return list(self._repo.list())
