"""Django ORM implementation of the Shop repository."""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.db import models

from modules.shops.models import Shop
from modules.shops.repositories.interfaces import IShopRepository

logger = structlog.get_logger(__name__)


class ShopDjangoRepository(IShopRepository):
    """Concrete Shop repository backed by Django ORM."""

    def list(self, filters: Optional[Dict[str, Any]] = None) -> "models.QuerySet[Shop]":
        """List shops sorted by name ascending."""
        queryset = Shop.objects.order_by("name", "created_at")
        if filters:
            queryset = queryset.filter(**filters)
        return queryset

    def save(self, entity: Shop) -> Shop:
        entity.save()
        logger.info("shop.saved", shop_id=str(entity.id))
        return entity
