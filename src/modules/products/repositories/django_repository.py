"""Django ORM implementation of the Product repository."""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.db import models

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def list(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> "models.QuerySet[Product]":
        """List products sorted by name ascending.

        Examples of valid filters::

            {"name": "Basmati Rice 5kg"}
        """
        queryset = Product.objects.order_by("name", "created_at")
        if filters:
            queryset = queryset.filter(**filters)
        return queryset

    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        logger.info("product.saved", product_id=str(entity.id), name=entity.name)
        return entity
