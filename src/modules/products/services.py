"""Product service layer (Use Cases).

Orchestrates business logic for the Product catalogue, delegating
persistence to the injected ``IProductRepository``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog

from modules.core.exceptions import storage_errors
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    def create_product(self, dto: CreateProductDTO) -> Product:
        """Create a new product.  Both optional sale prices are kept as given."""
        product = Product(
            name=dto.name,
            mrp=dto.mrp,
            price=dto.price,
            sale_price=dto.sale_price,
        )
        with storage_errors("Error creating product"):
            product = self._repo.save(product)
        logger.info("product.created", product_id=str(product.id))
        return product

    def list_products(self) -> List[Product]:
        """Return every product, sorted by name."""
        with storage_errors("Error fetching products"):
            return list(self._repo.list())
