"""Product API views.

Exposes the ``ProductService`` via HTTP using DRF ViewSets.
Validation failures become 400 responses; storage failures surface
through the project exception handler as 500.
"""

from __future__ import annotations

import structlog
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.exceptions import validation_message
from modules.core.payload import request_payload
from modules.products.dtos import CreateProductDTO
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService

logger = structlog.get_logger(__name__)

REQUIRED_FIELDS_MESSAGE = "Name and MRP are required"


class ProductViewSet(GenericViewSet):
    """List and create products."""

    serializer_class = ProductSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    def list(self, request: Request) -> Response:
        """GET /api/products"""
        products = self._service.list_products()
        return Response(ProductSerializer(products, many=True).data)

    def create(self, request: Request) -> Response:
        """POST /api/products"""
        data = request_payload(request)

        if not data.get("name") or data.get("mrp") is None:
            return Response(
                {"message": REQUIRED_FIELDS_MESSAGE},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            dto = CreateProductDTO(
                name=data["name"],
                mrp=data["mrp"],
                price=data.get("price"),
                sale_price=data.get("salePrice"),
            )
        except PydanticValidationError as exc:
            logger.warning("product.invalid_payload", errors=exc.error_count())
            return Response(
                {"message": validation_message(exc, "Invalid product data")},
                status=status.HTTP_400_BAD_REQUEST,
            )

        product = self._service.create_product(dto)
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)
