"""Shop API views.

Exposes the ``ShopService`` via HTTP using DRF ViewSets.
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
from modules.shops.dtos import CreateShopDTO
from modules.shops.repositories.django_repository import ShopDjangoRepository
from modules.shops.serializers import ShopSerializer
from modules.shops.services import ShopService

logger = structlog.get_logger(__name__)


class ShopViewSet(GenericViewSet):
    """List and create shops."""

    serializer_class = ShopSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ShopService(repository=ShopDjangoRepository())

    def list(self, request: Request) -> Response:
        """GET /api/shops"""
        shops = self._service.list_shops()
        return Response(ShopSerializer(shops, many=True).data)

    def create(self, request: Request) -> Response:
        """POST /api/shops"""
        data = request_payload(request)

        try:
            dto = CreateShopDTO(name=data.get("name") or "")
        except PydanticValidationError as exc:
            logger.warning("shop.invalid_payload", errors=exc.error_count())
            return Response(
                {"message": validation_message(exc, "Shop name is required")},
                status=status.HTTP_400_BAD_REQUEST,
            )

        shop = self._service.create_shop(dto)
        return Response(ShopSerializer(shop).data, status=status.HTTP_201_CREATED)
