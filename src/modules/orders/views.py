"""Order API views.

Exposes the ``OrderService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into HTTP status codes;
storage failures reach the project exception handler as 500s.
"""

from __future__ import annotations

import structlog
from django.conf import settings
from django_filters.rest_framework import DjangoFilterBackend
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.exceptions import storage_errors, validation_message
from modules.core.payload import request_payload
from modules.orders.dtos import SaveOrderDTO
from modules.orders.exceptions import InvalidOrderStatus, OrderNotFound
from modules.orders.filters import OrderFilter
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.serializers import OrderSerializer
from modules.orders.services import OrderService

logger = structlog.get_logger(__name__)

REQUIRED_FIELDS_MESSAGE = "Shop and items are required"


class OrderViewSet(GenericViewSet):
    """ViewSet for Order operations.

    Uses ``OrderService`` with an injected repository (DIP).
    Does **not** extend ``ModelViewSet``; all ORM access goes through
    the service/repository layer.
    """

    serializer_class = OrderSerializer
    filterset_class = OrderFilter
    filter_backends = [DjangoFilterBackend]

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = OrderService(
            order_repository=OrderDjangoRepository(),
            amount_precision=settings.ORDER_AMOUNT_PRECISION,
        )

    def get_queryset(self):
        return self._service.list_orders()

    # ------------------------------------------------------------------
    # Create / Replace
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/orders"""
        try:
            dto = self._save_order_dto(request)
        except PydanticValidationError as exc:
            return self._invalid_order(exc)

        order = self._service.create_order(dto)
        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/orders/{pk}

        Replaces shop fields and items; the status is kept.
        """
        try:
            dto = self._save_order_dto(request)
        except PydanticValidationError as exc:
            return self._invalid_order(exc)

        try:
            order = self._service.replace_order(str(pk), dto)
        except OrderNotFound:
            return Response(
                {"message": "Order not found"},
                status=status.HTTP_404_NOT_FOUND,
            )
        return Response(OrderSerializer(order).data)

    @staticmethod
    def _save_order_dto(request: Request) -> SaveOrderDTO:
        data = request_payload(request)
        return SaveOrderDTO(
            shop_id=data.get("shopId"),
            shop_name=data.get("shopName"),
            items=data.get("items"),
        )

    @staticmethod
    def _invalid_order(exc: PydanticValidationError) -> Response:
        logger.warning("order.invalid_payload", errors=exc.error_count())
        return Response(
            {"message": validation_message(exc, REQUIRED_FIELDS_MESSAGE)},
            status=status.HTTP_400_BAD_REQUEST,
        )

    # ------------------------------------------------------------------
    # List
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/orders?shopId=&status=

        Both filters are optional equality matches; newest orders first.
        """
        with storage_errors("Error fetching orders"):
            orders = list(self.filter_queryset(self.get_queryset()))
        return Response(OrderSerializer(orders, many=True).data)

    # ------------------------------------------------------------------
    # Status Update
    # ------------------------------------------------------------------

    @action(detail=True, methods=["patch"], url_path="status")
    def change_status(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/orders/{pk}/status"""
        data = request_payload(request)

        try:
            order = self._service.update_status(str(pk), data.get("status"))
        except InvalidOrderStatus:
            return Response(
                {"message": "Invalid status"},
                status=status.HTTP_400_BAD_REQUEST,
            )
        except OrderNotFound:
            return Response(
                {"message": "Order not found"},
                status=status.HTTP_404_NOT_FOUND,
            )
        return Response(OrderSerializer(order).data)

    # ------------------------------------------------------------------
    # Destroy
    # ------------------------------------------------------------------

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/orders/{pk}"""
        deleted = self._service.delete_order(str(pk).strip())
        if not deleted:
            return Response(
                {"message": "Order not found or already deleted", "deletedCount": 0},
                status=status.HTTP_404_NOT_FOUND,
            )
        return Response({"message": "Order deleted", "deletedCount": deleted})
