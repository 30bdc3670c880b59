"""Order DRF serializers for API output.

Request bodies are validated by ``SaveOrderDTO`` and normalized by
``modules.orders.pricing``; these serializers only shape responses,
using the camelCase keys clients expect.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.orders.models import Order, OrderItem


class OrderItemSerializer(serializers.ModelSerializer):
    """Read serializer for an embedded line item."""

    productId = serializers.CharField(source="product_id", read_only=True)
    productName = serializers.CharField(source="product_name", read_only=True)
    lineTotal = serializers.FloatField(source="line_total", read_only=True)

    class Meta:
        model = OrderItem
        fields = [
            "productId",
            "productName",
            "mrp",
            "price",
            "qty",
            "lineTotal",
            "note",
        ]
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    """Read serializer for orders with their line items in submission order."""

    shopId = serializers.UUIDField(source="shop_id", read_only=True)
    shopName = serializers.CharField(source="shop_name", read_only=True)
    items = OrderItemSerializer(many=True, read_only=True)
    totalAmount = serializers.FloatField(source="total_amount", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "shopId",
            "shopName",
            "items",
            "totalAmount",
            "status",
            "createdAt",
        ]
        read_only_fields = fields
