"""Shop DRF serializers (output only; input goes through ``CreateShopDTO``)."""

from __future__ import annotations

from rest_framework import serializers

from modules.shops.models import Shop


class ShopSerializer(serializers.ModelSerializer):
    """Read serializer for the Shop resource."""

    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Shop
        fields = ["id", "name", "createdAt"]
        read_only_fields = fields
