"""Product DRF serializers for API output.

Input is validated by ``CreateProductDTO``; these serializers only
shape responses.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    salePrice = serializers.FloatField(source="sale_price", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Product
        fields = ["id", "name", "mrp", "price", "salePrice", "createdAt"]
        read_only_fields = fields
