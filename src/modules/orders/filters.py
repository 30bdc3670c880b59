import django_filters

from modules.orders.models import Order


class OrderFilter(django_filters.FilterSet):
    """Equality filters for ``GET /api/orders``; blank values are ignored."""

    shopId = django_filters.UUIDFilter(field_name="shop_id")
    status = django_filters.CharFilter(field_name="status", lookup_expr="exact")

    class Meta:
        model = Order
        fields = ["shopId", "status"]
