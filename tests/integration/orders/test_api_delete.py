"""Integration tests for DELETE /api/orders/{id}."""

from uuid import uuid4

import pytest

from modules.orders.models import Order, OrderItem

pytestmark = pytest.mark.integration


@pytest.fixture()
def order_id(api_client, shop):
    response = api_client.post(
        "/api/orders",
        {"shopId": str(shop.id), "items": [{"price": 3}, {"price": 4}]},
        format="json",
    )
    return response.json()["id"]


class TestDeleteOrder:
    def test_delete_order(self, api_client, order_id):
        response = api_client.delete(f"/api/orders/{order_id}")

        assert response.status_code == 200
        assert response.json() == {"message": "Order deleted", "deletedCount": 1}
        assert not Order.objects.filter(id=order_id).exists()
        assert not OrderItem.objects.filter(order_id=order_id).exists()

    def test_second_delete_returns_404(self, api_client, order_id):
        api_client.delete(f"/api/orders/{order_id}")

        response = api_client.delete(f"/api/orders/{order_id}")

        assert response.status_code == 404
        assert response.json() == {
            "message": "Order not found or already deleted",
            "deletedCount": 0,
        }

    @pytest.mark.parametrize("order_ref", [str(uuid4()), "not-an-id"])
    def test_delete_unknown_order_returns_404(self, api_client, order_ref):
        response = api_client.delete(f"/api/orders/{order_ref}")

        assert response.status_code == 404
        assert response.json()["deletedCount"] == 0

    def test_deleted_order_disappears_from_listing(self, api_client, order_id):
        api_client.delete(f"/api/orders/{order_id}")

        response = api_client.get("/api/orders")

        assert response.json() == []
