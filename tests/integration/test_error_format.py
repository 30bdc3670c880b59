"""Every API error body carries a single ``message`` field."""

import logging
from unittest.mock import patch

import pytest
from django.db import DatabaseError

from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.shops.repositories.django_repository import ShopDjangoRepository

pytestmark = pytest.mark.integration


class TestClientErrors:
    def test_malformed_json_returns_message(self, api_client):
        response = api_client.post(
            "/api/orders", data="{not json", content_type="application/json"
        )

        assert response.status_code == 400
        assert set(response.json()) == {"message"}

    def test_method_not_allowed_returns_message(self, api_client):
        response = api_client.delete("/api/shops")

        assert response.status_code == 405
        assert set(response.json()) == {"message"}

    def test_filter_error_is_flattened(self, api_client):
        response = api_client.get("/api/orders", {"shopId": "nope"})

        assert response.status_code == 400
        assert response.json()["message"].startswith("shopId:")


class TestStorageFailures:
    def test_listing_orders_fails_with_500(self, api_client):
        with patch.object(
            OrderDjangoRepository,
            "list",
            side_effect=DatabaseError("could not connect to db.internal:5432"),
        ):
            response = api_client.get("/api/orders")

        assert response.status_code == 500
        assert response.json() == {"message": "Error fetching orders"}

    def test_creating_order_fails_with_500(self, api_client, shop):
        with patch.object(
            OrderDjangoRepository, "create", side_effect=DatabaseError("disk full")
        ):
            response = api_client.post(
                "/api/orders",
                {"shopId": str(shop.id), "items": [{}]},
                format="json",
            )

        assert response.status_code == 500
        assert response.json() == {"message": "Error creating order"}
        assert "disk full" not in response.content.decode()

    def test_status_update_fails_with_500(self, api_client):
        with patch.object(
            OrderDjangoRepository, "get_by_id", side_effect=DatabaseError("gone")
        ):
            response = api_client.patch(
                "/api/orders/0190a1b2-0000-7000-8000-000000000001/status",
                {"status": "Delivered"},
                format="json",
            )

        assert response.status_code == 500
        assert response.json() == {"message": "Error updating status"}

    def test_deleting_order_fails_with_500(self, api_client):
        with patch.object(
            OrderDjangoRepository, "delete", side_effect=DatabaseError("gone")
        ):
            response = api_client.delete(
                "/api/orders/0190a1b2-0000-7000-8000-000000000001"
            )

        assert response.status_code == 500
        assert response.json() == {"message": "Error deleting order"}

    def test_listing_shops_fails_with_500(self, api_client):
        with patch.object(
            ShopDjangoRepository, "list", side_effect=DatabaseError("gone")
        ):
            response = api_client.get("/api/shops")

        assert response.status_code == 500
        assert response.json() == {"message": "Error fetching shops"}

    def test_storage_failure_is_logged(self, api_client, caplog):
        with caplog.at_level(logging.ERROR):
            with patch.object(
                ShopDjangoRepository, "list", side_effect=DatabaseError("gone")
            ):
                api_client.get("/api/shops")

        assert any("storage.failure" in r.getMessage() for r in caplog.records)
