import pytest

from modules.shops.models import Shop

pytestmark = pytest.mark.integration

URL = "/api/shops"


class TestShopAPI:
    def test_create_shop(self, api_client):
        response = api_client.post(URL, {"name": "  New Anand Traders "}, format="json")

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "New Anand Traders"
        assert "id" in data
        assert "createdAt" in data
        assert Shop.objects.filter(id=data["id"]).exists()

    @pytest.mark.parametrize(
        "payload", [{}, {"name": ""}, {"name": "   "}, {"name": 7}]
    )
    def test_create_shop_requires_name(self, api_client, payload):
        response = api_client.post(URL, payload, format="json")

        assert response.status_code == 400
        assert response.json() == {"message": "Shop name is required"}
        assert Shop.objects.count() == 0

    def test_list_shops_sorted_by_name(self, api_client):
        Shop.objects.create(name="Gupta Kirana")
        Shop.objects.create(name="Anand Traders")

        response = api_client.get(URL)

        assert response.status_code == 200
        assert [s["name"] for s in response.json()] == ["Anand Traders", "Gupta Kirana"]

    def test_list_shops_is_a_plain_array(self, api_client, shop):
        response = api_client.get(URL)

        data = response.json()
        assert isinstance(data, list)
        assert data[0] == {
            "id": str(shop.id),
            "name": shop.name,
            "createdAt": data[0]["createdAt"],
        }

    def test_long_name_is_stored_in_full(self, api_client):
        long_name = "Anand " * 60
        response = api_client.post(URL, {"name": long_name}, format="json")

        assert response.status_code == 201
        assert Shop.objects.get().name == long_name.strip()

    def test_name_column_has_no_length_limit(self):
        assert Shop._meta.get_field("name").max_length is None
