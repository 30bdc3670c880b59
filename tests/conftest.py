import pytest

from rest_framework.test import APIClient

from modules.products.models import Product
from modules.shops.models import Shop


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def shop():
    """A persisted Shop."""
    return Shop.objects.create(name="Sharma General Store")


@pytest.fixture()
def other_shop():
    """A second persisted Shop."""
    return Shop.objects.create(name="Gupta Kirana")


@pytest.fixture()
def product():
    """A persisted Product with list and sale price."""
    return Product.objects.create(name="Toor Dal 1kg", mrp=180.0, price=165.0)
