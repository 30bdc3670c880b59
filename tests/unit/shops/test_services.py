from __future__ import annotations

from unittest.mock import patch

import pytest
from django.db import DatabaseError
from pydantic import ValidationError

from modules.core.exceptions import StorageError
from modules.shops.dtos import CreateShopDTO
from modules.shops.models import Shop
from modules.shops.repositories.django_repository import ShopDjangoRepository
from modules.shops.services import ShopService

pytestmark = pytest.mark.unit


@pytest.fixture()
def service():
    return ShopService(repository=ShopDjangoRepository())


class TestCreateShopDTO:
    def test_name_is_trimmed(self):
        assert CreateShopDTO(name="  Gupta Kirana ").name == "Gupta Kirana"

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_rejected(self, name):
        with pytest.raises(ValidationError, match="Shop name is required"):
            CreateShopDTO(name=name)


class TestShopService:
    def test_create_shop(self, service):
        shop = service.create_shop(CreateShopDTO(name="Sharma General Store"))

        assert shop.id is not None
        assert shop.created_at is not None
        assert Shop.objects.get(id=shop.id).name == "Sharma General Store"

    def test_list_shops_sorted_by_name(self, service):
        Shop.objects.create(name="Zeta Stores")
        Shop.objects.create(name="Alpha Mart")

        names = [shop.name for shop in service.list_shops()]
        assert names == ["Alpha Mart", "Zeta Stores"]

    def test_list_shops_empty(self, service):
        assert service.list_shops() == []

    def test_storage_failure_raises_storage_error(self, service):
        with patch.object(
            ShopDjangoRepository, "list", side_effect=DatabaseError("down")
        ):
            with pytest.raises(StorageError, match="Error fetching shops"):
                service.list_shops()
