from __future__ import annotations

import pytest
from pydantic import ValidationError

from modules.products.dtos import CreateProductDTO
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService

pytestmark = pytest.mark.unit


@pytest.fixture()
def service():
    return ProductService(repository=ProductDjangoRepository())


class TestCreateProductDTO:
    def test_numeric_strings_accepted(self):
        dto = CreateProductDTO(name="Sugar 1kg", mrp="55", price="48.5")
        assert dto.mrp == 55.0
        assert dto.price == 48.5
        assert dto.sale_price is None

    def test_name_is_trimmed(self):
        assert CreateProductDTO(name=" Sugar ", mrp=1).name == "Sugar"

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="Name and MRP are required"):
            CreateProductDTO(name="  ", mrp=10)

    @pytest.mark.parametrize("mrp", ["abc", float("inf"), [10]])
    def test_unusable_mrp_rejected(self, mrp):
        with pytest.raises(ValidationError):
            CreateProductDTO(name="Sugar", mrp=mrp)


class TestProductService:
    def test_create_product_keeps_both_sale_prices(self, service):
        product = service.create_product(
            CreateProductDTO(name="Tea Leaves 500g", mrp=290, price=275, sale_price=260)
        )

        stored = Product.objects.get(id=product.id)
        assert stored.mrp == 290.0
        assert stored.price == 275.0
        assert stored.sale_price == 260.0

    def test_optional_prices_default_to_none(self, service):
        product = service.create_product(CreateProductDTO(name="Salt", mrp=20))
        assert product.price is None
        assert product.sale_price is None

    def test_list_products_sorted_by_name(self, service):
        Product.objects.create(name="Sugar 1kg", mrp=55)
        Product.objects.create(name="Basmati Rice 5kg", mrp=650)

        names = [product.name for product in service.list_products()]
        assert names == ["Basmati Rice 5kg", "Sugar 1kg"]
