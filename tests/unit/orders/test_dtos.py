from __future__ import annotations

from uuid import uuid4

import pytest
from pydantic import ValidationError

from modules.core.exceptions import validation_message
from modules.orders.dtos import OrderLineItem, RawLineItem, SaveOrderDTO

pytestmark = pytest.mark.unit


class TestSaveOrderDTO:
    def test_valid_payload(self):
        shop_id = uuid4()
        dto = SaveOrderDTO(shop_id=str(shop_id), shop_name="Sharma", items=[{}])
        assert dto.shop_id == shop_id
        assert dto.shop_name == "Sharma"
        assert dto.items == [{}]

    def test_shop_name_is_optional(self):
        dto = SaveOrderDTO(shop_id=uuid4(), items=[{}])
        assert dto.shop_name is None

    def test_shop_name_is_stringified(self):
        dto = SaveOrderDTO(shop_id=uuid4(), shop_name=42, items=[{}])
        assert dto.shop_name == "42"

    def test_empty_items_rejected_with_message(self):
        with pytest.raises(ValidationError) as exc_info:
            SaveOrderDTO(shop_id=uuid4(), items=[])
        assert validation_message(exc_info.value, "fallback") == (
            "Shop and items are required"
        )

    @pytest.mark.parametrize("items", [None, "rice", {"productId": "p1"}])
    def test_items_must_be_a_list(self, items):
        with pytest.raises(ValidationError):
            SaveOrderDTO(shop_id=uuid4(), items=items)

    @pytest.mark.parametrize("shop_id", [None, "", "not-a-uuid"])
    def test_shop_id_must_be_a_uuid(self, shop_id):
        with pytest.raises(ValidationError) as exc_info:
            SaveOrderDTO(shop_id=shop_id, items=[{}])
        assert validation_message(exc_info.value, "fallback") == "fallback"

    def test_dto_is_frozen(self):
        dto = SaveOrderDTO(shop_id=uuid4(), items=[{}])
        with pytest.raises(ValidationError):
            dto.shop_name = "other"


class TestRawLineItem:
    def test_reads_camel_case_keys(self):
        raw = RawLineItem.from_untrusted({"productId": "p1", "productName": "Rice"})
        assert raw.product_id == "p1"
        assert raw.product_name == "Rice"

    def test_non_mapping_is_empty(self):
        raw = RawLineItem.from_untrusted("rice")
        assert raw == RawLineItem()

    def test_values_are_not_coerced(self):
        raw = RawLineItem.from_untrusted({"qty": "abc", "price": [1]})
        assert raw.qty == "abc"
        assert raw.price == [1]


class TestOrderLineItem:
    def test_defaults(self):
        item = OrderLineItem()
        assert item.qty == 1.0
        assert item.price == 0.0
        assert item.mrp == 0.0
        assert item.line_total == 0.0
        assert item.note == ""
        assert item.product_id is None
