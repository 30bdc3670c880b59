"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer and the Service layer
and between the pricing functions and the repository.  DTOs are
immutable (``frozen=True``).

- ``RawLineItem``: one line item exactly as a client sent it.
- ``OrderLineItem``: the canonical, priced line item that is stored.
- ``PricedItems``: canonical line items plus their order total.
- ``SaveOrderDTO``: input for order creation and full replacement.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from modules.orders.constants import DEFAULT_MRP, DEFAULT_PRICE, DEFAULT_QUANTITY

# ---------------------------------------------------------------------------
# Line items
# ---------------------------------------------------------------------------


class RawLineItem(BaseModel):
    """Untrusted line item: every field optional, none of them type-checked.

    Only the camelCase keys clients send are recognised; anything else is
    dropped.  Interpreting the values is the normalizer's job.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    product_id: Any = Field(default=None, alias="productId")
    product_name: Any = Field(default=None, alias="productName")
    mrp: Any = None
    price: Any = None
    qty: Any = None
    note: Any = None

    @classmethod
    def from_untrusted(cls, value: Any) -> RawLineItem:
        """Wrap an arbitrary JSON value; non-objects become an empty record."""
        if isinstance(value, RawLineItem):
            return value
        if not isinstance(value, Mapping):
            return cls()
        return cls.model_validate(
            {key: val for key, val in value.items() if isinstance(key, str)}
        )


class OrderLineItem(BaseModel):
    """Canonical line item.  ``line_total`` is ``price * qty`` when built."""

    model_config = ConfigDict(frozen=True)

    product_id: Optional[str] = None
    product_name: Optional[str] = None
    mrp: float = DEFAULT_MRP
    price: float = DEFAULT_PRICE
    qty: float = DEFAULT_QUANTITY
    line_total: float = 0.0
    note: str = ""


class PricedItems(BaseModel):
    """Normalized line items in submission order, with their total."""

    model_config = ConfigDict(frozen=True)

    items: List[OrderLineItem]
    total_amount: float


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class SaveOrderDTO(BaseModel):
    """Immutable DTO for order creation and full-replace requests.

    Validates:
    - ``shop_id`` is present and is a UUID.
    - ``items`` is a non-empty list.  Its entries are deliberately left
      untyped; the normalizer decides what each one means.
    """

    model_config = ConfigDict(frozen=True)

    shop_id: UUID
    shop_name: Optional[str] = None
    items: List[Any]

    @field_validator("shop_name", mode="before")
    @classmethod
    def shop_name_as_text(cls, v: Any) -> Optional[str]:
        return None if v is None else str(v)

    @field_validator("items")
    @classmethod
    def items_must_not_be_empty(cls, v: List[Any]) -> List[Any]:
        if not v:
            raise ValueError("Shop and items are required")
        return v
