"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer and the Service layer.
DTOs are immutable (``frozen=True``).
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``name`` is a non-empty string (stored trimmed).
    - ``mrp`` is a finite number; numeric strings are accepted.
    - ``price`` and ``sale_price`` are optional finite numbers.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    name: str
    mrp: float
    price: Optional[float] = None
    sale_price: Optional[float] = None

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Name and MRP are required")
        return v.strip()
