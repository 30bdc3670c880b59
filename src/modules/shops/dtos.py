"""Shop DTOs for the Service Layer.

Framework-agnostic, immutable Pydantic models passed from the API
layer to ``ShopService``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class CreateShopDTO(BaseModel):
    """Immutable DTO for shop creation requests."""

    model_config = ConfigDict(frozen=True)

    name: str

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Shop name is required")
        return v.strip()
