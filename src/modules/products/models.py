"""Product model.

``mrp`` is the list price and is always present.  Two optional sale
prices coexist: ``price`` (written by current clients) and
``sale_price`` (carried by legacy records).  They are stored side by
side and never reconciled, so readers keep seeing the field they were
written with.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Product(BaseModel):
    """A sellable product.  Immutable once created."""

    name = models.TextField()
    mrp = models.FloatField()
    price = models.FloatField(null=True, blank=True, default=None)
    sale_price = models.FloatField(null=True, blank=True, default=None)

    class Meta:
        db_table = "products"
        ordering = ["name"]

    def save(self, *args, **kwargs) -> None:
        if self.name:
            self.name = self.name.strip()
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"{self.name} (MRP {self.mrp})"
