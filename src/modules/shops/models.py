"""Shop model.

Shops are created once and read many times; there is no update or
delete route.  The name is trimmed before it is stored.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Shop(BaseModel):
    """A shop that places orders."""

    name = models.TextField()

    class Meta:
        db_table = "shops"
        ordering = ["name"]

    def save(self, *args, **kwargs) -> None:
        if self.name:
            self.name = self.name.strip()
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return self.name
