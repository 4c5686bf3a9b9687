"""Product model.

``id`` is a server-assigned auto-increment key.  ``save()`` on an instance
carrying an ``id`` performs an UPDATE and falls back to an INSERT when no
row matched, so resubmitting a product with an id is an upsert.
"""

from __future__ import annotations

from django.db import models


class Product(models.Model):
    """Catalog product with a name and an arbitrary-precision price."""

    id = models.BigAutoField(primary_key=True)
    name = models.CharField(max_length=255)
    price = models.DecimalField(max_digits=19, decimal_places=2)

    class Meta:
        db_table = "products"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["price"], name="products_price_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.id} - {self.name}"
