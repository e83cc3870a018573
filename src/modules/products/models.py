"""Product model.

Business rules implemented:
- Every product belongs to exactly one Category.  ``PROTECT`` makes the
  store refuse to drop a category that still owns products; the category
  service migrates them to ``No Category`` first.
- Soft delete: a product whose category is the ``Deleted`` sentinel is
  considered removed (enforced at service/repository layer).  The row is
  never physically deleted by the API.
"""

from __future__ import annotations

from django.db import models

from modules.categories.models import Category
from modules.core.models import TimeStampedModel


class Product(TimeStampedModel):
    product_title = models.CharField(max_length=255)
    image_url = models.CharField(max_length=2048)
    sku = models.CharField(max_length=64)
    price_unit = models.FloatField()
    quantity = models.IntegerField()
    category = models.ForeignKey(
        Category,
        on_delete=models.PROTECT,
        related_name="products",
    )

    class Meta:
        db_table = "products"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["sku"], name="products_sku_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.sku} - {self.product_title}"
