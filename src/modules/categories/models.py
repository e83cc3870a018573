"""Category model.

Business rules implemented:
- Title is unique case-insensitively (functional unique index on
  ``LOWER(category_title)``; the service checks first so callers get a
  400 instead of an IntegrityError).
- ``"Deleted"`` and ``"No Category"`` are reserved sentinel rows
  (enforced at service/repository layer).
"""

from __future__ import annotations

from django.db import models
from django.db.models.functions import Lower

from modules.core.models import TimeStampedModel


class Category(TimeStampedModel):
    """Catalog grouping.

    ``parent_category`` / ``sub_categories`` form a tree that the service
    does not manage: every create or update through ``CategoryService``
    resets it.
    """

    category_title = models.CharField(max_length=255)
    image_url = models.CharField(max_length=2048, blank=True, null=True)  # noqa: DJ01
    parent_category = models.ForeignKey(
        "self",
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="sub_categories",
    )

    class Meta:
        db_table = "categories"
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(
                Lower("category_title"),
                name="categories_title_ci_unique",
            ),
        ]

    def __str__(self) -> str:
        return self.category_title
