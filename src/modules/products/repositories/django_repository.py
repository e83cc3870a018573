"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Methods return ``None`` for missing rows instead of raising; the
Service Layer decides how to translate a missing entity.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.db import transaction
from django.utils import timezone

from modules.categories.constants import DELETED_CATEGORY_TITLE
from modules.categories.models import Category
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def _without_deleted(self):
        # Exact, case-sensitive match on the sentinel title.
        return Product.objects.select_related("category").exclude(
            category__category_title=DELETED_CATEGORY_TITLE
        )

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key, soft-deleted ones included."""
        return Product.objects.select_related("category").filter(id=id).first()

    def list(self) -> List[Product]:
        return list(Product.objects.select_related("category"))

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        logger.info(
            "product.saved",
            product_id=entity.pk,
            category_id=entity.category_id,
        )
        return entity

    def list_without_deleted(self) -> List[Product]:
        return list(self._without_deleted())

    def get_without_deleted_by_id(self, id: int) -> Optional[Product]:
        return self._without_deleted().filter(id=id).first()

    @transaction.atomic
    def reassign_category(self, from_category_id: int, to_category: Category) -> int:
        # Bulk update skips auto_now, so updated_at is set explicitly.
        moved = Product.objects.filter(category_id=from_category_id).update(
            category=to_category, updated_at=timezone.now()
        )
        logger.info(
            "product.category_reassigned",
            from_category_id=from_category_id,
            to_category_id=to_category.pk,
            count=moved,
        )
        return moved
