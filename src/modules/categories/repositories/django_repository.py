"""Django ORM implementation of the Category repository.

Satisfies ``ICategoryRepository`` using Django's QuerySet API.
Methods return ``None`` instead of raising for missing rows; the
Service Layer decides how to translate a missing entity.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.db import transaction
from django.utils import timezone

from modules.categories.constants import DELETED_CATEGORY_TITLE, NO_CATEGORY_TITLE
from modules.categories.models import Category
from modules.categories.repositories.interfaces import ICategoryRepository

logger = structlog.get_logger(__name__)


class CategoryDjangoRepository(ICategoryRepository):
    """Concrete Category repository backed by Django ORM."""

    def _non_reserved(self):
        return (
            Category.objects.exclude(category_title__iexact=DELETED_CATEGORY_TITLE)
            .exclude(category_title__iexact=NO_CATEGORY_TITLE)
        )

    def get_by_id(self, id: int) -> Optional[Category]:
        return Category.objects.filter(id=id).first()

    def list(self) -> List[Category]:
        return list(Category.objects.all())

    @transaction.atomic
    def save(self, entity: Category) -> Category:
        """Persist (create or update) a category."""
        entity.save()
        logger.info(
            "category.saved",
            category_id=entity.pk,
            category_title=entity.category_title,
        )
        return entity

    def list_non_reserved(self) -> List[Category]:
        return list(self._non_reserved())

    def get_non_reserved_by_id(self, id: int) -> Optional[Category]:
        return self._non_reserved().filter(id=id).first()

    def get_by_title(self, title: str) -> Optional[Category]:
        return Category.objects.filter(category_title=title).first()

    def get_by_title_ignore_case(self, title: str) -> Optional[Category]:
        return Category.objects.filter(category_title__iexact=title).first()

    def exists_by_title_ignore_case(
        self, title: str, exclude_id: Optional[int] = None
    ) -> bool:
        queryset = Category.objects.filter(category_title__iexact=title)
        if exclude_id is not None:
            queryset = queryset.exclude(id=exclude_id)
        return queryset.exists()

    def clear_sub_categories(self, category: Category) -> int:
        # Bulk update skips auto_now, so updated_at is set explicitly.
        return Category.objects.filter(parent_category_id=category.pk).update(
            parent_category=None, updated_at=timezone.now()
        )

    @transaction.atomic
    def delete(self, category: Category) -> None:
        category_id = category.pk
        category.delete()
        logger.info("category.removed", category_id=category_id)
