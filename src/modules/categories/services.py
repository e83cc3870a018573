"""Category service layer (Use Cases).

Orchestrates business logic for the Category aggregate, delegating
persistence to the injected ``ICategoryRepository``.  Deleting a category
also needs the ``IProductRepository`` to migrate the products it owns.

Business rules enforced here:
- Titles are required, trimmed and unique ignoring case.
- Create/update always reset the parent/children hierarchy.
- ``Deleted`` and ``No Category`` are hidden from look-ups and can never
  be removed.
- Removing a category first moves its products to ``No Category``,
  inside the same transaction.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog
from django.db import transaction

from modules.categories.constants import NO_CATEGORY_TITLE, is_reserved_title
from modules.categories.dtos import CategoryDTO
from modules.categories.exceptions import (
    CategoryAlreadyExists,
    CategoryNotFound,
    InvalidCategory,
    ReservedCategory,
)
from modules.core.exceptions import IllegalState

if TYPE_CHECKING:
    from modules.categories.repositories.interfaces import ICategoryRepository
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


def _normalized_title(title: Optional[str]) -> str:
    if title is None or not title.strip():
        raise InvalidCategory("Category title cannot be empty or null.")
    return title.strip()


class CategoryService:
    """Application service for Category use-cases.

    Receives both repositories via constructor injection (DIP).
    """

    def __init__(
        self,
        category_repository: ICategoryRepository,
        product_repository: IProductRepository,
    ) -> None:
        self._repo = category_repository
        self._product_repo = product_repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_all(self) -> List[CategoryDTO]:
        """Return every category except the reserved sentinels."""
        return [CategoryDTO.from_entity(c) for c in self._repo.list_non_reserved()]

    def find_by_id(self, id: int) -> CategoryDTO:
        """Retrieve a single non-reserved category.

        Raises:
            CategoryNotFound: if absent or reserved.
        """
        category = self._repo.get_non_reserved_by_id(id)
        if not category:
            raise CategoryNotFound(f"Category with id: {id} not found or is reserved.")
        return CategoryDTO.from_entity(category)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def save(self, dto: CategoryDTO) -> CategoryDTO:
        """Create a new category; any id or hierarchy in ``dto`` is dropped.

        Raises:
            InvalidCategory: if the title is missing or blank.
            CategoryAlreadyExists: if the title is taken (any case).
        """
        title = _normalized_title(dto.category_title)
        log = logger.bind(category_title=title)

        if self._repo.exists_by_title_ignore_case(title):
            log.warning("category.duplicate_title")
            raise CategoryAlreadyExists(f"A category named '{title}' already exists.")

        fresh = dto.model_copy(
            update={
                "category_id": None,
                "category_title": title,
                "parent_category": None,
                "sub_categories": None,
            }
        )
        category = self._repo.save(fresh.to_entity())
        log.info("category.created", category_id=category.pk)
        return CategoryDTO.from_entity(category)

    def update(self, dto: CategoryDTO) -> CategoryDTO:
        """Rename the category identified by ``dto.category_id``.

        Raises:
            InvalidCategory: if the id or title is missing.
            CategoryNotFound: if no category has that id.
            CategoryAlreadyExists: if another category has the title.
        """
        if dto.category_id is None:
            raise InvalidCategory("Category ID cannot be null for update.")
        return self.update_by_id(dto.category_id, dto)

    @transaction.atomic
    def update_by_id(self, id: Optional[int], dto: CategoryDTO) -> CategoryDTO:
        """Rename category ``id``; the id inside ``dto`` is ignored.

        Only the title is taken from the payload.  The persisted row is
        loaded fresh and its hierarchy is reset.
        """
        if id is None:
            raise InvalidCategory("Category ID cannot be null.")
        title = _normalized_title(dto.category_title)

        category = self._repo.get_by_id(id)
        if not category:
            raise CategoryNotFound(f"Category not found with ID: {id}.")

        log = logger.bind(category_id=id)

        if self._repo.exists_by_title_ignore_case(title, exclude_id=id):
            log.warning("category.duplicate_title", category_title=title)
            raise CategoryAlreadyExists(
                f"Another category named '{title}' already exists."
            )

        category.category_title = title
        category.parent_category = None
        self._repo.clear_sub_categories(category)

        category = self._repo.save(category)
        log.info("category.updated", category_title=title)
        return CategoryDTO.from_entity(category)

    @transaction.atomic
    def delete_by_id(self, id: int) -> None:
        """Remove a category after moving its products to ``No Category``.

        Raises:
            CategoryNotFound: if no category has that id.
            ReservedCategory: if the category is a sentinel.
            IllegalState: if the ``No Category`` sentinel is missing.
        """
        category = self._repo.get_by_id(id)
        if not category:
            raise CategoryNotFound(f"Category not found with ID: {id}.")

        log = logger.bind(category_id=id)

        if is_reserved_title(category.category_title):
            log.warning("category.reserved_delete_rejected")
            raise ReservedCategory(
                "Cannot delete reserved categories: 'Deleted' or 'No Category'."
            )

        no_category = self._repo.get_by_title_ignore_case(NO_CATEGORY_TITLE)
        if not no_category:
            log.error("category.sentinel_missing", sentinel=NO_CATEGORY_TITLE)
            raise IllegalState(
                f"The '{NO_CATEGORY_TITLE}' category is required but not found in database."
            )

        moved = self._product_repo.reassign_category(id, no_category)
        self._repo.delete(category)
        log.info("category.deleted", products_migrated=moved, target_id=no_category.pk)
