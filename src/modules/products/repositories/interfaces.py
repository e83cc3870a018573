"""Product repository interface.

Extends ``IRepository[Product]`` with the soft-delete aware look-ups and
the bulk category reassignment used when a category is removed.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.categories.models import Category
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def list_without_deleted(self) -> List[Product]:
        """List products whose category is not the ``Deleted`` sentinel."""

    @abstractmethod
    def get_without_deleted_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by ID unless it is soft-deleted."""

    @abstractmethod
    def reassign_category(self, from_category_id: int, to_category: Category) -> int:
        """Move every product of ``from_category_id`` to ``to_category``.

        Returns the number of products moved.
        """
