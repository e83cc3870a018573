"""Category repository interface.

Extends ``IRepository[Category]`` with the look-ups required by the
title-uniqueness and reserved-sentinel rules.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.categories.models import Category


class ICategoryRepository(IRepository["Category"]):
    """Repository contract for the Category aggregate."""

    @abstractmethod
    def list_non_reserved(self) -> List[Category]:
        """List categories whose title is not a reserved sentinel."""

    @abstractmethod
    def get_non_reserved_by_id(self, id: int) -> Optional[Category]:
        """Retrieve a category by ID unless it is a reserved sentinel."""

    @abstractmethod
    def get_by_title(self, title: str) -> Optional[Category]:
        """Retrieve a category by exact title."""

    @abstractmethod
    def get_by_title_ignore_case(self, title: str) -> Optional[Category]:
        """Retrieve a category by title, ignoring case."""

    @abstractmethod
    def exists_by_title_ignore_case(
        self, title: str, exclude_id: Optional[int] = None
    ) -> bool:
        """Check whether a title is taken, optionally ignoring one category."""

    @abstractmethod
    def clear_sub_categories(self, category: Category) -> int:
        """Detach every child of ``category``; returns the number detached."""

    @abstractmethod
    def delete(self, category: Category) -> None:
        """Remove the category row."""
