"""Category DTO for the Service Layer.

Framework-agnostic transfer object using Pydantic v2, shared by input
and output.  Field names are snake_case in Python and camelCase on the
wire (``categoryId``, ``categoryTitle``, ``imageUrl`` ...).

Every field is optional on purpose: the service decides which ones are
required for each use case and raises ``InvalidCategory`` itself.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from modules.categories.models import Category


class CategoryDTO(BaseModel):
    """Immutable category payload / response."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    category_id: int | None = None
    category_title: str | None = None
    image_url: str | None = None
    parent_category: CategoryDTO | None = None
    sub_categories: tuple[CategoryDTO, ...] | None = None

    @classmethod
    def from_entity(cls, category: Category) -> CategoryDTO:
        """Build a DTO from a Category model instance.

        The hierarchy is never mapped out.
        """
        return cls(
            category_id=category.pk,
            category_title=category.category_title,
            image_url=category.image_url,
        )

    def to_entity(self) -> Category:
        """Build an unsaved Category model instance from this DTO."""
        from modules.categories.models import Category

        return Category(
            id=self.category_id,
            category_title=self.category_title,
            image_url=self.image_url,
        )
