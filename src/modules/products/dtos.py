"""Product DTO for the Service Layer.

Pydantic v2 transfer object shared by input and output, camelCase on
the wire (``productId``, ``productTitle``, ``priceUnit`` ...).  The owning
category travels as a nested ``CategoryDTO`` under ``category``.

DTOs are immutable (``frozen=True``) and therefore hashable, which the
service relies on to deduplicate listings by value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from modules.categories.dtos import CategoryDTO

if TYPE_CHECKING:
    from modules.products.models import Product


class ProductDTO(BaseModel):
    """Immutable product payload / response.

    All fields are optional so that ``ProductService.save`` can report
    the first missing one in a fixed order.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    product_id: int | None = None
    product_title: str | None = None
    image_url: str | None = None
    sku: str | None = None
    price_unit: float | None = None
    quantity: int | None = None
    category: CategoryDTO | None = None

    @property
    def category_id(self) -> int | None:
        return self.category.category_id if self.category else None

    @classmethod
    def from_entity(cls, product: Product) -> ProductDTO:
        """Build a DTO from a Product model instance."""
        return cls(
            product_id=product.pk,
            product_title=product.product_title,
            image_url=product.image_url,
            sku=product.sku,
            price_unit=product.price_unit,
            quantity=product.quantity,
            category=CategoryDTO.from_entity(product.category),
        )

    def to_entity(self) -> Product:
        """Build an unsaved Product model instance from this DTO.

        Only the category id is carried over; the referenced row is not
        loaded.
        """
        from modules.products.models import Product

        return Product(
            id=self.product_id,
            product_title=self.product_title,
            image_url=self.image_url,
            sku=self.sku,
            price_unit=self.price_unit,
            quantity=self.quantity,
            category_id=self.category_id,
        )
