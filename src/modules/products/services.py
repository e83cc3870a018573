"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository``.  The
``ICategoryRepository`` is needed to validate category references and to
find the ``Deleted`` sentinel.

Business rules enforced here:
- Creation requires title, image, SKU, price, quantity and a category
  that exists.
- Soft delete: deleting a product moves it to the ``Deleted`` category;
  such products are hidden from look-ups but the row stays.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
from django.db import transaction

from modules.categories.constants import DELETED_CATEGORY_TITLE
from modules.categories.exceptions import CategoryNotFound
from modules.products.dtos import ProductDTO
from modules.products.exceptions import InvalidProduct, ProductNotFound

if TYPE_CHECKING:
    from modules.categories.repositories.interfaces import ICategoryRepository
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

# Checked in this order; the first missing one is reported.
_REQUIRED_FIELDS = (
    ("product_title", "Product title is required."),
    ("image_url", "Image URL is required."),
    ("sku", "SKU is required."),
    ("price_unit", "Unit price is required."),
    ("quantity", "Quantity is required."),
)


def _validate_new_product(dto: ProductDTO) -> None:
    for field, message in _REQUIRED_FIELDS:
        value = getattr(dto, field)
        if value is None or value == "":
            raise InvalidProduct(message)
    if dto.category_id is None:
        raise InvalidProduct("Category is required.")


def _replacement(existing: Product, dto: ProductDTO) -> Product:
    """Build the entity that replaces ``existing`` with the payload's values."""
    product = dto.model_copy(update={"product_id": existing.pk}).to_entity()
    product.created_at = existing.created_at
    return product


class ProductService:
    """Application service for Product use-cases.

    Receives both repositories via constructor injection (DIP).
    """

    def __init__(
        self,
        product_repository: IProductRepository,
        category_repository: ICategoryRepository,
    ) -> None:
        self._repo = product_repository
        self._category_repo = category_repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_all(self) -> List[ProductDTO]:
        """Return every product not soft-deleted, without duplicates."""
        products = [ProductDTO.from_entity(p) for p in self._repo.list_without_deleted()]
        return list(dict.fromkeys(products))

    def find_by_id(self, id: int) -> ProductDTO:
        """Retrieve a single product that is not soft-deleted.

        Raises:
            ProductNotFound: if absent or soft-deleted.
        """
        product = self._repo.get_without_deleted_by_id(id)
        if not product:
            raise ProductNotFound(f"Product with id: {id} not found.")
        return ProductDTO.from_entity(product)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def save(self, dto: ProductDTO) -> ProductDTO:
        """Create a new product; any id in ``dto`` is dropped.

        Raises:
            InvalidProduct: naming the first missing required field.
            CategoryNotFound: if the referenced category does not exist.
        """
        _validate_new_product(dto)

        category = self._category_repo.get_by_id(dto.category_id)
        if not category:
            logger.warning("product.unknown_category", category_id=dto.category_id)
            raise CategoryNotFound(f"Category not found with ID: {dto.category_id}.")

        product = dto.model_copy(update={"product_id": None}).to_entity()
        product.category = category
        product = self._repo.save(product)
        logger.info("product.created", product_id=product.pk, category_id=category.pk)
        return ProductDTO.from_entity(product)

    @transaction.atomic
    def update(self, dto: ProductDTO) -> ProductDTO:
        """Replace the product identified by ``dto.product_id`` wholesale.

        Raises:
            ProductNotFound: if the id is missing or unknown.
        """
        existing = self._repo.get_by_id(dto.product_id) if dto.product_id is not None else None
        if not existing:
            raise ProductNotFound(f"Product not found with ID: {dto.product_id}.")

        product = self._repo.save(_replacement(existing, dto))
        logger.info("product.updated", product_id=product.pk)
        return ProductDTO.from_entity(product)

    @transaction.atomic
    def update_by_id(self, id: int, dto: ProductDTO) -> ProductDTO:
        """Replace product ``id`` with the payload; the payload id is ignored.

        Raises:
            ProductNotFound: if no product has that id.
        """
        existing = self._repo.get_by_id(id)
        if not existing:
            raise ProductNotFound(f"Product not found with ID: {id}.")

        product = self._repo.save(_replacement(existing, dto))
        logger.info("product.updated", product_id=product.pk)
        return ProductDTO.from_entity(product)

    @transaction.atomic
    def delete_by_id(self, id: int) -> None:
        """Soft-delete a product by moving it to the ``Deleted`` category.

        Raises:
            ProductNotFound: if absent or already soft-deleted.
            RuntimeError: if the ``Deleted`` sentinel is missing.
        """
        product = self._repo.get_without_deleted_by_id(id)
        if not product:
            raise ProductNotFound(f"Product with id: {id} not found.")

        deleted = self._category_repo.get_by_title(DELETED_CATEGORY_TITLE)
        if not deleted:
            logger.error("product.sentinel_missing", sentinel=DELETED_CATEGORY_TITLE)
            raise RuntimeError(f"Category '{DELETED_CATEGORY_TITLE}' not found in database.")

        product.category = deleted
        self._repo.save(product)
        logger.info("product.soft_deleted", product_id=id)
