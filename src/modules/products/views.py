"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into HTTP status codes;
the view never swallows generic exceptions, so a missing ``Deleted``
sentinel or a store error surfaces as a 500.
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.categories.exceptions import CategoryNotFound
from modules.categories.repositories import CategoryDjangoRepository
from modules.core.exceptions import InvalidArgument
from modules.products.dtos import ProductDTO
from modules.products.exceptions import ProductNotFound
from modules.products.repositories import ProductDjangoRepository
from modules.products.serializers import ProductCollectionSerializer, ProductSerializer
from modules.products.services import ProductService


def _dump(dto: ProductDTO) -> dict:
    return dto.model_dump(by_alias=True, mode="json")


def _not_found(exc: Exception) -> Response:
    return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)


def _bad_request(exc: Exception) -> Response:
    return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)


@extend_schema(tags=["products"])
class ProductViewSet(ViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with the Django repositories (DIP).
    ``destroy`` is a soft delete.
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(
            product_repository=ProductDjangoRepository(),
            category_repository=CategoryDjangoRepository(),
        )

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(responses=ProductCollectionSerializer)
    def list(self, request: Request) -> Response:
        """GET /api/products"""
        products = self._service.find_all()
        return Response({"collection": [_dump(p) for p in products]})

    @extend_schema(responses=ProductSerializer)
    def retrieve(self, request: Request, pk: int) -> Response:
        """GET /api/products/{pk}"""
        try:
            product = self._service.find_by_id(pk)
        except ProductNotFound as exc:
            return _not_found(exc)
        return Response(_dump(product))

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(request=ProductSerializer, responses=ProductSerializer)
    def create(self, request: Request) -> Response:
        """POST /api/products"""
        try:
            dto = ProductDTO.model_validate(request.data)
            product = self._service.save(dto)
        except CategoryNotFound as exc:
            return _not_found(exc)
        except (PydanticValidationError, InvalidArgument) as exc:
            return _bad_request(exc)
        return Response(_dump(product))

    @extend_schema(request=ProductSerializer, responses=ProductSerializer)
    def update(self, request: Request) -> Response:
        """PUT /api/products (id carried in the body)"""
        try:
            dto = ProductDTO.model_validate(request.data)
            product = self._service.update(dto)
        except ProductNotFound as exc:
            return _not_found(exc)
        except PydanticValidationError as exc:
            return _bad_request(exc)
        return Response(_dump(product))

    @extend_schema(request=ProductSerializer, responses=ProductSerializer)
    def update_by_id(self, request: Request, pk: int) -> Response:
        """PUT /api/products/{pk}"""
        try:
            dto = ProductDTO.model_validate(request.data)
            product = self._service.update_by_id(pk, dto)
        except ProductNotFound as exc:
            return _not_found(exc)
        except PydanticValidationError as exc:
            return _bad_request(exc)
        return Response(_dump(product))

    @extend_schema(responses=bool)
    def destroy(self, request: Request, pk: int) -> Response:
        """DELETE /api/products/{pk} (soft delete)"""
        try:
            self._service.delete_by_id(pk)
        except ProductNotFound as exc:
            return _not_found(exc)
        return Response(True)
