"""Category API views.

Exposes the ``CategoryService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into HTTP status codes;
``IllegalState`` (missing sentinel) is left to surface as a 500.
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.categories.dtos import CategoryDTO
from modules.categories.exceptions import CategoryNotFound
from modules.categories.repositories import CategoryDjangoRepository
from modules.categories.serializers import (
    CategoryCollectionSerializer,
    CategorySerializer,
)
from modules.categories.services import CategoryService
from modules.core.exceptions import InvalidArgument
from modules.products.repositories import ProductDjangoRepository


def _dump(dto: CategoryDTO) -> dict:
    return dto.model_dump(by_alias=True, mode="json")


@extend_schema(tags=["categories"])
class CategoryViewSet(ViewSet):
    """ViewSet for Category CRUD operations.

    Routed explicitly in ``urls.py`` because ``PUT`` is accepted on the
    collection (id in body) as well as on the detail route.
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CategoryService(
            category_repository=CategoryDjangoRepository(),
            product_repository=ProductDjangoRepository(),
        )

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(responses=CategoryCollectionSerializer)
    def list(self, request: Request) -> Response:
        """GET /api/categories"""
        categories = self._service.find_all()
        return Response({"collection": [_dump(c) for c in categories]})

    @extend_schema(responses=CategorySerializer)
    def retrieve(self, request: Request, pk: int) -> Response:
        """GET /api/categories/{pk}"""
        try:
            category = self._service.find_by_id(pk)
        except CategoryNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        return Response(_dump(category))

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(request=CategorySerializer, responses=CategorySerializer)
    def create(self, request: Request) -> Response:
        """POST /api/categories"""
        try:
            dto = CategoryDTO.model_validate(request.data)
            category = self._service.save(dto)
        except (PydanticValidationError, InvalidArgument) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        return Response(_dump(category))

    @extend_schema(request=CategorySerializer, responses=CategorySerializer)
    def update(self, request: Request) -> Response:
        """PUT /api/categories (id carried in the body)"""
        try:
            dto = CategoryDTO.model_validate(request.data)
            category = self._service.update(dto)
        except CategoryNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        except (PydanticValidationError, InvalidArgument) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        return Response(_dump(category))

    @extend_schema(request=CategorySerializer, responses=CategorySerializer)
    def update_by_id(self, request: Request, pk: int) -> Response:
        """PUT /api/categories/{pk}"""
        try:
            dto = CategoryDTO.model_validate(request.data)
            category = self._service.update_by_id(pk, dto)
        except CategoryNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        except (PydanticValidationError, InvalidArgument) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        return Response(_dump(category))

    @extend_schema(responses=bool)
    def destroy(self, request: Request, pk: int) -> Response:
        """DELETE /api/categories/{pk}

        Products of the category are moved to ``No Category`` first.
        """
        try:
            self._service.delete_by_id(pk)
        except CategoryNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidArgument as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        return Response(True)
