"""Category URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.categories.views import CategoryViewSet

category_collection = CategoryViewSet.as_view(
    {"get": "list", "post": "create", "put": "update"}
)
category_detail = CategoryViewSet.as_view(
    {"get": "retrieve", "put": "update_by_id", "delete": "destroy"}
)

urlpatterns = [
    path("categories", category_collection, name="category-list"),
    path("categories/<int:pk>", category_detail, name="category-detail"),
]
