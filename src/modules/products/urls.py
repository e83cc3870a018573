"""Product URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.products.views import ProductViewSet

product_collection = ProductViewSet.as_view(
    {"get": "list", "post": "create", "put": "update"}
)
product_detail = ProductViewSet.as_view(
    {"get": "retrieve", "put": "update_by_id", "delete": "destroy"}
)

urlpatterns = [
    path("products", product_collection, name="product-list"),
    path("products/<int:pk>", product_detail, name="product-detail"),
]
