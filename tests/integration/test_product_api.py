"""Integration tests for Product API endpoints.

Covers:
- CRUD operations via /api/products.
- Soft delete: the row stays, moved to ``Deleted``, hidden from reads.
- Domain exception mapping (400, 404) and the missing-sentinel fault.
"""

from __future__ import annotations

import pytest

from modules.categories.models import Category
from modules.products.models import Product

pytestmark = pytest.mark.integration


def _laptop_payload(category_id: int, **overrides) -> dict:
    payload = {
        "productTitle": "Laptop",
        "imageUrl": "laptop.jpg",
        "sku": "LP123",
        "priceUnit": 999.99,
        "quantity": 10,
        "category": {"categoryId": category_id},
    }
    payload.update(overrides)
    return payload


# ===========================================================================
# LIST / RETRIEVE
# ===========================================================================


class TestProductList:
    def test_list_empty(self, auth_client):
        response = auth_client.get("/api/products")
        assert response.status_code == 200
        assert response.data == {"collection": []}

    def test_list_hides_soft_deleted(self, auth_client, make_product, deleted_category):
        make_product(sku="VISIBLE")
        make_product(sku="GONE", category=deleted_category)

        response = auth_client.get("/api/products")

        skus = [p["sku"] for p in response.data["collection"]]
        assert skus == ["VISIBLE"]

    def test_list_embeds_category(self, auth_client, make_product, electronics):
        product = make_product()

        item = auth_client.get("/api/products").data["collection"][0]

        assert item["productId"] == product.id
        assert item["productTitle"] == "Laptop"
        assert item["priceUnit"] == 999.99
        assert item["category"]["categoryId"] == electronics.id
        assert item["category"]["categoryTitle"] == "Electronics"


class TestProductRetrieve:
    def test_retrieve_success(self, auth_client, make_product):
        product = make_product()
        response = auth_client.get(f"/api/products/{product.id}")
        assert response.status_code == 200
        assert response.data["productId"] == product.id
        assert response.data["sku"] == "LP123"

    def test_retrieve_not_found(self, auth_client):
        response = auth_client.get("/api/products/999999")
        assert response.status_code == 404

    def test_retrieve_soft_deleted_is_not_found(self, auth_client, make_product, deleted_category):
        product = make_product(category=deleted_category)
        response = auth_client.get(f"/api/products/{product.id}")
        assert response.status_code == 404


# ===========================================================================
# CREATE
# ===========================================================================


class TestProductCreate:
    def test_create_success(self, auth_client, electronics):
        response = auth_client.post(
            "/api/products", _laptop_payload(electronics.id, productId=555), format="json"
        )

        assert response.status_code == 200
        assert response.data["productId"] != 555
        assert response.data["category"]["categoryId"] == electronics.id
        product = Product.objects.get(id=response.data["productId"])
        assert product.sku == "LP123"
        assert product.price_unit == 999.99

    def test_create_unknown_category_returns_404(self, auth_client):
        response = auth_client.post("/api/products", _laptop_payload(424242), format="json")
        assert response.status_code == 404
        assert not Product.objects.exists()

    def test_create_missing_field_returns_400(self, auth_client, electronics):
        response = auth_client.post(
            "/api/products", _laptop_payload(electronics.id, sku=None), format="json"
        )
        assert response.status_code == 400
        assert "SKU" in response.data["detail"]

    def test_create_without_category_returns_400(self, auth_client):
        payload = _laptop_payload(1)
        del payload["category"]
        response = auth_client.post("/api/products", payload, format="json")
        assert response.status_code == 400

    def test_create_malformed_price_returns_400(self, auth_client, electronics):
        response = auth_client.post(
            "/api/products", _laptop_payload(electronics.id, priceUnit="cheap"), format="json"
        )
        assert response.status_code == 400


# ===========================================================================
# UPDATE
# ===========================================================================


class TestProductUpdate:
    def test_update_with_id_in_body(self, auth_client, make_product, electronics):
        product = make_product()
        payload = _laptop_payload(electronics.id, productId=product.id, quantity=3)

        response = auth_client.put("/api/products", payload, format="json")

        assert response.status_code == 200
        product.refresh_from_db()
        assert product.quantity == 3

    def test_update_without_id_returns_404(self, auth_client, electronics):
        response = auth_client.put("/api/products", _laptop_payload(electronics.id), format="json")
        assert response.status_code == 404

    def test_update_by_path_forces_path_id(self, auth_client, make_product, electronics):
        product = make_product()
        books = Category.objects.create(category_title="Books")
        payload = _laptop_payload(books.id, productId=999999, productTitle="Laptop Pro")

        response = auth_client.put(f"/api/products/{product.id}", payload, format="json")

        assert response.status_code == 200
        assert response.data["productId"] == product.id
        product.refresh_from_db()
        assert product.product_title == "Laptop Pro"
        assert product.category_id == books.id
        assert not Product.objects.filter(id=999999).exists()

    def test_update_by_path_preserves_created_at(self, auth_client, make_product, electronics):
        product = make_product()
        created_at = product.created_at

        auth_client.put(
            f"/api/products/{product.id}", _laptop_payload(electronics.id), format="json"
        )

        product.refresh_from_db()
        assert product.created_at == created_at

    def test_update_by_path_not_found(self, auth_client, electronics):
        response = auth_client.put(
            "/api/products/999999", _laptop_payload(electronics.id), format="json"
        )
        assert response.status_code == 404


# ===========================================================================
# DESTROY (soft delete)
# ===========================================================================


class TestProductDestroy:
    def test_destroy_is_soft(self, auth_client, make_product, deleted_category):
        product = make_product()

        response = auth_client.delete(f"/api/products/{product.id}")

        assert response.status_code == 200
        assert response.data is True
        product.refresh_from_db()
        assert product.category.category_title == "Deleted"
        assert auth_client.get(f"/api/products/{product.id}").status_code == 404

    def test_destroy_twice_is_not_found(self, auth_client, make_product, deleted_category):
        product = make_product()
        auth_client.delete(f"/api/products/{product.id}")

        response = auth_client.delete(f"/api/products/{product.id}")

        assert response.status_code == 404
        assert Product.objects.filter(id=product.id).exists()

    def test_destroy_not_found(self, auth_client, deleted_category):
        response = auth_client.delete("/api/products/999999")
        assert response.status_code == 404

    def test_destroy_without_deleted_sentinel_is_a_server_fault(
        self, auth_client, make_product, electronics
    ):
        product = make_product()

        with pytest.raises(RuntimeError, match="Deleted"):
            auth_client.delete(f"/api/products/{product.id}")

        product.refresh_from_db()
        assert product.category_id == electronics.id
