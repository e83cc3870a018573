"""Integration tests for Category API endpoints.

Covers:
- CRUD operations via /api/categories.
- Reserved sentinels hidden from list/retrieve and protected from delete.
- Product migration to ``No Category`` on delete.
- Domain exception mapping (400, 404) and the missing-sentinel fault.
"""

from __future__ import annotations

import pytest

from modules.categories.models import Category
from modules.core.exceptions import IllegalState
from modules.products.models import Product

pytestmark = pytest.mark.integration


# ===========================================================================
# LIST / RETRIEVE
# ===========================================================================


class TestCategoryList:
    def test_list_empty(self, auth_client):
        response = auth_client.get("/api/categories")
        assert response.status_code == 200
        assert response.data == {"collection": []}

    def test_list_hides_sentinels(self, auth_client, sentinels, electronics):
        Category.objects.create(category_title="Books")

        response = auth_client.get("/api/categories")

        assert response.status_code == 200
        titles = [c["categoryTitle"] for c in response.data["collection"]]
        assert titles == ["Electronics", "Books"]

    def test_list_items_use_camel_case(self, auth_client, electronics):
        response = auth_client.get("/api/categories")
        item = response.data["collection"][0]
        assert item["categoryId"] == electronics.id
        assert item["imageUrl"] == "http://example.com/image.jpg"


class TestCategoryRetrieve:
    def test_retrieve_success(self, auth_client, electronics):
        response = auth_client.get(f"/api/categories/{electronics.id}")
        assert response.status_code == 200
        assert response.data["categoryId"] == electronics.id
        assert response.data["categoryTitle"] == "Electronics"

    def test_retrieve_not_found(self, auth_client):
        response = auth_client.get("/api/categories/999999")
        assert response.status_code == 404

    @pytest.mark.parametrize("title", ["Deleted", "no category", "DELETED"])
    def test_retrieve_reserved_is_not_found(self, auth_client, title):
        reserved = Category.objects.create(category_title=title)
        response = auth_client.get(f"/api/categories/{reserved.id}")
        assert response.status_code == 404


# ===========================================================================
# CREATE
# ===========================================================================


class TestCategoryCreate:
    def test_create_success(self, auth_client):
        payload = {"categoryTitle": "  New Category ", "imageUrl": "http://example.com/new.jpg"}
        response = auth_client.post("/api/categories", payload, format="json")

        assert response.status_code == 200
        assert response.data["categoryTitle"] == "New Category"
        assert response.data["imageUrl"] == "http://example.com/new.jpg"
        assert Category.objects.filter(id=response.data["categoryId"]).exists()

    def test_create_ignores_client_id_and_parent(self, auth_client, electronics):
        payload = {
            "categoryId": electronics.id,
            "categoryTitle": "Phones",
            "parentCategory": {"categoryId": electronics.id},
        }
        response = auth_client.post("/api/categories", payload, format="json")

        assert response.status_code == 200
        assert response.data["categoryId"] != electronics.id
        created = Category.objects.get(id=response.data["categoryId"])
        assert created.parent_category is None

    def test_case_insensitive_duplicate_returns_400(self, auth_client, electronics):
        response = auth_client.post(
            "/api/categories", {"categoryTitle": "electronics"}, format="json"
        )
        assert response.status_code == 400
        assert Category.objects.count() == 1

    def test_blank_title_returns_400(self, auth_client):
        response = auth_client.post("/api/categories", {"categoryTitle": "  "}, format="json")
        assert response.status_code == 400

    def test_malformed_payload_returns_400(self, auth_client):
        response = auth_client.post(
            "/api/categories", {"categoryId": "abc", "categoryTitle": "X"}, format="json"
        )
        assert response.status_code == 400


# ===========================================================================
# UPDATE
# ===========================================================================


class TestCategoryUpdate:
    def test_update_with_id_in_body(self, auth_client, electronics):
        payload = {"categoryId": electronics.id, "categoryTitle": "Updated Category"}
        response = auth_client.put("/api/categories", payload, format="json")

        assert response.status_code == 200
        assert response.data["categoryTitle"] == "Updated Category"
        electronics.refresh_from_db()
        assert electronics.category_title == "Updated Category"

    def test_update_without_id_returns_400(self, auth_client):
        response = auth_client.put("/api/categories", {"categoryTitle": "X"}, format="json")
        assert response.status_code == 400

    def test_update_unknown_id_returns_404(self, auth_client):
        payload = {"categoryId": 999999, "categoryTitle": "Ghost"}
        response = auth_client.put("/api/categories", payload, format="json")
        assert response.status_code == 404

    def test_update_by_path_keeps_id_and_clears_hierarchy(self, auth_client, electronics):
        parent = Category.objects.create(category_title="Parent")
        child = Category.objects.create(category_title="Child", parent_category=electronics)
        electronics.parent_category = parent
        electronics.save()

        payload = {"categoryId": parent.id, "categoryTitle": "Gadgets"}
        response = auth_client.put(f"/api/categories/{electronics.id}", payload, format="json")

        assert response.status_code == 200
        assert response.data["categoryId"] == electronics.id
        electronics.refresh_from_db()
        child.refresh_from_db()
        parent.refresh_from_db()
        assert electronics.category_title == "Gadgets"
        assert electronics.parent_category is None
        assert child.parent_category is None
        assert parent.category_title == "Parent"

    def test_update_same_title_different_case_on_itself(self, auth_client, electronics):
        response = auth_client.put(
            f"/api/categories/{electronics.id}", {"categoryTitle": "ELECTRONICS"}, format="json"
        )
        assert response.status_code == 200
        assert response.data["categoryTitle"] == "ELECTRONICS"

    def test_update_to_other_title_returns_400(self, auth_client, electronics):
        Category.objects.create(category_title="Books")
        response = auth_client.put(
            f"/api/categories/{electronics.id}", {"categoryTitle": "books"}, format="json"
        )
        assert response.status_code == 400


# ===========================================================================
# DESTROY
# ===========================================================================


class TestCategoryDestroy:
    def test_destroy_migrates_products_to_no_category(self, auth_client, electronics, make_product):
        no_category = Category.objects.create(id=999, category_title="No Category")
        laptop = make_product()

        response = auth_client.delete(f"/api/categories/{electronics.id}")

        assert response.status_code == 200
        assert response.data is True
        laptop.refresh_from_db()
        assert laptop.category_id == 999
        assert laptop.category == no_category
        assert not Category.objects.filter(id=electronics.id).exists()
        assert not Product.objects.filter(category_id=electronics.id).exists()
        assert auth_client.get(f"/api/categories/{electronics.id}").status_code == 404

    def test_destroy_not_found(self, auth_client, no_category):
        response = auth_client.delete("/api/categories/999999")
        assert response.status_code == 404

    def test_destroy_reserved_returns_400(self, auth_client, sentinels):
        deleted_category, no_category = sentinels
        for reserved in (deleted_category, no_category):
            response = auth_client.delete(f"/api/categories/{reserved.id}")
            assert response.status_code == 400
        assert Category.objects.count() == 2

    def test_destroy_without_no_category_is_a_server_fault(
        self, auth_client, electronics, make_product
    ):
        laptop = make_product()

        with pytest.raises(IllegalState):
            auth_client.delete(f"/api/categories/{electronics.id}")

        assert Category.objects.filter(id=electronics.id).exists()
        laptop.refresh_from_db()
        assert laptop.category_id == electronics.id
