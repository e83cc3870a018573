import pytest

from django.contrib.auth import get_user_model

from rest_framework.test import APIClient

from modules.categories.models import Category
from modules.products.models import Product


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def auth_client():
    """APIClient with a force-authenticated Django user."""
    client = APIClient()
    user = get_user_model().objects.create_user(
        username="catalog-tester", password="testpass123"
    )
    client.force_authenticate(user=user)
    return client


@pytest.fixture()
def deleted_category():
    """The ``Deleted`` sentinel used as the soft-delete target."""
    return Category.objects.create(category_title="Deleted")


@pytest.fixture()
def no_category():
    """The ``No Category`` sentinel used when a category is removed."""
    return Category.objects.create(category_title="No Category")


@pytest.fixture()
def sentinels(deleted_category, no_category):
    return deleted_category, no_category


@pytest.fixture()
def electronics():
    return Category.objects.create(
        category_title="Electronics", image_url="http://example.com/image.jpg"
    )


@pytest.fixture()
def make_product(electronics):
    """Factory persisting a product, in ``Electronics`` unless told otherwise."""

    def _make(**overrides) -> Product:
        defaults = {
            "product_title": "Laptop",
            "image_url": "laptop.jpg",
            "sku": "LP123",
            "price_unit": 999.99,
            "quantity": 10,
            "category": electronics,
        }
        defaults.update(overrides)
        return Product.objects.create(**defaults)

    return _make
