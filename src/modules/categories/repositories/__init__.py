"""Category repositories package."""

from modules.categories.repositories.django_repository import CategoryDjangoRepository
from modules.categories.repositories.interfaces import ICategoryRepository

__all__ = ["CategoryDjangoRepository", "ICategoryRepository"]
