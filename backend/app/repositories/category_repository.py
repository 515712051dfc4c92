"""
Category record store.
"""

from app.models.category import Category
from app.repositories.base import CatalogRepository


class CategoryRepository(CatalogRepository[Category]):
    """Persistence for category rows."""

    model = Category
    label = "Category"
