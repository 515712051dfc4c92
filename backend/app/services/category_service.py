"""Service for category management.

Owns the existence checks around the category record store: the store
reports absence, this service turns it into NotFoundError.
"""

import logging
from typing import Dict, List

from app.errors import NotFoundError
from app.models.category import Category
from app.repositories.category_repository import CategoryRepository
from app.schemas.category import CategoryCreate, CategoryUpdate

logger = logging.getLogger(__name__)


def _not_found(category_id: str) -> NotFoundError:
    return NotFoundError(f"Category with ID {category_id} not found")


class CategoryService:
    """Category use cases on top of a CategoryRepository."""

    def __init__(self, repository: CategoryRepository) -> None:
        self.repository = repository

    def create(self, dto: CategoryCreate) -> Category:
        category = self.repository.create(dto.model_dump())
        logger.info(f"Created category {category.id} ({category.slug})")
        return category

    def find_all(self) -> List[Category]:
        return self.repository.list_all()

    def find_one(self, category_id: str) -> Category:
        category = self.repository.get_by_id(category_id)
        if category is None:
            raise _not_found(category_id)
        return category

    def update(self, category_id: str, dto: CategoryUpdate) -> Category:
        self.find_one(category_id)

        fields = dto.model_dump(exclude_unset=True)
        category = self.repository.update(category_id, fields)
        if category is None:
            # Deleted between the check and the write
            raise _not_found(category_id)
        logger.info(f"Updated category {category_id}: {sorted(fields)}")
        return category

    def remove(self, category_id: str) -> Dict[str, str]:
        affected = self.repository.delete_by_id(category_id)
        if affected == 0:
            raise _not_found(category_id)
        logger.info(f"Deleted category {category_id}")
        return {"message": "Category deleted successfully"}
