"""
Record stores: the persistence boundary for each entity type.
"""

from app.repositories.category_repository import CategoryRepository
from app.repositories.language_repository import LanguageRepository

__all__ = [
    "CategoryRepository",
    "LanguageRepository",
]
