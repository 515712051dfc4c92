"""
Language record store.
"""

from app.models.language import Language
from app.repositories.base import CatalogRepository


class LanguageRepository(CatalogRepository[Language]):
    """Persistence for language rows."""

    model = Language
    label = "Language"
