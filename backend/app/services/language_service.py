"""Service for language management."""

import logging
from typing import Dict, List

from app.errors import NotFoundError
from app.models.language import Language
from app.repositories.language_repository import LanguageRepository
from app.schemas.language import LanguageCreate, LanguageUpdate

logger = logging.getLogger(__name__)


class LanguageService:
    """Language use cases on top of a LanguageRepository."""

    def __init__(self, repository: LanguageRepository) -> None:
        self.repository = repository

    def create(self, dto: LanguageCreate) -> Language:
        language = self.repository.create(dto.model_dump())
        logger.info(f"Created language {language.id} ({language.slug})")
        return language

    def find_all(self) -> List[Language]:
        return self.repository.list_all()

    def find_one(self, language_id: str) -> Language:
        language = self.repository.get_by_id(language_id)
        if language is None:
            raise NotFoundError(f"Language with ID {language_id} not found")
        return language

    def update(self, language_id: str, dto: LanguageUpdate) -> Language:
        self.find_one(language_id)
        language = self.repository.update(language_id, dto.model_dump(exclude_unset=True))
        if language is None:
            raise NotFoundError(f"Language with ID {language_id} not found")
        return language

    def remove(self, language_id: str) -> Dict[str, str]:
        if self.repository.delete_by_id(language_id) == 0:
            raise NotFoundError(f"Language with ID {language_id} not found")
        logger.info(f"Deleted language {language_id}")
        return {"message": "Language deleted successfully"}
