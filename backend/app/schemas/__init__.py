"""
Pydantic schemas package.
"""

from app.schemas.category import (
    CategoryBase,
    CategoryCreate,
    CategoryUpdate,
    CategoryResponse,
    CategoryDeleted,
)
from app.schemas.language import (
    LanguageBase,
    LanguageCreate,
    LanguageUpdate,
    LanguageResponse,
    LanguageDeleted,
)

__all__ = [
    "CategoryBase",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
    "CategoryDeleted",
    "LanguageBase",
    "LanguageCreate",
    "LanguageUpdate",
    "LanguageResponse",
    "LanguageDeleted",
]
