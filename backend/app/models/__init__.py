"""
Database models package.
"""

from app.models.category import Category
from app.models.language import Language

__all__ = [
    "Category",
    "Language",
]
