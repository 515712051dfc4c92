"""
Main API router.
"""

from fastapi import APIRouter
from app.api import categories, languages

api_router = APIRouter()

api_router.include_router(categories.router, prefix="/categories", tags=["categories"])
api_router.include_router(languages.router, prefix="/languages", tags=["languages"])
