"""
Language API endpoints.
"""

from fastapi import APIRouter, Depends
from typing import List

from app.dependencies import get_current_user, get_language_service
from app.schemas.language import (
    LanguageCreate,
    LanguageUpdate,
    LanguageResponse,
    LanguageDeleted,
)
from app.services.language_service import LanguageService

router = APIRouter()


@router.post("", response_model=LanguageResponse, status_code=201)
def create_language(
    language: LanguageCreate,
    _: dict = Depends(get_current_user),
    service: LanguageService = Depends(get_language_service)
):
    """Create a new language."""
    return service.create(language)


@router.get("", response_model=List[LanguageResponse])
def list_languages(
    service: LanguageService = Depends(get_language_service)
):
    """List all languages."""
    return service.find_all()


@router.get("/{language_id}", response_model=LanguageResponse)
def get_language(
    language_id: str,
    service: LanguageService = Depends(get_language_service)
):
    """Get a specific language."""
    return service.find_one(language_id)


@router.patch("/{language_id}", response_model=LanguageResponse)
def update_language(
    language_id: str,
    language_update: LanguageUpdate,
    _: dict = Depends(get_current_user),
    service: LanguageService = Depends(get_language_service)
):
    """Update a language."""
    return service.update(language_id, language_update)


@router.delete("/{language_id}", response_model=LanguageDeleted)
def delete_language(
    language_id: str,
    _: dict = Depends(get_current_user),
    service: LanguageService = Depends(get_language_service)
):
    """Delete a language."""
    return service.remove(language_id)
