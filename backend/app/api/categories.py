"""
Category API endpoints.

Reads are public; create, update and delete require a bearer token.
"""

from fastapi import APIRouter, Depends
from typing import List

from app.dependencies import get_category_service, get_current_user
from app.schemas.category import (
    CategoryCreate,
    CategoryUpdate,
    CategoryResponse,
    CategoryDeleted,
)
from app.services.category_service import CategoryService

router = APIRouter()


@router.post("", response_model=CategoryResponse, status_code=201)
def create_category(
    category: CategoryCreate,
    _: dict = Depends(get_current_user),
    service: CategoryService = Depends(get_category_service)
):
    """Create a new category."""
    return service.create(category)


@router.get("", response_model=List[CategoryResponse])
def list_categories(
    service: CategoryService = Depends(get_category_service)
):
    """List all categories ordered by display order."""
    return service.find_all()


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(
    category_id: str,
    service: CategoryService = Depends(get_category_service)
):
    """Get a specific category."""
    return service.find_one(category_id)


@router.patch("/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: str,
    category_update: CategoryUpdate,
    _: dict = Depends(get_current_user),
    service: CategoryService = Depends(get_category_service)
):
    """Update a category."""
    return service.update(category_id, category_update)


@router.delete("/{category_id}", response_model=CategoryDeleted)
def delete_category(
    category_id: str,
    _: dict = Depends(get_current_user),
    service: CategoryService = Depends(get_category_service)
):
    """Delete a category."""
    return service.remove(category_id)
