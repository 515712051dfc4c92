"""
FastAPI dependencies.

Wiring happens here explicitly: a session goes into a repository, the
repository into a service, the service into the router handler.
"""

from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.errors import ForbiddenError, UnauthorizedError
from app.repositories import CategoryRepository, LanguageRepository
from app.security import decode_access_token
from app.services.category_service import CategoryService
from app.services.language_service import LanguageService


def _extract_bearer_token(authorization: Optional[str]) -> str:
    raw = (authorization or "").strip()
    if not raw:
        raise UnauthorizedError("Missing Authorization header.")

    parts = raw.split(" ", 1)
    if len(parts) != 2:
        raise UnauthorizedError("Invalid Authorization header format.")

    scheme, token = parts[0].strip().lower(), parts[1].strip()
    if scheme != "bearer" or not token:
        raise UnauthorizedError("Authorization must be: Bearer <token>.")
    return token


def get_current_user(authorization: Optional[str] = Header(default=None)) -> dict:
    """
    Resolve the caller from a bearer token; required by every mutating route.
    """
    payload = decode_access_token(_extract_bearer_token(authorization))
    role = payload.get("role") or "user"
    if role not in settings.catalog_editor_roles:
        raise ForbiddenError("You are not allowed to modify the catalog.")
    return {"id": payload["sub"], "email": payload.get("email"), "role": role}


def get_category_service(db: Session = Depends(get_db)) -> CategoryService:
    return CategoryService(CategoryRepository(db))


def get_language_service(db: Session = Depends(get_db)) -> LanguageService:
    return LanguageService(LanguageRepository(db))


__all__ = [
    "get_db",
    "get_current_user",
    "get_category_service",
    "get_language_service",
]
