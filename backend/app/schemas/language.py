"""
Language Pydantic schemas for API validation.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Optional

from app.schemas.category import MAX_DISPLAY_ORDER, SLUG_PATTERN


class LanguageBase(BaseModel):
    """Base language schema."""
    name: str = Field(..., min_length=1, max_length=100)
    slug: str = Field(..., min_length=1, max_length=100, pattern=SLUG_PATTERN)
    is_active: bool = Field(True, strict=True)
    display_order: int = Field(0, ge=0, le=MAX_DISPLAY_ORDER, strict=True)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True)


class LanguageCreate(LanguageBase):
    """Schema for creating a language."""

    model_config = ConfigDict(extra="forbid")


class LanguageUpdate(BaseModel):
    """Schema for updating a language."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    slug: Optional[str] = Field(None, min_length=1, max_length=100, pattern=SLUG_PATTERN)
    is_active: Optional[bool] = Field(None, strict=True)
    display_order: Optional[int] = Field(None, ge=0, le=MAX_DISPLAY_ORDER, strict=True)

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True, extra="forbid"
    )

    @field_validator("name", "slug", "is_active", "display_order", mode="before")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("must not be null")
        return value


class LanguageResponse(LanguageBase):
    """Schema for language response."""
    id: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class LanguageDeleted(BaseModel):
    """Confirmation returned after a language is removed."""
    message: str
