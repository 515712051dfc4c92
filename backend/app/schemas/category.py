"""
Category Pydantic schemas for API validation.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Optional

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"
# Upper bound of a 32-bit INTEGER column
MAX_DISPLAY_ORDER = 2_147_483_647


class CategoryBase(BaseModel):
    """Base category schema."""
    name: str = Field(..., min_length=1, max_length=100)
    slug: str = Field(..., min_length=1, max_length=100, pattern=SLUG_PATTERN)
    description: Optional[str] = None
    is_active: bool = Field(True, strict=True)
    display_order: int = Field(0, ge=0, le=MAX_DISPLAY_ORDER, strict=True)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True)


class CategoryCreate(CategoryBase):
    """Schema for creating a category."""

    model_config = ConfigDict(extra="forbid")


class CategoryUpdate(BaseModel):
    """Schema for updating a category. Only the fields sent are applied."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    slug: Optional[str] = Field(None, min_length=1, max_length=100, pattern=SLUG_PATTERN)
    description: Optional[str] = None
    is_active: Optional[bool] = Field(None, strict=True)
    display_order: Optional[int] = Field(None, ge=0, le=MAX_DISPLAY_ORDER, strict=True)

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True, extra="forbid"
    )

    @field_validator("name", "slug", "is_active", "display_order", mode="before")
    @classmethod
    def reject_null(cls, value):
        # description is the only column that may be cleared
        if value is None:
            raise ValueError("must not be null")
        return value


class CategoryResponse(CategoryBase):
    """Schema for category response."""
    id: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CategoryDeleted(BaseModel):
    """Confirmation returned after a category is removed."""
    message: str
