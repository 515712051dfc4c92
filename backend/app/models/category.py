"""
Category database model.
"""

import uuid
from datetime import datetime
from sqlalchemy import Column, Index, String, Boolean, DateTime, Integer, Text
from app.database import Base


class Category(Base):
    """Card game category a sale is listed under."""

    __tablename__ = "categories"
    __table_args__ = (
        Index("idx_categories_slug", "slug"),
        Index("idx_categories_display_order", "display_order"),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(100), nullable=False, unique=True)
    slug = Column(String(100), nullable=False, unique=True)
    description = Column(Text, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    display_order = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
