"""
Shared record store for slugged catalog tables (categories, languages).

The store never raises "not found": lookups return None and deletes report
the number of rows removed, so callers decide what absence means.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.errors import ConflictError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")

# Columns that must be unique across the table
UNIQUE_FIELDS = ("name", "slug")


class CatalogRepository(Generic[ModelT]):
    """CRUD over a table with unique ``name`` and ``slug`` columns."""

    model: Type[ModelT]
    label: str = "Record"

    def __init__(self, db: Session) -> None:
        self.db = db

    def _find_clash(self, fields: Dict[str, Any], exclude_id: Optional[str] = None) -> Optional[str]:
        """Return the first unique field whose value is already taken."""
        checks = [
            getattr(self.model, field) == fields[field]
            for field in UNIQUE_FIELDS
            if fields.get(field) is not None
        ]
        if not checks:
            return None

        query = self.db.query(self.model).filter(or_(*checks))
        if exclude_id is not None:
            query = query.filter(self.model.id != exclude_id)
        existing = query.first()
        if existing is None:
            return None
        for field in UNIQUE_FIELDS:
            if fields.get(field) is not None and getattr(existing, field) == fields[field]:
                return field
        return UNIQUE_FIELDS[0]

    def _conflict(self, field: str, value: Any) -> ConflictError:
        logger.warning("%s %s already taken: %s", self.label, field, value)
        return ConflictError(f"{self.label} with {field} '{value}' already exists")

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as exc:
            # Lost a race on the unique constraint
            self.db.rollback()
            logger.warning("%s uniqueness violation on commit: %s", self.label, exc.orig)
            raise ConflictError(f"{self.label} with this name or slug already exists") from exc

    def create(self, fields: Dict[str, Any]) -> ModelT:
        clash = self._find_clash(fields)
        if clash:
            raise self._conflict(clash, fields[clash])

        record = self.model(**fields)
        self.db.add(record)
        self._commit()
        self.db.refresh(record)
        return record

    def list_all(self) -> List[ModelT]:
        return (
            self.db.query(self.model)
            .order_by(self.model.display_order.asc(), self.model.name.asc())
            .all()
        )

    def get_by_id(self, record_id: str) -> Optional[ModelT]:
        return self.db.query(self.model).filter(self.model.id == record_id).first()

    def update(self, record_id: str, fields: Dict[str, Any]) -> Optional[ModelT]:
        record = self.get_by_id(record_id)
        if record is None:
            return None

        clash = self._find_clash(fields, exclude_id=record_id)
        if clash:
            raise self._conflict(clash, fields[clash])

        for field, value in fields.items():
            setattr(record, field, value)
        record.updated_at = datetime.utcnow()

        self._commit()
        self.db.refresh(record)
        return record

    def delete_by_id(self, record_id: str) -> int:
        try:
            affected = (
                self.db.query(self.model)
                .filter(self.model.id == record_id)
                .delete(synchronize_session=False)
            )
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.warning("%s %s is still referenced: %s", self.label, record_id, exc.orig)
            raise ConflictError(f"{self.label} is still referenced and cannot be deleted") from exc
        return affected
