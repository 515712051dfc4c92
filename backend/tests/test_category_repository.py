"""Tests for the category record store."""

import pytest
from sqlalchemy.exc import IntegrityError

from app.errors import ConflictError
from app.models.category import Category
from app.repositories.category_repository import CategoryRepository


@pytest.fixture
def repository(db_session):
    return CategoryRepository(db_session)


def test_create_assigns_id_and_timestamps(repository):
    category = repository.create({"name": "Digimon", "slug": "digimon"})
    assert len(category.id) == 36
    assert category.created_at is not None
    assert category.updated_at is not None


def test_create_conflict_on_name(repository, sample_category):
    with pytest.raises(ConflictError, match="name"):
        repository.create({"name": sample_category.name, "slug": "other"})


def test_create_conflict_on_lost_race(repository, sample_category, monkeypatch):
    """A uniqueness violation raised by the database still surfaces as a conflict."""
    monkeypatch.setattr(repository, "_find_clash", lambda fields, exclude_id=None: None)

    with pytest.raises(ConflictError):
        repository.create({"name": "Other", "slug": sample_category.slug})

    # Session is usable again after the rollback
    assert repository.db.query(Category).count() == 1


def test_get_by_id_absent(repository):
    assert repository.get_by_id("missing") is None


def test_list_all_order(repository):
    repository.create({"name": "B", "slug": "b", "display_order": 2})
    repository.create({"name": "A2", "slug": "a2", "display_order": 1})
    repository.create({"name": "A1", "slug": "a1", "display_order": 1})

    assert [c.name for c in repository.list_all()] == ["A1", "A2", "B"]


def test_update_absent_returns_none(repository):
    assert repository.update("missing", {"name": "X"}) is None


def test_update_keeps_own_values(repository, sample_category):
    """Re-sending the current name/slug is not a conflict with itself."""
    updated = repository.update(sample_category.id, {"name": sample_category.name, "slug": "pokemon"})
    assert updated.slug == "pokemon"


def test_update_refreshes_timestamp(repository, sample_category):
    before = sample_category.updated_at
    updated = repository.update(sample_category.id, {"is_active": False})
    assert updated.is_active is False
    assert updated.updated_at >= before


def test_delete_reports_rows_affected(repository, sample_category):
    assert repository.delete_by_id("missing") == 0
    assert repository.delete_by_id(sample_category.id) == 1
    assert repository.get_by_id(sample_category.id) is None


def test_delete_still_referenced_is_conflict(repository, sample_category, monkeypatch):
    """A foreign key violation on delete surfaces as a conflict and keeps the row."""
    def refuse_commit():
        raise IntegrityError("DELETE FROM categories", {}, Exception("FOREIGN KEY constraint failed"))

    monkeypatch.setattr(repository.db, "commit", refuse_commit)

    with pytest.raises(ConflictError, match="still referenced"):
        repository.delete_by_id(sample_category.id)

    assert repository.db.query(Category).filter(Category.id == sample_category.id).count() == 1
