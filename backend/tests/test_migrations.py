"""Tests for the initial schema migration."""

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect, text

import app.seed
from app.config import settings
from app.models import Category, Language
from app.security import verify_password

BACKEND_DIR = Path(__file__).resolve().parents[1]

EXPECTED_TABLES = {
    "users", "subscriptionplans", "usersubscriptions", "categories", "languages",
    "stores", "storesociallinks", "sales", "comments", "purchases", "favorites",
    "storeratings", "userratings", "notifications", "badges", "userbadges", "storebadges",
}


@pytest.fixture
def alembic_config(tmp_path):
    url = f"sqlite:///{tmp_path / 'migrations.sqlite'}"
    config = Config(str(BACKEND_DIR / "alembic.ini"))
    config.set_main_option("script_location", str(BACKEND_DIR / "alembic"))
    config.set_main_option("sqlalchemy.url", url)
    config.attributes["configure_logger"] = False
    yield config
    create_engine(url).dispose()


@pytest.fixture
def migrated_engine(alembic_config):
    command.upgrade(alembic_config, "head")
    engine = create_engine(alembic_config.get_main_option("sqlalchemy.url"))
    yield engine
    engine.dispose()


def test_upgrade_creates_schema(migrated_engine):
    inspector = inspect(migrated_engine)
    assert EXPECTED_TABLES <= set(inspector.get_table_names())

    category_indexes = {index["name"] for index in inspector.get_indexes("categories")}
    assert {"idx_categories_slug", "idx_categories_display_order"} <= category_indexes
    badge_indexes = {index["name"] for index in inspector.get_indexes("storebadges")}
    assert "idx_storebadges_expires_at" in badge_indexes


def test_upgrade_seeds_catalog(migrated_engine):
    with migrated_engine.connect() as conn:
        counts = {
            table: conn.execute(text(f"SELECT COUNT(*) FROM {table}")).scalar()
            for table in ("categories", "languages", "subscriptionplans", "badges")
        }
        first = conn.execute(
            text("SELECT slug, is_active FROM categories ORDER BY display_order LIMIT 1")
        ).one()

    assert counts == {"categories": 11, "languages": 10, "subscriptionplans": 3, "badges": 17}
    assert first.slug == "digimon"
    assert bool(first.is_active) is True


def test_upgrade_seeds_admin_on_free_plan(migrated_engine):
    with migrated_engine.connect() as conn:
        admin = conn.execute(
            text("SELECT id, role, password, current_subscription_id FROM users WHERE email = :email"),
            {"email": settings.admin_email},
        ).one()
        subscription = conn.execute(
            text(
                "SELECT s.user_id, p.name FROM usersubscriptions s "
                "JOIN subscriptionplans p ON p.id = s.plan_id WHERE s.id = :id"
            ),
            {"id": admin.current_subscription_id},
        ).one()

    assert admin.role == "admin"
    assert verify_password(settings.admin_password, admin.password)
    assert subscription.user_id == admin.id
    assert subscription.name == "Free"


def test_downgrade_removes_schema(alembic_config, migrated_engine):
    command.downgrade(alembic_config, "base")

    remaining = set(inspect(migrated_engine).get_table_names())
    assert remaining & EXPECTED_TABLES == set()


def test_upgrade_can_be_replayed_after_downgrade(alembic_config, migrated_engine):
    command.downgrade(alembic_config, "base")
    command.upgrade(alembic_config, "head")

    with migrated_engine.connect() as conn:
        assert conn.execute(text("SELECT COUNT(*) FROM categories")).scalar() == 11


@pytest.mark.parametrize("model", [Category, Language])
def test_catalog_tables_match_models(migrated_engine, model):
    """Nullability and index names agree with the ORM declarations."""
    inspector = inspect(migrated_engine)
    table = model.__table__

    migrated = {column["name"]: column for column in inspector.get_columns(table.name)}
    for column in table.columns:
        if column.primary_key:
            continue
        assert migrated[column.name]["nullable"] == column.nullable, column.name

    indexes = {index["name"] for index in inspector.get_indexes(table.name)}
    assert indexes == {index.name for index in table.indexes}


def test_revision_seed_rows_are_frozen(alembic_config, monkeypatch):
    """Editing the application's seed lists does not change what the revision inserts."""
    monkeypatch.setattr(app.seed, "CATEGORIES", [])
    monkeypatch.setattr(app.seed, "LANGUAGES", [])

    command.upgrade(alembic_config, "head")

    engine = create_engine(alembic_config.get_main_option("sqlalchemy.url"))
    try:
        with engine.connect() as conn:
            assert conn.execute(text("SELECT COUNT(*) FROM categories")).scalar() == 11
            assert conn.execute(text("SELECT COUNT(*) FROM languages")).scalar() == 10
    finally:
        engine.dispose()
