"""Shared test fixtures."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient
import uuid

from app.database import Base, get_db
from app.main import app
from app.models.category import Category
from app.models.language import Language
from app.security import build_access_token


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test using in-memory SQLite."""
    # Use StaticPool to ensure all connections use the same in-memory database
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    Base.metadata.create_all(bind=engine)

    # Create session
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    """Bearer headers for a regular signed-in user."""
    token = build_access_token(user_id=str(uuid.uuid4()), email="seller@example.com")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def guest_headers():
    """Bearer headers for a role that may not edit the catalog."""
    token = build_access_token(user_id=str(uuid.uuid4()), email="guest@example.com", role="guest")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def sample_category(db_session):
    """Create a sample category."""
    category = Category(
        id=str(uuid.uuid4()),
        name="Pokémon",
        slug="pokemon",
        description="Cartas del juego Pokémon Trading Card Game",
        display_order=9,
    )
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category


@pytest.fixture
def sample_language(db_session):
    """Create a sample language."""
    language = Language(
        id=str(uuid.uuid4()),
        name="Japonés",
        slug="japones",
        display_order=3,
    )
    db_session.add(language)
    db_session.commit()
    db_session.refresh(language)
    return language
