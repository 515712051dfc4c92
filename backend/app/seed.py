"""
Seed data for the marketplace catalog.

``seed_catalog`` upserts the categories and languages by slug. Databases built
by Alembic already carry the rows frozen into the initial revision; this keeps
those built straight from the ORM metadata (local development, tests) and
older databases in line with the current catalog.
"""

import logging

from sqlalchemy.orm import Session

from app.database import SessionLocal
from app.models import Category, Language

logger = logging.getLogger(__name__)

CATEGORIES = [
    {"name": "Digimon", "slug": "digimon", "description": "Cartas coleccionables del juego Digimon Card Game", "display_order": 1},
    {"name": "Dragon Ball Fusion World", "slug": "dragon-ball-fusion-world", "description": "Cartas del juego Dragon Ball Fusion World", "display_order": 2},
    {"name": "Dragon Ball Masters", "slug": "dragon-ball-masters", "description": "Cartas del juego Dragon Ball Super Card Game", "display_order": 3},
    {"name": "Gundam Card Game", "slug": "gundam-card-game", "description": "Cartas del juego Gundam Card Game", "display_order": 4},
    {"name": "Magic the gathering", "slug": "magic-the-gathering", "description": "Cartas del juego Magic: The Gathering", "display_order": 5},
    {"name": "Mitos y leyendas", "slug": "mitos-y-leyendas", "description": "Cartas del juego Mitos y Leyendas", "display_order": 6},
    {"name": "One Piece", "slug": "one-piece", "description": "Cartas del juego One Piece Card Game", "display_order": 7},
    {"name": "Otro", "slug": "otro", "description": "Otras cartas y productos coleccionables", "display_order": 8},
    {"name": "Pokémon", "slug": "pokemon", "description": "Cartas del juego Pokémon Trading Card Game", "display_order": 9},
    {"name": "Union Arena", "slug": "union-arena", "description": "Cartas del juego Union Arena", "display_order": 10},
    {"name": "Yu-Gi-Oh", "slug": "yu-gi-oh", "description": "Cartas del juego Yu-Gi-Oh! Trading Card Game", "display_order": 11},
]

LANGUAGES = [
    {"name": "Inglés", "slug": "ingles", "display_order": 1},
    {"name": "Español", "slug": "espanol", "display_order": 2},
    {"name": "Japonés", "slug": "japones", "display_order": 3},
    {"name": "Coreano", "slug": "coreano", "display_order": 4},
    {"name": "Francés", "slug": "frances", "display_order": 5},
    {"name": "Alemán", "slug": "aleman", "display_order": 6},
    {"name": "Italiano", "slug": "italiano", "display_order": 7},
    {"name": "Portugués", "slug": "portugues", "display_order": 8},
    {"name": "Chino", "slug": "chino", "display_order": 9},
    {"name": "Otro", "slug": "otro", "display_order": 10},
]


def _upsert_by_slug(db: Session, model, rows) -> tuple:
    created = updated = 0
    for row in rows:
        existing = db.query(model).filter(model.slug == row["slug"]).first()
        if existing is None:
            db.add(model(**row))
            created += 1
            continue
        for field, value in row.items():
            setattr(existing, field, value)
        updated += 1
    return created, updated


def seed_catalog(db: Session) -> dict:
    """Insert missing categories and languages, refresh existing ones by slug."""
    categories = _upsert_by_slug(db, Category, CATEGORIES)
    languages = _upsert_by_slug(db, Language, LANGUAGES)
    db.commit()

    summary = {
        "categories_created": categories[0],
        "categories_updated": categories[1],
        "languages_created": languages[0],
        "languages_updated": languages[1],
    }
    logger.info(f"Catalog seeded: {summary}")
    return summary


def main() -> None:
    db = SessionLocal()
    try:
        seed_catalog(db)
    except Exception:
        logger.exception("Error seeding catalog")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    from app.logging_config import configure_logging
    from app.config import settings

    configure_logging(settings.log_level)
    main()
