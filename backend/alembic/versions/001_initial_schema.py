"""initial marketplace schema

Revision ID: 001
Revises:
Create Date: 2024-05-20 16:00:00
"""

import uuid
from datetime import datetime, timedelta
from decimal import Decimal

import bcrypt
from alembic import op
import sqlalchemy as sa

from app.config import settings

revision = "001"
down_revision = None
branch_labels = None
depends_on = None

# Seed rows as of this revision; later edits belong in a new revision
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

SUBSCRIPTION_PLANS = [
    {
        "name": "Free",
        "price": "0.00",
        "duration_days": 3650,
        "description": "Plan gratuito por defecto",
        "features": {"maxSales": 10, "canCreateStore": False, "branding": False, "statistics": False, "featured": False, "support": "community"},
    },
    {
        "name": "Pro",
        "price": "4.99",
        "duration_days": 30,
        "description": "Plan Pro para usuarios avanzados",
        "features": {"maxSales": 50, "canCreateStore": False, "branding": True, "statistics": True, "featured": True, "support": "priority"},
    },
    {
        "name": "Tienda",
        "price": "9.99",
        "duration_days": 30,
        "description": "Plan para tiendas profesionales",
        "features": {"maxSales": 1000, "canCreateStore": True, "branding": True, "statistics": True, "featured": True, "support": "priority"},
    },
]

ADMIN_NAME = "Administrador"
ADMIN_PLAN = "Free"
BCRYPT_ROUNDS = 10

ICON_BASE = "https://cdn.jsdelivr.net/gh/FortAwesome/Font-Awesome@6.4.0/svgs/solid"

BADGES = [
    {"name": "welcome", "description": "¡Bienvenido a bordo!", "type": "user", "category": "level",
     "icon_url": f"{ICON_BASE}/user-plus.svg", "criteria": {"type": "register"}},
    {"name": "upgrade_pro", "description": "¡Has mejorado a Pro!", "type": "user", "category": "plan",
     "icon_url": f"{ICON_BASE}/arrow-up.svg", "criteria": {"type": "subscription_upgrade", "plan": "Pro"}},
    {"name": "upgrade_store", "description": "¡Ahora eres dueño de una tienda!", "type": "user", "category": "plan",
     "icon_url": f"{ICON_BASE}/store.svg", "criteria": {"type": "subscription_upgrade", "plan": "Store"}},
    {"name": "rookie", "description": "Primeras ventas/compras completadas", "type": "user", "category": "level",
     "icon_url": f"{ICON_BASE}/seedling.svg", "criteria": {"type": "transactions", "count": 5, "period": "all_time"}},
    {"name": "experienced", "description": "Más de 50 transacciones completadas", "type": "user", "category": "level",
     "icon_url": f"{ICON_BASE}/star.svg", "criteria": {"type": "transactions", "count": 50, "period": "all_time"}},
    {"name": "expert", "description": "Más de 200 transacciones completadas", "type": "user", "category": "level",
     "icon_url": f"{ICON_BASE}/crown.svg", "criteria": {"type": "transactions", "count": 200, "period": "all_time"}},
    {"name": "trusted_seller", "description": "Rating promedio superior a 4.5", "type": "user", "category": "reputation",
     "icon_url": f"{ICON_BASE}/shield-check.svg", "criteria": {"type": "rating", "min_average": 4.5, "min_ratings": 10}},
    {"name": "fast_shipper", "description": "Envíos confirmados en menos de 48h", "type": "user", "category": "reputation",
     "icon_url": f"{ICON_BASE}/truck-fast.svg", "criteria": {"type": "shipping_time", "max_hours": 48, "min_sales": 5}},
    {"name": "pro_member", "description": "Usuario con plan Pro", "type": "user", "category": "plan",
     "icon_url": f"{ICON_BASE}/gem.svg", "criteria": {"type": "subscription", "plan": "Pro"}},
    {"name": "store_owner", "description": "Usuario con plan Tienda", "type": "user", "category": "plan",
     "icon_url": f"{ICON_BASE}/store.svg", "criteria": {"type": "subscription", "plan": "Tienda"}},
    {"name": "rising_store", "description": "Más de 100 ventas completadas", "type": "store", "category": "volume",
     "icon_url": f"{ICON_BASE}/arrow-trend-up.svg", "criteria": {"type": "sales", "count": 100, "period": "all_time"}},
    {"name": "popular_store", "description": "Más de 500 ventas completadas", "type": "store", "category": "volume",
     "icon_url": f"{ICON_BASE}/fire.svg", "criteria": {"type": "sales", "count": 500, "period": "all_time"}},
    {"name": "top_rated", "description": "Rating promedio superior a 4.8", "type": "store", "category": "quality",
     "icon_url": f"{ICON_BASE}/trophy.svg", "criteria": {"type": "rating", "min_average": 4.8, "min_ratings": 20}},
    {"name": "active_store", "description": "Más de 50 ventas activas", "type": "store", "category": "quality",
     "icon_url": f"{ICON_BASE}/bolt.svg", "criteria": {"type": "active_sales", "count": 50}},
    {"name": "pokemon_expert", "description": "Especialista en Pokémon", "type": "store", "category": "specialty",
     "icon_url": f"{ICON_BASE}/pokeball.svg", "criteria": {"type": "category_sales", "category": "pokemon", "percentage": 70}},
    {"name": "yugioh_expert", "description": "Especialista en Yu-Gi-Oh!", "type": "store", "category": "specialty",
     "icon_url": f"{ICON_BASE}/wand-sparkles.svg", "criteria": {"type": "category_sales", "category": "yu-gi-oh", "percentage": 70}},
    {"name": "magic_expert", "description": "Especialista en Magic", "type": "store", "category": "specialty",
     "icon_url": f"{ICON_BASE}/wand-magic-sparkles.svg", "criteria": {"type": "category_sales", "category": "magic-the-gathering", "percentage": 70}},
]

# (index, table, column) in creation order
CORE_INDEXES = [
    ("idx_users_email", "users", "email"),
    ("idx_categories_slug", "categories", "slug"),
    ("idx_categories_display_order", "categories", "display_order"),
    ("idx_languages_slug", "languages", "slug"),
    ("idx_languages_display_order", "languages", "display_order"),
    ("idx_notifications_user_id", "notifications", "user_id"),
    ("idx_notifications_is_read", "notifications", "is_read"),
    ("idx_notifications_created_at", "notifications", "created_at"),
    ("idx_usersubscriptions_user_id", "usersubscriptions", "user_id"),
    ("idx_usersubscriptions_end_date", "usersubscriptions", "end_date"),
    ("idx_usersubscriptions_is_active", "usersubscriptions", "is_active"),
]

BADGE_INDEXES = [
    ("idx_badges_type", "badges", "type"),
    ("idx_badges_category", "badges", "category"),
    ("idx_badges_is_active", "badges", "is_active"),
    ("idx_userbadges_user_id", "userbadges", "user_id"),
    ("idx_userbadges_badge_id", "userbadges", "badge_id"),
    ("idx_userbadges_expires_at", "userbadges", "expires_at"),
    ("idx_storebadges_store_id", "storebadges", "store_id"),
    ("idx_storebadges_badge_id", "storebadges", "badge_id"),
    ("idx_storebadges_expires_at", "storebadges", "expires_at"),
]

# Tables created before the badge system, in creation order
CORE_TABLES = [
    "users",
    "subscriptionplans",
    "usersubscriptions",
    "categories",
    "languages",
    "stores",
    "storesociallinks",
    "sales",
    "comments",
    "purchases",
    "favorites",
    "storeratings",
    "userratings",
    "notifications",
]

BADGE_TABLES = ["badges", "userbadges", "storebadges"]


def _id():
    return sa.Column("id", sa.String(36), primary_key=True)


def _fk(name, target, ondelete=None, nullable=True):
    return sa.Column(name, sa.String(36), sa.ForeignKey(f"{target}.id", ondelete=ondelete), nullable=nullable)


def _flag(name, default, nullable=True):
    return sa.Column(name, sa.Boolean(), nullable=nullable, server_default=sa.true() if default else sa.false())


def _timestamps(nullable=True):
    return [
        sa.Column("created_at", sa.DateTime(), nullable=nullable, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=nullable, server_default=sa.func.now()),
    ]


def _new_id():
    return str(uuid.uuid4())


def _hash_password(plain):
    return bcrypt.hashpw(plain.encode("utf-8"), bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def upgrade() -> None:
    # 1. Core tables
    users = op.create_table(
        "users",
        _id(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("password", sa.String(255)),
        sa.Column("role", sa.String(20), server_default="user"),
        _flag("is_store", False),
        sa.Column("google_id", sa.String(255)),
        sa.Column("avatar_url", sa.String(255)),
        sa.Column("current_subscription_id", sa.String(36)),
        *_timestamps(),
        sa.Column("refresh_token", sa.Text()),
        sa.Column("refresh_token_expires_at", sa.DateTime()),
    )

    subscription_plans = op.create_table(
        "subscriptionplans",
        _id(),
        sa.Column("name", sa.String(100), nullable=False, unique=True),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("duration_days", sa.Integer(), nullable=False),
        sa.Column("description", sa.Text()),
        sa.Column("features", sa.JSON()),
        _flag("is_active", True),
        *_timestamps(),
    )

    user_subscriptions = op.create_table(
        "usersubscriptions",
        _id(),
        _fk("user_id", "users", ondelete="CASCADE"),
        _fk("plan_id", "subscriptionplans", ondelete="RESTRICT"),
        sa.Column("start_date", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("end_date", sa.DateTime(), nullable=False),
        _flag("is_active", True),
        sa.Column("payment_id", sa.String(255)),
        _flag("auto_renew", False),
        *_timestamps(),
    )

    with op.batch_alter_table("users") as batch_op:
        batch_op.create_foreign_key(
            "fk_users_subscription",
            "usersubscriptions",
            ["current_subscription_id"],
            ["id"],
            ondelete="SET NULL",
        )

    categories = op.create_table(
        "categories",
        _id(),
        sa.Column("name", sa.String(100), nullable=False, unique=True),
        sa.Column("slug", sa.String(100), nullable=False, unique=True),
        sa.Column("description", sa.Text()),
        _flag("is_active", True, nullable=False),
        sa.Column("display_order", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(nullable=False),
    )

    languages = op.create_table(
        "languages",
        _id(),
        sa.Column("name", sa.String(100), nullable=False, unique=True),
        sa.Column("slug", sa.String(100), nullable=False, unique=True),
        _flag("is_active", True, nullable=False),
        sa.Column("display_order", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(nullable=False),
    )

    op.create_table(
        "stores",
        _id(),
        sa.Column("user_id", sa.String(36), sa.ForeignKey("users.id"), unique=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("avatar_url", sa.String(255)),
        sa.Column("banner_url", sa.String(255)),
        sa.Column("description", sa.Text()),
        sa.Column("location", sa.String(255)),
        *_timestamps(),
    )

    op.create_table(
        "storesociallinks",
        _id(),
        _fk("store_id", "stores", ondelete="CASCADE"),
        sa.Column("platform", sa.String(50), nullable=False),
        sa.Column("url", sa.String(255), nullable=False),
    )

    op.create_table(
        "sales",
        _id(),
        _fk("seller_id", "users", ondelete="CASCADE"),
        _fk("store_id", "stores", ondelete="CASCADE"),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.String(100), nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("image_url", sa.String(255)),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("status", sa.String(20), server_default="available"),
        sa.Column("views", sa.Integer(), server_default="0"),
        _fk("category_id", "categories", nullable=False),
        _fk("language_id", "languages", nullable=False),
        sa.Column("shipping_proof_url", sa.String(255)),
        sa.Column("delivery_proof_url", sa.String(255)),
        sa.Column("reserved_at", sa.DateTime()),
        sa.Column("shipped_at", sa.DateTime()),
        sa.Column("delivered_at", sa.DateTime()),
        sa.Column("completed_at", sa.DateTime()),
        sa.Column("cancelled_at", sa.DateTime()),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.CheckConstraint("quantity >= 0", name="ck_sales_quantity"),
    )

    op.create_table(
        "comments",
        _id(),
        _fk("user_id", "users", ondelete="CASCADE"),
        _fk("sale_id", "sales", ondelete="CASCADE"),
        _fk("store_id", "stores", ondelete="CASCADE"),
        _fk("target_user_id", "users", ondelete="CASCADE"),
        sa.Column("rating", sa.Integer()),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
    )

    op.create_table(
        "purchases",
        _id(),
        _fk("user_id", "users", ondelete="CASCADE"),
        _fk("sale_id", "sales", ondelete="CASCADE"),
        _fk("seller_id", "users", ondelete="CASCADE"),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("image_url", sa.String(255)),
        sa.Column("quantity", sa.Integer(), nullable=False),
        _fk("language_id", "languages", nullable=False),
        _fk("category_id", "categories", nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.CheckConstraint("quantity > 0", name="ck_purchases_quantity"),
    )

    op.create_table(
        "favorites",
        _id(),
        _fk("user_id", "users", ondelete="CASCADE"),
        _fk("sale_id", "sales", ondelete="CASCADE"),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
        sa.UniqueConstraint("user_id", "sale_id", name="uq_favorites_user_sale"),
    )

    for table, owner in (("storeratings", ("store_id", "stores")), ("userratings", ("user_id", "users"))):
        op.create_table(
            table,
            _id(),
            _fk(owner[0], owner[1], ondelete="CASCADE"),
            _fk("rater_id", "users", ondelete="SET NULL"),
            _fk("sale_id", "sales", ondelete="CASCADE"),
            sa.Column("rating", sa.Integer()),
            sa.Column("comment", sa.Text()),
            sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
            sa.CheckConstraint("rating >= 1 AND rating <= 5", name=f"ck_{table}_rating"),
            sa.UniqueConstraint("sale_id", "rater_id", name=f"uq_{table}_sale_rater"),
        )

    op.create_table(
        "notifications",
        _id(),
        _fk("user_id", "users", ondelete="CASCADE"),
        sa.Column("type", sa.String(50), nullable=False),
        _flag("is_read", False),
        sa.Column("related_entity_id", sa.String(36)),
        sa.Column("related_entity_type", sa.String(50)),
        *_timestamps(),
    )

    # 2. Indexes
    for name, table, column in CORE_INDEXES:
        op.create_index(name, table, [column])

    # 3. Seed data
    op.bulk_insert(categories, [{"id": _new_id(), **row} for row in CATEGORIES])
    op.bulk_insert(languages, [{"id": _new_id(), **row} for row in LANGUAGES])

    plan_ids = {plan["name"]: _new_id() for plan in SUBSCRIPTION_PLANS}
    op.bulk_insert(
        subscription_plans,
        [
            {**plan, "id": plan_ids[plan["name"]], "price": Decimal(plan["price"]), "is_active": True}
            for plan in SUBSCRIPTION_PLANS
        ],
    )

    # 4. Admin user on the Free plan
    admin_id = _new_id()
    subscription_id = _new_id()
    duration = next(p["duration_days"] for p in SUBSCRIPTION_PLANS if p["name"] == ADMIN_PLAN)
    now = datetime.utcnow()

    op.bulk_insert(
        users,
        [{
            "id": admin_id,
            "name": ADMIN_NAME,
            "email": settings.admin_email,
            "password": _hash_password(settings.admin_password),
            "role": "admin",
            "is_store": False,
        }],
    )
    op.bulk_insert(
        user_subscriptions,
        [{
            "id": subscription_id,
            "user_id": admin_id,
            "plan_id": plan_ids[ADMIN_PLAN],
            "start_date": now,
            "end_date": now + timedelta(days=duration),
            "is_active": True,
        }],
    )
    op.execute(
        users.update()
        .where(users.c.id == admin_id)
        .values(current_subscription_id=subscription_id)
    )

    # 5. Badges system
    badges = op.create_table(
        "badges",
        _id(),
        sa.Column("name", sa.String(50), nullable=False, unique=True),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("category", sa.String(20), nullable=False),
        sa.Column("icon_url", sa.String(255), nullable=False),
        sa.Column("criteria", sa.JSON(), nullable=False),
        _flag("is_active", True),
        *_timestamps(),
        sa.CheckConstraint("type IN ('user', 'store')", name="ck_badges_type"),
        sa.CheckConstraint(
            "category IN ('level', 'reputation', 'plan', 'volume', 'quality', 'specialty')",
            name="ck_badges_category",
        ),
    )

    for table, owner in (("userbadges", ("user_id", "users")), ("storebadges", ("store_id", "stores"))):
        op.create_table(
            table,
            _id(),
            _fk(owner[0], owner[1], ondelete="CASCADE"),
            _fk("badge_id", "badges", ondelete="CASCADE"),
            sa.Column("awarded_at", sa.DateTime(), server_default=sa.func.now()),
            sa.Column("expires_at", sa.DateTime()),
            sa.Column("metadata", sa.JSON()),
            *_timestamps(),
            sa.UniqueConstraint(owner[0], "badge_id", name=f"uq_{table}_owner_badge"),
        )

    for name, table, column in BADGE_INDEXES:
        op.create_index(name, table, [column])

    op.bulk_insert(badges, [{"id": _new_id(), "is_active": True, **badge} for badge in BADGES])


def downgrade() -> None:
    # Badge system first, in exact reverse order of creation
    for name, table, _ in reversed(BADGE_INDEXES):
        op.drop_index(name, table_name=table)
    for table in reversed(BADGE_TABLES):
        op.drop_table(table)

    for name, table, _ in reversed(CORE_INDEXES):
        op.drop_index(name, table_name=table)

    for table in reversed(CORE_TABLES):
        # SQLite cannot drop a constraint in place and does not block the drop
        if table == "usersubscriptions" and op.get_context().dialect.name != "sqlite":
            op.drop_constraint("fk_users_subscription", "users", type_="foreignkey")
        op.drop_table(table)
