"""
Application configuration using Pydantic settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    # App
    app_name: str = "Beyond TCG"
    api_prefix: str = "/api"
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite:///./data/db.sqlite"

    # Auth
    jwt_secret: str = "dev-change-this-secret-in-production"
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24
    catalog_editor_roles: list[str] = ["user", "admin"]

    # Seeded admin account (initial migration)
    admin_email: str = "admin@beyondtcg.cl"
    admin_password: str = "Admin1234"

    # Server
    api_host: str = "0.0.0.0"
    api_port: int = 3000
    frontend_url: str = "http://localhost:4200"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )


# Global settings instance
settings = Settings()
