"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - The ancestor scope of all sites comes from settings, never from key logic

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Defaults work out-of-the-box: SQLite file database, allow-all CORS
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from app.core.domain_types import ParentKey


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite+aiosqlite:///./sites.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    database_create_all: bool = True

    # Sites
    sites_path: str = "/sites"
    site_list_kind: str = "SiteList"
    site_list_name: str = "default"

    # API
    cors_origins: list[str] = ["*"]
    host: str = "0.0.0.0"
    port: int = 8080

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    def site_list_key(self) -> ParentKey:
        """Ancestor key every Site is stored and queried under."""
        return ParentKey(kind=self.site_list_kind, name=self.site_list_name)


@lru_cache
def get_settings() -> Settings:
    return Settings()
