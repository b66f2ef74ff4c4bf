"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Database credentials come from environment variables or .env (never hardcoded)
    - get_settings() is cached (lru_cache): single instance per process
    - sqlalchemy_url always names an async driver
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

_SYNC_POSTGRES_PREFIXES = ("postgresql://", "postgres://")


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database: either a full URL or host/user/password parameters
    database_url: str = ""

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str):
            for prefix in _SYNC_POSTGRES_PREFIXES:
                if v.startswith(prefix):
                    return v.replace(prefix, "postgresql+asyncpg://", 1)
        return v

    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "postgres"
    db_password: str = "postgres"
    db_name: str = "postgres"

    database_pool_size: int = 5
    database_max_overflow: int = 10
    database_create_tables: bool = True

    # HTTP
    host: str = "0.0.0.0"
    port: int = 8010
    cors_origins: list[str] = ["http://localhost:3000"]

    # Pagination
    default_page_size: int = 10
    max_page_size: int = 100

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def sqlalchemy_url(self) -> str:
        if self.database_url:
            return self.database_url
        return URL.create(
            "postgresql+asyncpg",
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        ).render_as_string(hide_password=False)


@lru_cache
def get_settings() -> Settings:
    return Settings()
