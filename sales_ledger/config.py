"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Connection strings come from environment variables or .env (never hardcoded
      beyond the local SQLite default)
    - get_settings() is cached (lru_cache) — single instance per process
    - Demo seeding only ever happens in the development environment

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all settings: works out-of-the-box against a local
      SQLite file
"""

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite+aiosqlite:///./sales_ledger.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres URLs come as postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Environment
    environment: Literal["development", "production"] = "development"
    seed_demo_data: bool = True

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @property
    def should_seed(self) -> bool:
        return self.environment == "development" and self.seed_demo_data


@lru_cache
def get_settings() -> Settings:
    return Settings()
