"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Secrets come from environment variables (the default jwt_secret is for local dev only)
    - get_settings() is cached (lru_cache) — single instance per process
    - The bootstrap admin is seeded only when both email and password are set

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box locally
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Auth
    jwt_secret: str = "change-me-in-production-32-bytes!"
    jwt_algorithm: str = "HS256"
    token_ttl_minutes: int = 60 * 12

    # Bootstrap super admin (seeded into the store on startup)
    bootstrap_admin_name: str = "Super Administrator"
    bootstrap_admin_email: str | None = None
    bootstrap_admin_password: str | None = None

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
