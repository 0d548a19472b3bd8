"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - default_max_users_limit, when set, is never below default_min_users_limit

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: works out-of-the-box locally
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Room defaults (applied when a create request omits them)
    default_min_users_limit: int = 3
    default_max_users_limit: int | None = 20

    # Draw: a fixed seed makes every draw reproducible (local debugging only)
    draw_seed: int | None = None

    # API
    cors_origins: list[str] = ["http://localhost:4200"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @model_validator(mode="after")
    def check_limits(self) -> "Settings":
        if self.default_min_users_limit < 0:
            raise ValueError("default_min_users_limit cannot be negative")
        if (
            self.default_max_users_limit is not None
            and self.default_max_users_limit < self.default_min_users_limit
        ):
            raise ValueError(
                "default_max_users_limit cannot be lower than default_min_users_limit",
            )
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
