"""Service settings loaded from environment variables.

Values are read from (highest priority first):
1. OS environment variables prefixed with ``JOBPREVIEW_``
2. The file named by ``JOBPREVIEW_ENV_FILE``, or else ``config/.env.dev``
   over ``config/.env`` (paths relative to the working directory; missing
   files are skipped)
3. Defaults below
"""

import os
from datetime import timedelta
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENV_FILES = (Path("config/.env"), Path("config/.env.dev"))


def env_files() -> tuple[Path, ...]:
    """Env files to load, later files overriding earlier ones."""
    override = os.environ.get("JOBPREVIEW_ENV_FILE")
    if override:
        return (Path(override),)
    return DEFAULT_ENV_FILES


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class Settings(BaseSettings):
    """Job preview service configuration."""

    log_level: str = "INFO"

    # Result cache
    cache_ttl_hours: float = Field(default=24.0, gt=0)
    cache_sweep_interval_minutes: float = Field(default=60.0, gt=0)

    # Outbound fetch. None means no timeout is imposed on upstream pages.
    fetch_timeout: float | None = None
    user_agent: str = DEFAULT_USER_AGENT
    accept_language: str = "en-US,en;q=0.5"

    model_config = SettingsConfigDict(
        env_file=DEFAULT_ENV_FILES,
        env_file_encoding="utf-8",
        env_prefix="JOBPREVIEW_",
        extra="ignore",
    )

    @property
    def cache_ttl(self) -> timedelta:
        return timedelta(hours=self.cache_ttl_hours)

    @property
    def cache_sweep_interval(self) -> timedelta:
        return timedelta(minutes=self.cache_sweep_interval_minutes)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings(_env_file=env_files())


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
