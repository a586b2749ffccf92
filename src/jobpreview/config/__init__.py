"""Service configuration package."""

from .settings import Settings, clear_settings_cache, env_files, get_settings

__all__ = [
    "Settings",
    "clear_settings_cache",
    "env_files",
    "get_settings",
]
