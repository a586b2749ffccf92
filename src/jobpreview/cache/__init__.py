"""In-memory result cache."""

from .description_cache import CacheEntry, DescriptionCache

__all__ = ["CacheEntry", "DescriptionCache"]
