"""Base types for extraction strategies."""

from typing import Protocol

from jobpreview.domain import Platform


class ExtractionStrategy(Protocol):
    """Extracts a plain-text description from a full HTML document.

    Implementations return ``None`` ("no result") when their markup
    conventions are not found, and never raise on malformed input.
    """

    platform: Platform

    def extract(self, html: str) -> str | None:
        """Return the sanitized description, or None."""
        ...
