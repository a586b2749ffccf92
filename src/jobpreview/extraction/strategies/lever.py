"""Lever job pages."""

import logging

from jobpreview.domain import Platform
from jobpreview.extraction.patterns import find_divs_with_class
from jobpreview.extraction.sanitizer import strip_html

logger = logging.getLogger(__name__)

MAX_CONTENT_BLOCKS = 3
MAX_SECTION_BLOCKS = 5


class LeverStrategy:
    """Joins Lever's content blocks, or its posting sections as a fallback."""

    platform = Platform.LEVER

    def extract(self, html: str) -> str | None:
        content_blocks = find_divs_with_class(html, "content")
        if content_blocks:
            logger.debug("Lever: %d content blocks", len(content_blocks))
            return strip_html("\n".join(content_blocks[:MAX_CONTENT_BLOCKS]))

        section_blocks = find_divs_with_class(html, "section")
        if section_blocks:
            logger.debug("Lever: %d section blocks", len(section_blocks))
            return strip_html("\n".join(section_blocks[:MAX_SECTION_BLOCKS]))

        return None
