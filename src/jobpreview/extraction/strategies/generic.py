"""Fallback strategy for unknown sites and empty platform results."""

import logging
from collections.abc import Callable

from jobpreview.domain import Platform
from jobpreview.extraction.patterns import (
    find_article,
    find_description_div,
    find_description_section,
    find_meta_description,
)
from jobpreview.extraction.sanitizer import strip_html

logger = logging.getLogger(__name__)

# Tried in order; each returns the inner markup of its first match.
BODY_LOCATORS: tuple[tuple[str, Callable[[str], str | None]], ...] = (
    ("description_div", find_description_div),
    ("description_section", find_description_section),
    ("article", find_article),
)

MIN_BODY_LENGTH = 100
MIN_META_LENGTH = 50


class GenericStrategy:
    """Tries common description containers, then the meta description.

    Matches shorter than the thresholds are rejected so that navigation
    shells that happen to carry a matching class do not win.
    """

    platform = Platform.GENERIC

    def __init__(
        self,
        min_body_length: int = MIN_BODY_LENGTH,
        min_meta_length: int = MIN_META_LENGTH,
    ):
        self.min_body_length = min_body_length
        self.min_meta_length = min_meta_length

    def extract(self, html: str) -> str | None:
        for name, locate in BODY_LOCATORS:
            inner = locate(html)
            if inner is None:
                continue
            text = strip_html(inner)
            if len(text) > self.min_body_length:
                logger.debug("Generic: accepted %s (%d chars)", name, len(text))
                return text
            logger.debug("Generic: rejected %s (%d chars)", name, len(text))

        meta = find_meta_description(html)
        if meta and len(meta) > self.min_meta_length:
            logger.debug("Generic: accepted meta description (%d chars)", len(meta))
            return meta

        return None
