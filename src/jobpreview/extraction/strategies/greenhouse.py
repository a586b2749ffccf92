"""Greenhouse job pages."""

from jobpreview.domain import Platform
from jobpreview.extraction.patterns import find_div_by_id
from jobpreview.extraction.sanitizer import strip_html

CONTAINER_IDS = ("content", "app_body")


class GreenhouseStrategy:
    """Reads the ``#content`` container, falling back to ``#app_body``."""

    platform = Platform.GREENHOUSE

    def extract(self, html: str) -> str | None:
        for element_id in CONTAINER_IDS:
            inner = find_div_by_id(html, element_id)
            if inner is not None:
                return strip_html(inner)
        return None
