"""LinkedIn job pages."""

from jobpreview.domain import Platform
from jobpreview.extraction.patterns import find_div_with_class, find_meta_description
from jobpreview.extraction.sanitizer import strip_html


class LinkedInStrategy:
    """Reads the description div, falling back to ``<meta name="description">``."""

    platform = Platform.LINKEDIN

    def extract(self, html: str) -> str | None:
        inner = find_div_with_class(html, "description")
        if inner is not None:
            return strip_html(inner)

        return find_meta_description(html, include_property=False)
