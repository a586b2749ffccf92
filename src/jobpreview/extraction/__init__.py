"""Job description extraction: sanitizer, strategies and the fetcher."""

from .fetcher import DEFAULT_HEADERS, JobDescriptionFetcher, build_headers, validate_url
from .sanitizer import MAX_DESCRIPTION_LENGTH, strip_html

__all__ = [
    "DEFAULT_HEADERS",
    "MAX_DESCRIPTION_LENGTH",
    "JobDescriptionFetcher",
    "build_headers",
    "strip_html",
    "validate_url",
]
