"""Hosting platform detection from a job posting URL."""

from enum import Enum


class Platform(str, Enum):
    """Applicant-tracking system a posting is hosted on."""

    COMEET = "comeet"
    LEVER = "lever"
    GREENHOUSE = "greenhouse"
    LINKEDIN = "linkedin"
    GENERIC = "generic"


# Checked in order; the first marker contained in the URL wins.
PLATFORM_MARKERS: tuple[tuple[str, Platform], ...] = (
    ("comeet.com", Platform.COMEET),
    ("lever.co", Platform.LEVER),
    ("greenhouse.io", Platform.GREENHOUSE),
    ("linkedin.com", Platform.LINKEDIN),
)


def detect_platform(url: str) -> Platform:
    """Classify a URL by substring markers, falling back to GENERIC."""
    url_lower = url.lower()
    for marker, platform in PLATFORM_MARKERS:
        if marker in url_lower:
            return platform
    return Platform.GENERIC
