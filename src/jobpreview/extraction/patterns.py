"""Regex locators for job posting markup.

Each locator hides one pattern behind a named function so the strategies only
depend on "find X in this page". Swapping a locator for a structural HTML
parser must not change what the strategies see: inner markup for single
matches, whole elements for ``find_divs_with_class``.
"""

import re
from functools import lru_cache

META_DESCRIPTION_PATTERN = re.compile(
    r'<meta\s+(?:name|property)="(?:og:)?description"\s+content="([^"]+)"',
    re.IGNORECASE,
)
NAMED_META_DESCRIPTION_PATTERN = re.compile(
    r'<meta\s+name="description"\s+content="([^"]+)"',
    re.IGNORECASE,
)

# Comeet assigns the posting to a page-level variable followed by the next
# declaration.
POSITION_DATA_PATTERN = re.compile(
    r"POSITION_DATA\s*=\s*(\{[\s\S]*?\});?\s*(?:var|const|let|COMPANY_DATA)"
)
LOOSE_DESCRIPTION_PATTERN = re.compile(r'"description"\s*:\s*"([^"]+)"')

GENERIC_DESCRIPTION_DIV_PATTERN = re.compile(
    r'<div[^>]*class="[^"]*(?:job-description|jobDescription|description|job-details|jobDetails)[^"]*"[^>]*>'
    r"([\s\S]*?)</div>",
    re.IGNORECASE,
)
GENERIC_SECTION_PATTERN = re.compile(
    r'<section[^>]*class="[^"]*(?:description|details|content)[^"]*"[^>]*>'
    r"([\s\S]*?)</section>",
    re.IGNORECASE,
)
GENERIC_ARTICLE_PATTERN = re.compile(r"<article[^>]*>([\s\S]*?)</article>", re.IGNORECASE)


@lru_cache(maxsize=16)
def _div_with_class_pattern(keyword: str) -> re.Pattern[str]:
    return re.compile(
        rf'<div[^>]*class="[^"]*{re.escape(keyword)}[^"]*"[^>]*>([\s\S]*?)</div>',
        re.IGNORECASE,
    )


@lru_cache(maxsize=16)
def _div_by_id_pattern(element_id: str) -> re.Pattern[str]:
    return re.compile(
        rf'<div[^>]*id="{re.escape(element_id)}"[^>]*>([\s\S]*?)</div>',
        re.IGNORECASE,
    )


def find_meta_description(html: str, *, include_property: bool = True) -> str | None:
    """Return the raw content of the page's description meta tag.

    With ``include_property`` the tag may use ``property=`` and the
    ``og:description`` name; otherwise only ``name="description"`` counts.
    """
    pattern = META_DESCRIPTION_PATTERN if include_property else NAMED_META_DESCRIPTION_PATTERN
    match = pattern.search(html)
    return match.group(1) if match else None


def find_divs_with_class(html: str, keyword: str) -> list[str]:
    """Return every whole ``<div>`` element whose class contains ``keyword``."""
    return [match.group(0) for match in _div_with_class_pattern(keyword).finditer(html)]


def find_div_with_class(html: str, keyword: str) -> str | None:
    """Return the inner markup of the first div whose class contains ``keyword``."""
    match = _div_with_class_pattern(keyword).search(html)
    return match.group(1) if match else None


def find_div_by_id(html: str, element_id: str) -> str | None:
    """Return the inner markup of the first div with the given id."""
    match = _div_by_id_pattern(element_id).search(html)
    return match.group(1) if match else None


def find_position_data(html: str) -> str | None:
    """Return the raw object literal assigned to ``POSITION_DATA``."""
    match = POSITION_DATA_PATTERN.search(html)
    return match.group(1) if match else None


def find_loose_description(html: str) -> str | None:
    """Return the first ``"description": "..."`` string value, still escaped."""
    match = LOOSE_DESCRIPTION_PATTERN.search(html)
    return match.group(1) if match else None


def find_description_div(html: str) -> str | None:
    """Inner markup of the first div whose class names a job description."""
    match = GENERIC_DESCRIPTION_DIV_PATTERN.search(html)
    return match.group(1) if match else None


def find_description_section(html: str) -> str | None:
    """Inner markup of the first section classed as description/details/content."""
    match = GENERIC_SECTION_PATTERN.search(html)
    return match.group(1) if match else None


def find_article(html: str) -> str | None:
    """Inner markup of the first ``<article>`` element."""
    match = GENERIC_ARTICLE_PATTERN.search(html)
    return match.group(1) if match else None
