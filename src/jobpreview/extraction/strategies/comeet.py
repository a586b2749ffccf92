"""Comeet job pages.

Comeet renders client-side from a ``POSITION_DATA`` object embedded in the
page. The strategy tries, in order:

1. strict JSON parse of that object, rendering its ``custom_fields.details``
   list as bold-labelled sections, or its plain ``description`` field
2. a loose ``"description": "..."`` match when the object is not valid JSON
   or is nested too deeply to parse
3. the page's description meta tag
"""

import json
import logging
from typing import Any

from jobpreview.domain import Platform
from jobpreview.extraction.patterns import (
    find_loose_description,
    find_meta_description,
    find_position_data,
)
from jobpreview.extraction.sanitizer import strip_html

logger = logging.getLogger(__name__)


def render_detail_fields(details: list[Any]) -> str | None:
    """Render name/value pairs as ``**name**`` headers over their text."""
    parts: list[str] = []
    for field in details:
        if not isinstance(field, dict):
            continue
        name = field.get("name")
        value = field.get("value")
        if name and isinstance(value, str) and value:
            parts.append(f"**{name}**\n{strip_html(value)}")
    return "\n\n".join(parts) if parts else None


def unescape_loose_description(raw: str) -> str:
    """Undo the JSON escapes a loose regex match leaves behind."""
    return raw.replace("\\n", "\n").replace('\\"', '"')


class ComeetStrategy:
    """Extracts from the embedded ``POSITION_DATA`` object."""

    platform = Platform.COMEET

    def extract(self, html: str) -> str | None:
        raw_data = find_position_data(html)
        if raw_data is not None:
            description = self._from_position_data(html, raw_data)
            if description:
                return description

        meta = find_meta_description(html)
        if meta:
            logger.debug("Comeet: using meta description")
        return meta

    def _from_position_data(self, html: str, raw_data: str) -> str | None:
        try:
            data = json.loads(raw_data)
        except (json.JSONDecodeError, RecursionError) as e:
            logger.debug("Comeet: POSITION_DATA could not be parsed (%s)", type(e).__name__)
            return self._from_loose_match(html)

        if not isinstance(data, dict):
            logger.debug("Comeet: POSITION_DATA is not an object")
            return self._from_loose_match(html)

        custom_fields = data.get("custom_fields")
        details = custom_fields.get("details") if isinstance(custom_fields, dict) else None
        if isinstance(details, list):
            rendered = render_detail_fields(details)
            if rendered:
                logger.debug("Comeet: rendered %d detail fields", len(details))
                return rendered

        description = data.get("description")
        if isinstance(description, str) and description:
            return strip_html(description)

        return None

    def _from_loose_match(self, html: str) -> str | None:
        raw = find_loose_description(html)
        if raw is None:
            return None
        logger.debug("Comeet: using loose description match")
        return strip_html(unescape_loose_description(raw))
