"""HTML fragment to plain text conversion."""

import re

MAX_DESCRIPTION_LENGTH = 3000

# Structural boundaries that become visible line breaks, applied in order.
BLOCK_REPLACEMENTS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"<br\s*/?>", re.IGNORECASE), "\n"),
    (re.compile(r"</p>", re.IGNORECASE), "\n\n"),
    (re.compile(r"</div>", re.IGNORECASE), "\n"),
    (re.compile(r"</li>", re.IGNORECASE), "\n"),
    (re.compile(r"<li\b[^>]*>", re.IGNORECASE), "• "),
)

TAG_PATTERN = re.compile(r"<[^>]+>")

# Decoded sequentially, so "&amp;lt;" ends up as "<". A single pass decodes one
# level: "&amp;amp;" becomes "&amp;", which a second pass turns into "&".
NAMED_ENTITIES: tuple[tuple[str, str], ...] = (
    ("&nbsp;", " "),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
    ("&#x27;", "'"),
)

# Eight or more digits are above U+10FFFF, so such references stay as written.
NUMERIC_ENTITY_PATTERN = re.compile(r"&#(\d{1,7});")
EXCESS_NEWLINES_PATTERN = re.compile(r"\n\s*\n\s*\n")
HORIZONTAL_WHITESPACE_PATTERN = re.compile(r"[ \t]+")


def _decode_numeric_entity(match: re.Match[str]) -> str:
    code_point = int(match.group(1))
    # Surrogates and out-of-range values are kept verbatim.
    if code_point > 0x10FFFF or 0xD800 <= code_point <= 0xDFFF:
        return match.group(0)
    return chr(code_point)


def decode_entities(text: str) -> str:
    """Decode the supported named entities and decimal character references."""
    for entity, replacement in NAMED_ENTITIES:
        text = text.replace(entity, replacement)
    return NUMERIC_ENTITY_PATTERN.sub(_decode_numeric_entity, text)


def strip_html(html: str, max_length: int = MAX_DESCRIPTION_LENGTH) -> str:
    """Convert a raw HTML fragment into readable plain text.

    Block boundaries turn into line breaks and list items into bullets, every
    remaining tag is dropped, entities are decoded, and whitespace is
    normalized. The result never exceeds ``max_length`` characters.
    """
    text = html
    for pattern, replacement in BLOCK_REPLACEMENTS:
        text = pattern.sub(replacement, text)

    text = TAG_PATTERN.sub("", text)
    # Escaped markup such as "&lt;script&gt;" only becomes a tag once decoded.
    text = TAG_PATTERN.sub("", decode_entities(text))

    text = EXCESS_NEWLINES_PATTERN.sub("\n\n", text)
    text = HORIZONTAL_WHITESPACE_PATTERN.sub(" ", text)

    return text.strip()[:max_length]
