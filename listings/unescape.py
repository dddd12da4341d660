from __future__ import annotations

from bs4 import BeautifulSoup


ESCAPED_OPEN_TAG = "&lt;"
ESCAPED_TAG_HINTS = ("&lt;div", "&lt;p")
LISTING_MARKER = "product-tile-"

# Order matters: "&amp;" must come after "&lt;"/"&gt;" so "&amp;lt;" stays "&lt;".
ENTITY_REPLACEMENTS = (
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&amp;", "&"),
    ("&quot;", '"'),
    ("&#39;", "'"),
)


def has_escaped_structure(content: str) -> bool:
    """Whether the markup itself (not just some text) arrives entity-escaped."""
    if content.strip().startswith(ESCAPED_OPEN_TAG):
        return True
    return any(hint in content for hint in ESCAPED_TAG_HINTS)


def decode_entities(text: str) -> str:
    for entity, char in ENTITY_REPLACEMENTS:
        text = text.replace(entity, char)
    return text


def _joined_text(soup: BeautifulSoup, selector: str) -> str:
    return "".join(el.get_text() for el in soup.select(selector))


def unescape_listing(content: str) -> str:
    """
    Return the markup the extractor should parse.

    Saved pages sometimes carry the listing as escaped text inside a rich-text
    wrapper (``<p class="p1"><span class="s1">&lt;div ...``). In that case the
    wrapper text is pulled out and decoded; otherwise content is returned as is.
    """
    if not has_escaped_structure(content):
        return content

    soup = BeautifulSoup(content, "lxml")
    escaped = _joined_text(soup, "p.p1 span.s1")
    if not escaped:
        first_p = soup.select_one("p")
        escaped = first_p.get_text() if first_p else ""
    if not escaped and content.strip().startswith(ESCAPED_OPEN_TAG):
        # Bare escaped fragment: whether the parser wraps it in <p> varies by libxml2 version
        escaped = soup.get_text()
    if not escaped and LISTING_MARKER in content:
        escaped = content

    return decode_entities(escaped)
