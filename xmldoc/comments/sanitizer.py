# xmldoc/comments/sanitizer.py

import logging
from functools import lru_cache

import bleach

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _get_bleach_config():
    """Cache bleach configuration for better performance."""
    allowed_tags = set(bleach.sanitizer.ALLOWED_TAGS).union(
        {
            # text
            "p",
            "br",
            "div",
            "span",
            "em",
            "strong",
            "b",
            "i",
            "u",
            "sub",
            "sup",
            # lists
            "ul",
            "ol",
            "li",
            "dl",
            "dt",
            "dd",
            # code
            "pre",
            "code",
            "kbd",
            "samp",
            "var",
            # tables
            "table",
            "thead",
            "tbody",
            "tr",
            "th",
            "td",
            # links
            "a",
        }
    )

    allowed_attrs = {
        "*": ["class", "id", "title"],
        "a": ["href", "title"],
        "span": ["class", "name"],
        "th": ["colspan", "rowspan", "scope"],
        "td": ["colspan", "rowspan"],
    }

    allowed_protocols = ["http", "https", "mailto"]

    return allowed_tags, allowed_attrs, allowed_protocols


def sanitize_fragment(html: str) -> str:
    """
    Sanitize a rendered comment fragment using bleach.

    Tags outside the allow-list (unrecognised documentation tags such as a
    nested <seealso>) are escaped rather than dropped, so nothing in the
    comment silently disappears.
    """
    if not html:
        return html

    allowed_tags, allowed_attrs, allowed_protocols = _get_bleach_config()

    try:
        return bleach.clean(
            html,
            tags=allowed_tags,
            attributes=allowed_attrs,
            protocols=allowed_protocols,
            strip=False,  # Escape disallowed tags instead of removing them
        )
    except Exception as e:
        logger.error(f"Bleach sanitization failed: {e}", exc_info=True)
        return html
