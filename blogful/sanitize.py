"""HTML sanitization for user-supplied text.

Markup outside the allow-list is escaped rather than removed, so a submitted
``<script>`` tag comes back as the literal text ``&lt;script&gt;``. Allowed
tags survive with only their allowed attributes.
"""

from bleach.sanitizer import Cleaner


ALLOWED_TAGS = frozenset(
    {
        "a",
        "abbr",
        "b",
        "blockquote",
        "br",
        "code",
        "em",
        "i",
        "img",
        "li",
        "ol",
        "p",
        "pre",
        "strong",
        "u",
        "ul",
    }
)

ALLOWED_ATTRIBUTES = {
    "a": ["href", "title"],
    "abbr": ["title"],
    "img": ["src", "alt", "title", "width", "height"],
}

ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto"})

_cleaner = Cleaner(
    tags=ALLOWED_TAGS,
    attributes=ALLOWED_ATTRIBUTES,
    protocols=ALLOWED_PROTOCOLS,
    strip=False,
    strip_comments=True,
)


def sanitize(text: str | None) -> str | None:
    """Escape disallowed markup in text.

    Args:
        text: Raw user-supplied text, or None.

    Returns:
        Sanitized text, or None if text was None.
    """
    if text is None:
        return None
    return _cleaner.clean(text)
