"""
Security utilities for sanitizing user-supplied text before it is published
"""
from typing import Optional


# Ampersand must come first so already-escaped entities are not re-processed
HTML_ESCAPES = [
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
]


def escape_html(value: Optional[str]) -> str:
    """
    Escape a user-supplied value for interpolation into HTML text or attributes.

    Every submission field that ends up in the published document goes through
    here, so no field can introduce live markup.

    Args:
        value: Raw text (None and empty string are allowed)

    Returns:
        str: Escaped text, or "" for empty input
    """
    if not value:
        return ""

    escaped = str(value)
    for char, entity in HTML_ESCAPES:
        escaped = escaped.replace(char, entity)
    return escaped
