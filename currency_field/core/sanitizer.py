"""Sanitizer — strips everything but ASCII digits and separators.

Runs on every edit so disallowed characters never persist in the field.
"""

import re

from currency_field.constants import ALLOWED_CHARACTERS

# Explicit character class rather than \d: Unicode digits must not survive
_DISALLOWED = re.compile(f"[^{re.escape(ALLOWED_CHARACTERS)}]")


def sanitize(text: str) -> str:
    """Remove every character other than ``0-9``, ``.`` and ``,``.

    Order of the surviving characters is preserved.

    >>> sanitize("as12.3")
    '12.3'
    """
    return _DISALLOWED.sub("", text)


def sanitized_cursor(text: str, cursor: int) -> int:
    """Map a cursor position in *text* to the same spot after sanitizing."""
    cursor = max(0, min(cursor, len(text)))
    return len(sanitize(text[:cursor]))
