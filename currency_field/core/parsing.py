"""Amount parsing — typed buffers, pasted blocks and legacy host strings.

Three entry points, one per origin of the text:

    parse_typed       : live-edited buffer, ',' is the only decimal marker
                        besides '.', never a thousands separator.
    parse_pasted      : clipboard content, either separator convention,
                        resolved by a fixed rule table.
    parse_amount_text : string amounts handed in by the host
                        (Italian convention, "1.234,56").

Typed and pasted parsing never raise: anything that does not yield a
finite number falls back to 0.
"""

from __future__ import annotations

import logging
import math
import re

logger = logging.getLogger(__name__)

# Optional sign, digits with at most one '.', nothing else. Keeps
# float()'s extras ("inf", "1e5", "1_000") out of the amount path.
_NUMBER = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")

FALLBACK_AMOUNT = 0.0


def _to_float(text: str) -> float | None:
    """Strictly parse a dot-decimal string; None when malformed or non-finite."""
    text = text.strip()
    if not _NUMBER.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value


# ---------------------------------------------------------------------------
# Typed input
# ---------------------------------------------------------------------------

def parse_typed(text: str) -> float:
    """Parse a manually edited buffer.

    Every ',' becomes '.', and a '.' is always the decimal marker. No
    thousands-separator disambiguation happens here.

    Args:
        text: LiveBuffer content at commit time.

    Returns:
        The parsed amount, or 0.0 when the text is empty or malformed.
    """
    value = _to_float(text.replace(",", "."))
    if value is None:
        logger.debug("Typed text %r is not a number, falling back to 0", text)
        return FALLBACK_AMOUNT
    return value


# ---------------------------------------------------------------------------
# Pasted input
# ---------------------------------------------------------------------------

def _resolve_separators(text: str) -> str | None:
    """Rewrite pasted text into dot-decimal form, None if ambiguous.

    Rules, first match wins:
        dots >= 2            : dots group thousands (dropped); a single
                               remaining ',' is the decimal marker
        one '.', no ','      : '.' is decimal, however many digits follow
        one ',', no '.'      : ',' is decimal
        one '.', one ','     : '.' groups thousands, ',' is decimal
        no separators        : plain integer
    Any other combination (several commas) is left unresolved.
    """
    dots = text.count(".")
    commas = text.count(",")

    if dots >= 2:
        text = text.replace(".", "")
        if commas == 0:
            return text
        if commas == 1:
            return text.replace(",", ".")
        return None
    if dots == 1 and commas == 0:
        return text
    if commas == 1 and dots == 0:
        return text.replace(",", ".")
    if dots == 1 and commas == 1:
        return text.replace(".", "").replace(",", ".")
    if dots == 0 and commas == 0:
        return text
    return None


def parse_pasted(text: str) -> float:
    """Parse clipboard content whose separator convention is unknown.

    A single separator is always read as the decimal marker, so
    ``"1.232"`` is 1.232, not 1232. Grouping is only assumed once a
    second '.' proves it: ``"1.233.222,43"`` is 1233222.43.

    Args:
        text: Sanitized pasted string.

    Returns:
        The parsed amount, or 0.0 when the separators cannot be resolved
        or the result is not a number.
    """
    resolved = _resolve_separators(text)
    if resolved is None:
        logger.debug("Pasted text %r has ambiguous separators, falling back to 0", text)
        return FALLBACK_AMOUNT
    value = _to_float(resolved)
    if value is None:
        logger.debug("Pasted text %r is not a number, falling back to 0", text)
        return FALLBACK_AMOUNT
    return value


# ---------------------------------------------------------------------------
# Host-supplied amounts
# ---------------------------------------------------------------------------

def parse_amount_text(text: str) -> float | None:
    """Parse an Italian-formatted amount string ("1.234,56" -> 1234.56).

    When a comma is present, dots are thousands separators and the first
    comma is the decimal marker. Without a comma the text is read as a
    dot-decimal number.

    Returns:
        The amount, or None if *text* is empty or not a number.
    """
    if not text or not text.strip():
        return None
    normalized = text.strip()
    if "," in normalized:
        normalized = normalized.replace(".", "").replace(",", ".", 1)
    return _to_float(normalized)


def coerce_amount(value: float | int | str | None) -> float | None:
    """Normalize an amount supplied by the host.

    Numbers pass through as float (non-finite ones become None). Strings
    are still accepted for compatibility but are deprecated.

    Raises:
        TypeError: If *value* is not None, a number or a string.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise TypeError(f"Amount must be a number, got {value!r}")
    if isinstance(value, (int, float)):
        value = float(value)
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        logger.warning(
            "String amounts are deprecated, pass a number instead (got %r)", value,
        )
        return parse_amount_text(value)
    raise TypeError(f"Amount must be a number, got {type(value).__name__}")

