"""Formatter — canonical display string for an amount.

Two fraction digits, ',' as decimal marker, no grouping separators.
Rounding is done in decimal arithmetic on the float's shortest repr, so
1.005 formats as "1,01" the way a person reads it.
"""

from __future__ import annotations

import math
from decimal import ROUND_DOWN, ROUND_HALF_UP, Decimal

from currency_field.constants import DECIMAL_SEPARATOR, FRACTION_DIGITS
from currency_field.core.bounds import DECIMAL_CONTEXT, to_decimal


def _quantize(value: float, digits: int, rounding: str) -> Decimal:
    exponent = Decimal(1).scaleb(-digits)
    result = to_decimal(value).quantize(exponent, rounding=rounding, context=DECIMAL_CONTEXT)
    if result.is_zero():
        result = result.copy_abs()
    return result


def truncate_decimals(value: float, digits: int = FRACTION_DIGITS) -> float:
    """Drop fraction digits beyond *digits* without rounding (toward zero)."""
    if not math.isfinite(value):
        return 0.0
    return float(_quantize(value, digits, ROUND_DOWN))


def format_amount(value: float | None, round_decimals: bool = True) -> str:
    """Format *value* as the canonical display string.

    Args:
        value: Amount in major units. None (no amount) formats as "";
            NaN and infinities fall back to 0.
        round_decimals: Round half away from zero at the second decimal.
            When False the extra digits are truncated.

    Returns:
        E.g. ``1.232555 -> "1,23"``, ``-7 -> "-7,00"``,
        ``1233222.43 -> "1233222,43"``.
    """
    if value is None:
        return ""
    if not round_decimals:
        value = truncate_decimals(value)
    elif not math.isfinite(value):
        value = 0.0
    text = format(_quantize(value, FRACTION_DIGITS, ROUND_HALF_UP), "f")
    return text.replace(".", DECIMAL_SEPARATOR)
