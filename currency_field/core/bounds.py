"""Bounds & quantization — clamp to [min, max] and snap to step multiples.

Quantization and stepping run in decimal arithmetic on the floats'
shortest repr so that step multiples stay exact (0.3 / 0.1 -> 3).
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from currency_field.models.config import CurrencyInputConfig

# Enough digits for any finite double plus the fraction
DECIMAL_CONTEXT = Context(prec=400)


def to_decimal(value: float) -> Decimal:
    """Exact decimal of the float as it is printed (not its binary value)."""
    return Decimal(repr(float(value)))


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """Restrict *value* to the inclusive range [min_value, max_value].

    A missing bound leaves that side open. Inverted bounds
    (min_value > max_value) are not applied at all: *value* is returned
    unchanged.
    """
    if min_value is not None and max_value is not None and min_value > max_value:
        return value
    if min_value is not None and value < min_value:
        return min_value
    if max_value is not None and value > max_value:
        return max_value
    return value


def quantize(value: float, step: float) -> float:
    """Snap *value* to the nearest multiple of *step*.

    Ties go away from zero: ``quantize(2, 4) == 4``,
    ``quantize(-2, 4) == -4``, ``quantize(-7, 4) == -8``. A value too
    large to count in steps of *step* (``quantize(1e308, 1e-95)``) is
    returned unchanged.

    Raises:
        ValueError: If step is not a finite number > 0.
    """
    if not math.isfinite(step) or step <= 0:
        raise ValueError(f"step must be a finite number > 0, got {step!r}")
    d_step = to_decimal(step)
    try:
        multiples = DECIMAL_CONTEXT.divide(to_decimal(value), d_step).quantize(
            Decimal(1), rounding=ROUND_HALF_UP, context=DECIMAL_CONTEXT,
        )
    except InvalidOperation:
        # value / step needs more digits than the context holds
        return value
    result = float(multiples * d_step)
    if math.isinf(result):
        # nearest multiple is past the float range; take the one toward zero
        result = float((multiples - Decimal(1).copy_sign(multiples)) * d_step)
    return result + 0.0  # -0.0 -> 0.0


def apply_constraints(value: float, config: CurrencyInputConfig) -> float:
    """Commit-time constraints: quantize (if force_step), then clamp."""
    if config.force_step:
        value = quantize(value, config.step)
    return clamp(value, config.min_value, config.max_value)
