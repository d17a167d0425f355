"""Step controller — +step / -step on the current amount.

No bounds are applied here; callers run the result through
``apply_constraints``.
"""

from currency_field.core.bounds import to_decimal


def increment(value: float, step: float) -> float:
    """``value + step``, exact in decimal (0.1 + 0.2 == 0.3)."""
    return float(to_decimal(value) + to_decimal(step))


def decrement(value: float, step: float) -> float:
    """``value - step``, exact in decimal."""
    return float(to_decimal(value) - to_decimal(step))
