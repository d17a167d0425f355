"""Currency input configuration model.

Replaces the loosely-typed options object of the host field with an
explicit, validated dataclass. Built once and passed by reference into
the engine's functions.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from currency_field.constants import DEFAULT_STEP

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a CurrencyInputConfig field holds an unusable value."""


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class CurrencyInputConfig:
    """Bounds, step and commit options for one currency field.

    Attributes:
        min_value: Inclusive lower bound (None = unbounded).
        max_value: Inclusive upper bound (None = unbounded).
        step: Increment/decrement size and quantization granularity (> 0).
        force_step: Quantize every committed amount to a multiple of step.
        null_on_empty: Commit an empty buffer as None instead of 0.
        round_decimals: Round half away from zero when formatting;
            False truncates toward zero.
    """
    min_value: float | None = None
    max_value: float | None = None
    step: float = DEFAULT_STEP
    force_step: bool = False
    null_on_empty: bool = False
    round_decimals: bool = True

    def __post_init__(self) -> None:
        for name in ("min_value", "max_value"):
            bound = getattr(self, name)
            if bound is None:
                continue
            if not _is_number(bound) or not math.isfinite(bound):
                raise ConfigError(f"{name} must be a finite number, got {bound!r}")

        if not _is_number(self.step) or not math.isfinite(self.step) or self.step <= 0:
            raise ConfigError(f"step must be a finite number > 0, got {self.step!r}")

        for name in ("force_step", "null_on_empty", "round_decimals"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigError(f"{name} must be a bool, got {getattr(self, name)!r}")

        if not self.has_consistent_bounds:
            logger.warning(
                "min_value %s is greater than max_value %s; bounds will not be applied",
                self.min_value, self.max_value,
            )

    @property
    def has_consistent_bounds(self) -> bool:
        """False only when both bounds are set and min_value > max_value."""
        if self.min_value is None or self.max_value is None:
            return True
        return self.min_value <= self.max_value

