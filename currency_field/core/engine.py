"""Commit engine — state between host events for one currency field.

Holds the committed amount, the uncommitted live buffer and the
canonical display string. Pure Python class (no Qt dependency); the
Qt widget forwards input / paste / blur / step events to it.

Flow::

    edit(text)  -> sanitize -> live buffer (uncommitted)
    commit()    -> parse_typed | parse_pasted -> constraints -> format
    paste(text) -> sanitize -> parse_pasted -> constraints -> format
    step_up()   -> increment -> constraints -> format
"""

from __future__ import annotations

import logging
import math
from enum import Enum

from currency_field.core.bounds import apply_constraints
from currency_field.core.formatting import format_amount
from currency_field.core.parsing import coerce_amount, parse_pasted, parse_typed
from currency_field.core.sanitizer import sanitize
from currency_field.core.stepping import decrement, increment
from currency_field.models.config import CurrencyInputConfig

logger = logging.getLogger(__name__)


class EditSource(Enum):
    """Where the pending live buffer came from."""
    TYPED = "typed"
    PASTED = "pasted"


class CurrencyEngine:
    """Live buffer + committed amount for a single field.

    Usage::

        engine = CurrencyEngine(CurrencyInputConfig(min_value=2, max_value=20))
        engine.edit("as12.3")   # -> "12.3"
        engine.commit()         # -> 12.3, display "12,30"
    """

    def __init__(
        self,
        config: CurrencyInputConfig | None = None,
        amount: float | int | str | None = None,
    ) -> None:
        self._config = config if config is not None else CurrencyInputConfig()
        self._amount = coerce_amount(amount)
        self._buffer: str | None = None
        self._source = EditSource.TYPED
        self._display = self._format(self._amount)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def config(self) -> CurrencyInputConfig:
        return self._config

    @property
    def amount(self) -> float | None:
        """Last committed (or host-set) amount."""
        return self._amount

    @property
    def buffer(self) -> str | None:
        """Pending live buffer, None when nothing is being edited."""
        return self._buffer

    @property
    def source(self) -> EditSource:
        return self._source

    @property
    def display(self) -> str:
        """Text the field should show: live buffer while editing, else canonical."""
        return self._buffer if self._buffer is not None else self._display

    @property
    def is_dirty(self) -> bool:
        return self._buffer is not None

    # ------------------------------------------------------------------
    # Host updates
    # ------------------------------------------------------------------

    def set_config(self, config: CurrencyInputConfig) -> None:
        """Replace the configuration. Takes effect at the next commit."""
        self._config = config
        self._display = self._format(self._amount)

    def set_amount(self, value: float | int | str | None) -> None:
        """Host-supplied amount; drops any pending edit and reformats."""
        self._amount = coerce_amount(value)
        self._buffer = None
        self._display = self._format(self._amount)

    # ------------------------------------------------------------------
    # Edit events
    # ------------------------------------------------------------------

    def edit(self, text: str) -> str:
        """Keystroke/input event: sanitize into the live buffer.

        Returns:
            The sanitized text to write back into the field.
        """
        self._buffer = sanitize(text)
        self._source = EditSource.TYPED
        return self._buffer

    def paste(self, text: str) -> float | None:
        """Paste event: resolve the clipboard text and commit at once."""
        self._buffer = sanitize(text)
        self._source = EditSource.PASTED
        return self.commit()

    def commit(self) -> float | None:
        """Blur: turn the live buffer into the committed amount.

        Without a pending buffer the current amount is re-constrained, so
        an out-of-range amount set by the host is corrected on blur.

        Returns:
            The committed amount (None only for an absent amount, or an
            empty buffer with ``null_on_empty``).
        """
        if self._buffer is None:
            value = self._amount
        elif not self._buffer and self._config.null_on_empty:
            value = None
        elif self._source is EditSource.PASTED:
            value = parse_pasted(self._buffer)
        else:
            value = parse_typed(self._buffer)

        if value is not None:
            value = apply_constraints(value, self._config)
        return self._accept(value)

    # ------------------------------------------------------------------
    # Step actions
    # ------------------------------------------------------------------

    def step_up(self) -> float:
        """+step on the current amount, committed immediately."""
        return self._step(increment)

    def step_down(self) -> float:
        """-step on the current amount, committed immediately."""
        return self._step(decrement)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _step(self, operation) -> float:
        current = self._amount if self._amount is not None else 0.0
        value = operation(current, self._config.step)
        if not math.isfinite(value):
            logger.debug("Step from %r overflows, keeping the current amount", current)
            value = current
        value = apply_constraints(value, self._config)
        self._accept(value)
        return value

    def _accept(self, value: float | None) -> float | None:
        logger.debug("Committed %r (buffer %r, %s)", value, self._buffer, self._source.value)
        self._amount = value
        self._buffer = None
        self._display = self._format(value)
        return value

    def _format(self, value: float | None) -> str:
        return format_amount(value, round_decimals=self._config.round_decimals)
