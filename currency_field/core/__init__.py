"""Core — pure-Python amount engine (no Qt dependency)."""

from currency_field.core.bounds import apply_constraints, clamp, quantize
from currency_field.core.engine import CurrencyEngine, EditSource
from currency_field.core.formatting import format_amount, truncate_decimals
from currency_field.core.parsing import (
    coerce_amount,
    parse_amount_text,
    parse_pasted,
    parse_typed,
)
from currency_field.core.sanitizer import sanitize
from currency_field.core.stepping import decrement, increment

__all__ = [
    "CurrencyEngine",
    "EditSource",
    "apply_constraints",
    "clamp",
    "coerce_amount",
    "decrement",
    "format_amount",
    "increment",
    "parse_amount_text",
    "parse_pasted",
    "parse_typed",
    "quantize",
    "sanitize",
    "truncate_decimals",
]
