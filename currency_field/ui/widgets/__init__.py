"""Widgets — currency input and its field binding."""

from currency_field.ui.widgets.currency_input import CurrencyInput
from currency_field.ui.widgets.field_binding import FieldBinding

__all__ = [
    "CurrencyInput",
    "FieldBinding",
]
