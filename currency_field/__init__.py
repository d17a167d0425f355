"""Currency Field — currency-amount input engine and its Qt host widget."""

from currency_field.constants import APP_VERSION

__version__ = APP_VERSION
