"""Models — engine configuration."""

from currency_field.models.config import ConfigError, CurrencyInputConfig

__all__ = [
    "ConfigError",
    "CurrencyInputConfig",
]
