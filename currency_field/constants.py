"""Application-wide constants.

Single fixed currency convention: comma decimal separator, two fraction
digits, no grouping separators.
"""

APP_NAME = "Currency Field"
APP_VERSION = "0.1.0"
APP_ORGANIZATION = "Currency Field"

# Display convention
DECIMAL_SEPARATOR = ","
FRACTION_DIGITS = 2

# Characters that survive sanitizing (ASCII digits + both separators)
ALLOWED_CHARACTERS = "0123456789.,"

# Step defaults
DEFAULT_STEP = 1.0

# i18n
DEFAULT_LANGUAGE = "en"
SUPPORTED_LANGUAGES = ["en", "it"]

# Demo window
DEMO_MIN_AMOUNT = 0.0
DEMO_MAX_AMOUNT = 10_000.0
DEMO_STEP = 0.5
