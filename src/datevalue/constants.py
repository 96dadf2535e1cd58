"""Shared constants for datevalue.

Constants are grouped by domain:
- Calendar: field names and fixed time units
- Locale resources: fallback locale, file extension, bundled directory
- Formatting: default ISO-like template

Python 3.13+. Zero external dependencies.
"""

from pathlib import Path

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Calendar
    "FIELD_NAMES",
    "SECONDS_PER_DAY",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_MINUTE",
    "EPOCH_YEAR",
    # Locale resources
    "FALLBACK_LOCALE",
    "LOCALE_RESOURCE_EXTENSION",
    "BUNDLED_LOCALE_DIR",
    "MONTHS_PER_YEAR",
    # Formatting
    "DEFAULT_FORMAT",
]

# ============================================================================
# CALENDAR
# ============================================================================

# Order matters: coarsest to finest, used for comparisons and tuple layout.
FIELD_NAMES: tuple[str, ...] = ("year", "month", "day", "hour", "minute", "second")

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 3600
SECONDS_PER_DAY: int = 86400

EPOCH_YEAR: int = 1970

# ============================================================================
# LOCALE RESOURCES
# ============================================================================

# Loaded whenever the requested locale has no resource. Must ship with the package.
FALLBACK_LOCALE: str = "en_US"

LOCALE_RESOURCE_EXTENSION: str = ".json"

BUNDLED_LOCALE_DIR: Path = Path(__file__).parent / "locales"

MONTHS_PER_YEAR: int = 12

# ============================================================================
# FORMATTING
# ============================================================================

# Rendered by DateValue.format() with no argument. No timezone suffix.
DEFAULT_FORMAT: str = "{year}-{month:02}-{day:02}T{hour:02}:{minute:02}:{second:02}"
