"""datevalue - calendar date-time values with locale-aware formatting.

Represents a UTC calendar date-time, builds it from structured fields, an
ISO 8601 string or epoch seconds, compares dates at a chosen precision and
renders them through locale tables (month names and named templates) read
from JSON locale resources or Babel's CLDR data.

Public API:
    DateValue - Immutable date-time record with locale table
    DateConfig - Collaborators and defaults (loader, fallback locale, clock)
    Precision - Comparison granularity (YEAR .. SECOND)
    LocaleTable - Month names and format templates of one locale
    PathLocaleLoader - Reads <dir>/<locale>.json resources
    BabelLocaleLoader - Builds locale documents from CLDR

Exceptions:
    DateValueError - Base exception class
    UnrecognizedInputFormatError - Construction input matches no shape
    UnsupportedTimezoneOffsetError - ISO input with an offset other than Z
    InvalidFieldError - Calendar field out of range
    LocaleResourceMissingError - No readable locale resource, not even the fallback
    LocaleParseError - Locale resource failed to parse

Submodules:
    datevalue.calendar - Leap years, month lengths, epoch conversions
    datevalue.iso - ISO 8601 parsing
    datevalue.formatting - Template tokenizer and renderer
    datevalue.localization - Locale resource loading
    datevalue.diagnostics - Error types and diagnostic codes
"""

from .calendar import days_in_month, epoch_to_fields, fields_to_epoch, is_leap_year
from .config import DEFAULT_CONFIG, DateConfig
from .date_value import DateValue
from .diagnostics import (
    DateValueError,
    InvalidFieldError,
    LocaleParseError,
    LocaleResourceMissingError,
    UnrecognizedInputFormatError,
    UnsupportedTimezoneOffsetError,
)
from .enums import Precision
from .host import FixedClock, SystemClock
from .iso import parse_iso8601
from .localization import BabelLocaleLoader, LocaleTable, PathLocaleLoader

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("datevalue")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DEFAULT_CONFIG",
    "BabelLocaleLoader",
    "DateConfig",
    "DateValue",
    "DateValueError",
    "FixedClock",
    "InvalidFieldError",
    "LocaleParseError",
    "LocaleResourceMissingError",
    "LocaleTable",
    "PathLocaleLoader",
    "Precision",
    "SystemClock",
    "UnrecognizedInputFormatError",
    "UnsupportedTimezoneOffsetError",
    "__version__",
    "days_in_month",
    "epoch_to_fields",
    "fields_to_epoch",
    "is_leap_year",
    "parse_iso8601",
]
