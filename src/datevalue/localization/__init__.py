"""Locale table package.

Submodules:
    types   - LocaleTable and the LocaleCode type alias
    loading - LocaleResourceLoader protocol, PathLocaleLoader, BabelLocaleLoader
    tables  - load_locale_table (read, fall back, parse, validate)

Python 3.13+.
"""

from datevalue.localization.loading import (
    BabelLocaleLoader,
    LocaleResourceLoader,
    PathLocaleLoader,
    cldr_pattern_to_template,
)
from datevalue.localization.tables import load_locale_table, parse_locale_table
from datevalue.localization.types import LocaleCode, LocaleTable, LocaleTableShapeError

__all__ = [
    "BabelLocaleLoader",
    "LocaleCode",
    "LocaleResourceLoader",
    "LocaleTable",
    "LocaleTableShapeError",
    "PathLocaleLoader",
    "cldr_pattern_to_template",
    "load_locale_table",
    "parse_locale_table",
]
