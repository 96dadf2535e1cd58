"""Locale utilities for BCP-47 to POSIX conversion and system locale detection.

Centralizes locale tag normalization so resource lookups use one canonical
form ("en_US", never "en-US").

Python 3.13+.
"""

from __future__ import annotations

import functools
import os

from babel import Locale, UnknownLocaleError
from babel.core import get_global, parse_locale

from datevalue.constants import FALLBACK_LOCALE

__all__ = [
    "canonical_locale",
    "get_system_locale",
    "likely_region_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format.

    BCP-47 uses hyphens (en-US), while locale resources and Babel use
    underscores (en_US). An encoding suffix (".UTF-8") is dropped.

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("de_DE.UTF-8")
        'de_DE'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.split(".")[0].replace("-", "_")


@functools.lru_cache(maxsize=128)
def canonical_locale(locale_code: str) -> str:
    """Return Babel's canonical spelling of a locale tag.

    Fixes case ("en_us" -> "en_US") so tags from environment variables
    match resource file names. Unknown or malformed tags are returned
    normalized but otherwise unchanged; the resource lookup then decides.

    Example:
        >>> canonical_locale("pt-br")
        'pt_BR'
        >>> canonical_locale("xx_YY")
        'xx_YY'
    """
    normalized = normalize_locale(locale_code)
    try:
        return str(Locale.parse(normalized))
    except (UnknownLocaleError, ValueError):
        return normalized


@functools.lru_cache(maxsize=128)
def likely_region_locale(locale_code: str) -> str | None:
    """Expand a language-only tag to its most likely language_TERRITORY form.

    Uses CLDR likely-subtags data, so "de" from a bare LANG value finds the
    de_DE resource. Tags that already name a territory or script, and
    languages without likely-subtags data, return None.

    Example:
        >>> likely_region_locale("de")
        'de_DE'
        >>> likely_region_locale("pt-BR") is None
        True
    """
    try:
        language, territory, script = parse_locale(normalize_locale(locale_code))[:3]
    except ValueError:
        return None
    if territory is not None or script is not None:
        return None

    likely = get_global("likely_subtags").get(language.lower())
    if likely is None:
        return None
    likely_territory = parse_locale(likely)[1]
    return f"{language}_{likely_territory}" if likely_territory else None


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Filters out "C" and "POSIX" pseudo-locales.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return the fallback locale.

    Returns:
        Detected locale code in POSIX format.

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.

    Example:
        >>> os.environ['LANG'] = 'de_DE.UTF-8'
        >>> get_system_locale()
        'de_DE'
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale and system_locale not in ("C", "POSIX"):
            return normalize_locale(system_locale)
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and value not in ("C", "POSIX", "C.UTF-8"):
            return normalize_locale(value)

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return FALLBACK_LOCALE
