"""Locale table loading with a single fallback.

``load_locale_table`` reads the requested locale resource, falls back to
the fixed default locale when it cannot be read, parses the text as JSON and
validates the document shape. The tag returned is always the tag whose
resource produced the table.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from datevalue.constants import FALLBACK_LOCALE
from datevalue.diagnostics import (
    ErrorTemplate,
    LocaleParseError,
    LocaleResourceMissingError,
)
from datevalue.locale_utils import canonical_locale, likely_region_locale
from datevalue.localization.types import LocaleTable, LocaleTableShapeError

if TYPE_CHECKING:
    from datevalue.localization.loading import LocaleResourceLoader
    from datevalue.localization.types import LocaleCode

__all__ = ["load_locale_table", "parse_locale_table"]

logger = logging.getLogger(__name__)


def _describe(loader: LocaleResourceLoader, locale: LocaleCode) -> str:
    describe = getattr(loader, "describe_path", None)
    return describe(locale) if describe is not None else locale


def _read_with_fallback(
    locale: LocaleCode,
    loader: LocaleResourceLoader,
    fallback_locale: LocaleCode,
) -> tuple[LocaleCode, str]:
    expanded = likely_region_locale(locale)
    candidates = (locale,) if expanded is None else (locale, expanded)

    reason: Exception | None = None
    for candidate in candidates:
        try:
            return candidate, loader.load(candidate)
        except (OSError, ValueError) as e:
            logger.debug("No locale resource for '%s': %s", candidate, e)
            reason = e

    logger.info(
        "No locale resource for '%s' (%s). Falling back to %s", locale, reason, fallback_locale
    )
    try:
        return fallback_locale, loader.load(fallback_locale)
    except (OSError, ValueError) as e:
        diagnostic = ErrorTemplate.locale_resource_missing(
            locale, fallback_locale, _describe(loader, fallback_locale)
        )
        logger.error("%s", diagnostic.format_error())
        raise LocaleResourceMissingError(
            diagnostic, locale_code=locale, fallback_locale=fallback_locale
        ) from e


def parse_locale_table(
    text: str,
    locale: LocaleCode,
    *,
    resource: str | None = None,
) -> LocaleTable:
    """Parse locale resource text into a LocaleTable.

    Args:
        text: JSON resource text
        locale: Locale code, used in diagnostics
        resource: Human-readable resource location, used in diagnostics

    Raises:
        LocaleParseError: On JSON syntax errors (with line and column) or
            when the document does not have the locale table shape
    """
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        diagnostic = ErrorTemplate.locale_parse_error(
            locale, e.msg, line=e.lineno, column=e.colno, resource=resource
        )
        logger.error("%s", diagnostic.format_error())
        raise LocaleParseError(
            diagnostic, locale_code=locale, line=e.lineno, column=e.colno, detail=e.msg
        ) from e

    try:
        table = LocaleTable.from_mapping(document)
    except LocaleTableShapeError as e:
        diagnostic = ErrorTemplate.locale_parse_error(locale, str(e), resource=resource)
        logger.error("%s", diagnostic.format_error())
        raise LocaleParseError(diagnostic, locale_code=locale, detail=str(e)) from e

    logger.debug("Loaded locale table for %s", locale)
    return table


def load_locale_table(
    locale: LocaleCode,
    *,
    loader: LocaleResourceLoader,
    fallback_locale: LocaleCode = FALLBACK_LOCALE,
) -> tuple[LocaleCode, LocaleTable]:
    """Load the locale table for ``locale``, falling back once if it is missing.

    Steps:
    1. Read the requested resource (tag canonicalized first: "en-us" -> "en_US").
    2. If it cannot be read and the tag is language-only ("de"), read the
       likely-region resource ("de_DE").
    3. If that also fails, read the fallback resource instead.
    4. Parse the text as JSON and validate its shape.

    A resource that exists but fails to parse does NOT trigger the fallback:
    the error is reported so broken resources are fixed, not hidden.

    Args:
        locale: Requested locale tag
        loader: Resource loader
        fallback_locale: Tag loaded when the requested resource cannot be read

    Returns:
        Tuple of (loaded tag, table). The tag is the likely-region tag or
        ``fallback_locale`` when one of those was used.

    Raises:
        LocaleResourceMissingError: If neither resource can be read
        LocaleParseError: If the resource text fails to parse

    Example:
        >>> tag, table = load_locale_table("xx_XX", loader=PathLocaleLoader())
        >>> tag
        'en_US'
    """
    requested = canonical_locale(locale)
    loaded_locale, text = _read_with_fallback(requested, loader, fallback_locale)
    return loaded_locale, parse_locale_table(
        text, loaded_locale, resource=_describe(loader, loaded_locale)
    )
