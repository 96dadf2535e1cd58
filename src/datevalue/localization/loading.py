"""Locale resource loading infrastructure.

Provides the protocol for locale resource loaders, a filesystem
implementation with path-traversal checks, and a loader that synthesizes
locale documents from Babel's CLDR data.

Components:
    LocaleResourceLoader - Protocol for reading locale resources (structural typing)
    PathLocaleLoader - Disk-based loader reading ``<base_path>/<locale>.json``
    BabelLocaleLoader - CLDR-backed loader producing the same JSON document

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Protocol

from babel import Locale, UnknownLocaleError

from datevalue.constants import BUNDLED_LOCALE_DIR, LOCALE_RESOURCE_EXTENSION, MONTHS_PER_YEAR
from datevalue.locale_utils import normalize_locale

if TYPE_CHECKING:
    from collections.abc import Mapping

    from datevalue.localization.types import LocaleCode

__all__ = [
    "BabelLocaleLoader",
    "LocaleResourceLoader",
    "PathLocaleLoader",
]

logger = logging.getLogger(__name__)


class LocaleResourceLoader(Protocol):
    """Protocol for reading the locale resource of a locale tag.

    Implementations return the raw resource text; parsing happens in
    ``load_locale_table`` so every loader shares the same diagnostics.

    Example:
        >>> class MemoryLoader:
        ...     def __init__(self, documents: dict[str, str]) -> None:
        ...         self.documents = documents
        ...     def load(self, locale: str) -> str:
        ...         try:
        ...             return self.documents[locale]
        ...         except KeyError:
        ...             raise FileNotFoundError(locale) from None
        ...     def describe_path(self, locale: str) -> str:
        ...         return f"memory:{locale}"
    """

    def load(self, locale: LocaleCode) -> str:
        """Read the resource text for ``locale``.

        Raises:
            FileNotFoundError: If no resource exists for this locale
            OSError: If the resource cannot be read
        """

    def describe_path(self, locale: LocaleCode) -> str:
        """Return a human-readable resource location for diagnostics."""
        return str(locale)


@dataclass(frozen=True, slots=True)
class PathLocaleLoader:
    """File system locale loader.

    Reads ``<base_path>/<locale><extension>`` as UTF-8 text.

    Security:
        Locale codes containing path separators or ".." are rejected, and
        resolved paths must stay inside ``base_path``.

    Example:
        >>> loader = PathLocaleLoader("locales")
        >>> text = loader.load("de_DE")
        # Reads: locales/de_DE.json

    Attributes:
        base_path: Directory holding one resource per locale
        extension: Resource file extension (default ".json")
    """

    base_path: str | Path = BUNDLED_LOCALE_DIR
    extension: str = LOCALE_RESOURCE_EXTENSION
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_resolved_root", Path(self.base_path).resolve())

    @staticmethod
    def _validate_locale(locale: LocaleCode) -> None:
        """Validate locale code for path traversal attacks.

        Raises:
            ValueError: If locale is empty or contains unsafe path components
        """
        if not locale:
            msg = "Locale code cannot be empty"
            raise ValueError(msg)
        if ".." in locale:
            msg = f"Path traversal sequences not allowed in locale: '{locale}'"
            raise ValueError(msg)
        if "/" in locale or "\\" in locale:
            msg = f"Path separators not allowed in locale: '{locale}'"
            raise ValueError(msg)

    def path_for(self, locale: LocaleCode) -> Path:
        """Return the resource path for ``locale`` without reading it."""
        self._validate_locale(locale)
        full_path = (self._resolved_root / f"{locale}{self.extension}").resolve()
        try:
            full_path.relative_to(self._resolved_root)
        except ValueError:
            msg = f"Path traversal detected: resolved path escapes root directory. locale='{locale}'"
            raise ValueError(msg) from None
        return full_path

    def describe_path(self, locale: LocaleCode) -> str:
        """Return the resource path string for diagnostics."""
        return str(Path(self.base_path) / f"{locale}{self.extension}")

    def load(self, locale: LocaleCode) -> str:
        """Read the locale resource from disk.

        Raises:
            ValueError: If locale contains path traversal sequences
            FileNotFoundError: If the file doesn't exist
            OSError: If the file cannot be read
        """
        path = self.path_for(locale)
        logger.debug("Reading locale resource %s", path)
        return path.read_text(encoding="utf-8")


# CLDR pattern letters with a datevalue token equivalent. Keys are full runs.
_CLDR_TOKENS: Mapping[str, str] = MappingProxyType({
    "y": "YYYY",
    "yyyy": "YYYY",
    "M": "M",
    "MM": "MM",
    "MMM": "MMM",
    "MMMM": "MMMM",
    "L": "M",
    "LL": "MM",
    "LLL": "MMM",
    "LLLL": "MMMM",
    "d": "D",
    "dd": "DD",
    "H": "HH",
    "HH": "HH",
    "m": "m",
    "mm": "mm",
    "s": "s",
    "ss": "ss",
})

# Literal text containing these would be read back as tokens.
_TOKEN_LETTERS = frozenset("YMDHms")

_CLDR_DATE_STYLES: tuple[str, ...] = ("short", "medium", "long")


def _tokenize_cldr_pattern(pattern: str) -> list[tuple[bool, str]]:
    """Split a CLDR pattern into (is_field, text) pieces.

    Quoted sections are literals; ``''`` is a literal single quote.

    Examples:
        "d. MMMM y" -> [(True, "d"), (False, ". "), (True, "MMMM"), (False, " "), (True, "y")]
        "d 'de' MMMM" -> [(True, "d"), (False, " de "), (True, "MMMM")]
    """
    pieces: list[tuple[bool, str]] = []
    literal: list[str] = []
    i = 0
    n = len(pattern)

    while i < n:
        char = pattern[i]
        if char == "'":
            if i + 1 < n and pattern[i + 1] == "'":
                literal.append("'")
                i += 2
                continue
            i += 1
            while i < n:
                if pattern[i] == "'":
                    if i + 1 < n and pattern[i + 1] == "'":
                        literal.append("'")
                        i += 2
                        continue
                    i += 1
                    break
                literal.append(pattern[i])
                i += 1
            continue
        if char.isascii() and char.isalpha():
            if literal:
                pieces.append((False, "".join(literal)))
                literal = []
            j = i + 1
            while j < n and pattern[j] == char:
                j += 1
            pieces.append((True, pattern[i:j]))
            i = j
            continue
        literal.append(char)
        i += 1

    if literal:
        pieces.append((False, "".join(literal)))
    return pieces


def cldr_pattern_to_template(pattern: str) -> str | None:
    """Convert a CLDR date pattern into a datevalue template.

    Returns None when the pattern uses a field with no token equivalent
    (weekdays, eras, two-digit years) or literal text that would be read
    back as a token.

    Example:
        >>> cldr_pattern_to_template("dd.MM.yyyy")
        'DD.MM.YYYY'
        >>> cldr_pattern_to_template("EEEE, d MMMM y") is None
        True
    """
    parts: list[str] = []
    for is_field, text in _tokenize_cldr_pattern(pattern):
        if is_field:
            token = _CLDR_TOKENS.get(text)
            if token is None:
                return None
            parts.append(token)
        elif _TOKEN_LETTERS.intersection(text):
            return None
        else:
            parts.append(text)
    return "".join(parts)


@dataclass(frozen=True, slots=True)
class BabelLocaleLoader:
    """Locale loader backed by Babel's CLDR data.

    Produces the same JSON document a locale file holds: wide and
    abbreviated format-context month names, plus the short/medium/long CLDR
    date patterns converted into datevalue templates. ``extra_formats`` are
    merged on top.

    Unknown locales raise FileNotFoundError so the usual fallback applies.

    Example:
        >>> loader = BabelLocaleLoader()
        >>> json.loads(loader.load("fr_FR"))["months"]["long"][0]
        'janvier'
    """

    extra_formats: Mapping[str, str] = field(default_factory=dict)

    def describe_path(self, locale: LocaleCode) -> str:
        """Return a CLDR pseudo-path for diagnostics."""
        return f"cldr:{normalize_locale(locale)}"

    def load(self, locale: LocaleCode) -> str:
        """Build the locale document from CLDR and return it as JSON text.

        Raises:
            FileNotFoundError: If Babel does not know the locale
        """
        try:
            babel_locale = Locale.parse(normalize_locale(locale))
        except (UnknownLocaleError, ValueError) as e:
            msg = f"No CLDR data for locale '{locale}': {e}"
            raise FileNotFoundError(msg) from None

        wide = babel_locale.months["format"]["wide"]
        abbreviated = babel_locale.months["format"]["abbreviated"]
        formats: dict[str, str] = {}
        for style in _CLDR_DATE_STYLES:
            template = cldr_pattern_to_template(babel_locale.date_formats[style].pattern)
            if template is not None:
                formats[style] = template
        formats.update(self.extra_formats)

        logger.debug("Built locale document for %s from CLDR", locale)
        return json.dumps(
            {
                "months": {
                    "long": [wide[m] for m in range(1, MONTHS_PER_YEAR + 1)],
                    "short": [abbreviated[m] for m in range(1, MONTHS_PER_YEAR + 1)],
                },
                "formats": formats,
            },
            ensure_ascii=False,
        )
