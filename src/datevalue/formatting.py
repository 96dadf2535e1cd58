"""Template formatting with locale month names.

Templates are plain strings with positional tokens:

    ====  =====================================
    YYYY  year, no padding
    MMMM  full month name (locale table)
    MMM   abbreviated month name (locale table)
    MM    month, 2 digits
    M     month
    DD    day, 2 digits
    D     day
    HH    hour, 2 digits
    mm    minute, 2 digits
    m     minute
    ss    second, 2 digits
    s     second
    ====  =====================================

The template is scanned once, left to right. At each position the longest
matching token wins, and substituted text is never scanned again: a month
name such as "March" or "mars" keeps its "M" and "s". Any other character
is copied as-is.

Python 3.13+.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from types import MappingProxyType
from typing import TYPE_CHECKING

from datevalue.constants import DEFAULT_FORMAT

if TYPE_CHECKING:
    from collections.abc import Mapping

    from datevalue.calendar import CalendarFields
    from datevalue.localization.types import LocaleTable

__all__ = ["TOKENS", "format_default", "format_fields", "tokenize_template"]

type _Renderer = Callable[[CalendarFields, LocaleTable], str]

# Insertion order is match priority: a longer token precedes its prefixes.
TOKENS: Mapping[str, _Renderer] = MappingProxyType({
    "YYYY": lambda f, t: str(f.year),
    "MMMM": lambda f, t: t.month_name(f.month),
    "MMM": lambda f, t: t.month_name(f.month, short=True),
    "MM": lambda f, t: f"{f.month:02d}",
    "M": lambda f, t: str(f.month),
    "DD": lambda f, t: f"{f.day:02d}",
    "D": lambda f, t: str(f.day),
    "HH": lambda f, t: f"{f.hour:02d}",
    "mm": lambda f, t: f"{f.minute:02d}",
    "m": lambda f, t: str(f.minute),
    "ss": lambda f, t: f"{f.second:02d}",
    "s": lambda f, t: str(f.second),
})

_TOKEN_PATTERN = re.compile("|".join(re.escape(token) for token in TOKENS))


def tokenize_template(template: str) -> list[tuple[bool, str]]:
    """Split a template into (is_token, text) pieces.

    Example:
        >>> tokenize_template("MMMM D, YYYY")
        [(True, 'MMMM'), (False, ' '), (True, 'D'), (False, ', '), (True, 'YYYY')]
    """
    pieces: list[tuple[bool, str]] = []
    position = 0
    for match in _TOKEN_PATTERN.finditer(template):
        if match.start() > position:
            pieces.append((False, template[position : match.start()]))
        pieces.append((True, match.group()))
        position = match.end()
    if position < len(template):
        pieces.append((False, template[position:]))
    return pieces


def format_fields(fields: CalendarFields, template: str, table: LocaleTable) -> str:
    """Render ``fields`` through ``template`` using ``table`` for month names.

    Example:
        >>> format_fields(CalendarFields(2020, 3, 5, 14, 30, 0), "MM/DD/YYYY", table)
        '03/05/2020'
    """
    return _TOKEN_PATTERN.sub(lambda match: TOKENS[match.group()](fields, table), template)


def format_default(fields: CalendarFields) -> str:
    """Render the fixed ISO-like form ``YYYY-MM-DDTHH:mm:ss`` (no timezone suffix)."""
    return DEFAULT_FORMAT.format(**fields._asdict())
