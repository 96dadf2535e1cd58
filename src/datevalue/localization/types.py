"""Locale table type.

A LocaleTable holds the month names and named format templates of one
locale. Tables are immutable and built from the parsed JSON document of a
locale resource.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from datevalue.constants import MONTHS_PER_YEAR

__all__ = ["LocaleCode", "LocaleTable", "LocaleTableShapeError"]

type LocaleCode = str


class LocaleTableShapeError(ValueError):
    """Parsed locale document does not have the expected structure.

    Raised by LocaleTable.from_mapping; the loader converts it into a
    LocaleParseError carrying the locale code.
    """


def _month_names(months: Mapping[str, Any], key: str) -> tuple[str, ...]:
    names = months.get(key)
    if not isinstance(names, list) or len(names) != MONTHS_PER_YEAR:
        msg = f"months.{key} must be a list of {MONTHS_PER_YEAR} strings"
        raise LocaleTableShapeError(msg)
    if not all(isinstance(name, str) for name in names):
        msg = f"months.{key} must contain only strings"
        raise LocaleTableShapeError(msg)
    return tuple(names)


@dataclass(frozen=True, slots=True)
class LocaleTable:
    """Month names and format templates for one locale.

    Attributes:
        months_long: Full month names, index 0 = January
        months_short: Abbreviated month names, index 0 = January
        formats: Read-only mapping of format name to template string

    Example:
        >>> table = LocaleTable.from_mapping(json.loads(text))
        >>> table.month_name(3)
        'March'
        >>> table.resolve_format("short")
        'MM/DD/YYYY'
    """

    months_long: tuple[str, ...]
    months_short: tuple[str, ...]
    formats: Mapping[str, str]

    @classmethod
    def from_mapping(cls, document: object) -> LocaleTable:
        """Build a table from a parsed locale document.

        Expected shape::

            {"months": {"long": [12 names], "short": [12 names]},
             "formats": {"name": "template", ...}}

        Raises:
            LocaleTableShapeError: If any part of the document is missing or mistyped
        """
        if not isinstance(document, Mapping):
            msg = f"locale document must be an object, got {type(document).__name__}"
            raise LocaleTableShapeError(msg)

        months = document.get("months")
        if not isinstance(months, Mapping):
            msg = "missing 'months' object"
            raise LocaleTableShapeError(msg)

        formats = document.get("formats", {})
        if not isinstance(formats, Mapping) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in formats.items()
        ):
            msg = "'formats' must map names to template strings"
            raise LocaleTableShapeError(msg)

        return cls(
            months_long=_month_names(months, "long"),
            months_short=_month_names(months, "short"),
            formats=MappingProxyType(dict(formats)),
        )

    def month_name(self, month: int, *, short: bool = False) -> str:
        """Return the name of ``month`` (1-12)."""
        names = self.months_short if short else self.months_long
        return names[month - 1]

    def resolve_format(self, name_or_template: str) -> str:
        """Return the template registered as ``name_or_template``, else the argument."""
        return self.formats.get(name_or_template, name_or_template)

    def to_mapping(self) -> dict[str, Any]:
        """Return the table as a JSON-serializable locale document."""
        return {
            "months": {"long": list(self.months_long), "short": list(self.months_short)},
            "formats": dict(self.formats),
        }
