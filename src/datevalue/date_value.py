"""DateValue: an immutable calendar date-time with a locale table.

A DateValue holds six calendar fields, the matching epoch seconds and the
locale table used to render it. Every constructor validates its input and
every "setter" returns a new consistent value, so a DateValue never exists
with fields and epoch out of step or with a locale tag that does not match
its table.

Example:
    >>> d = DateValue.create("2020-03-05T14:30:00Z", locale="en_US")
    >>> d.format()
    '2020-03-05T14:30:00'
    >>> d.format("MMMM D, YYYY")
    'March 5, 2020'
    >>> d.with_field("day", 6).is_after(d, Precision.DAY)
    True

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from datevalue.calendar import (
    CalendarFields,
    days_in_month,
    epoch_to_fields,
    fields_to_epoch,
    is_leap_year,
    validate_fields,
)
from datevalue.config import DEFAULT_CONFIG, DateConfig
from datevalue.constants import FIELD_NAMES
from datevalue.diagnostics import (
    ErrorTemplate,
    InvalidFieldError,
    LocaleParseError,
    UnrecognizedInputFormatError,
)
from datevalue.enums import Precision
from datevalue.formatting import format_default, format_fields
from datevalue.iso import has_numeric_offset, is_iso8601_candidate, parse_iso8601
from datevalue.locale_utils import get_system_locale
from datevalue.localization.tables import load_locale_table

if TYPE_CHECKING:
    from datevalue.localization.types import LocaleCode, LocaleTable

__all__ = ["DateInput", "DateValue"]

logger = logging.getLogger(__name__)

type DateInput = Mapping[str, Any] | str | int | None


def _resolve_locale(locale: LocaleCode | None, config: DateConfig) -> LocaleCode:
    if locale is not None:
        return locale
    if config.locale is not None:
        return config.locale
    return get_system_locale()


def _coerce_precision(precision: Precision | str) -> Precision:
    try:
        return Precision(precision)
    except ValueError:
        msg = f"Unknown precision {precision!r}; expected one of {[p.value for p in Precision]}"
        raise ValueError(msg) from None


@dataclass(frozen=True, slots=True)
class DateValue:
    """Calendar date-time with epoch seconds and a locale table.

    Build instances with ``create()`` or the ``from_*`` constructors; they
    load the locale table and compute the epoch. The dataclass initializer
    validates the fields and their agreement with ``epoch_seconds``.

    Attributes:
        year: Calendar year
        month: Month, 1-12
        day: Day of month, 1..days_in_month
        hour: Hour, 0-23
        minute: Minute, 0-59
        second: Second, 0-59
        epoch_seconds: Signed seconds since 1970-01-01T00:00:00Z
        locale: Tag of the loaded locale table
        locale_table: Month names and format templates
        config: Configuration the value was built with; ``with_locale``
            reloads tables through its loader and fallback
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    epoch_seconds: int
    locale: LocaleCode
    locale_table: LocaleTable = field(compare=False, repr=False)
    config: DateConfig = field(default=DEFAULT_CONFIG, compare=False, repr=False)

    def __post_init__(self) -> None:
        """Validate the fields and their agreement with epoch_seconds.

        Raises:
            InvalidFieldError: If a field is out of range, or epoch_seconds
                does not encode the fields
        """
        expected = fields_to_epoch(*self.fields)
        if type(self.epoch_seconds) is not int or self.epoch_seconds != expected:
            raise InvalidFieldError(
                ErrorTemplate.invalid_field(
                    "epoch_seconds", self.epoch_seconds, f"{expected} for {tuple(self.fields)}"
                )
            )

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def _build(
        cls,
        fields: CalendarFields,
        *,
        locale: LocaleCode | None,
        config: DateConfig,
    ) -> DateValue:
        tag, table = load_locale_table(
            _resolve_locale(locale, config),
            loader=config.loader,
            fallback_locale=config.fallback_locale,
        )
        return cls(*fields, fields_to_epoch(*fields), tag, table, config)

    @classmethod
    def create(
        cls,
        value: DateInput = None,
        *,
        locale: LocaleCode | None = None,
        config: DateConfig = DEFAULT_CONFIG,
    ) -> DateValue:
        """Create a DateValue from any supported input shape.

        Args:
            value: One of
                - a mapping with year, month, day, hour, minute, second
                - an ISO 8601 UTC string ("2020-03-05T14:30:00Z")
                - epoch seconds (int)
                - None for the current time from ``config.clock``
            locale: Locale tag (default: ``config.locale``, then the system locale)
            config: Collaborators and defaults

        Returns:
            New DateValue

        Raises:
            UnrecognizedInputFormatError: If value matches no shape
            UnsupportedTimezoneOffsetError: If an ISO string has a non-Z offset
            InvalidFieldError: If a field is out of range
            LocaleResourceMissingError: If no locale resource can be read
            LocaleParseError: If the locale resource fails to parse
        """
        match value:
            case None:
                fields = epoch_to_fields(config.clock.now_epoch())
            case bool():
                raise UnrecognizedInputFormatError(ErrorTemplate.unrecognized_input(value))
            case int():
                fields = epoch_to_fields(value)
            case str():
                if not (is_iso8601_candidate(value) or has_numeric_offset(value)):
                    raise UnrecognizedInputFormatError(
                        ErrorTemplate.unrecognized_input(value, "not an ISO 8601 UTC date-time")
                    )
                fields = parse_iso8601(value)
            case Mapping():
                fields = cls._fields_from_mapping(value)
            case _:
                raise UnrecognizedInputFormatError(ErrorTemplate.unrecognized_input(value))
        return cls._build(fields, locale=locale, config=config)

    @staticmethod
    def _fields_from_mapping(value: Mapping[str, Any]) -> CalendarFields:
        missing = [name for name in FIELD_NAMES if name not in value]
        if missing:
            raise UnrecognizedInputFormatError(
                ErrorTemplate.unrecognized_input(
                    dict(value), f"missing keys {', '.join(missing)}"
                )
            )
        return validate_fields(*(value[name] for name in FIELD_NAMES))

    @classmethod
    def from_fields(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        locale: LocaleCode | None = None,
        config: DateConfig = DEFAULT_CONFIG,
    ) -> DateValue:
        """Create a DateValue from explicit calendar fields."""
        fields = validate_fields(year, month, day, hour, minute, second)
        return cls._build(fields, locale=locale, config=config)

    @classmethod
    def from_mapping(
        cls,
        value: Mapping[str, Any],
        *,
        locale: LocaleCode | None = None,
        config: DateConfig = DEFAULT_CONFIG,
    ) -> DateValue:
        """Create a DateValue from a mapping holding the six field names."""
        return cls._build(cls._fields_from_mapping(value), locale=locale, config=config)

    @classmethod
    def from_iso(
        cls,
        value: str,
        *,
        locale: LocaleCode | None = None,
        config: DateConfig = DEFAULT_CONFIG,
    ) -> DateValue:
        """Create a DateValue from ``YYYY-MM-DDTHH:MM:SSZ``."""
        return cls._build(parse_iso8601(value), locale=locale, config=config)

    @classmethod
    def from_epoch(
        cls,
        seconds: int,
        *,
        locale: LocaleCode | None = None,
        config: DateConfig = DEFAULT_CONFIG,
    ) -> DateValue:
        """Create a DateValue from signed epoch seconds."""
        return cls._build(epoch_to_fields(seconds), locale=locale, config=config)

    @classmethod
    def from_datetime(
        cls,
        value: datetime,
        *,
        locale: LocaleCode | None = None,
        config: DateConfig = DEFAULT_CONFIG,
    ) -> DateValue:
        """Create a DateValue from a stdlib datetime.

        Aware datetimes are converted to UTC; naive ones are taken as UTC.
        Microseconds are dropped.
        """
        if value.tzinfo is not None:
            value = value.astimezone(UTC)
        fields = validate_fields(
            value.year, value.month, value.day, value.hour, value.minute, value.second
        )
        return cls._build(fields, locale=locale, config=config)

    @classmethod
    def now(
        cls,
        *,
        locale: LocaleCode | None = None,
        config: DateConfig = DEFAULT_CONFIG,
    ) -> DateValue:
        """Create a DateValue for the current time reported by ``config.clock``."""
        return cls.create(None, locale=locale, config=config)

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def fields(self) -> CalendarFields:
        """The six calendar fields as a tuple, coarsest first."""
        return CalendarFields(
            self.year, self.month, self.day, self.hour, self.minute, self.second
        )

    @property
    def unix(self) -> int:
        """Alias for epoch_seconds."""
        return self.epoch_seconds

    @property
    def days_in_month(self) -> int:
        """Number of days in this date's month."""
        return days_in_month(self.year, self.month)

    @property
    def is_leap_year(self) -> bool:
        """True when this date's year is divisible by 4."""
        return is_leap_year(self.year)

    def to_datetime(self) -> datetime:
        """Return an aware UTC datetime.

        Raises:
            ValueError: If the year is outside datetime's 1-9999 range
        """
        return datetime(*self.fields, tzinfo=UTC)

    # ------------------------------------------------------------------
    # Updates (return new values)
    # ------------------------------------------------------------------

    def _with_fields(self, fields: CalendarFields) -> DateValue:
        return DateValue(
            *fields, fields_to_epoch(*fields), self.locale, self.locale_table, self.config
        )

    def with_field(self, name: str, value: int) -> DateValue:
        """Return a copy with one calendar field replaced and epoch recomputed.

        Raises:
            InvalidFieldError: If name is not a field name or the result is invalid
        """
        if name not in FIELD_NAMES:
            raise InvalidFieldError(
                ErrorTemplate.invalid_field("field name", name, f"one of {', '.join(FIELD_NAMES)}")
            )
        return self.replace(**{name: value})

    def replace(self, **fields: int) -> DateValue:
        """Return a copy with several calendar fields replaced.

        The new field set is validated as a whole, so moving from
        January 31 to February 29 in a leap year works in one call.

        Raises:
            InvalidFieldError: If a name is unknown or the result is invalid
        """
        unknown = sorted(set(fields) - set(FIELD_NAMES))
        if unknown:
            raise InvalidFieldError(
                ErrorTemplate.invalid_field(
                    "field name", unknown[0], f"one of {', '.join(FIELD_NAMES)}"
                )
            )
        return self._with_fields(validate_fields(*self.fields._replace(**fields)))

    def with_epoch(self, seconds: int) -> DateValue:
        """Return a copy at ``seconds`` since the epoch, fields recomputed."""
        fields = epoch_to_fields(seconds)
        return DateValue(*fields, seconds, self.locale, self.locale_table, self.config)

    def with_locale(
        self,
        locale: LocaleCode,
        *,
        config: DateConfig | None = None,
    ) -> DateValue:
        """Return a copy using the locale table of ``locale``.

        The table is loaded through ``config``, by default the configuration
        this value was built with. A missing resource falls back to
        ``config.fallback_locale``. A resource that fails to parse is logged
        and the current locale and table are kept (``self`` is returned).

        Raises:
            LocaleResourceMissingError: If neither resource can be read
        """
        if config is None:
            config = self.config
        try:
            tag, table = load_locale_table(
                locale, loader=config.loader, fallback_locale=config.fallback_locale
            )
        except LocaleParseError as e:
            logger.warning(
                "Keeping locale '%s' after locale '%s' failed to parse (line %s): %s",
                self.locale,
                e.locale_code,
                e.line,
                e.detail,
            )
            return self
        return DateValue(*self.fields, self.epoch_seconds, tag, table, config)

    def with_locale_table(self, locale: LocaleCode, table: LocaleTable) -> DateValue:
        """Return a copy using an explicitly supplied locale table."""
        return DateValue(*self.fields, self.epoch_seconds, locale, table, self.config)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def _truncated(
        self, other: DateValue, precision: Precision | str
    ) -> tuple[tuple[int, ...], tuple[int, ...]]:
        if not isinstance(other, DateValue):
            msg = f"Cannot compare DateValue with {type(other).__name__}"
            raise TypeError(msg)
        depth = _coerce_precision(precision).depth
        return self.fields[:depth], other.fields[:depth]

    def is_same(self, other: DateValue, precision: Precision | str = Precision.SECOND) -> bool:
        """True if every field from year down to ``precision`` is equal."""
        mine, theirs = self._truncated(other, precision)
        return mine == theirs

    def is_before(self, other: DateValue, precision: Precision | str = Precision.SECOND) -> bool:
        """True if this date is earlier than ``other`` at ``precision``."""
        mine, theirs = self._truncated(other, precision)
        return mine < theirs

    def is_same_or_before(
        self, other: DateValue, precision: Precision | str = Precision.SECOND
    ) -> bool:
        """is_same or is_before."""
        return self.is_same(other, precision) or self.is_before(other, precision)

    def is_after(self, other: DateValue, precision: Precision | str = Precision.SECOND) -> bool:
        """Not is_same_or_before."""
        return not self.is_same_or_before(other, precision)

    def is_same_or_after(
        self, other: DateValue, precision: Precision | str = Precision.SECOND
    ) -> bool:
        """Not is_before."""
        return not self.is_before(other, precision)

    def compare(self, other: DateValue, precision: Precision | str = Precision.SECOND) -> int:
        """Return -1, 0 or 1 as this date is before, the same as, or after ``other``."""
        mine, theirs = self._truncated(other, precision)
        return (mine > theirs) - (mine < theirs)

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format(self, template_or_name: str | None = None) -> str:
        """Render the date.

        Args:
            template_or_name: A format name from the locale table ("long"),
                a literal template ("MM/DD/YYYY"), or None for the ISO-like
                "YYYY-MM-DDTHH:mm:ss" form

        Example:
            >>> d.format("MM/DD/YYYY")
            '03/05/2020'
        """
        if template_or_name is None:
            return format_default(self.fields)
        template = self.locale_table.resolve_format(template_or_name)
        return format_fields(self.fields, template, self.locale_table)

    def __str__(self) -> str:
        return self.format()
