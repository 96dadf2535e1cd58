"""ISO 8601 date-time parsing for the ``YYYY-MM-DDTHH:MM:SSZ`` shape.

Only UTC input is accepted. Numeric offsets (``+02:00``, ``-0500``) raise
UnsupportedTimezoneOffsetError rather than being mis-read as UTC; a
string without a ``Z`` designator is not an ISO date-time at all.
Zero-padding is not required (``2020-3-5T9:5:0Z`` parses).
Fractional seconds are truncated.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from datevalue.calendar import CalendarFields, validate_fields
from datevalue.diagnostics import (
    ErrorTemplate,
    UnrecognizedInputFormatError,
    UnsupportedTimezoneOffsetError,
)

__all__ = ["has_numeric_offset", "is_iso8601_candidate", "parse_iso8601"]

_DATE_TIME_SEPARATOR = "T"
_UTC_DESIGNATOR = "Z"


def is_iso8601_candidate(value: str) -> bool:
    """Return True for strings shaped like an ISO 8601 UTC date-time.

    A cheap shape check (contains both ``T`` and ``Z``); it does not validate.
    """
    return _DATE_TIME_SEPARATOR in value and _UTC_DESIGNATOR in value


def has_numeric_offset(value: str) -> bool:
    """Return True when the time part of ``value`` carries a ``+`` or ``-`` offset."""
    _, separator, time_part = value.partition(_DATE_TIME_SEPARATOR)
    if not (separator and time_part[:1].isdigit()):
        return False
    return any(char in "+-" for char in time_part)


def _to_int(component: str, source: str) -> int:
    # int() would also accept " 5", "+5" and "1_000"
    if not (component.isascii() and component.isdigit()):
        raise UnrecognizedInputFormatError(
            ErrorTemplate.unrecognized_input(source, f"'{component}' is not a number")
        )
    return int(component)


def _strip_designator(time_part: str, source: str) -> str:
    """Strip the trailing ``Z``; reject any numeric offset or missing designator.

    Raises:
        UnsupportedTimezoneOffsetError: If the time carries a numeric offset
        UnrecognizedInputFormatError: If the ``Z`` designator is missing
    """
    for index, char in enumerate(time_part):
        if char in "+-":
            raise UnsupportedTimezoneOffsetError(
                ErrorTemplate.unsupported_offset(source, time_part[index:])
            )
    if not time_part.endswith(_UTC_DESIGNATOR):
        raise UnrecognizedInputFormatError(
            ErrorTemplate.unrecognized_input(source, "missing 'Z' UTC designator")
        )
    return time_part[: -len(_UTC_DESIGNATOR)]


def parse_iso8601(value: str) -> CalendarFields:
    """Parse ``YYYY-MM-DDTHH:MM:SSZ`` into validated calendar fields.

    Args:
        value: ISO 8601 date-time string in UTC

    Returns:
        CalendarFields tuple

    Raises:
        UnrecognizedInputFormatError: If the string does not have a date part,
            a time part ending in Z, three date components and three time
            components
        UnsupportedTimezoneOffsetError: If the time carries an offset other than Z
        InvalidFieldError: If a component is out of range

    Example:
        >>> parse_iso8601("2020-03-05T14:30:00Z")
        CalendarFields(year=2020, month=3, day=5, hour=14, minute=30, second=0)
    """
    if not isinstance(value, str):
        raise UnrecognizedInputFormatError(
            ErrorTemplate.unrecognized_input(value, "expected an ISO 8601 string")
        )

    date_part, separator, time_part = value.strip().partition(_DATE_TIME_SEPARATOR)
    if not separator:
        raise UnrecognizedInputFormatError(
            ErrorTemplate.unrecognized_input(value, "missing 'T' date/time separator")
        )

    clock = _strip_designator(time_part, value)

    negative_year = date_part.startswith("-")
    date_components = (date_part[1:] if negative_year else date_part).split("-")
    if len(date_components) != 3:
        raise UnrecognizedInputFormatError(
            ErrorTemplate.unrecognized_input(value, "date must be YYYY-MM-DD")
        )
    year, month, day = (_to_int(c, value) for c in date_components)
    if negative_year:
        year = -year

    time_components = clock.split(":")
    if len(time_components) != 3:
        raise UnrecognizedInputFormatError(
            ErrorTemplate.unrecognized_input(value, "time must be HH:MM:SS")
        )
    hour = _to_int(time_components[0], value)
    minute = _to_int(time_components[1], value)
    whole_seconds, _, fraction = time_components[2].partition(".")
    if fraction:
        _to_int(fraction, value)
    second = _to_int(whole_seconds, value)

    return validate_fields(year, month, day, hour, minute, second)
