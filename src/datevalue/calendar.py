"""Calendar arithmetic: leap years, month lengths, epoch conversions.

The calendar is proleptic with a leap year every fourth year
(``year % 4 == 0``), with no century exception. Conversions and month
lengths share that rule, so ``fields_to_epoch`` and ``epoch_to_fields``
are exact inverses over every integer. Results agree with the Gregorian
calendar from 1901-03-01 through 2100-02-28.

All functions are pure and work for negative epoch values and years
before 1 (year 0 is a leap year).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import NamedTuple

from datevalue.constants import (
    EPOCH_YEAR,
    MONTHS_PER_YEAR,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from datevalue.diagnostics import ErrorTemplate, InvalidFieldError

__all__ = [
    "CalendarFields",
    "days_in_month",
    "epoch_to_fields",
    "fields_to_epoch",
    "is_leap_year",
    "validate_fields",
]

_LONG_MONTHS = frozenset({1, 3, 5, 7, 8, 10, 12})
_SHORT_MONTHS = frozenset({4, 6, 9, 11})

_DAYS_PER_YEAR = 365
_DAYS_PER_CYCLE = 4 * _DAYS_PER_YEAR + 1

# 1968 is the leap year opening the four-year cycle that contains the epoch.
_CYCLE_ANCHOR_YEAR = 1968
_DAYS_ANCHOR_TO_EPOCH = 2 * _DAYS_PER_YEAR + 1


class CalendarFields(NamedTuple):
    """The six calendar fields, coarsest first."""

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0


def is_leap_year(year: int) -> bool:
    """Return True when ``year`` is divisible by 4.

    Century years are not special-cased: 1900 and 2100 are leap years here.

    Example:
        >>> is_leap_year(2020)
        True
        >>> is_leap_year(2021)
        False
    """
    return year % 4 == 0


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in ``month`` of ``year``.

    Args:
        year: Calendar year
        month: Month number, 1-12

    Returns:
        31, 30, 29 or 28

    Raises:
        InvalidFieldError: If month is outside 1-12
    """
    if month in _LONG_MONTHS:
        return 31
    if month in _SHORT_MONTHS:
        return 30
    if month == 2:
        return 29 if is_leap_year(year) else 28
    raise InvalidFieldError(ErrorTemplate.invalid_field("month", month, "1-12"))


def _check_int(name: str, value: object) -> None:
    # bool is an int subclass but never a meaningful calendar field
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidFieldError(ErrorTemplate.invalid_field(name, value, "an integer"))


def _check_range(name: str, value: int, low: int, high: int) -> None:
    if not low <= value <= high:
        raise InvalidFieldError(ErrorTemplate.invalid_field(name, value, f"{low}-{high}"))


def validate_fields(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> CalendarFields:
    """Check every field type and range, returning the validated tuple.

    Raises:
        InvalidFieldError: On the first field that is not an int or is out of range
    """
    for name, value in zip(
        CalendarFields._fields, (year, month, day, hour, minute, second), strict=True
    ):
        _check_int(name, value)
    _check_range("month", month, 1, MONTHS_PER_YEAR)
    _check_range("day", day, 1, days_in_month(year, month))
    _check_range("hour", hour, 0, 23)
    _check_range("minute", minute, 0, 59)
    _check_range("second", second, 0, 59)
    return CalendarFields(year, month, day, hour, minute, second)


def _days_before_year(year: int) -> int:
    """Days from 1970-01-01 to January 1st of ``year`` (negative before 1970)."""
    leap_days = (year - 1) // 4 - (EPOCH_YEAR - 1) // 4
    return _DAYS_PER_YEAR * (year - EPOCH_YEAR) + leap_days


def _days_before_month(year: int, month: int) -> int:
    return sum(days_in_month(year, m) for m in range(1, month))


def fields_to_epoch(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> int:
    """Encode calendar fields as signed seconds since 1970-01-01T00:00:00Z.

    Fields are validated first.

    Example:
        >>> fields_to_epoch(1970, 1, 1)
        0
        >>> fields_to_epoch(2020, 3, 5, 14, 30, 0)
        1583418600

    Raises:
        InvalidFieldError: If any field is out of range
    """
    validate_fields(year, month, day, hour, minute, second)
    days = _days_before_year(year) + _days_before_month(year, month) + day - 1
    return (
        days * SECONDS_PER_DAY
        + hour * SECONDS_PER_HOUR
        + minute * SECONDS_PER_MINUTE
        + second
    )


def epoch_to_fields(seconds: int) -> CalendarFields:
    """Decode signed epoch seconds into calendar fields.

    Example:
        >>> epoch_to_fields(0)
        CalendarFields(year=1970, month=1, day=1, hour=0, minute=0, second=0)
        >>> epoch_to_fields(-1)
        CalendarFields(year=1969, month=12, day=31, hour=23, minute=59, second=59)

    Raises:
        InvalidFieldError: If seconds is not an integer
    """
    _check_int("epoch seconds", seconds)
    days, remainder = divmod(seconds, SECONDS_PER_DAY)

    cycle, day_of_cycle = divmod(days + _DAYS_ANCHOR_TO_EPOCH, _DAYS_PER_CYCLE)
    if day_of_cycle < _DAYS_PER_YEAR + 1:
        year_of_cycle, day_of_year = 0, day_of_cycle
    else:
        year_of_cycle, day_of_year = divmod(day_of_cycle - (_DAYS_PER_YEAR + 1), _DAYS_PER_YEAR)
        year_of_cycle += 1
    year = _CYCLE_ANCHOR_YEAR + 4 * cycle + year_of_cycle

    month = 1
    while day_of_year >= (length := days_in_month(year, month)):
        day_of_year -= length
        month += 1

    hour, remainder = divmod(remainder, SECONDS_PER_HOUR)
    minute, second = divmod(remainder, SECONDS_PER_MINUTE)
    return CalendarFields(year, month, day_of_year + 1, hour, minute, second)
