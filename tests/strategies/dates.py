"""Hypothesis strategies for calendar fields, epoch values and DateValues.

Usage:
    from hypothesis import given
    from tests.strategies.dates import calendar_fields, epoch_seconds

    @given(fields=calendar_fields())
    def test_roundtrip(fields):
        ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

from datevalue import DateConfig, DateValue, FixedClock, Precision
from datevalue.calendar import CalendarFields, days_in_month

from tests.helpers.locales import MemoryLocaleLoader

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy

# ============================================================================
# SCALARS
# ============================================================================

# About +/- 3000 years around the epoch, negative values included.
epoch_seconds: SearchStrategy[int] = st.integers(min_value=-(10**11), max_value=10**11)

years: SearchStrategy[int] = st.integers(min_value=-9999, max_value=9999)

precisions: SearchStrategy[Precision] = st.sampled_from(list(Precision))


# ============================================================================
# CALENDAR FIELDS
# ============================================================================


@composite
def calendar_fields(
    draw: st.DrawFn,
    year_strategy: SearchStrategy[int] = years,
) -> CalendarFields:
    """Generate a valid field tuple, emitting month-end and leap-day events."""
    year = draw(year_strategy)
    month = draw(st.integers(min_value=1, max_value=12))
    last_day = days_in_month(year, month)
    day = draw(st.integers(min_value=1, max_value=last_day))
    if day == last_day:
        event("day=month_end")
    if month == 2 and day == 29:
        event("day=leap_day")
    return CalendarFields(
        year,
        month,
        day,
        draw(st.integers(min_value=0, max_value=23)),
        draw(st.integers(min_value=0, max_value=59)),
        draw(st.integers(min_value=0, max_value=59)),
    )


# ============================================================================
# DATE VALUES
# ============================================================================

_MEMORY_CONFIG = DateConfig(locale="en_US", loader=MemoryLocaleLoader(), clock=FixedClock(0))


@composite
def date_values(draw: st.DrawFn) -> DateValue:
    """Generate a DateValue backed by the in-memory en_US table.

    Years are drawn from a narrow range so pairs of dates often share
    their coarse fields and comparisons reach the finer precisions.
    """
    fields = draw(calendar_fields(st.integers(min_value=1999, max_value=2001)))
    return DateValue.from_fields(*fields, config=_MEMORY_CONFIG)


@composite
def date_pairs(draw: st.DrawFn) -> tuple[DateValue, DateValue]:
    """Generate two dates, the second often derived from the first by one field."""
    first = draw(date_values())
    if draw(st.booleans()):
        return first, draw(date_values())
    name = draw(st.sampled_from(["year", "month", "day", "hour", "minute", "second"]))
    event(f"pair=shares_all_but_{name}")
    second = draw(date_values())
    try:
        return first, first.with_field(name, getattr(second, name))
    except ValueError:
        return first, second
