"""Enumerations for datevalue type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.

Python 3.13+.
"""

from enum import StrEnum

from datevalue.constants import FIELD_NAMES

__all__ = ["Precision"]


class Precision(StrEnum):
    """Calendar granularity for comparisons, ordered coarsest to finest.

    StrEnum provides automatic string conversion: str(Precision.DAY) == "day".
    Member values are the DateValue field names they stop at.
    """

    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"

    @property
    def depth(self) -> int:
        """Number of fields compared at this precision (YEAR=1 .. SECOND=6)."""
        return FIELD_NAMES.index(self.value) + 1

    @property
    def fields(self) -> tuple[str, ...]:
        """Field names from year down to and including this precision."""
        return FIELD_NAMES[: self.depth]
