"""Hypothesis strategies for datevalue property-based testing.

Usage:
    from tests.strategies import calendar_fields, date_pairs, epoch_seconds
"""

from .dates import (
    calendar_fields,
    date_pairs,
    date_values,
    epoch_seconds,
    precisions,
    years,
)

__all__ = [
    "calendar_fields",
    "date_pairs",
    "date_values",
    "epoch_seconds",
    "precisions",
    "years",
]
