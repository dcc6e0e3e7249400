"""Core package for worldline.

Re-exports the data model so callers can do:
    from worldline.core import Date, Event, WorldLine
"""

from __future__ import annotations

from .date import Date, Precision
from .errors import (
    DateError,
    DateFormatError,
    InvalidDate,
    InvalidDay,
    InvalidDescription,
    InvalidMonth,
)
from .event import Event
from .worldline import WorldLine

__all__ = [
    "Date",
    "DateError",
    "DateFormatError",
    "Event",
    "InvalidDate",
    "InvalidDay",
    "InvalidDescription",
    "InvalidMonth",
    "Precision",
    "WorldLine",
]
