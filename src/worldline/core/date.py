"""
Partial-precision calendar dates.

A :class:`Date` stores a signed year plus an optional month and day. Zero in
the month or day slot means "not known", so a single type covers three
precisions:

- ``Date(1969)``         the year 1969
- ``Date(1969, 7)``      July 1969
- ``Date(1969, 7, 20)``  20 July 1969

Negative years are BCE (``Date(-44, 3, 15)`` is the Ides of March, 44 BCE).
There is no year zero in the historical calendar, but nothing here forbids it;
it simply sorts between 1 BCE and 1 CE.

Calendar model
--------------
Month lengths come from a fixed table with a 28-day February. Leap years are
not modelled.

Ordering
--------
Dates compare lexicographically on ``(year, month, day)`` with unknown parts
treated as 0. A year-only date therefore sorts before every more precise date
in the same year. This is an exact chronology only between dates of the same
precision; range queries rely on it anyway and :meth:`Date.next` is what turns
a coarse date into a correct exclusive bound.

Text form
---------
:meth:`Date.parse` accepts an optional era (``BCE``, ``BC``, ``CE``, ``AD``,
any case), a 1-4 digit year with an optional leading minus, and optional
``-MM`` and ``-DD`` parts. :meth:`Date.format` produces the fixed-width
column used by the worldline file.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from .errors import DateFormatError, InvalidDay, InvalidMonth

MONTH_LENGTHS: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Width of "YYYY-MM-DD" and of the era prefix (" CE " / "BCE ").
DATE_WIDTH = 10
ERA_WIDTH = 4

_ERA = r"(?P<era>(?i:BCE|BC|CE|AD))?"
_YEAR = r"(?P<year>-?\d{1,4})"
_MONTH = r"(?:-(?P<month>\d{1,2}))?"
_DAY = r"(?:-(?P<day>\d{1,2}))?"

DATE_PATTERN = re.compile(rf"^\s*{_ERA}\s*{_YEAR}{_MONTH}{_DAY}(?:\s+|$)")


class Precision(Enum):
    """Finest unit a :class:`Date` is known to."""

    YEAR = "year"
    MONTH = "month"
    DAY = "day"

    def __str__(self) -> str:
        return self.value


def month_length(month: int) -> int:
    """Return the fixed length of ``month`` (1-12)."""
    return MONTH_LENGTHS[month - 1]


@dataclass(frozen=True, order=True, slots=True)
class Date:
    """
    Immutable, possibly partial calendar date.

    Parameters
    ----------
    year : int
        Signed year; negative values are BCE.
    month : int, default=0
        1-12, or 0 when unknown.
    day : int, default=0
        1 to the month's length, or 0 when unknown. Must be 0 when
        ``month`` is 0.

    Raises
    ------
    InvalidMonth
        ``month`` is outside 0-12.
    InvalidDay
        ``day`` does not fit the month, or a day is given without a month.
    """

    year: int
    month: int = 0
    day: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.month <= 12:
            raise InvalidMonth(self.month)
        if self.day < 0:
            raise InvalidDay(self.day, self.month)
        if self.month == 0:
            if self.day != 0:
                raise InvalidDay(self.day, self.month)
        elif self.day > month_length(self.month):
            raise InvalidDay(self.day, self.month)

    # ------------------------------------------------------------------ #
    # Introspection
    # ------------------------------------------------------------------ #

    @property
    def precision(self) -> Precision:
        if self.month == 0:
            return Precision.YEAR
        if self.day == 0:
            return Precision.MONTH
        return Precision.DAY

    @property
    def is_bce(self) -> bool:
        return self.year < 0

    @property
    def era(self) -> str:
        return "BCE" if self.is_bce else "CE"

    # ------------------------------------------------------------------ #
    # Arithmetic
    # ------------------------------------------------------------------ #

    def next(self) -> Date:
        """
        Return the date one unit of the finest known precision later.

        ``2023-11-30`` becomes ``2023-12`` (start of the next month, day
        unknown), ``2023-12`` and ``2023-12-31`` become ``2024``, and ``2023``
        becomes ``2024``. The result is the exclusive upper bound of the
        period this date denotes.
        """
        if self.day != 0 and self.day < month_length(self.month):
            return Date(self.year, self.month, self.day + 1)
        if self.month != 0 and self.month < 12:
            return Date(self.year, self.month + 1, 0)
        return Date(self.year + 1, 0, 0)

    # ------------------------------------------------------------------ #
    # Text
    # ------------------------------------------------------------------ #

    @classmethod
    def parse(cls, text: str) -> tuple[Date, int]:
        """
        Parse the date at the start of ``text``.

        Returns
        -------
        tuple[Date, int]
            The date and the index of the first character not consumed. The
            whitespace that terminates the date is consumed.

        Raises
        ------
        DateFormatError
            ``text`` does not start with a date followed by whitespace or the
            end of input, or an AD/CE era is combined with a negative year.
        InvalidMonth, InvalidDay
            The components are out of range.

        Examples
        --------
        >>> Date.parse("BCE 44-03-15 Ides of March")
        (Date(year=-44, month=3, day=15), 13)
        >>> Date.parse("2023")
        (Date(year=2023, month=0, day=0), 4)
        """
        match = DATE_PATTERN.match(text)
        if match is None:
            raise DateFormatError(text)

        year = int(match["year"])
        era = match["era"]
        if era is not None:
            if era[0] in "Bb":
                year = -abs(year)
            elif match["year"].startswith("-"):
                raise DateFormatError(text, f"era {era} contradicts a negative year")

        month = int(match["month"]) if match["month"] is not None else 0
        day = int(match["day"]) if match["day"] is not None else 0
        return cls(year, month, day), match.end()

    @classmethod
    def from_string(cls, text: str) -> Date:
        """Parse ``text`` that must consist of a single date and nothing else."""
        date, consumed = cls.parse(text)
        if consumed != len(text):
            raise DateFormatError(text, "unexpected text after date")
        return date

    def format(self, display_era: bool) -> str:
        """
        Render the fixed-width date column.

        The year is zero-padded to four digits, month and day to two. Missing
        parts are replaced by spaces so the column is always ten characters.
        The year is printed without sign; with ``display_era`` a four
        character ``" CE "`` or ``"BCE "`` prefix carries it.
        """
        prefix = ""
        if display_era:
            prefix = "BCE " if self.is_bce else " CE "

        year = f"{abs(self.year):04d}"
        if self.month == 0:
            body = year
        elif self.day == 0:
            body = f"{year}-{self.month:02d}"
        else:
            body = f"{year}-{self.month:02d}-{self.day:02d}"
        return prefix + body.ljust(DATE_WIDTH)

    def __str__(self) -> str:
        return f"{self.era} {self.format(False).rstrip()}"


__all__ = ["DATE_PATTERN", "DATE_WIDTH", "ERA_WIDTH", "Date", "MONTH_LENGTHS", "Precision"]
