"""
A dated worldline entry.

One line of the worldline file holds one :class:`Event`::

    BCE 0044-03-15 Assassination of Julius Caesar
     CE 1969-07-20 Apollo 11 lands on the Moon
     CE 2023       Started keeping a worldline

The first 14 characters are the era-qualified date column, then a single
space, then the description up to the end of the line.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.text import Text

from .date import Date
from .errors import InvalidDescription

DATE_STYLE = "blue"


@dataclass(frozen=True, slots=True)
class Event:
    """
    A :class:`Date` paired with free text.

    Events are not orderable; collections sort on ``event.date``.

    Raises
    ------
    InvalidDescription
        ``description`` contains ``"\\n"`` or ends with ``"\\r"``; either
        would change the line when the file is read back.
    """

    date: Date
    description: str = ""

    def __post_init__(self) -> None:
        if "\n" in self.description or self.description.endswith("\r"):
            raise InvalidDescription(self.description)

    @classmethod
    def parse(cls, line: str) -> Event:
        """
        Parse one worldline line.

        The description is everything after the date and its terminating
        whitespace, kept verbatim.

        Raises
        ------
        DateFormatError, InvalidMonth, InvalidDay
            Propagated from :meth:`Date.parse`.
        """
        date, consumed = Date.parse(line)
        return cls(date, line[consumed:])

    def format_for_file(self) -> str:
        """Return the persisted form; the era is always written."""
        return f"{self.date.format(True)} {self.description}"

    def format_for_display(self, show_era: bool, colored: bool = True) -> Text:
        """
        Return the terminal form of this event.

        Parameters
        ----------
        show_era : bool
            Prefix the date with its era. Callers decide this per batch.
        colored : bool, default=True
            Style the date column; ``False`` gives plain text.
        """
        date_text = self.date.format(show_era)
        return Text.assemble(
            (date_text, DATE_STYLE if colored else ""),
            " ",
            self.description,
        )

    def __str__(self) -> str:
        return self.format_for_file()


__all__ = ["Event"]
