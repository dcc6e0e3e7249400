"""Exception hierarchy for date parsing and validation.

Every failure raised by :mod:`worldline.core` derives from
:class:`WorldLineError`. Date problems additionally derive from ``ValueError``
so generic callers can treat them as bad input. File failures are not wrapped;
they surface as the built-in ``OSError``.
"""

from __future__ import annotations


class WorldLineError(Exception):
    """Base class for all worldline errors."""


class DateError(WorldLineError, ValueError):
    """A date string or date component could not be accepted."""


class DateFormatError(DateError):
    """Text does not match the date grammar."""

    def __init__(self, text: str, reason: str | None = None) -> None:
        self.text = text
        message = f"Invalid date format: {text!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidDate(DateError):
    """Date components are out of range."""


class InvalidDescription(WorldLineError, ValueError):
    """An event description cannot be stored on a single line."""

    def __init__(self, description: str) -> None:
        self.description = description
        super().__init__(f"Description must not contain a line break: {description!r}")


class InvalidMonth(InvalidDate):
    def __init__(self, month: int) -> None:
        self.month = month
        super().__init__(f"Invalid month: {month}")


class InvalidDay(InvalidDate):
    def __init__(self, day: int, month: int) -> None:
        self.day = day
        self.month = month
        super().__init__(f"Invalid day: {day} (month {month})")


__all__ = [
    "DateError",
    "DateFormatError",
    "InvalidDate",
    "InvalidDay",
    "InvalidDescription",
    "InvalidMonth",
    "WorldLineError",
]
