"""
Tests for partial-precision dates.

Scope
-----
1.  **Validation**: month and day ranges, the "day without month" rule.
2.  **Grammar**: era tokens, signed years, optional parts, trailing context.
3.  **Formatting**: fixed-width columns with blank padding and era prefixes.
4.  **Successor**: `next()` advances by the finest known unit.
5.  **Ordering**: lexicographic on (year, month, day).
"""

from __future__ import annotations

import pytest

from worldline.core.date import DATE_WIDTH, Date, Precision
from worldline.core.errors import (
    DateError,
    DateFormatError,
    InvalidDate,
    InvalidDay,
    InvalidMonth,
)

# --------------------------------------------------------------------------- #
# Construction
# --------------------------------------------------------------------------- #


def test_unknown_parts_are_valid_sentinels() -> None:
    assert Date(2023).precision is Precision.YEAR
    assert Date(2023, 12).precision is Precision.MONTH
    assert Date(2023, 12, 25).precision is Precision.DAY


def test_invalid_month_and_day() -> None:
    """Out-of-range components raise the specific error type."""
    with pytest.raises(InvalidMonth):
        Date(2023, 13)
    with pytest.raises(InvalidMonth):
        Date(2023, -1)
    with pytest.raises(InvalidDay):
        Date(2023, 4, 31)
    with pytest.raises(InvalidDay):
        Date(2023, 1, -1)


def test_february_has_no_leap_day() -> None:
    assert Date(2024, 2, 28).day == 28
    with pytest.raises(InvalidDay):
        Date(2024, 2, 29)


def test_day_without_month_is_rejected() -> None:
    with pytest.raises(InvalidDay):
        Date(2023, 0, 5)


def test_error_hierarchy() -> None:
    """Validation errors are `ValueError`s and share a common base."""
    assert issubclass(InvalidMonth, InvalidDate)
    assert issubclass(InvalidDay, InvalidDate)
    assert issubclass(DateFormatError, DateError)
    assert issubclass(DateError, ValueError)


def test_dates_are_immutable_and_hashable() -> None:
    d = Date(1969, 7, 20)
    with pytest.raises(AttributeError):
        d.year = 1970  # type: ignore[misc]
    assert {d, Date(1969, 7, 20)} == {d}


# --------------------------------------------------------------------------- #
# Parsing
# --------------------------------------------------------------------------- #


def test_parse_dates() -> None:
    """Accepted spellings map to the expected components."""
    cases = [
        # CE dates
        ("CE 2023", (2023, 0, 0)),
        ("CE 2023-12", (2023, 12, 0)),
        ("CE 2023-12-25", (2023, 12, 25)),
        ("1-2-3", (1, 2, 3)),
        ("AD 2023", (2023, 0, 0)),
        ("ad 2023", (2023, 0, 0)),
        ("CE2023", (2023, 0, 0)),
        ("  CE  2023-1-5", (2023, 1, 5)),
        # BCE dates
        ("BCE 44", (-44, 0, 0)),
        ("BC 44", (-44, 0, 0)),
        ("bce 44", (-44, 0, 0)),
        ("-44", (-44, 0, 0)),
        ("-44-12", (-44, 12, 0)),
        ("-44-12-25", (-44, 12, 25)),
        ("BCE -44", (-44, 0, 0)),
    ]
    for text, (year, month, day) in cases:
        date, _ = Date.parse(text)
        assert date == Date(year, month, day), text


def test_parse_reports_consumed_length() -> None:
    """The index points at the first character after the date and its whitespace."""
    assert Date.parse("CE 2023") == (Date(2023), 7)
    text = "-44-12-25 et tu"
    date, consumed = Date.parse(text)
    assert date == Date(-44, 12, 25)
    assert text[consumed:] == "et tu"
    assert Date.parse("2023   x")[1] == 7


def test_parse_invalid_dates() -> None:
    """Grammar mismatches raise DateFormatError; range errors keep their type."""
    for text in ["", "CE", "invalid", "2023x", "20234", "CE 2023-01-01-01", "2023-", "BCE"]:
        with pytest.raises(DateFormatError):
            Date.parse(text)
    with pytest.raises(InvalidMonth):
        Date.parse("CE 2023-13")
    with pytest.raises(InvalidDay):
        Date.parse("CE 2023-12-32")


def test_ce_era_contradicting_negative_year() -> None:
    with pytest.raises(DateFormatError):
        Date.parse("CE -44")
    with pytest.raises(DateFormatError):
        Date.parse("AD -1-02")


def test_from_string_requires_whole_input() -> None:
    assert Date.from_string("BCE 44-03-15") == Date(-44, 3, 15)
    assert Date.from_string(" 2023 ") == Date(2023)
    with pytest.raises(DateFormatError):
        Date.from_string("2023 and more")


# --------------------------------------------------------------------------- #
# Formatting
# --------------------------------------------------------------------------- #


def test_format_dates() -> None:
    cases = [
        # CE dates
        ((2023, 0, 0), " CE 2023      "),
        ((2023, 12, 0), " CE 2023-12   "),
        ((2023, 12, 25), " CE 2023-12-25"),
        ((1, 2, 3), " CE 0001-02-03"),
        # BCE dates
        ((-44, 0, 0), "BCE 0044      "),
        ((-44, 12, 0), "BCE 0044-12   "),
        ((-44, 12, 25), "BCE 0044-12-25"),
        ((-1, 0, 0), "BCE 0001      "),
    ]
    for (year, month, day), expected in cases:
        assert Date(year, month, day).format(True) == expected


def test_format_without_era_drops_sign() -> None:
    assert Date(-44, 3).format(False) == "0044-03   "
    assert Date(44, 3).format(False) == "0044-03   "


def test_format_width_is_constant() -> None:
    for date in [Date(7), Date(-7, 7), Date(1999, 9, 9), Date(-9999, 12, 31)]:
        assert len(date.format(False)) == DATE_WIDTH
        assert len(date.format(True)) == DATE_WIDTH + 4


def test_round_trip_through_file_form() -> None:
    """Era is always written, so the sign survives a format/parse cycle."""
    samples = [
        Date(-9999),
        Date(-44, 3, 15),
        Date(-1, 12),
        Date(0),
        Date(1, 1, 1),
        Date(1969, 7, 20),
        Date(9999, 12, 31),
    ]
    for date in samples:
        text = date.format(True)
        assert Date.parse(text) == (date, len(text))


def test_str_is_compact() -> None:
    assert str(Date(-44, 3, 15)) == "BCE 0044-03-15"
    assert str(Date(2023)) == "CE 2023"


# --------------------------------------------------------------------------- #
# Successor & ordering
# --------------------------------------------------------------------------- #


def test_date_next() -> None:
    cases = [
        (Date(2023, 11, 30), Date(2023, 12)),
        (Date(2023, 12, 31), Date(2024)),
        (Date(2023, 12), Date(2024)),
        (Date(2023), Date(2024)),
        (Date(2023, 2, 28), Date(2023, 3)),
        (Date(2023, 1, 15), Date(2023, 1, 16)),
        (Date(-1), Date(0)),
        (Date(-44, 12, 31), Date(-43)),
    ]
    for date, expected in cases:
        assert date.next() == expected, date
        assert date.next() > date


def test_lexicographic_ordering() -> None:
    """Unknown parts sort as zero: a year precedes its months and days."""
    ordered = [
        Date(-44),
        Date(-44, 3, 15),
        Date(-1, 12, 31),
        Date(2023),
        Date(2023, 1),
        Date(2023, 1, 1),
        Date(2023, 1, 2),
        Date(2023, 2),
        Date(2024),
    ]
    assert sorted(reversed(ordered)) == ordered
