"""
Sorted, file-backed event store.

A :class:`WorldLine` owns a list of :class:`Event` objects kept in
non-decreasing date order. It is loaded whole from a text file, mutated in
memory through :meth:`WorldLine.add_event`, and written back whole with
:meth:`WorldLine.to_file`.

Lookups
-------
Range queries are binary searches over the date column:

- :meth:`first_geq` is the index of the first event dated ``>= date``.
- :meth:`last_before` is one past the last event dated ``< date``.

Both are the same partition point. An inclusive date range ``[start, end]``
is the index window ``[first_geq(start), last_before(end.next()))``, which is
how a coarse date such as ``1994`` expands to everything in that year.

Display
-------
Printing goes to a :class:`rich.console.Console`. Whether dates carry their
era marker is decided per printed batch, not per event.

Limitations
-----------
- Writes overwrite the file in place; there is no atomic rename or locking.
- The loader trusts the file to be sorted already and does not re-sort it.
- Events sharing a date have no guaranteed relative order.
"""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Iterator
from pathlib import Path

from rich.console import Console

from .date import DATE_WIDTH, ERA_WIDTH, Date
from .errors import DateError
from .event import Event
from .settings import get_logger

logger = get_logger(__name__)

ANKI_HEADER = "#separator:Tab"
NO_EVENTS = "No events"

# Index of the space between the era-qualified date and the description.
DATE_COLUMN = ERA_WIDTH + DATE_WIDTH


def _date_of(event: Event) -> Date:
    return event.date


class WorldLine:
    """
    Ordered collection of events with range and substring queries.

    Parameters
    ----------
    events : Iterable[Event], optional
        Initial events, assumed to be sorted by date already.
    console : Console | None
        Output sink for the ``print_*`` methods. A stdout console is created
        when omitted.
    colored : bool, default=True
        Style dates in printed output.
    """

    __slots__ = ("_events", "console", "colored")

    def __init__(
        self,
        events: Iterable[Event] = (),
        *,
        console: Console | None = None,
        colored: bool = True,
    ) -> None:
        self._events: list[Event] = list(events)
        self.console: Console = console if console is not None else Console()
        self.colored = colored

    # ------------------------------- Loading --------------------------------

    @classmethod
    def from_lines(
        cls, lines: Iterable[str], *, console: Console | None = None, colored: bool = True
    ) -> WorldLine:
        """Parse one event per non-blank line, keeping the given order."""
        events = [Event.parse(line) for line in lines if line.strip()]
        return cls(events, console=console, colored=colored)

    @classmethod
    def from_events(
        cls, events: Iterable[Event], *, console: Console | None = None, colored: bool = True
    ) -> WorldLine:
        """Build a store from events in any order (stable sort by date)."""
        return cls(sorted(events, key=_date_of), console=console, colored=colored)

    @classmethod
    def from_file(
        cls, path: str | Path, *, console: Console | None = None, colored: bool = True
    ) -> WorldLine:
        """
        Load a worldline file.

        Raises
        ------
        OSError
            The file cannot be read.
        DateError
            A line does not start with a valid date. The exception carries a
            note with the offending ``path:lineno``.
        """
        path = Path(path)
        # Only "\n" ends a line; other Unicode line breaks belong to descriptions.
        with open(path, encoding="utf-8", newline="") as f:
            text = f.read()

        events: list[Event] = []
        for lineno, line in enumerate(text.split("\n"), start=1):
            line = line.removesuffix("\r")
            if not line.strip():
                continue
            try:
                events.append(Event.parse(line))
            except DateError as exc:
                exc.add_note(f"{path}:{lineno}: {line!r}")
                raise

        logger.debug("Loaded %d events from %s", len(events), path)
        return cls(events, console=console, colored=colored)

    # ------------------------------- Saving ---------------------------------

    def _build_file(self, separator: str = " ") -> str:
        lines = []
        for event in self._events:
            line = event.format_for_file()
            if separator != " ":
                line = line[:DATE_COLUMN] + separator + line[DATE_COLUMN + 1 :]
            lines.append(line + "\n")
        return "".join(lines)

    def to_file(self, path: str | Path) -> None:
        """Overwrite ``path`` with one line per event. ``OSError`` propagates."""
        path = Path(path)
        path.write_text(self._build_file(), encoding="utf-8", newline="")
        logger.debug("Wrote %d events to %s", len(self._events), path)

    def to_anki_file(self, path: str | Path) -> None:
        """
        Write a tab-separated export for flashcard import.

        The first line is the ``#separator:Tab`` header; each event line uses
        a tab between the date column and the description.
        """
        path = Path(path)
        body = self._build_file(separator="\t")
        path.write_text(f"{ANKI_HEADER}\n{body}", encoding="utf-8", newline="")
        logger.debug("Exported %d events to %s", len(self._events), path)

    # ------------------------------- Container ------------------------------

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(self._events)

    def __getitem__(self, index: int) -> Event:
        return self._events[index]

    @property
    def events(self) -> tuple[Event, ...]:
        """Read-only view of the events in stored order."""
        return tuple(self._events)

    # ------------------------------- Mutation -------------------------------

    def add_event(self, event: Event) -> int:
        """
        Insert ``event`` at its sorted position and return that index.

        The position is the first index whose date is ``>= event.date``, so
        a new event lands before existing events with the same date.
        """
        idx = self.first_geq(event.date)
        self._events.insert(idx, event)
        logger.debug("Inserted %s at index %d", event.date, idx)
        return idx

    # ------------------------------- Search ---------------------------------

    def first_geq(self, date: Date) -> int:
        """Return the index of the first event dated on or after ``date``."""
        return bisect.bisect_left(self._events, date, key=_date_of)

    def last_before(self, date: Date) -> int:
        """Return one past the index of the last event dated before ``date``."""
        lo, hi = 0, len(self._events)
        while lo < hi:
            mid = (lo + hi) // 2
            if self._events[mid].date < date:
                lo = mid + 1
            else:
                hi = mid
        return lo

    def date_range(self, start: Date, end: Date) -> tuple[int, int]:
        """Return the index window ``[lo, hi)`` of events dated in ``[start, end]``."""
        return self.first_geq(start), self.last_before(end.next())

    def query(self, text: str) -> list[Event]:
        """Return events whose description contains ``text``, ignoring case."""
        needle = text.lower()
        return [event for event in self._events if needle in event.description.lower()]

    # ------------------------------- Display --------------------------------

    def _print_event(self, event: Event, show_era: bool) -> None:
        self.console.print(
            event.format_for_display(show_era, colored=self.colored),
            soft_wrap=True,
            highlight=False,
        )

    def print_range(self, start_idx: int, end_idx: int) -> None:
        """
        Print the events with indices in ``[start_idx, end_idx)``.

        The era marker is shown for the whole batch only when it runs from a
        BCE event to a CE event, judged by the first and last event alone.
        """
        batch = self._events[start_idx:end_idx]
        if not batch:
            self.console.print(NO_EVENTS, highlight=False)
            return

        show_era = batch[0].date.is_bce and batch[-1].date.year > 0
        for event in batch:
            self._print_event(event, show_era)

    def print_all(self) -> None:
        self.print_range(0, len(self._events))

    def print_date_range(self, start: Date, end: Date) -> None:
        """Print all events dated in ``[start, end]`` inclusive."""
        self.print_range(*self.date_range(start, end))

    def print_implicit_date_range(self, date: Date) -> None:
        """
        Print everything in the period ``date`` denotes, e.g.

        - ``1994``       -> 1994-01-01 to 1994-12-31
        - ``1994-05``    -> 1994-05-01 to 1994-05-31
        - ``1994-05-15`` -> that day only
        """
        self.print_date_range(date, date)

    def query_and_print(self, text: str) -> int:
        """
        Print events whose description contains ``text`` and return the count.

        Once a BCE match has been printed, every later match in the same call
        is printed with its era as well.
        """
        show_era = False
        matches = self.query(text)
        for event in matches:
            if event.date.is_bce:
                show_era = True
            self._print_event(event, show_era)
        return len(matches)


__all__ = ["ANKI_HEADER", "NO_EVENTS", "WorldLine"]
