# src/worldline/cli.py
"""
worldline Command Line Interface (CLI).

This module implements the user-facing terminal interface using `typer` and
`rich`. It is thin glue: every command loads the worldline file named by
``WORLDLINE_FILE``, calls one operation of :class:`~worldline.core.worldline.WorldLine`
and prints the result.

Commands
--------
- ``add DATE DESCRIPTION`` (``a``): insert an event, save, show its neighbours.
- ``show [DATE [DATE]]`` (``s``): everything, one period, or an inclusive range.
- ``query TEXT`` (``q``): case-insensitive search in descriptions.
- ``export PATH``: tab-separated flashcard export.

Usage
-----
    $ export WORLDLINE_FILE=~/worldline.txt
    $ worldline add "BCE 44-03-15" "Assassination of Julius Caesar"
    $ worldline show 1969
    $ worldline show "BCE 100" "CE 100"
    $ worldline query caesar

A date starting with ``-`` looks like an option to the shell parser; write it
with an era (``"BCE 44"``) or put ``--`` before the arguments.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from worldline.core.date import Date
from worldline.core.errors import DateError, InvalidDescription
from worldline.core.event import Event
from worldline.core.settings import Settings, get_logger, load_settings
from worldline.core.worldline import WorldLine

# Pick up WORLDLINE_FILE from a local .env before any command runs
load_dotenv()

app = typer.Typer(
    help="worldline: keep a personal timeline of dated events.",
    no_args_is_help=True,
)
console = Console(highlight=False, soft_wrap=True)
logger = get_logger(__name__)


# --------------------------------------------------------------------------- #
# Helpers
# --------------------------------------------------------------------------- #


def _parse_date(text: str) -> Date:
    """Parse a command-line date or exit with status 1."""
    try:
        return Date.from_string(text)
    except DateError as e:
        console.print(
            f"[bold red]Error:[/bold red] Could not parse date {escape(repr(text))}: "
            f"{escape(str(e))}"
        )
        raise typer.Exit(code=1) from e


def _worldline_path(settings: Settings) -> Path:
    if settings.worldline_file is None:
        console.print(
            "[bold red]Error:[/bold red] Could not read the WORLDLINE_FILE environment variable"
        )
        raise typer.Exit(code=1)
    return settings.worldline_file.expanduser()


def _load_worldline(settings: Settings, path: Path) -> WorldLine:
    """Load the store or exit with status 1."""
    try:
        return WorldLine.from_file(path, console=console, colored=settings.colored)
    except (OSError, DateError) as e:
        console.print(
            f"[bold red]Error:[/bold red] Could not read worldline file: {escape(str(e))}"
        )
        for note in getattr(e, "__notes__", ()):
            console.print(note, style="dim", markup=False)
        console.print(f"Expected to find a worldline file at {path}", markup=False)
        raise typer.Exit(code=1) from e


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #


@app.command("add")  # type: ignore[misc]
def add(
    date: Annotated[str, typer.Argument(help="Event date, e.g. '2023-12-25' or 'BCE 44'.")],
    description: Annotated[str, typer.Argument(help="Free-text description.")],
) -> None:
    """Add a new event with date and description."""
    settings = load_settings()
    try:
        event = Event(_parse_date(date), description)
    except InvalidDescription as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1) from e
    path = _worldline_path(settings)
    worldline = _load_worldline(settings, path)

    idx = worldline.add_event(event)
    logger.info("Added event at index %d of %d", idx, len(worldline))

    try:
        worldline.to_file(path)
    except OSError as e:
        console.print(
            f"[bold yellow]Warning:[/bold yellow] Could not write worldline file: "
            f"{escape(str(e))}"
        )

    worldline.print_range(max(0, idx - 1), min(len(worldline), idx + 2))


@app.command("show")  # type: ignore[misc]
def show(
    dates: Annotated[
        list[str] | None,
        typer.Argument(help="No date: everything. One date: that period. Two dates: a range."),
    ] = None,
) -> None:
    """Show events. No args = show all. One date = that date/month/year. Two dates = range."""
    dates = dates or []
    if len(dates) > 2:
        raise typer.BadParameter("expected at most two dates", param_hint="DATES")

    parsed = [_parse_date(text) for text in dates]
    settings = load_settings()
    worldline = _load_worldline(settings, _worldline_path(settings))

    if not parsed:
        worldline.print_all()
    elif len(parsed) == 1:
        worldline.print_implicit_date_range(parsed[0])
    else:
        worldline.print_date_range(parsed[0], parsed[1])


@app.command("query")  # type: ignore[misc]
def query(
    text: Annotated[str, typer.Argument(help="Text to look for in event descriptions.")],
) -> None:
    """Search for events containing text (case-insensitive)."""
    settings = load_settings()
    worldline = _load_worldline(settings, _worldline_path(settings))
    count = worldline.query_and_print(text)
    logger.info("Query %r matched %d events", text, count)


@app.command("export")  # type: ignore[misc]
def export(
    output: Annotated[Path, typer.Argument(help="Destination of the tab-separated export.")],
) -> None:
    """Export the worldline as a tab-separated file for flashcard import."""
    settings = load_settings()
    worldline = _load_worldline(settings, _worldline_path(settings))
    try:
        worldline.to_anki_file(output)
    except OSError as e:
        console.print(
            f"[bold red]Error:[/bold red] Could not write {escape(str(output))}: {escape(str(e))}"
        )
        raise typer.Exit(code=1) from e
    console.print(f"Exported {len(worldline)} events to {output}", markup=False)


# Short aliases
app.command("a", hidden=True)(add)
app.command("s", hidden=True)(show)
app.command("q", hidden=True)(query)


if __name__ == "__main__":
    app()
