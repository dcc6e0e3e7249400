# scripts/smoke.py
"""
Smoke Test Script for the worldline store.

Usage
-----
1. Run against a throwaway file seeded with a few events:
    $ python scripts/smoke.py

2. Run read-only queries against an existing worldline file:
    $ python scripts/smoke.py --file ~/worldline.txt --query moon
"""

import argparse
import logging
import sys
import tempfile
from pathlib import Path

from worldline.core.date import Date
from worldline.core.errors import DateError
from worldline.core.event import Event
from worldline.core.worldline import WorldLine

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
log = logging.getLogger("worldline.smoke")

# --------------------------------------------------------------------------- #
# Test Data
# --------------------------------------------------------------------------- #
SEED_EVENTS = [
    ("BCE 44-03-15", "Assassination of Julius Caesar"),
    ("79-08-24", "Eruption of Vesuvius"),
    ("1969-07-20", "Apollo 11 lands on the Moon"),
    ("1969", "The year of the Moon landing"),
    ("1989-11-09", "Fall of the Berlin Wall"),
]


def _seeded_file(directory: Path) -> Path:
    path = directory / "worldline.txt"
    worldline = WorldLine()
    for date_text, description in SEED_EVENTS:
        idx = worldline.add_event(Event(Date.from_string(date_text), description))
        log.info("Inserted %r at %d", description, idx)
    worldline.to_file(path)
    return path


def main() -> None:
    """Execute the smoke test workflow."""
    parser = argparse.ArgumentParser(description="Run worldline smoke test")
    parser.add_argument("--file", "-f", type=str, help="Existing worldline file (read-only)")
    parser.add_argument("--query", "-q", type=str, default="the", help="Substring to search")
    args = parser.parse_args()

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(args.file) if args.file else _seeded_file(Path(tmp))

        try:
            worldline = WorldLine.from_file(path)
        except (OSError, DateError) as e:
            log.error("Could not load %s: %s", path, e)
            sys.exit(1)

        print(f"\n--- All events ({len(worldline)}) ---")
        worldline.print_all()

        print("\n--- 1969 ---")
        worldline.print_implicit_date_range(Date(1969))

        print(f"\n--- Query {args.query!r} ---")
        worldline.query_and_print(args.query)

        if not args.file:
            export = Path(tmp) / "anki.txt"
            worldline.to_anki_file(export)
            print("\n--- Tab-separated export ---")
            print(export.read_text(encoding="utf-8"))


if __name__ == "__main__":
    main()
