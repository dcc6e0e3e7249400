"""Shared fixtures: in-memory consoles, sample worldline files, fresh settings."""

from __future__ import annotations

import io
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from rich.console import Console

from worldline.core.settings import load_settings

SAMPLE_LINES = [
    "BCE 0044-03-15 Assassination of Julius Caesar",
    " CE 0079-08-24 Eruption of Vesuvius",
    " CE 1969       The year of the Moon landing",
    " CE 1969-07-20 Apollo 11 lands on the Moon",
    " CE 1989-11-09 Fall of the Berlin Wall",
    " CE 2023-12    Started keeping a worldline",
]


@pytest.fixture  # type: ignore[misc]
def console() -> Console:
    """A wide, colourless console writing into a string buffer."""
    return Console(file=io.StringIO(), width=200, color_system=None, highlight=False)


@pytest.fixture  # type: ignore[misc]
def printed(console: Console) -> Callable[[], list[str]]:
    """Return a reader for what was printed to `console`, one entry per line."""

    def read() -> list[str]:
        buffer = console.file
        assert isinstance(buffer, io.StringIO)
        return [line.rstrip() for line in buffer.getvalue().splitlines()]

    return read


@pytest.fixture  # type: ignore[misc]
def sample_file(tmp_path: Path) -> Path:
    """A small, sorted worldline file spanning both eras."""
    path = tmp_path / "worldline.txt"
    path.write_text("\n".join(SAMPLE_LINES) + "\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)  # type: ignore[misc]
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate every test from the caller's WORLDLINE_* environment."""
    for name in ("WORLDLINE_FILE", "WORLDLINE_DISPLAY", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()
