"""Source positions for tokens and AST nodes."""

from __future__ import annotations

from typing import NamedTuple


class Position(NamedTuple):
    line: int
    column: int
    offset: int


class Location(NamedTuple):
    file: str
    start: Position
    end: Position

    def __str__(self) -> str:
        return f"{self.file}:{self.start.line}:{self.start.column}"


def span(first: Location, last: Location) -> Location:
    """Location covering `first` through `last` (same file)."""
    return Location(first.file, first.start, last.end)
