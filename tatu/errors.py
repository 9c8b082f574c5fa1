"""Error hierarchy for the Tatu runtime.

Every error carries a message and, once known, the source location of the
expression that failed. Locations are attached at the point of failure by the
evaluator (or the reader), never overwritten on the way up.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from tatu.reader.location import Location


class TatuError(Exception):
    """ Base class for all Tatu errors"""

    def __init__(self, message: str, location: Optional[Location] = None):
        super().__init__(message)
        self.message = message
        self.location = location

    def with_location(self, location: Optional[Location]) -> TatuError:
        """Attach `location` unless the error already has one; returns self."""
        if self.location is None and location is not None:
            self.location = location
        return self

    def __str__(self) -> str:
        if self.location is None:
            return f"Error: {self.message}"
        start = self.location.start
        return f"[Line {start.line}][Column {start.column}] Error: {self.message}"

    def dump(self, source: Optional[str] = None) -> str:
        """Render the message under the offending source line.

        `source` is the text of the file the error points at; when omitted it
        is read from the location's file if that file exists.
        """
        if self.location is None:
            return str(self)

        loc = self.location
        if source is None:
            try:
                source = Path(loc.file).read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError):
                source = ""
        lines = source.split("\n")
        raw_line = lines[loc.start.line - 1] if 0 < loc.start.line <= len(lines) else ""

        pad = " " * max(loc.start.column - 2, 0)
        return (
            f"Error on line {loc.start.line}, column {loc.start.column}, file `{loc.file}`:\n\n"
            f"{raw_line}\n"
            f"{pad}↑\n"
            f"{pad}└─ {self.message}"
        )


class TatuSyntaxError(TatuError):
    """ Raised for malformed tokens or structurally invalid forms"""


class TatuIncludeError(TatuError):
    """ Raised when an included file cannot be resolved or read"""


class TatuUnboundSymbol(TatuError):
    """ Raised when a symbol is neither bound nor a native function"""


class TatuNameError(TatuError):
    """ Raised when a name is defined twice in one scope or assigned before definition"""


class TatuTypeError(TatuError):
    """ Raised when the types of operands or arguments are incorrect"""


class TatuArityError(TatuError):
    """ Raised when the number of arguments passed to a function or form is incorrect"""


class TatuRuntimeError(TatuError):
    """ Raised by native functions for domain failures (division by zero, I/O, ...)"""


class TatuRecurError(TatuError):
    """ Raised when recur escapes tail position"""
