"""Whole-program construction: scan, parse and flatten top-level includes.

A top-level `(include "path")` is replaced in place by the program of the
included file. Relative paths are resolved against the including file's
directory first, then against each `TATU_PATH` root. Every file is built at
most once per builder; a repeated include is dropped, which also ends
include cycles.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from tatu.config import get_include_roots
from tatu.errors import TatuIncludeError
from tatu.reader.ast import Expr, ListExpr, StringExpr
from tatu.reader.parser import parse_program
from tatu.reader.scanner import Token, scan

logger = logging.getLogger(__name__)


def include_target(expr: Expr) -> Optional[str]:
    """Path argument of an `(include "path")` form, else None."""
    if (
        isinstance(expr, ListExpr)
        and len(expr) == 2
        and expr.head_name() == "include"
        and isinstance(expr.items[1], StringExpr)
    ):
        return expr.items[1].value
    return None


def _is_virtual(filename: str) -> bool:
    return filename.startswith("<") and filename.endswith(">")


class ProgramBuilder:
    def __init__(self, roots: Optional[Iterable[Path]] = None):
        self.roots = list(roots) if roots is not None else get_include_roots()
        self.built: set[Path] = set()

    def build_from_file(self, filename: str | Path) -> tuple[list[Token], list[Expr]]:
        path = Path(filename).resolve()
        try:
            source = path.read_text(encoding="utf-8")
        except OSError as e:
            raise TatuIncludeError(f"missing file `{path}`: {e.strerror or e}")
        except UnicodeDecodeError as e:
            raise TatuIncludeError(f"cannot read file `{path}`: {e}")
        return self.build_from_source(source, str(path))

    def build_from_source(self, source: str, filename: str = "<eval>") -> tuple[list[Token], list[Expr]]:
        if _is_virtual(filename):
            base = Path.cwd()
        else:
            path = Path(filename).resolve()
            filename = str(path)
            base = path.parent
            self.built.add(path)

        logger.debug("building %s", filename)
        tokens = scan(source, filename)
        program: list[Expr] = []

        for expr in parse_program(tokens):
            target = include_target(expr)
            if target is None:
                program.append(expr)
                continue

            path = self.resolve(base, target)
            if path is None:
                raise TatuIncludeError(f"missing file `{target}` included from `{filename}`", expr.location)
            if path in self.built:
                logger.debug("skipping already built %s", path)
                continue

            logger.debug("including %s from %s", path, filename)
            try:
                inc_tokens, inc_program = self.build_from_file(path)
            except TatuIncludeError as e:
                raise e.with_location(expr.location)
            tokens.extend(inc_tokens)
            program.extend(inc_program)

        return tokens, program

    def resolve(self, base: Path, target: str) -> Optional[Path]:
        candidate = Path(target)
        if candidate.is_absolute():
            return candidate.resolve() if candidate.is_file() else None
        for root in [base, *self.roots]:
            path = (root / candidate).resolve()
            if path.is_file():
                return path
        return None
