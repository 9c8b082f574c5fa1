from __future__ import annotations

"""
Indexer for Tatu source files, built on the real scanner and parser.

Nothing is evaluated. For each document we collect:
- diagnostics: the first lexical or syntax error, with its location
- definitions: top-level (var name ...) and (def name ...) forms

Broken buffers are the normal case while typing, so the indexer keeps every
top-level form parsed before the first error.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from tatu.errors import TatuSyntaxError
from tatu.reader.ast import Expr, ListExpr, SymbolExpr
from tatu.reader.location import Location
from tatu.reader.parser import TokenStream
from tatu.reader.scanner import Token, scan

DOCUMENT_NAME = "<document>"


@dataclass
class SymbolDef:
    name: str
    kind: str  # "var" | "function"
    line: int  # 0-based
    col: int  # 0-based


@dataclass
class IndexDiagnostic:
    message: str
    line: int  # 0-based
    col: int  # 0-based
    end_line: int
    end_col: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    diagnostics: List[IndexDiagnostic] = field(default_factory=list)
    forms: int = 0


def _diagnostic(err: TatuSyntaxError) -> IndexDiagnostic:
    loc = err.location
    if loc is None:
        return IndexDiagnostic(err.message, 0, 0, 0, 1)
    line, col = loc.start.line - 1, loc.start.column - 1
    end_line, end_col = loc.end.line - 1, loc.end.column - 1
    if (end_line, end_col) <= (line, col):
        end_line, end_col = line, col + 1
    return IndexDiagnostic(err.message, line, col, end_line, end_col)


def _scan_tolerant(text: str, idx: DocumentIndex) -> List[Token]:
    try:
        return scan(text, DOCUMENT_NAME)
    except TatuSyntaxError as e:
        idx.diagnostics.append(_diagnostic(e))
        if e.location is None:
            return []
        # everything before the bad character still scans
        cut = e.location.start.offset
        if e.message == "unterminated string":
            cut = max(text.rfind('"', 0, cut), 0)
        try:
            return scan(text[:cut], DOCUMENT_NAME)
        except TatuSyntaxError:
            return []


def _definition(expr: Expr) -> Optional[Tuple[SymbolExpr, str]]:
    if not isinstance(expr, ListExpr) or expr.head_name() != "var" or len(expr) != 3:
        return None
    name, value = expr.items[1], expr.items[2]
    if not isinstance(name, SymbolExpr):
        return None
    is_fn = isinstance(value, ListExpr) and value.head_name() == "lambda"
    return name, "function" if is_fn else "var"


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    stream = TokenStream(_scan_tolerant(text, idx))

    while not stream.at_end():
        try:
            expr = stream.parse_expr()
        except TatuSyntaxError as e:
            idx.diagnostics.append(_diagnostic(e))
            break
        idx.forms += 1
        found = _definition(expr)
        if found is None:
            continue
        name, kind = found
        loc: Location = name.location
        idx.symbols[name.name] = SymbolDef(
            name=name.name, kind=kind, line=loc.start.line - 1, col=loc.start.column - 1
        )

    return idx


# Special forms and derived forms, for hover and completion without eval
SPECIAL_FORM_SIGNATURES: Dict[str, str] = {
    "begin": "(begin expr ...)",
    "var": "(var name expr)",
    "set": "(set name expr)",
    "if": "(if cond then [else])",
    "while": "(while cond body)",
    "lambda": "(lambda (params ...) body)",
    "recur": "(recur args ...)",
    "vector": "(vector items ...)",
    "map": "(map key value ...)",
    "and": "(and cond cond ...)",
    "or": "(or cond cond ...)",
    "include": '(include "path")',
    "def": "(def name (params ...) body)",
    "switch": "(switch (cond value) ... (default value))",
    "for": "(for init cond step body)",
}
