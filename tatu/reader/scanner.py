"""
  Tatu scanner

- Regex driven, single pass over the source text
- Every token carries a Location (file, start, end); lines and columns start at 1
- Atoms are converted to Python values while scanning:

    - numbers -> float
    - strings -> str (escapes resolved)
    - true/false -> bool
    - nil -> Nil
    - symbols -> str
"""

from __future__ import annotations

import enum
import re
from typing import Any, Iterator, NamedTuple

from tatu.errors import TatuSyntaxError
from tatu.reader.location import Location, Position
from tatu.types.nil import Nil


class TokenType(str, enum.Enum):
    LEFT_PAREN = "LEFT_PAREN"
    RIGHT_PAREN = "RIGHT_PAREN"
    NUMBER = "NUMBER"
    STRING = "STRING"
    BOOL = "BOOL"
    NIL = "NIL"
    SYMBOL = "SYMBOL"
    EOF = "EOF"


class Token(NamedTuple):
    type: TokenType
    lexeme: str
    literal: Any
    location: Location

    def __str__(self) -> str:
        start = self.location.start
        return f"[{start.line}:{start.column}] {self.type.value} {self.lexeme!r}"


TOKEN_RE = re.compile(
    r"(?P<newline>\n)"
    r"|(?P<whitespace>[ \t\r]+)"
    r"|(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # may span lines
    r'|(?P<open_string>")'  # no closing quote before EOF
    r"|(?P<number>-?[0-9]+(?:\.[0-9]+)?)"
    r"|(?P<symbol>[A-Za-z0-9_?:+\-*/%=><!&|]+)",
    re.DOTALL,
)

ESCAPES: dict[str, str] = {
    "\\": "\\",
    "n": "\n",
    "t": "\t",
    "r": "\r",
    '"': '"',
}

_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)

KEYWORDS: dict[str, tuple[TokenType, Any]] = {
    "true": (TokenType.BOOL, True),
    "false": (TokenType.BOOL, False),
    "nil": (TokenType.NIL, Nil),
}


def unescape(body: str) -> str:
    """Resolve escape sequences; unknown escapes are kept verbatim."""
    return _ESCAPE_RE.sub(lambda m: ESCAPES.get(m.group(1), m.group(0)), body)


def lex(source: str, filename: str = "<eval>") -> Iterator[Token]:
    """Token generator: yields Tokens, finishing with a single EOF token."""
    pos = 0
    n = len(source)
    line = 1
    line_start = 0

    def position(offset: int) -> Position:
        return Position(line, offset - line_start + 1, offset)

    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            here = position(pos)
            raise TatuSyntaxError(
                f"unexpected character `{source[pos]}`", Location(filename, here, here)
            )

        kind = m.lastgroup
        start = position(pos)

        if kind == "newline":
            pos = m.end()
            line += 1
            line_start = pos
            continue
        if kind in ("whitespace", "comment"):
            pos = m.end()
            continue
        if kind == "open_string":
            end = position(n)
            raise TatuSyntaxError("unterminated string", Location(filename, end, end))

        lexeme = m.group(kind)
        pos = m.end()

        if kind == "string":
            # keep line/column tracking right for strings spanning lines
            newlines = lexeme.count("\n")
            if newlines:
                line += newlines
                line_start = m.start() + lexeme.rindex("\n") + 1
        location = Location(filename, start, position(pos))

        if kind == "lparen":
            yield Token(TokenType.LEFT_PAREN, lexeme, None, location)
        elif kind == "rparen":
            yield Token(TokenType.RIGHT_PAREN, lexeme, None, location)
        elif kind == "string":
            yield Token(TokenType.STRING, lexeme, unescape(lexeme[1:-1]), location)
        elif kind == "number":
            yield Token(TokenType.NUMBER, lexeme, float(lexeme), location)
        elif lexeme in KEYWORDS:
            tok_type, literal = KEYWORDS[lexeme]
            yield Token(tok_type, lexeme, literal, location)
        else:
            yield Token(TokenType.SYMBOL, lexeme, lexeme, location)

    end = position(n)
    yield Token(TokenType.EOF, "", None, Location(filename, end, end))


def scan(source: str, filename: str = "<eval>") -> list[Token]:
    """Scan the whole source eagerly; the list always ends with EOF."""
    return list(lex(source, filename))
