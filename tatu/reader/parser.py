"""
  Tatu parser

- Recursive descent over the scanner's token stream
- Atoms become AST atoms, parentheses become ListExpr
- Each list is desugared, then shape-checked, as soon as it is closed
"""

from __future__ import annotations

from typing import Iterable, Iterator

from tatu.errors import TatuSyntaxError
from tatu.reader.analysis import SyntaxAnalyzer
from tatu.reader.ast import BoolExpr, Expr, ListExpr, NilExpr, NumberExpr, StringExpr, SymbolExpr
from tatu.reader.location import span
from tatu.reader.scanner import Token, TokenType, scan
from tatu.reader.sugar import SyntaxSugar

ATOMS = {
    TokenType.NUMBER: lambda tok: NumberExpr(tok.literal, tok.location),
    TokenType.STRING: lambda tok: StringExpr(tok.literal, tok.location),
    TokenType.BOOL: lambda tok: BoolExpr(tok.literal, tok.location),
    TokenType.SYMBOL: lambda tok: SymbolExpr(tok.literal, tok.location),
    TokenType.NIL: lambda tok: NilExpr(tok.location),
}


class TokenStream:
    def __init__(self, tokens: Iterable[Token]):
        self.tokens = iter(tokens)
        self.buffer: list[Token] = []
        self.last: Token | None = None
        self.sugar = SyntaxSugar()
        self.analyzer = SyntaxAnalyzer()

    def peek(self) -> Token | None:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Token | None:
        if self.buffer:
            self.last = self.buffer.pop(0)
        else:
            self.last = next(self.tokens, None)
        return self.last

    def at_end(self) -> bool:
        tok = self.peek()
        return tok is None or tok.type is TokenType.EOF

    def parse_expr(self) -> Expr:
        tok = self.peek()
        if tok is None or tok.type is TokenType.EOF:
            location = tok.location if tok else (self.last.location if self.last else None)
            raise TatuSyntaxError("expected expression", location)

        if tok.type in ATOMS:
            self.advance()
            return ATOMS[tok.type](tok)

        if tok.type is TokenType.LEFT_PAREN:
            return self.parse_list()

        raise TatuSyntaxError("expected expression", tok.location)

    def parse_list(self) -> Expr:
        opening = self.advance()
        items: list[Expr] = []
        while True:
            if self.at_end():
                raise TatuSyntaxError("unclosed parenthesis", opening.location)
            if self.peek().type is TokenType.RIGHT_PAREN:
                closing = self.advance()
                break
            items.append(self.parse_expr())

        expr = self.sugar.transform(ListExpr(items, span(opening.location, closing.location)))
        self.analyzer.validate(expr)
        return expr

    def parse_all(self) -> Iterator[Expr]:
        while not self.at_end():
            yield self.parse_expr()


def parse_program(tokens: Iterable[Token]) -> list[Expr]:
    """Parse every top-level expression of a token stream."""
    return list(TokenStream(tokens).parse_all())


def parse_source(source: str, filename: str = "<eval>") -> list[Expr]:
    return parse_program(scan(source, filename))
