"""AST nodes produced by the parser.

The node set is closed: five atoms and one composite. Every node carries the
source location it was read from; nodes synthesised by the sugar pass borrow
the location of the node they replace.
"""

from __future__ import annotations

import enum

from tatu.reader.location import Location
from tatu.types.value import format_number


class ExprKind(str, enum.Enum):
    NUMBER = "NUMBER"
    STRING = "STRING"
    BOOL = "BOOL"
    SYMBOL = "SYMBOL"
    NIL = "NIL"
    LIST = "LIST"


class NumberExpr:
    __slots__ = ("value", "location")
    kind = ExprKind.NUMBER

    def __init__(self, value: float, location: Location):
        self.value = value
        self.location = location

    def __repr__(self) -> str:
        return f"NumberExpr({self.value!r})"


class StringExpr:
    __slots__ = ("value", "location")
    kind = ExprKind.STRING

    def __init__(self, value: str, location: Location):
        self.value = value
        self.location = location

    def __repr__(self) -> str:
        return f"StringExpr({self.value!r})"


class BoolExpr:
    __slots__ = ("value", "location")
    kind = ExprKind.BOOL

    def __init__(self, value: bool, location: Location):
        self.value = value
        self.location = location

    def __repr__(self) -> str:
        return f"BoolExpr({self.value!r})"


class SymbolExpr:
    __slots__ = ("name", "location")
    kind = ExprKind.SYMBOL

    def __init__(self, name: str, location: Location):
        self.name = name
        self.location = location

    def __repr__(self) -> str:
        return f"SymbolExpr({self.name!r})"


class NilExpr:
    __slots__ = ("location",)
    kind = ExprKind.NIL

    def __init__(self, location: Location):
        self.location = location

    def __repr__(self) -> str:
        return "NilExpr()"


class ListExpr:
    __slots__ = ("items", "location")
    kind = ExprKind.LIST

    def __init__(self, items: list[Expr], location: Location):
        self.items = items
        self.location = location

    @property
    def head(self) -> Expr | None:
        return self.items[0] if self.items else None

    @property
    def tail(self) -> list[Expr]:
        return self.items[1:]

    def head_name(self) -> str | None:
        """Name of the head symbol, or None when the head is not a symbol."""
        head = self.head
        return head.name if isinstance(head, SymbolExpr) else None

    def __len__(self) -> int:
        return len(self.items)

    def __repr__(self) -> str:
        return f"ListExpr({self.items!r})"


Expr = NumberExpr | StringExpr | BoolExpr | SymbolExpr | NilExpr | ListExpr


def to_source(expr: Expr) -> str:
    """Render a node back to Tatu source text."""
    match expr:
        case NumberExpr(value=value):
            return format_number(value)
        case StringExpr(value=value):
            escaped = (
                value.replace("\\", "\\\\")
                .replace('"', '\\"')
                .replace("\n", "\\n")
                .replace("\t", "\\t")
                .replace("\r", "\\r")
            )
            return f'"{escaped}"'
        case BoolExpr(value=value):
            return "true" if value else "false"
        case SymbolExpr(name=name):
            return name
        case NilExpr():
            return "nil"
        case ListExpr(items=items):
            return "(" + " ".join(to_source(item) for item in items) + ")"
    raise TypeError(f"not an expression: {expr!r}")
