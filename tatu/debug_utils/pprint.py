from typing import Optional

from tatu.config import use_color
from tatu.errors import TatuError
from tatu.reader.ast import BoolExpr, Expr, ListExpr, NilExpr, NumberExpr, StringExpr, SymbolExpr
from tatu.reader.location import Location
from tatu.reader.scanner import Token, TokenType
from tatu.types.value import format_number

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_CYAN = "\033[38;5;81m"
COLOR_GREEN = "\033[38;5;84m"
COLOR_PURPLE = "\033[38;5;141m"
COLOR_RED = "\033[38;5;210m"
COLOR_PINK = "\033[38;5;212m"
COLOR_ORANGE = "\033[38;5;215m"
COLOR_YELLOW = "\033[38;5;228m"
COLOR_DARK_GRAY = "\033[38;5;242m"
COLOR_LIGHT_GRAY = "\033[38;5;247m"

TOKEN_COLORS = {
    TokenType.LEFT_PAREN: COLOR_PURPLE,
    TokenType.RIGHT_PAREN: COLOR_PURPLE,
    TokenType.NUMBER: COLOR_GREEN,
    TokenType.STRING: COLOR_ORANGE,
    TokenType.BOOL: COLOR_PINK,
    TokenType.NIL: COLOR_LIGHT_GRAY,
    TokenType.SYMBOL: COLOR_CYAN,
    TokenType.EOF: COLOR_YELLOW,
}


# ----------------- Colorize utility -----------------
def colorize(text: str, color: str, enabled: Optional[bool] = None) -> str:
    if enabled is None:
        enabled = use_color()
    return f"{color}{text}{RESET}" if enabled else text


def _where(loc: Location) -> str:
    return (
        f" => start({loc.start.line}:{loc.start.column}) "
        f"end({loc.end.line}:{loc.end.column}) file({loc.file})"
    )


def format_token(tok: Token, enabled: Optional[bool] = None) -> str:
    lexeme = tok.lexeme.replace("\n", "\\n")
    head = colorize(f"({tok.type.value}: `{lexeme}`)", TOKEN_COLORS[tok.type], enabled)
    return head + colorize(_where(tok.location), COLOR_DARK_GRAY, enabled)


# ----------------- Pretty printer -----------------
def pprint_expr(expr: Expr, depth: int = 0, enabled: Optional[bool] = None) -> str:
    """Tree view of one node, one line per node with its location."""
    if enabled is None:
        enabled = use_color()

    match expr:
        case NumberExpr(value=value):
            head = colorize(f"(Number {format_number(value)})", COLOR_GREEN, enabled)
        case StringExpr(value=value):
            head = colorize(f'(String "{value}")', COLOR_ORANGE, enabled)
        case BoolExpr(value=value):
            head = colorize(f"(Bool {'true' if value else 'false'})", COLOR_PINK, enabled)
        case SymbolExpr(name=name):
            head = colorize(f"(Symbol {name})", COLOR_CYAN, enabled)
        case NilExpr():
            head = colorize("(Nil)", COLOR_LIGHT_GRAY, enabled)
        case ListExpr(items=[]):
            head = colorize("(List)", COLOR_PURPLE, enabled)
        case ListExpr(items=items):
            indent = "    " * depth
            parts = [colorize("(List", COLOR_PURPLE, enabled) + "\n"]
            for i, item in enumerate(items):
                connector = "└─ " if i == len(items) - 1 else "├─ "
                parts.append(indent + " " + colorize(connector, COLOR_PURPLE, enabled))
                parts.append(pprint_expr(item, depth + 1, enabled))
            parts.append(indent + colorize(")", COLOR_PURPLE, enabled))
            head = "".join(parts)
        case _:
            raise TypeError(f"not an expression: {expr!r}")

    return head + colorize(_where(expr.location), COLOR_DARK_GRAY, enabled) + "\n"


def format_program(program: list[Expr], enabled: Optional[bool] = None) -> str:
    return "".join(pprint_expr(expr, 0, enabled) for expr in program)


def format_banner(version: str, filename: str, enabled: Optional[bool] = None) -> str:
    if enabled is None:
        enabled = use_color()
    return (
        colorize(">>> Running tatu lang ", COLOR_PURPLE, enabled)
        + colorize(f"({version})", COLOR_DARK_GRAY, enabled)
        + colorize(f" - {filename}", COLOR_GREEN, enabled)
        + "\n"
        + colorize(">>> Result:", COLOR_PINK, enabled)
    )


def format_error(err: Exception, source: Optional[str] = None, enabled: Optional[bool] = None) -> str:
    if isinstance(err, TatuError):
        return colorize(f">>> {err.dump(source)}", COLOR_RED, enabled)
    return colorize(f">>> Error: {err}", COLOR_RED, enabled)
