"""Static shape checks run on every list once it is read and desugared."""

from __future__ import annotations

from typing import Callable

from tatu.errors import TatuSyntaxError
from tatu.reader.ast import Expr, ListExpr, StringExpr, SymbolExpr


def _fail(message: str, expr: Expr) -> None:
    raise TatuSyntaxError(message, expr.location)


class SyntaxAnalyzer:
    def __init__(self):
        self.rules: dict[str, Callable[[ListExpr], None]] = {
            "+": self.check_plus,
            "-": self.check_arithmetic,
            "*": self.check_arithmetic,
            "/": self.check_arithmetic,
            "%": self.check_arithmetic,
            "=": self.check_comparison,
            "<": self.check_comparison,
            "<=": self.check_comparison,
            ">": self.check_comparison,
            ">=": self.check_comparison,
            "and": self.check_logical,
            "or": self.check_logical,
            "not": self.check_not,
            "include": self.check_include,
            "begin": self.check_begin,
            "var": self.check_binding,
            "set": self.check_binding,
            "if": self.check_if,
            "while": self.check_while,
            "lambda": self.check_lambda,
            "map": self.check_map,
            "print": self.check_print,
        }

    def validate(self, expr: Expr) -> None:
        # Non-symbol heads are not checked here: the evaluator reports them
        # as "expression is not a function" at the head's location.
        if not isinstance(expr, ListExpr) or not expr.items:
            return
        rule = self.rules.get(expr.head_name())
        if rule is not None:
            rule(expr)

    @staticmethod
    def check_plus(expr: ListExpr) -> None:
        if len(expr) < 3:
            _fail("invalid `+` format: expected at least two operands", expr)

    @staticmethod
    def check_arithmetic(expr: ListExpr) -> None:
        op = expr.head_name()
        if len(expr) < 2:
            _fail(f"invalid `{op}` format: expected at least one operand", expr)
        if op == "-" and len(expr) == 2:
            return
        if op == "%" and len(expr) != 3:
            _fail("invalid `%` format: expected exactly two operands", expr)
        if op != "-" and len(expr) < 3:
            _fail(f"invalid `{op}` format: expected at least two operands", expr)

    @staticmethod
    def check_comparison(expr: ListExpr) -> None:
        if len(expr) != 3:
            _fail(f"invalid `{expr.head_name()}` format: expected exactly two operands", expr)

    @staticmethod
    def check_logical(expr: ListExpr) -> None:
        if len(expr) < 3:
            _fail(f"invalid `{expr.head_name()}` format: expected at least two operands", expr)

    @staticmethod
    def check_not(expr: ListExpr) -> None:
        if len(expr) != 2:
            _fail("invalid `not` format: expected exactly one operand", expr)

    @staticmethod
    def check_include(expr: ListExpr) -> None:
        if len(expr) != 2:
            _fail("invalid `include` format: expected (include <string>)", expr)
        if not isinstance(expr.items[1], StringExpr):
            _fail("invalid `include` argument: expected string", expr.items[1])

    @staticmethod
    def check_begin(expr: ListExpr) -> None:
        if len(expr) < 2:
            _fail("invalid `begin` format: expected at least one expression", expr)

    @staticmethod
    def check_binding(expr: ListExpr) -> None:
        form = expr.head_name()
        if len(expr) != 3:
            _fail(f"invalid `{form}` format: expected ({form} <identifier> <expr>)", expr)
        if not isinstance(expr.items[1], SymbolExpr):
            _fail(f"invalid `{form}` name: expected identifier", expr.items[1])

    @staticmethod
    def check_if(expr: ListExpr) -> None:
        if not 3 <= len(expr) <= 4:
            _fail("invalid `if` format: expected (if <condition> <then> [<else>])", expr)

    @staticmethod
    def check_while(expr: ListExpr) -> None:
        if len(expr) != 3:
            _fail("invalid `while` format: expected (while <condition> <body>)", expr)

    @staticmethod
    def check_lambda(expr: ListExpr) -> None:
        if len(expr) != 3:
            _fail("invalid `lambda` format: expected (lambda (<params>) <body>)", expr)
        params = expr.items[1]
        if not isinstance(params, ListExpr):
            _fail("invalid `lambda` params: expected list", params)
        for param in params.items:
            if not isinstance(param, SymbolExpr):
                _fail("invalid `lambda` param: expected identifier", param)

    @staticmethod
    def check_map(expr: ListExpr) -> None:
        if len(expr) % 2 != 1:
            _fail("invalid `map` format: expected (map <key-value>*)", expr)

    @staticmethod
    def check_print(expr: ListExpr) -> None:
        if len(expr) < 2:
            _fail("invalid `print` format: expected at least one expression", expr)
