"""Parse-time rewriting of derived forms into core forms.

    (def name (params) body)        -> (var name (lambda (params) body))
    (switch (c1 v1) ... (default v)) -> (if c1 v1 (if ... v))
    (for init cond step body)       -> (begin init (while cond (begin body step)))

The parser calls `transform` on every list right after reading it, so
nested lists are already rewritten by the time their parent is seen.
"""

from __future__ import annotations

from tatu.errors import TatuSyntaxError
from tatu.reader.ast import Expr, ListExpr, SymbolExpr


class SyntaxSugar:
    def transform(self, expr: Expr) -> Expr:
        if not isinstance(expr, ListExpr):
            return expr
        match expr.head_name():
            case "def":
                return self.def_to_var(expr)
            case "switch":
                return self.switch_to_if(expr)
            case "for":
                return self.for_to_while(expr)
        return expr

    @staticmethod
    def def_to_var(expr: ListExpr) -> ListExpr:
        if len(expr) != 4:
            raise TatuSyntaxError(
                "invalid `def` format: expected (def <identifier> (<params>) <body>)", expr.location
            )
        def_sym, name, params, body = expr.items
        return ListExpr(
            [
                SymbolExpr("var", def_sym.location),
                name,
                ListExpr([SymbolExpr("lambda", params.location), params, body], params.location),
            ],
            expr.location,
        )

    @staticmethod
    def for_to_while(expr: ListExpr) -> ListExpr:
        if len(expr) != 5:
            raise TatuSyntaxError(
                "invalid `for` format: expected (for <init> <condition> <step> <body>)", expr.location
            )
        for_sym, init, cond, step, body = expr.items
        loop_body = ListExpr([SymbolExpr("begin", cond.location), body, step], cond.location)
        loop = ListExpr([SymbolExpr("while", init.location), cond, loop_body], init.location)
        return ListExpr([SymbolExpr("begin", for_sym.location), init, loop], expr.location)

    @staticmethod
    def switch_to_if(expr: ListExpr) -> Expr:
        if len(expr) < 3:
            raise TatuSyntaxError(
                "invalid `switch` format: expected at least one case and a default", expr.location
            )
        cases = expr.tail

        default = cases[-1]
        if not isinstance(default, ListExpr) or len(default) != 2:
            raise TatuSyntaxError("invalid `switch` default: expected (default <expr>)", default.location)
        if default.head_name() != "default":
            raise TatuSyntaxError("invalid `switch` default: expected `default` symbol", default.location)

        result = default.items[1]
        for case in reversed(cases[:-1]):
            if not isinstance(case, ListExpr) or len(case) != 2:
                raise TatuSyntaxError("invalid `switch` case: expected (<condition> <expr>)", case.location)
            cond, value = case.items
            result = ListExpr([SymbolExpr("if", cond.location), cond, value, result], expr.location)
        return result
