# Core type aliases for Tatu's data model.
# Runtime values are plain Python objects (float, str, bool, list, dict) plus
# the small classes under tatu.types (Nil, Function, NativeFunction, RecurMarker).
#
# Naming guidance:
# - Expr:   Use in reader/parser/sugar code to denote AST nodes.
# - Value:  Use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

__version__ = "0.3.0"

# Runtime value alias
Value = Any
# AST node alias (see tatu.reader.ast for the closed node set)
Expr = Any

# Evaluator function type: the evaluator handed to special forms
EvaluatorFn = Callable[..., Value]
