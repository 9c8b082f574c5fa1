from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterable, Iterator, Mapping, Optional

from tatu import Value
from tatu.builtin.registry import NativeRegistry, create_natives
from tatu.errors import TatuRuntimeError
from tatu.evaluation.evaluator import evaluate
from tatu.reader.ast import Expr
from tatu.reader.builder import ProgramBuilder
from tatu.types.environment import Environment
from tatu.types.native import NativeFunction
from tatu.types.nil import Nil

logger = logging.getLogger(__name__)

# Each Tatu call costs about a dozen Python frames
RECURSION_LIMIT = 25_000


class Interpreter:
    """
    A Tatu interpreter session.
    One global environment and one native registry; definitions made by one
    call to `eval` are visible to the next.
    """

    def __init__(
        self,
        natives: Optional[NativeRegistry] = None,
        extra: Optional[Mapping[str, NativeFunction]] = None,
    ):
        sys.setrecursionlimit(max(sys.getrecursionlimit(), RECURSION_LIMIT))
        self.env = Environment()
        self.natives = natives if natives is not None else create_natives(extra=extra)
        logger.debug("interpreter ready with %d natives", len(self.natives))

    def iter_eval(self, program: Iterable[Expr]) -> Iterator[Value]:
        """Evaluate top-level expressions in order, yielding each result."""
        for expr in program:
            logger.debug("evaluating top-level form at %s", expr.location)
            try:
                result = evaluate(expr, self.env, self.natives)
            except RecursionError:
                raise TatuRuntimeError(
                    "stack overflow: recursion too deep (use recur in tail position)",
                    expr.location,
                ) from None
            yield result

    def eval_program(self, program: Iterable[Expr]) -> Value:
        result: Value = Nil
        for result in self.iter_eval(program):
            pass
        return result

    def eval(self, code: str, filename: str = "<eval>") -> Value:
        """Build `code` (top-level includes included) and evaluate it; returns the last value."""
        _, program = ProgramBuilder().build_from_source(code, filename)
        return self.eval_program(program)

    def eval_file(self, path: str | Path) -> Value:
        _, program = ProgramBuilder().build_from_file(path)
        return self.eval_program(program)
