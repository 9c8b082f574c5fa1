import sys

import pytest

from tatu.errors import TatuArityError, TatuRuntimeError
from tatu.interpreter import RECURSION_LIMIT, Interpreter


def test_large_tail_recursive_accumulator_runs_without_exception():
    """recur rebinds in place, so 100000 iterations need no Python stack."""
    interp = Interpreter()

    program = """
    (def sum-to (n acc)
      (if (= n 0)
          acc
          (recur (- n 1) (+ acc n))))
    (sum-to 100000 0)
    """

    assert interp.eval(program) == 5000050000.0


def test_recur_through_nested_tail_forms():
    interp = Interpreter()
    program = """
    (def count-down (n)
      (begin
        (var next (- n 1))
        (switch ((= n 0) "done")
                ((< n 0) "negative")
                (default (recur next)))))
    (count-down 50000)
    """
    assert interp.eval(program) == "done"


def test_plain_recursion_handles_moderate_depth():
    interp = Interpreter()
    interp.eval("(def depth (n) (if (= n 0) 0 (+ 1 (depth (- n 1)))))")
    assert interp.eval("(depth 1000)") == 1000.0
    assert sys.getrecursionlimit() >= RECURSION_LIMIT


def test_plain_recursion_is_not_stack_safe():
    interp = Interpreter()
    interp.eval("(def depth (n) (if (= n 0) 0 (+ 1 (depth (- n 1)))))")

    with pytest.raises(TatuRuntimeError, match="stack overflow") as info:
        interp.eval("(depth 100000)", "deep.tatu")
    assert info.value.location is not None

    # the session is still usable afterwards
    assert interp.eval("(depth 10)") == 10.0


def test_recur_arity_is_checked_on_every_iteration():
    interp = Interpreter()
    interp.eval("(def f (a b) (if (= a 0) b (recur (- a 1))))")
    with pytest.raises(TatuArityError, match="function expects 2 argument"):
        interp.eval("(f 3 0)")
