import sys

from tatu import Value
from tatu.builtin.expects import expect_min_args
from tatu.types.native import native_table
from tatu.types.nil import Nil
from tatu.types.value import to_display


def print_builtin(*args: Value) -> Value:
    """(print a ...) writes every argument, then a newline. Returns nil."""
    expect_min_args("print", 1, args)
    sys.stdout.write("".join(to_display(arg) for arg in args) + "\n")
    return Nil


def register(natives: dict) -> None:
    natives.update(native_table({"print": print_builtin}))
