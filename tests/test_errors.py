import pytest

from tatu.errors import (
    TatuArityError,
    TatuError,
    TatuIncludeError,
    TatuNameError,
    TatuRecurError,
    TatuRuntimeError,
    TatuSyntaxError,
    TatuTypeError,
    TatuUnboundSymbol,
)
from tatu.interpreter import Interpreter
from tatu.reader.location import Location, Position


def loc(line, column, file="<eval>"):
    start = Position(line, column, 0)
    return Location(file, start, Position(line, column + 1, 1))


@pytest.mark.parametrize(
    "cls",
    [
        TatuSyntaxError,
        TatuIncludeError,
        TatuUnboundSymbol,
        TatuNameError,
        TatuTypeError,
        TatuArityError,
        TatuRuntimeError,
        TatuRecurError,
    ],
)
def test_every_error_is_a_tatu_error(cls):
    assert issubclass(cls, TatuError)


def test_str_without_location():
    assert str(TatuRuntimeError("boom")) == "Error: boom"


def test_str_with_location():
    assert str(TatuTypeError("bad", loc(2, 7))) == "[Line 2][Column 7] Error: bad"


def test_with_location_keeps_the_first_location():
    err = TatuTypeError("bad")
    assert err.with_location(loc(1, 1)) is err
    err.with_location(loc(9, 9))
    assert err.location.start.line == 1

    assert TatuTypeError("bad").with_location(None).location is None


def test_dump_points_at_the_column():
    err = TatuTypeError("`+` invalid type BOOL at argument 2", loc(2, 5, "demo.tatu"))
    source = "(var x 1)\n(+ (+ x true))"
    assert err.dump(source) == (
        "Error on line 2, column 5, file `demo.tatu`:\n\n"
        "(+ (+ x true))\n"
        "   ↑\n"
        "   └─ `+` invalid type BOOL at argument 2"
    )


def test_dump_reads_the_file_when_no_source_is_given(tmp_path):
    path = tmp_path / "prog.tatu"
    path.write_text("(oops)\n", encoding="utf-8")
    err = TatuUnboundSymbol("unknown symbol `oops`", loc(1, 2, str(path)))
    dumped = err.dump()
    assert "(oops)" in dumped
    assert dumped.endswith("└─ unknown symbol `oops`")


def test_dump_tolerates_unreadable_source_files(tmp_path):
    path = tmp_path / "bad.tatu"
    path.write_bytes(b"(oops \xff)")
    err = TatuUnboundSymbol("unknown symbol `oops`", loc(1, 2, str(path)))
    assert err.dump().endswith("└─ unknown symbol `oops`")
    assert TatuUnboundSymbol("boom", loc(1, 1)).dump().endswith("└─ boom")


def test_dump_without_location():
    assert TatuRuntimeError("boom").dump("anything") == "Error: boom"


def test_dump_with_line_outside_the_source():
    err = TatuSyntaxError("unclosed parenthesis", loc(5, 1))
    assert err.dump("(") == "Error on line 5, column 1, file `<eval>`:\n\n\n↑\n└─ unclosed parenthesis"


def test_runtime_errors_carry_the_innermost_location():
    interp = Interpreter()
    source = "(def f (x)\n  (begin\n    (vec:get x 5)))\n(f (vector 1 2 3))"
    with pytest.raises(TatuRuntimeError) as info:
        interp.eval(source)

    err = info.value
    assert err.message == "`vec:get` index out of bounds: 5 (vector length: 3)"
    assert str(err) == "[Line 3][Column 5] Error: `vec:get` index out of bounds: 5 (vector length: 3)"
    assert "    (vec:get x 5)))" in err.dump(source)
