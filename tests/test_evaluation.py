import pytest

from tatu.builtin.registry import create_natives
from tatu.errors import (
    TatuArityError,
    TatuNameError,
    TatuRecurError,
    TatuSyntaxError,
    TatuTypeError,
    TatuUnboundSymbol,
)
from tatu.evaluation.evaluator import evaluate
from tatu.interpreter import Interpreter
from tatu.reader.parser import parse_source
from tatu.types.environment import Environment
from tatu.types.function import Function
from tatu.types.native import NativeFunction, native_table
from tatu.types.nil import Nil
from tatu.types.value import to_display


# -----------------------------------------------------
# Literals and symbols
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("42", 42.0),
        ("-1.5", -1.5),
        ('"hi"', "hi"),
        ("true", True),
        ("false", False),
        ("nil", Nil),
        ("()", Nil),
    ],
)
def test_self_evaluating_literals(run, source, expected):
    assert run(source) == expected


def test_symbol_lookup_prefers_environment_over_natives(run, natives):
    assert run("print") is natives["print"]
    run("(var print 5)")
    assert run("print") == 5.0


def test_unknown_symbol(run):
    with pytest.raises(TatuUnboundSymbol, match="unknown symbol `nope`"):
        run("nope")


# -----------------------------------------------------
# Scoping
# -----------------------------------------------------

def test_begin_opens_a_child_scope(run, env):
    assert run("(begin (var x 1) (begin (var x 2) x))") == 2.0
    assert "x" not in env


def test_inner_scope_leaves_outer_binding_alone(run):
    run("(var x 1)")
    assert run("(begin (var x 2) x)") == 2.0
    assert run("x") == 1.0


def test_set_reaches_outer_scope(run):
    run("(var x 1)")
    run("(begin (set x 10))")
    assert run("x") == 10.0


def test_var_twice_in_same_scope(run):
    run("(var x 1)")
    with pytest.raises(TatuNameError, match="symbol `x` already defined") as info:
        run("(var x 2)")
    assert info.value.location.start.column == 6


def test_set_undefined(run):
    with pytest.raises(TatuNameError, match="undefined variable `y`"):
        run("(set y 1)")


def test_var_and_set_return_the_value(run):
    assert run("(var x 3)") == 3.0
    assert run("(set x 4)") == 4.0


# -----------------------------------------------------
# Conditionals and loops
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ('(if (> 2 1) "yes" "no")', "yes"),
        ('(if (> 1 2) "yes" "no")', "no"),
        ('(if (> 1 2) "yes")', Nil),
        ("(if true 1)", 1.0),
    ],
)
def test_if(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize("cond", ["1", '"true"', "nil", "(vector)"])
def test_if_requires_a_bool(run, cond):
    with pytest.raises(TatuTypeError, match="expected BOOL"):
        run(f"(if {cond} 1 2)")


def test_while_returns_last_body_value(run):
    run("(var i 0)")
    assert run("(while (< i 3) (set i (+ i 1)))") == 3.0
    assert run("(while false 1)") is Nil


@pytest.mark.parametrize("cond", ["1", '"true"', "nil"])
def test_while_requires_a_bool(run, cond):
    with pytest.raises(TatuTypeError, match="expected BOOL, found"):
        run(f"(while {cond} 2)")


def test_for_loop(run):
    run("(var out (vector))")
    run("(for (var i 0) (< i 4) (set i (+ i 1)) (vec:push out i))")
    assert run("out") == [0.0, 1.0, 2.0, 3.0]


def test_switch(run):
    run('(def classify (n) (switch ((< n 0) "neg") ((= n 0) "zero") (default "pos")))')
    assert [run(f"(classify {n})") for n in (-5, 0, 7)] == ["neg", "zero", "pos"]


# -----------------------------------------------------
# Logic
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(and true true)", True),
        ("(and true false true)", False),
        ("(or false false)", False),
        ("(or false true)", True),
        ("(not true)", False),
    ],
)
def test_logic(run, source, expected):
    assert run(source) is expected


def _counting_natives():
    calls = []

    def tick(*args):
        calls.append(args[0])
        return True

    return calls, create_natives(extra=native_table({"tick": tick}))


def test_and_or_short_circuit():
    calls, natives = _counting_natives()
    env = Environment()

    assert evaluate(parse_source("(and false (tick 1))")[0], env, natives) is False
    assert evaluate(parse_source("(or true (tick 2))")[0], env, natives) is True
    assert calls == []

    assert evaluate(parse_source("(and true (tick 3))")[0], env, natives) is True
    assert calls == [3.0]


def test_logic_operands_must_be_bool(run):
    with pytest.raises(TatuTypeError, match="expected BOOL, found NUMBER"):
        run("(and true 1)")


# -----------------------------------------------------
# Functions
# -----------------------------------------------------

def test_lambda_creates_closure(run):
    fn = run("(lambda (a b) (+ a b))")
    assert isinstance(fn, Function)
    assert fn.params == ["a", "b"]
    assert run("((lambda (a b) (+ a b)) 2 3)") == 5.0


def test_closures_capture_their_environment(run):
    run("(def make-counter () (begin (var n 0) (lambda () (set n (+ n 1)))))")
    run("(var c1 (make-counter))")
    run("(var c2 (make-counter))")
    run("(c1)")
    run("(c1)")
    assert run("(c1)") == 3.0
    assert run("(c2)") == 1.0


def test_closure_sees_later_definitions(run):
    run("(def f () later)")
    run("(var later 9)")
    assert run("(f)") == 9.0


def test_recursive_def(run):
    run("(def fib (n) (if (< n 2) n (+ (fib (- n 1)) (fib (- n 2)))))")
    assert run("(fib 15)") == 610.0


def test_arguments_are_evaluated_left_to_right():
    order = []

    def note(*args):
        order.append(args[0])
        return args[0]

    natives = create_natives(extra=native_table({"note": note}))
    evaluate(parse_source("(vector (note 1) (note 2) (note 3))")[0], Environment(), natives)
    evaluate(parse_source("(+ (note 4) (note 5))")[0], Environment(), natives)
    assert order == [1.0, 2.0, 3.0, 4.0, 5.0]


@pytest.mark.parametrize(
    "source,message",
    [
        ("((lambda (a) a))", "function expects 1 argument(s), got 0"),
        ("((lambda () 1) 2)", "function expects 0 argument(s), got 1"),
    ],
)
def test_function_arity(run, source, message):
    with pytest.raises(TatuArityError) as info:
        run(source)
    assert info.value.message == message


def test_duplicate_parameters(run):
    with pytest.raises(TatuSyntaxError, match="duplicate parameter `a`"):
        run("(lambda (a a) a)")


@pytest.mark.parametrize("source", ["(1 2 3)", '("x" 1)', "((vector) 1)", "(nil)", "(true)"])
def test_calling_a_non_function(run, source):
    with pytest.raises(TatuTypeError, match="expression is not a function") as info:
        run(source)
    assert info.value.location.start.column == 2


def test_calling_a_bound_non_function(run):
    run("(var x 1)")
    with pytest.raises(TatuTypeError, match="expression is not a function") as info:
        run("(x 2 3)")
    assert info.value.location.start.column == 2


def test_natives_are_first_class(run):
    run("(var plus +)")
    assert run("(plus 1 2)") == 3.0
    assert isinstance(run("plus"), NativeFunction)


# -----------------------------------------------------
# Collections
# -----------------------------------------------------

def test_vector_and_map_literals(run):
    assert run("(vector 1 (+ 1 1) \"three\")") == [1.0, 2.0, "three"]
    assert run('(map name "tatu" "age" (+ 1 2))') == {"name": "tatu", "age": 3.0}
    assert run("(map)") == {}


def test_map_literal_last_duplicate_key_wins(run):
    assert run('(map "k" 1 "k" 2)') == {"k": 2.0}
    assert run('(map k 1 "k" 2 k 3)') == {"k": 3.0}


def test_map_keys_from_expressions(run):
    run('(var k "dyn")')
    assert run("(map (str:concat k \"amic\") 1)") == {"dynamic": 1.0}
    with pytest.raises(TatuTypeError, match="map keys must be STRING, found NUMBER"):
        run("(map (+ 1 1) 2)")


def test_vectors_alias(run):
    run("(var a (vector 1 2 3))")
    run("(var b a)")
    run("(vec:push b 4)")
    assert run("(vec:len a)") == 4.0


def test_maps_alias(run):
    run('(var a (map "k" 1))')
    run("(var b a)")
    run('(map:set b "j" 2)')
    assert run("(map:len a)") == 2.0


# -----------------------------------------------------
# Errors carry locations
# -----------------------------------------------------

def test_native_errors_point_at_the_call():
    interp = Interpreter()
    with pytest.raises(TatuTypeError) as info:
        interp.eval('(var x 1)\n(begin\n  (+ x true))')
    err = info.value
    assert err.message == "`+` invalid type BOOL at argument 2"
    assert (err.location.start.line, err.location.start.column) == (3, 3)


def test_nested_include_is_rejected(run):
    with pytest.raises(TatuSyntaxError, match="include not resolved"):
        run('(begin (include "x.tatu"))')


# -----------------------------------------------------
# Scenarios
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", "6"),
        ('(+ "a" 1 "b")', "a1b"),
        ("(begin (def fact (n acc) (if (= n 0) acc (recur (- n 1) (* n acc)))) (fact 5 1))", "120"),
        ("(begin (var a (vector 1 2 3)) (var b a) (vec:push b 4) (vec:len a))", "4"),
        ('(if (> 1 2) "yes")', "<nil>"),
        ("(- 5)", "-5"),
        ("(% 7 3)", "1"),
        ("(/ 1 4)", "0.25"),
    ],
)
def test_scenarios(interp, source, expected):
    assert to_display(interp.eval(source)) == expected


def test_recur_outside_tail_position(run):
    with pytest.raises(TatuRecurError, match="recur can only be used in tail position"):
        run("(def bad (n) (+ 1 (recur n)))\n(bad 1)")


def test_recur_at_top_level(run):
    with pytest.raises(TatuRecurError):
        run("(recur 1)")


def test_recur_in_while_body(run):
    with pytest.raises(TatuRecurError):
        run("(def loop (n) (while true (recur n)))\n(loop 1)")
