import pytest

from tatu.errors import TatuNameError
from tatu.types.environment import Environment
from tatu.types.nil import Nil


def test_define_and_lookup():
    env = Environment()
    assert env.define("x", 1.0) == 1.0
    assert env.lookup("x") == (1.0, True)
    assert env.lookup("y") == (None, False)


def test_define_twice_in_one_frame_fails():
    env = Environment()
    env.define("x", 1.0)
    with pytest.raises(TatuNameError, match="symbol `x` already defined"):
        env.define("x", 2.0)


def test_nil_binding_is_found():
    env = Environment()
    env.define("n", Nil)
    assert env.lookup("n") == (Nil, True)
    assert "n" in env


def test_inner_frame_shadows_without_touching_outer():
    outer = Environment()
    outer.define("x", 1.0)
    inner = Environment(outer=outer)
    inner.define("x", 2.0)
    assert inner.lookup("x") == (2.0, True)
    assert outer.lookup("x") == (1.0, True)


def test_assign_updates_nearest_binding():
    outer = Environment()
    outer.define("x", 1.0)
    inner = Environment(outer=outer)
    assert inner.assign("x", 5.0)
    assert outer.vars["x"] == 5.0
    assert "x" not in inner.vars


def test_assign_unbound_returns_false():
    env = Environment(outer=Environment())
    assert env.assign("missing", 1.0) is False
    assert "missing" not in env


def test_find_returns_owning_frame():
    outer = Environment()
    outer.define("x", 1.0)
    inner = Environment(outer=Environment(outer=outer))
    assert inner.find("x") is outer
    assert inner.find("y") is None


def test_str_and_repr():
    outer = Environment()
    outer.define("a", 1.0)
    inner = Environment(outer=outer)
    inner.define("b", "s")
    assert str(inner) == "{b: 's'} -> ..."
    assert repr(inner) == "<Environment chain: {b: 's'} -> {a: 1.0}>"
