import pytest

from schemer.builtin.env_builtin import PRIMITIVES, primitive_bindings
from schemer.errors import UnboundVariableError
from schemer.types import Environment, Number, List, Primitive


@pytest.fixture
def nested():
    outer = Environment()
    outer.define("x", Number(1))
    inner = Environment(outer=outer)
    return outer, inner


def test_lookup_walks_outward(nested):
    outer, inner = nested
    assert inner.lookup("x") == Number(1)
    assert inner.find("x") is outer
    assert inner.find("missing") is None


def test_define_shadows_in_innermost_frame(nested):
    outer, inner = nested
    assert inner.define("x", Number(2)) == Number(2)
    assert inner.lookup("x") == Number(2)
    assert outer.lookup("x") == Number(1)


def test_set_mutates_defining_frame(nested):
    outer, inner = nested
    assert inner.set("x", Number(3)) == Number(3)
    assert outer.lookup("x") == Number(3)
    assert "x" not in inner.vars


def test_set_and_lookup_unbound(nested):
    _, inner = nested
    with pytest.raises(UnboundVariableError, match="^Setting an unbound variable: y$"):
        inner.set("y", Number(1))
    with pytest.raises(UnboundVariableError, match="^Getting an unbound variable: y$"):
        inner.lookup("y")


def test_bind_fixed_parameters(nested):
    outer, _ = nested
    frame = outer.bind(("a", "b"), [Number(1), Number(2)])
    assert frame.outer is outer
    assert frame.vars == {"a": Number(1), "b": Number(2)}


def test_bind_variadic_parameters(nested):
    outer, _ = nested
    frame = outer.bind(("a",), [Number(1), Number(2), Number(3)], "rest")
    assert frame.lookup("rest") == List((Number(2), Number(3)))
    frame = outer.bind(("a",), [Number(1)], "rest")
    assert frame.lookup("rest") == List()


def test_primitive_bindings_are_fresh():
    first = primitive_bindings()
    second = primitive_bindings()
    first.define("+", Number(0))
    assert isinstance(second.lookup("+"), Primitive)
    assert PRIMITIVES["+"] is second.lookup("+")


def test_primitive_table_is_read_only():
    with pytest.raises(TypeError):
        PRIMITIVES["+"] = Number(0)


def test_primitive_table_contents():
    assert set(PRIMITIVES) == {
        "+", "-", "*", "/", "mod", "quotient",
        "=", "<", ">", "/=", ">=", "<=", "&&", "||",
        "string=?", "string<?", "string>?", "string<=?", "string>=?",
        "car", "cdr", "cons", "eq?", "eqv?", "equal?", "apply",
        "read-contents", "read-all",
    }


def test_environment_str(nested):
    outer, inner = nested
    inner.define("y", Number(2))
    assert str(outer) == "{x: 1}"
    assert str(inner) == "{y: 2} -> ..."
    assert repr(inner) == "<Environment chain: {y: 2} -> {x: 1}>"
