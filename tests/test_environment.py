import pytest

from tinylisp.errors import ArityMismatch, MalformedForm, UnboundVariable
from tinylisp.types import Environment, Symbol

a, b, x = Symbol("a"), Symbol("b"), Symbol("x")


def test_define_and_lookup():
    env = Environment()
    env.define(x, 1.0)
    assert env.lookup(x) == 1.0
    env.define(x, 2.0)
    assert env.lookup(x) == 2.0
    assert len(env.vars) == 1


def test_lookup_walks_outward():
    root = Environment()
    root.define(x, 1.0)
    inner = Environment(Environment(root))
    assert inner.lookup(x) == 1.0
    assert inner.find(x) is root


def test_find_returns_nearest_frame():
    root = Environment()
    root.define(x, 1.0)
    inner = Environment(root)
    inner.define(x, 2.0)
    assert inner.find(x) is inner
    assert inner.lookup(x) == 2.0


def test_unbound_lookup():
    env = Environment(Environment())
    with pytest.raises(UnboundVariable) as info:
        env.lookup(Symbol("missing"))
    assert info.value.name == Symbol("missing")


def test_define_shadows_without_touching_outer():
    root = Environment()
    root.define(x, 1.0)
    inner = Environment(root)
    inner.define(x, 2.0)
    assert root.lookup(x) == 1.0


def test_set_mutates_owning_frame():
    root = Environment()
    root.define(x, 1.0)
    first = Environment(root)
    second = Environment(root)
    first.set(x, 5.0)
    assert x not in first.vars
    assert root.lookup(x) == 5.0
    assert second.lookup(x) == 5.0


def test_set_never_creates_a_binding():
    env = Environment()
    with pytest.raises(UnboundVariable):
        env.set(x, 1.0)
    assert x not in env.vars


def test_define_rejects_non_symbols():
    with pytest.raises(MalformedForm):
        Environment().define("x", 1.0)


def test_update_bulk_defines():
    env = Environment()
    env.update({a: 1.0, b: 2.0})
    assert env.lookup(a) == 1.0
    assert env.lookup(b) == 2.0


def test_for_call_binds_in_order():
    outer = Environment()
    frame = Environment.for_call([a, b], [1.0, 2.0], outer)
    assert frame.outer is outer
    assert frame.vars == {a: 1.0, b: 2.0}


@pytest.mark.parametrize("args", [[], [1.0], [1.0, 2.0, 3.0]])
def test_for_call_arity_mismatch(args):
    with pytest.raises(ArityMismatch) as info:
        Environment.for_call([a, b], args, Environment())
    assert info.value.expected == 2
    assert info.value.received == len(args)


def test_repr_shows_chain():
    root = Environment()
    root.define(x, 1.0)
    inner = Environment(root)
    inner.define(a, 2.0)
    assert str(inner) == "{a: 2.0} -> ..."
    assert repr(inner) == "<Environment chain: {a: 2.0} -> {x: 1.0}>"


def test_symbols_compare_by_text():
    assert Symbol("a" + "b") == Symbol("ab")
    assert Symbol("ab") != Symbol("AB")
    assert Symbol("ab") != "ab"
    assert len({Symbol("ab"), Symbol("ab")}) == 1
