import pytest

from risp.types.environment import Environment
from risp.types.expression import Number
from risp.types.symbol import Symbol


def _noop(args, env):
    return Number(0)


@pytest.fixture
def chain():
    outer = Environment()
    outer.define_variable("x", Number(1))
    outer.define_procedure("op", _noop)
    inner = Environment(outer=outer)
    return outer, inner


def test_define_procedure_binds_name_to_symbol(chain):
    outer, _ = chain
    assert outer.get("op") == Symbol("op")
    assert outer.get_function("op") is _noop


def test_lookup_walks_outward(chain):
    _, inner = chain
    assert inner.get("x") == Number(1)
    assert inner.get_function("op") is _noop
    assert inner.get("missing") is None
    assert inner.get_function("x") is None


def test_define_variable_only_touches_current_scope(chain):
    outer, inner = chain
    inner.define_variable("x", Number(2))
    assert inner.get("x") == Number(2)
    assert outer.get("x") == Number(1)
    assert inner.find("x") is inner


def test_value_shadowing_leaves_procedure_in_place(chain):
    outer, _ = chain
    outer.define_variable("op", Number(5))
    assert outer.get("op") == Number(5)
    assert outer.get_function("op") is _noop


def test_depth(chain):
    _, inner = chain
    assert inner.depth() == 2
    assert Environment(outer=inner).depth() == 3


def test_str_and_repr(chain):
    outer, inner = chain
    inner.define_variable("y", Number(3))
    assert str(inner) == "{y: 3} -> ..."
    assert repr(inner) == "<Environment chain: {y: 3} -> {x: 1, op: op}>"
