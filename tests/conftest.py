import pytest

from tinylisp.builtin.env_builtin import register
from tinylisp.interpreter import Interpreter
from tinylisp.types import Builtin, Environment, Symbol


@pytest.fixture
def env():
    """A root environment populated by the standard registration hook."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def bare_env():
    """A root environment with only a handful of hand-registered builtins."""
    e = Environment()
    e.define(Symbol("+"), Builtin("+", lambda args: sum(args)))
    e.define(Symbol("*"), Builtin("*", lambda args: args[0] * args[1]))
    e.define(Symbol("x"), 42.0)
    return e


@pytest.fixture
def interp():
    return Interpreter()
