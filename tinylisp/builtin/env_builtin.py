"""Built-in procedures for the tinylisp root environment.

This module defines arithmetic, comparison, list processing, predicates,
application and I/O helpers, and the `register` hook that installs them.
Every builtin takes the list of evaluated arguments and returns a value.
"""
from __future__ import annotations

import math
import operator
import sys
from functools import reduce
from typing import Callable

from tinylisp import LispValue
from tinylisp.errors import ArityMismatch, ExitRequested, TinyLispTypeError
from tinylisp.evaluation.apply import apply_procedure
from tinylisp.evaluation.evaluator import evaluate
from tinylisp.printer import to_string
from tinylisp.types.environment import Environment
from tinylisp.types.procedure import Builtin, Procedure
from tinylisp.types.symbol import Symbol
from tinylisp.types.void import FALSE, TRUE, Void, is_true, to_bool


def _expect_count(name: str, args: list[LispValue], count: int) -> None:
    if len(args) != count:
        raise ArityMismatch(count, len(args), name)


def _expect_at_least(name: str, args: list[LispValue], count: int) -> None:
    if len(args) < count:
        raise ArityMismatch(count, len(args), name)


def _numbers(name: str, args: list[LispValue]) -> list[float]:
    for a in args:
        if not isinstance(a, float):
            raise TinyLispTypeError(f"All arguments to {name} must be numbers, got {to_string(a)}")
    return args


def _list_arg(name: str, value: LispValue) -> list:
    if not isinstance(value, list):
        raise TinyLispTypeError(f"{name} expects a list, got {to_string(value)}")
    return value


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[LispValue]) -> float:
    return reduce(operator.add, _numbers("+", args), 0.0)


def sub(args: list[LispValue]) -> float:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    _expect_at_least("-", args, 1)
    nums = _numbers("-", args)
    if len(nums) == 1:
        return -nums[0]
    return reduce(operator.sub, nums)


def mul(args: list[LispValue]) -> float:
    return reduce(operator.mul, _numbers("*", args), 1.0)


def div(args: list[LispValue]) -> float:
    """Divide the first number by the rest; reciprocal for one arg."""
    _expect_at_least("/", args, 1)
    nums = _numbers("/", args)
    if len(nums) == 1:
        nums = [1.0, nums[0]]
    try:
        return reduce(operator.truediv, nums)
    except ZeroDivisionError:
        raise TinyLispTypeError("division by zero")


def mod(args: list[LispValue]) -> float:
    _expect_count("mod", args, 2)
    a, b = _numbers("mod", args)
    if b == 0:
        raise TinyLispTypeError("division by zero")
    try:
        return math.fmod(a, b)
    except ValueError:
        raise TinyLispTypeError(f"mod undefined for {to_string(a)}")


def abs_builtin(args: list[LispValue]) -> float:
    _expect_count("abs", args, 1)
    return abs(_numbers("abs", args)[0])


def min_builtin(args: list[LispValue]) -> float:
    _expect_at_least("min", args, 1)
    return min(_numbers("min", args))


def max_builtin(args: list[LispValue]) -> float:
    _expect_at_least("max", args, 1)
    return max(_numbers("max", args))


# -------------------------------
# Comparison
# -------------------------------
def _chain(name: str, op: Callable[[float, float], bool]) -> Callable[[list[LispValue]], Symbol]:
    def compare(args: list[LispValue]) -> Symbol:
        nums = _numbers(name, args)
        return to_bool(all(op(a, b) for a, b in zip(nums, nums[1:])))

    return compare


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality for lists, value equality for atoms."""
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, Procedure) or isinstance(b, Procedure):
        return a is b
    return type(a) is type(b) and a == b


def eq(args: list[LispValue]) -> Symbol:
    """Identity for lists and procedures, value equality for atoms."""
    _expect_count("eq?", args, 2)
    a, b = args
    if isinstance(a, (list, Procedure)):
        return to_bool(a is b)
    return to_bool(is_equal(a, b))


def equal(args: list[LispValue]) -> Symbol:
    _expect_count("equal?", args, 2)
    return to_bool(is_equal(*args))


def logical_not(args: list[LispValue]) -> Symbol:
    _expect_count("not", args, 1)
    return to_bool(not is_true(args[0]))


# -------------------------------
# Lists
# -------------------------------
def list_builtin(args: list[LispValue]) -> list:
    return list(args)


def cons(args: list[LispValue]) -> list:
    _expect_count("cons", args, 2)
    head, tail = args
    return [head, *_list_arg("cons", tail)]


def car(args: list[LispValue]) -> LispValue:
    _expect_count("car", args, 1)
    items = _list_arg("car", args[0])
    if not items:
        raise TinyLispTypeError("car of empty list")
    return items[0]


def cdr(args: list[LispValue]) -> list:
    _expect_count("cdr", args, 1)
    items = _list_arg("cdr", args[0])
    if not items:
        raise TinyLispTypeError("cdr of empty list")
    return items[1:]


def length(args: list[LispValue]) -> float:
    _expect_count("length", args, 1)
    return float(len(_list_arg("length", args[0])))


def is_null(args: list[LispValue]) -> Symbol:
    _expect_count("null?", args, 1)
    return to_bool(args[0] == [])


# -------------------------------
# Predicates
# -------------------------------
def _predicate(name: str, test: Callable[[LispValue], bool]) -> Callable[[list[LispValue]], Symbol]:
    def check(args: list[LispValue]) -> Symbol:
        _expect_count(name, args, 1)
        return to_bool(test(args[0]))

    return check


# -------------------------------
# Application and I/O
# -------------------------------
def apply(args: list[LispValue]) -> LispValue:
    """(apply proc (arg ...)) calls proc with the elements of the list."""
    _expect_count("apply", args, 2)
    proc, call_args = args
    return apply_procedure(proc, list(_list_arg("apply", call_args)), evaluate)


def display(args: list[LispValue]) -> LispValue:
    sys.stdout.write(" ".join(to_string(a) for a in args))
    return Void


def newline(args: list[LispValue]) -> LispValue:
    _expect_count("newline", args, 0)
    sys.stdout.write("\n")
    return Void


def exit_builtin(args: list[LispValue]) -> LispValue:
    raise ExitRequested()


BUILTINS: dict[str, Callable[[list[LispValue]], LispValue]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "mod": mod,
    "abs": abs_builtin,
    "min": min_builtin,
    "max": max_builtin,
    "=": _chain("=", operator.eq),
    "<": _chain("<", operator.lt),
    "<=": _chain("<=", operator.le),
    ">": _chain(">", operator.gt),
    ">=": _chain(">=", operator.ge),
    "eq?": eq,
    "equal?": equal,
    "not": logical_not,
    "list": list_builtin,
    "cons": cons,
    "car": car,
    "cdr": cdr,
    "length": length,
    "null?": is_null,
    "number?": _predicate("number?", lambda v: isinstance(v, float)),
    "symbol?": _predicate("symbol?", lambda v: isinstance(v, Symbol)),
    "procedure?": _predicate("procedure?", lambda v: isinstance(v, Procedure)),
    "list?": _predicate("list?", lambda v: isinstance(v, list)),
    "apply": apply,
    "display": display,
    "newline": newline,
    "exit": exit_builtin,
}


def register(env: Environment) -> None:
    """Register all builtin procedures and constants into the given environment."""
    env.update({Symbol(name): Builtin(name, fn) for name, fn in BUILTINS.items()})
    env.define(TRUE, TRUE)
    env.define(FALSE, FALSE)
    env.define(Symbol("pi"), math.pi)
