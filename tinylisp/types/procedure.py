"""Procedure values: closures built by `lambda` and builtins supplied by Python."""

from __future__ import annotations

from io import StringIO
from typing import Callable

from tinylisp import SExpression, LispValue
from tinylisp.types.environment import Environment
from tinylisp.types.symbol import Symbol


class Procedure:
    """Base class for every value that may sit in the head of an application."""

    __slots__ = ()


class Closure(Procedure):
    """A lambda with formal parameters, one body expression and its defining env."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: list[Symbol], body: SExpression, env: Environment):
        self.params: list[Symbol] = params
        self.body: SExpression = body
        # Captured by reference; later define/set! in this frame stay visible
        self.env: Environment = env

    def bind(self, args: list[LispValue]) -> Environment:
        """Return a fresh frame for one call, chained to the captured env."""
        return Environment.for_call(self.params, args, self.env)

    def __str__(self) -> str:
        from tinylisp.printer import to_string

        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(") ")
            buffer.write(to_string(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)


class Builtin(Procedure):
    """An opaque Python callable taking the list of evaluated arguments."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[[list[LispValue]], LispValue]):
        self.name = name
        self.fn = fn

    def __call__(self, args: list[LispValue]) -> LispValue:
        return self.fn(args)

    def __repr__(self) -> str:
        return f"<builtin {self.name}>"
