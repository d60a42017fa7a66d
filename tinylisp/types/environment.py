"""Runtime environment for tinylisp.

An Environment is one frame of bindings from Symbols to evaluated values plus
an `outer` link to the enclosing frame. Frames are shared by reference: a
closure keeps the frame it was created in, and every call creates a new frame
whose outer link is that captured frame.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Mapping, Optional

from tinylisp import LispValue
from tinylisp.errors import ArityMismatch, MalformedForm, UnboundVariable
from tinylisp.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    @classmethod
    def for_call(
        cls,
        params: Iterable[Symbol],
        args: list[LispValue],
        outer: Environment,
    ) -> Environment:
        """Create the frame for one procedure invocation.

        Each parameter is bound, in order, to the matching argument. Raises
        ArityMismatch when the counts differ.
        """
        params = list(params)
        if len(params) != len(args):
            raise ArityMismatch(len(params), len(args))
        frame = cls(outer)
        frame.vars.update(zip(params, args))
        return frame

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` in this frame, shadowing any outer binding."""
        if not isinstance(name, Symbol):
            raise MalformedForm(f"cannot define {name!r}: not a symbol", name)
        self.vars[name] = value

    def find(self, name: Symbol) -> Environment:
        """Return the nearest frame in the chain that binds `name`.

        Raises UnboundVariable if no frame does.
        """
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        raise UnboundVariable(name)

    def set(self, name: Symbol, value: LispValue) -> None:
        """Overwrite the existing binding of `name` in the frame that owns it."""
        self.find(name).vars[name] = value

    def lookup(self, name: Symbol) -> LispValue:
        return self.find(name).vars[name]

    def update(self, mapping: Mapping[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env: Optional[Environment] = self
            first = True
            while env is not None:
                if not first:
                    buffer.write(" -> ")
                env._write_vars(buffer)
                first = False
                env = env.outer
            buffer.write(">")
            return buffer.getvalue()
