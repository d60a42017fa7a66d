"""Procedure application for tinylisp.

Closures run their body in a fresh frame chained to the environment they
captured, never the caller's. Builtins receive the evaluated argument list and
their result is returned unchanged.
"""

from tinylisp import LispValue, EvaluatorFn
from tinylisp.errors import NotCallable
from tinylisp.types.procedure import Builtin, Closure


def apply_procedure(
    proc: LispValue, args: list[LispValue], evaluate_fn: EvaluatorFn
) -> LispValue:
    if isinstance(proc, Closure):
        return evaluate_fn(proc.body, proc.bind(args))
    if isinstance(proc, Builtin):
        return proc(args)
    raise NotCallable(proc)
