"""Core recursive evaluator for tinylisp.

Symbols are looked up, other atoms evaluate to themselves, lists headed by a
special-form keyword are dispatched to their handler, and every other list is
a procedure application.
"""

from __future__ import annotations

from tinylisp import SExpression, LispValue
from tinylisp.errors import NotCallable
from tinylisp.types.environment import Environment
from tinylisp.types.symbol import Symbol
from tinylisp.evaluation.apply import apply_procedure
from tinylisp.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        case Symbol():
            return env.lookup(expr)
        case []:
            raise NotCallable(expr)
        case [Symbol() as head, *tail] if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail, env, evaluate)
        case [head, *tail]:
            proc = evaluate(head, env)
            args = [evaluate(arg, env) for arg in tail]
            return apply_procedure(proc, args, evaluate)

    # --- Atoms return as-is ---
    return expr
