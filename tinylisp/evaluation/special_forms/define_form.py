from tinylisp import EvaluatorFn
from tinylisp import SExpression, LispValue
from tinylisp.errors import MalformedForm
from tinylisp.types.environment import Environment
from tinylisp.types.void import Void


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Always binds in the current frame, even when an outer frame has `name`.
    """
    if len(tail) != 2:
        raise MalformedForm("define requires exactly 2 arguments", tail)

    name, val_expr = tail
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return Void
