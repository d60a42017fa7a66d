from tinylisp import EvaluatorFn
from tinylisp import SExpression, LispValue
from tinylisp.errors import MalformedForm
from tinylisp.types.symbol import Symbol
from tinylisp.types.environment import Environment


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 2:
        raise MalformedForm("set! requires exactly 2 arguments: (set! var value)", tail)
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise MalformedForm(f"set! target must be a symbol, got {var_sym!r}", var_sym)
    # The target must already be bound before the value expression runs
    owner = env.find(var_sym)
    value = evaluate_fn(val_expr, env)
    owner.set(var_sym, value)
    return value
