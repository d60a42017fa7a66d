from tinylisp import SExpression, LispValue, EvaluatorFn
from tinylisp.errors import MalformedForm
from tinylisp.types.environment import Environment


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise MalformedForm("quote expects exactly 1 argument", tail)
    return tail[0]
