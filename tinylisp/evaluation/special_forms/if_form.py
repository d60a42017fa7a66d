from tinylisp import EvaluatorFn
from tinylisp import SExpression, LispValue
from tinylisp.errors import MalformedForm
from tinylisp.types.environment import Environment
from tinylisp.types.void import Void, is_true


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) not in (2, 3):
        raise MalformedForm("if requires a test, a consequent and an optional alternative", tail)

    # Only the chosen branch is evaluated
    if is_true(evaluate_fn(tail[0], env)):
        return evaluate_fn(tail[1], env)
    if len(tail) == 3:
        return evaluate_fn(tail[2], env)
    return Void
