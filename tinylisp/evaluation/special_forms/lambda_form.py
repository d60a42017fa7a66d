from tinylisp import EvaluatorFn
from tinylisp import SExpression, LispValue
from tinylisp.errors import MalformedForm
from tinylisp.types.environment import Environment
from tinylisp.types.procedure import Closure
from tinylisp.types.symbol import Symbol


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) body...) with several body forms is an implicit begin.
    if len(tail) < 2:
        raise MalformedForm("lambda requires a parameter list and a body", tail)

    params = tail[0]
    if not isinstance(params, list) or not all(isinstance(p, Symbol) for p in params):
        raise MalformedForm(f"lambda parameters must be a list of symbols, got {params!r}", params)

    body_forms = tail[1:]
    if len(body_forms) == 1:
        body = body_forms[0]
    else:
        body = [Symbol("begin"), *body_forms]

    return Closure(list(params), body, env)
