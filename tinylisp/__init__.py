# Core type aliases for the tinylisp data model.
# Code and data share plain Python types: float for numbers, Symbol for
# names, list for compound forms. Procedures and the Void marker live in
# tinylisp.types.
#
# - SExpression: syntactic forms produced by the reader.
# - LispValue: results produced by the evaluator.
# Both resolve to `Any` and are interchangeable.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type passed into special forms and procedure application
EvaluatorFn = Callable[..., LispValue]
