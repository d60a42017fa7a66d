from tinylisp.types.symbol import Symbol
from tinylisp.types.void import Void, VoidType, TRUE, FALSE, is_true, to_bool
from tinylisp.types.environment import Environment
from tinylisp.types.procedure import Procedure, Closure, Builtin

__all__ = [
    "Symbol",
    "Void",
    "VoidType",
    "TRUE",
    "FALSE",
    "is_true",
    "to_bool",
    "Environment",
    "Procedure",
    "Closure",
    "Builtin",
]
