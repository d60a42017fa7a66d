"""Render evaluated values as tinylisp source text."""

from __future__ import annotations

import math

from tinylisp import LispValue
from tinylisp.types.procedure import Builtin, Closure
from tinylisp.types.symbol import Symbol
from tinylisp.types.void import VoidType


def format_number(value: float) -> str:
    # Integral floats print like integers: 7.0 -> "7"
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return repr(value)


def to_string(value: LispValue) -> str:
    if isinstance(value, VoidType):
        return ""
    if isinstance(value, float):
        return format_number(value)
    if isinstance(value, Symbol):
        return value.name
    if isinstance(value, list):
        return "(" + " ".join(to_string(v) for v in value) + ")"
    if isinstance(value, (Closure, Builtin)):
        return str(value)
    return repr(value)
