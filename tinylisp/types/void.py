from __future__ import annotations

from tinylisp.types.symbol import Symbol


class VoidType:
    """Result of forms evaluated only for effect (define, empty begin)."""

    _instance: VoidType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "#<void>"

    def __eq__(self, other):
        return isinstance(other, VoidType)

    def __hash__(self):
        return hash(VoidType)


Void = VoidType()

# The only false value is FALSE; numbers, lists and Void are all true.
TRUE = Symbol("#t")
FALSE = Symbol("#f")


def is_true(value) -> bool:
    return value != FALSE


def to_bool(flag: bool) -> Symbol:
    return TRUE if flag else FALSE
