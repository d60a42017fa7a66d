from __future__ import annotations

from typing import Any


class TinyLispError(Exception):
    """ Base class for all tinylisp errors"""
    pass


class ReaderError(TinyLispError):
    """ Raised when source text cannot be read into an expression"""
    pass


class UnexpectedEndOfInput(ReaderError):
    """ Raised when the tokens run out while an expression is still open"""

    def __init__(self, message: str = "unexpected end of input"):
        super().__init__(message)


class UnbalancedParenthesis(ReaderError):
    """ Raised when a ')' is read where an expression should start"""

    def __init__(self, token: str = ")"):
        super().__init__(f"unexpected {token!r}")
        self.token = token


class UnboundVariable(TinyLispError):
    """ Raised when a symbol is not bound anywhere in the environment chain"""

    def __init__(self, name: Any):
        super().__init__(f"variable '{name}' not found")
        self.name = name


class NotCallable(TinyLispError):
    """ Raised when the head of an application is not a procedure"""

    def __init__(self, value: Any):
        super().__init__(f"cannot apply non-procedure {value!r}")
        self.value = value


class ArityMismatch(TinyLispError):
    """ Raised when a procedure receives the wrong number of arguments"""

    def __init__(self, expected: int, received: int, name: str | None = None):
        who = f"{name}: " if name else ""
        super().__init__(f"{who}expected {expected} argument(s), got {received}")
        self.expected = expected
        self.received = received


class MalformedForm(TinyLispError):
    """ Raised when a special form does not have the shape it requires"""

    def __init__(self, message: str, form: Any = None):
        super().__init__(message)
        self.form = form


class TinyLispTypeError(TinyLispError):
    """ Raised when a builtin receives arguments of the wrong type"""
    pass


class ExitRequested(Exception):
    """ Raised by the `exit` builtin to leave the REPL"""
    pass
