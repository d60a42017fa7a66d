from tinylisp.reader.parser import (
    TokenStream,
    atom,
    parse,
    parse_all,
    read_all,
    read_expression,
    tokenize,
)

__all__ = [
    "TokenStream",
    "atom",
    "parse",
    "parse_all",
    "read_all",
    "read_expression",
    "tokenize",
]
