"""Interactive read-eval-print loop and command-line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Sequence

from tinylisp import config
from tinylisp.errors import ExitRequested, TinyLispError
from tinylisp.interpreter import Interpreter
from tinylisp.printer import to_string
from tinylisp.types.void import VoidType

logger = logging.getLogger(__name__)

BANNER = "Tiny Lisp REPL.\nType '(exit)' to exit from the REPL"


def print_results(interp: Interpreter, code: str, write: Callable[[str], None]) -> None:
    for value in interp.iter_eval(code):
        if not isinstance(value, VoidType):
            write(to_string(value))


def run_repl(
    interp: Interpreter,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
    prompt: str | None = None,
) -> None:
    """Read lines until end of input or (exit), printing one result per expression."""
    prompt = config.get_prompt() if prompt is None else prompt
    write(BANNER)
    while True:
        try:
            line = read_line(prompt)
        except (EOFError, KeyboardInterrupt):
            write("exit repl")
            return
        try:
            print_results(interp, line.strip(), write)
        except ExitRequested:
            write("exit repl")
            return
        except TinyLispError as e:
            logger.debug("evaluation failed", exc_info=True)
            write(f"Error: {e}")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tinylisp", description="Tiny Lisp interpreter")
    parser.add_argument(
        "--prelude",
        action="append",
        default=[],
        help="source file evaluated before the session starts (repeatable)",
    )
    parser.add_argument("-c", "--command", help="evaluate CODE, print the results and exit")
    parser.add_argument("--log-level", default=None, help="logging level (default from TINYLISP_LOG_LEVEL)")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    level = config.get_log_level() if args.log_level is None else args.log_level.upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    interp = Interpreter()
    try:
        for path in [*config.get_prelude_paths(), *args.prelude]:
            interp.load(path)
        if args.command is not None:
            print_results(interp, args.command, print)
            return 0
    except ExitRequested:
        return 0
    except (TinyLispError, OSError) as e:
        logger.error("%s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    run_repl(interp)
    return 0


if __name__ == "__main__":
    sys.exit(main())
