from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterator

from tinylisp import LispValue
from tinylisp.builtin.env_builtin import register
from tinylisp.evaluation.evaluator import evaluate
from tinylisp.reader.parser import TokenStream, read_all, tokenize
from tinylisp.types.environment import Environment
from tinylisp.types.void import Void

logger = logging.getLogger(__name__)


class Interpreter:
    """
    One evaluation session: a root Environment seeded once by the builtin
    registration hook, then shared by every evaluation fed to it.
    Independent Interpreter instances never share bindings.
    """

    def __init__(
        self,
        register_builtins: Callable[[Environment], None] | None = register,
        prelude: str | None = None,
    ):
        self.env: Environment = Environment()
        if register_builtins is not None:
            register_builtins(self.env)
            logger.debug("registered %d root bindings", len(self.env.vars))

        if prelude:
            self.eval_all(prelude)

    def iter_eval(self, code: str) -> Iterator[LispValue]:
        """Yield the value of each top-level expression in `code` as it is evaluated.

        Expressions are read and evaluated one at a time, so a failure leaves
        the effects of earlier expressions in place.
        """
        stream = TokenStream(tokenize(code))
        for expr in read_all(stream):
            logger.debug("evaluating %r", expr)
            yield evaluate(expr, self.env)

    def eval_all(self, code: str) -> list[LispValue]:
        return list(self.iter_eval(code))

    def eval(self, code: str) -> LispValue:
        results = self.eval_all(code)
        return results[-1] if results else Void

    def load(self, path: str | Path) -> LispValue:
        path = Path(path)
        logger.info("loading %s", path)
        return self.eval(path.read_text(encoding="utf-8"))
