from __future__ import annotations

import logging

from risp import LispValue
from risp.errors import RispLexError
from risp.reader.parser import parse_all
from risp.types.environment import Environment
from risp.builtin.env_builtin import standard_env
from risp.evaluation.evaluator import evaluate

logger = logging.getLogger(__name__)


class Interpreter:
    """
    One evaluation session: reads risp code and evaluates it against a
    single environment that persists across calls.
    """

    def __init__(self, prelude: str | None = None):
        self.env: Environment = standard_env()
        if prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        """Evaluate every form in `code`, discarding the results."""
        for expr in parse_all(code):
            evaluate(expr, self.env)
        logger.debug("prelude loaded: %s", self.env)

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code` in order and return the last value."""
        forms = list(parse_all(code))
        result = None
        for expr in forms:
            result = evaluate(expr, self.env)
        if result is None:
            raise RispLexError("empty input")
        return result
