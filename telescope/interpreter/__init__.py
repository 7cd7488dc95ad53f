from __future__ import annotations

import logging

from telescope import LispValue
from telescope.builtin.env_builtin import register
from telescope.evaluation.evaluator import evaluate
from telescope.reader.parser import parse
from telescope.types.environment import Environment
from telescope.types.errors import TelescopeEvalError

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates Telescope source one line at a time.

    The root environment holds the builtins and is created once; user
    definitions land in a global child frame, so they shadow builtins
    instead of replacing them.
    """

    def __init__(self):
        self.root: Environment = Environment()
        register(self.root)
        self.env: Environment = Environment(outer=self.root)

    def eval(self, code: str) -> LispValue:
        """Parse one expression from `code` and evaluate it.

        Raises TelescopeEOF for empty input, TelescopeSyntaxError for malformed
        input, TelescopeEvalError subclasses for evaluation failures, and
        TelescopeExit when the code calls `exit`.
        """
        expr = parse(code)
        logger.debug("eval %r", expr)
        try:
            return evaluate(expr, self.env)
        except RecursionError as e:
            raise TelescopeEvalError("maximum recursion depth exceeded") from e
