from __future__ import annotations

import logging
import sys
from typing import Literal

from lispy.builtin import register
from lispy.diagnostics import make_error, RECURSION_DEPTH
from lispy.errors import LispyError
from lispy.evaluation.evaluator import eval_value
from lispy.evaluation.read import read_value
from lispy.printer import format_value
from lispy.reader.ast import AstNode
from lispy.reader.parser import parse
from lispy.types.environment import Environment
from lispy.types.values import Error, Value

logger = logging.getLogger(__name__)

# Each Lispy call level costs several Python frames
RECURSION_LIMIT = 10000


class Interpreter:
    """
    A Lispy session: one root Environment with the builtins registered,
    optionally seeded with the standard prelude. Evaluate one top-level
    form at a time; the session is not safe for concurrent use.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        if sys.getrecursionlimit() < RECURSION_LIMIT:
            sys.setrecursionlimit(RECURSION_LIMIT)
        self.env: Environment = Environment()
        register(self.env)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            # Lazy import to avoid circular imports
            from lispy.modules.prelude_loader import load_prelude
            try:
                load_prelude(self)
            except FileNotFoundError:
                # Be permissive: no prelude found -> proceed
                logger.warning("standard prelude not found; starting with builtins only")
        else:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        for value in self.load(code):
            if isinstance(value, Error):
                raise LispyError(f"prelude failed: {format_value(value)}")

    def eval(self, code: str) -> Value:
        """Evaluate one line of input as a single S-Expression (REPL semantics)."""
        return self._evaluate(parse(code))

    def load(self, code: str) -> list[Value]:
        """Evaluate each top-level expression of `code` in turn (file semantics)."""
        results: list[Value] = []
        for node in parse(code).children:
            value = self._evaluate(node)
            if isinstance(value, Error):
                logger.debug("top-level form failed: %s", value.message)
            results.append(value)
        return results

    def _evaluate(self, node: AstNode) -> Value:
        try:
            return eval_value(self.env, read_value(node))
        except RecursionError:
            logger.debug("evaluation exceeded the recursion limit")
            return make_error(RECURSION_DEPTH)

    def run(self, code: str) -> str:
        """Evaluate a line and render the result."""
        return format_value(self.eval(code))
