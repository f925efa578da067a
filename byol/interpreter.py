from __future__ import annotations

import logging

from byol.errors import ByolSyntaxError
from byol.types.value import Value
from byol.types.environment import Environment
from byol.evaluation.evaluator import evaluate
from byol.builtin.env_builtin import register
from byol.reader.parser import ParseNode, parse
from byol.reader.translator import read, translate

logger = logging.getLogger(__name__)


class Interpreter:
    """
    One byol session: a fresh Environment with the builtins installed,
    kept alive across calls so that definitions persist.
    """

    def __init__(self, prelude: str | None = None):
        self.env: Environment = Environment()
        register(self.env)
        logger.debug("environment ready with %d builtins", len(self.env))

        if prelude:
            self.eval_lines(prelude)

    def read(self, line: str) -> Value:
        """Read one line of source as a top-level S-Expression."""
        return read(line)

    def eval(self, line: str) -> Value:
        """Read and evaluate one line. Language errors come back as Error values;
        malformed input raises ByolSyntaxError."""
        return self.eval_tree(parse(line))

    def eval_tree(self, tree: ParseNode) -> Value:
        """Translate and evaluate an already parsed line."""
        try:
            return evaluate(self.env, translate(tree))
        except RecursionError:
            return Value.error("Expression nested too deeply")

    def eval_lines(self, source: str) -> list[Value]:
        """Evaluate every non-blank line of `source` in order.

        Lines that fail to parse are logged and skipped.
        """
        results: list[Value] = []
        for lineno, line in enumerate(source.splitlines(), 1):
            if not line.strip():
                continue
            try:
                result = self.eval(line)
            except ByolSyntaxError as exc:
                logger.warning("line %d: %s", lineno, exc)
                continue
            if result.is_error:
                logger.warning("line %d: %s", lineno, result)
            results.append(result)
        return results
