"""Tree-walking evaluator for byol.

Symbols resolve through the Environment, S-Expressions are reduced by
evaluating every child left to right and applying the first to the rest,
and everything else evaluates to itself. Errors are ordinary values: the
first child that evaluates to an Error becomes the result of the whole form.
"""

from __future__ import annotations

import logging

from byol.types.environment import Environment
from byol.types.value import Value, ValueType

logger = logging.getLogger(__name__)


def evaluate(env: Environment, value: Value) -> Value:
    """Evaluate `value`, consuming it. Returns a fresh owned Value."""
    if value.type is ValueType.SYM:
        return env.get(value.sym)
    if value.type is ValueType.SEXPR:
        return evaluate_sexpr(env, value)
    # Numbers, errors, functions and Q-Expressions are self-evaluating.
    return value


def evaluate_sexpr(env: Environment, sexpr: Value) -> Value:
    """Reduce an S-Expression in place and apply its head to the remaining children."""
    cells = sexpr.cells
    for i in range(len(cells)):
        cells[i] = evaluate(env, cells[i])
        if cells[i].is_error:
            # First error wins; unevaluated siblings are dropped.
            return sexpr.take(i)

    if not cells:
        return sexpr
    if len(cells) == 1:
        return sexpr.take(0)

    first = sexpr.pop(0)
    if first.type is not ValueType.FUN:
        return Value.error(
            "S-Expression starts with incorrect type "
            f"(expected {ValueType.FUN.value}, got {first.type_description()})"
        )

    logger.debug("applying %s to %d argument(s)", first.fn_name, len(sexpr))
    # The builtin owns `sexpr` from here on.
    return first.fn(env, sexpr)
