"""Built-in functions for the byol runtime environment.

Every builtin takes (env, args) where `args` is an S-Expression of already
evaluated arguments that the builtin now owns. It returns a fresh Value, or
an Error value when its argument contract is violated.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from byol import Builtin
from byol.config import NUMBER_MAX, NUMBER_MIN
from byol.types.environment import Environment
from byol.types.value import Value, ValueType
from byol.evaluation.evaluator import evaluate
from byol.builtin.assertions import (
    check_arg_count,
    check_arg_type,
    check_all_types,
    check_min_args,
    check_not_empty,
)

logger = logging.getLogger(__name__)


# -------------------------------
# Arithmetic
# -------------------------------
def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _trunc_mod(a: int, b: int) -> int:
    """Remainder with the sign of the dividend, matching truncating division."""
    return a - b * _trunc_div(a, b)


_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _trunc_div,
    "%": _trunc_mod,
    "^": lambda a, b: a ** b,
    "min": min,
    "max": max,
}


def _overflow() -> Value:
    return Value.error("Integer Overflow!")


def _in_range(num: int) -> bool:
    return NUMBER_MIN <= num <= NUMBER_MAX


def _check_operand(op: str, acc: int, operand: int) -> Optional[Value]:
    if op in ("/", "%") and operand == 0:
        return Value.error("Division By Zero!")
    if op == "^" and operand < 0:
        return Value.error(f"Function '{op}' passed a negative exponent ({operand})")
    if op == "^" and abs(acc) > 1 and operand >= 64:
        # |acc| ** 64 already exceeds the 64-bit range; skip the computation.
        return _overflow()
    return None


def builtin_op(env: Environment, args: Value, op: str) -> Value:
    """Left-fold `op` over numeric arguments; unary '-' negates.

    Every intermediate result must fit in a signed 64-bit integer, otherwise
    the fold stops with an overflow Error.
    """
    fold = _OPERATORS.get(op)
    if fold is None:
        return Value.error(f"Unknown operator '{op}'")
    if (err := check_min_args(args, op, 1)) is not None:
        return err
    if (err := check_all_types(args, op, ValueType.NUM)) is not None:
        return err

    result = args.pop(0)
    if op == "-" and not args.cells:
        result.num = -result.num
        if not _in_range(result.num):
            return _overflow()

    while args.cells:
        operand = args.pop(0)
        if (err := _check_operand(op, result.num, operand.num)) is not None:
            # Abort the fold; remaining operands are never looked at.
            return err
        result.num = fold(result.num, operand.num)
        if not _in_range(result.num):
            return _overflow()
    return result


def add(env: Environment, args: Value) -> Value:
    return builtin_op(env, args, "+")


def sub(env: Environment, args: Value) -> Value:
    return builtin_op(env, args, "-")


def mul(env: Environment, args: Value) -> Value:
    return builtin_op(env, args, "*")


def div(env: Environment, args: Value) -> Value:
    return builtin_op(env, args, "/")


def mod(env: Environment, args: Value) -> Value:
    return builtin_op(env, args, "%")


def power(env: Environment, args: Value) -> Value:
    return builtin_op(env, args, "^")


def minimum(env: Environment, args: Value) -> Value:
    return builtin_op(env, args, "min")


def maximum(env: Environment, args: Value) -> Value:
    return builtin_op(env, args, "max")


# -------------------------------
# List operations
# -------------------------------
def list_builtin(env: Environment, args: Value) -> Value:
    """Turn the argument S-Expression into a Q-Expression; no copy is made."""
    args.type = ValueType.QEXPR
    return args


def head(env: Environment, args: Value) -> Value:
    """Q-Expression holding only the first element of the argument."""
    if (err := check_arg_count(args, "head", 1)) is not None:
        return err
    if (err := check_arg_type(args, "head", 0, ValueType.QEXPR)) is not None:
        return err
    if (err := check_not_empty(args, "head", 0)) is not None:
        return err

    qexpr = args.take(0)
    del qexpr.cells[1:]
    return qexpr


def tail(env: Environment, args: Value) -> Value:
    """Q-Expression without its first element."""
    if (err := check_arg_count(args, "tail", 1)) is not None:
        return err
    if (err := check_arg_type(args, "tail", 0, ValueType.QEXPR)) is not None:
        return err
    if (err := check_not_empty(args, "tail", 0)) is not None:
        return err

    qexpr = args.take(0)
    qexpr.pop(0)
    return qexpr


def init(env: Environment, args: Value) -> Value:
    """Q-Expression without its last element."""
    if (err := check_arg_count(args, "init", 1)) is not None:
        return err
    if (err := check_arg_type(args, "init", 0, ValueType.QEXPR)) is not None:
        return err
    if (err := check_not_empty(args, "init", 0)) is not None:
        return err

    qexpr = args.take(0)
    qexpr.pop(len(qexpr) - 1)
    return qexpr


def eval_builtin(env: Environment, args: Value) -> Value:
    """Evaluate a Q-Expression as if it were an S-Expression."""
    if (err := check_arg_count(args, "eval", 1)) is not None:
        return err
    if (err := check_arg_type(args, "eval", 0, ValueType.QEXPR)) is not None:
        return err

    expr = args.take(0)
    expr.type = ValueType.SEXPR
    return evaluate(env, expr)


def join(env: Environment, args: Value) -> Value:
    """Concatenate Q-Expressions in argument order."""
    if (err := check_min_args(args, "join", 1)) is not None:
        return err
    if (err := check_all_types(args, "join", ValueType.QEXPR)) is not None:
        return err

    qexpr = args.pop(0)
    while args.cells:
        qexpr.join(args.pop(0))
    return qexpr


def cons(env: Environment, args: Value) -> Value:
    """Prepend a value to a Q-Expression."""
    if (err := check_arg_count(args, "cons", 2)) is not None:
        return err
    if (err := check_arg_type(args, "cons", 1, ValueType.QEXPR)) is not None:
        return err

    element = args.pop(0)
    qexpr = args.take(0)
    qexpr.cells.insert(0, element)
    return qexpr


def len_builtin(env: Environment, args: Value) -> Value:
    if (err := check_arg_count(args, "len", 1)) is not None:
        return err
    if (err := check_arg_type(args, "len", 0, ValueType.QEXPR)) is not None:
        return err
    return Value.number(len(args.cells[0]))


# -------------------------------
# Definitions
# -------------------------------
def define(env: Environment, args: Value) -> Value:
    """(def {a b} 1 2): bind each symbol to the matching value in the environment."""
    if (err := check_min_args(args, "def", 1)) is not None:
        return err
    if (err := check_arg_type(args, "def", 0, ValueType.QEXPR)) is not None:
        return err
    if (err := check_not_empty(args, "def", 0)) is not None:
        return err

    syms = args.cells[0]
    for sym in syms:
        if sym.type is not ValueType.SYM:
            return Value.error(
                f"Function 'def' cannot define non-symbol (got {sym.type_description()})"
            )
    if len(syms) != len(args) - 1:
        return Value.error(
            "Function 'def' cannot define incorrect number of values to symbols "
            f"(got {len(args) - 1}, expected {len(syms)})"
        )

    syms = args.pop(0)
    for sym, val in zip(syms, args):
        env.put(sym.sym, val)
    return Value.sexpr()


# -------------------------------
# Registration
# -------------------------------
BUILTINS: dict[str, Builtin] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "%": mod,
    "^": power,
    "min": minimum,
    "max": maximum,
    "list": list_builtin,
    "head": head,
    "tail": tail,
    "init": init,
    "eval": eval_builtin,
    "join": join,
    "cons": cons,
    "len": len_builtin,
    "def": define,
}


def call_builtin(env: Environment, name: str, args: Value) -> Value:
    """Name-based dispatch over BUILTINS; unknown names yield the "Unknown function" Error."""
    fn = BUILTINS.get(name)
    if fn is None:
        return Value.error(f"Unknown function '{name}'")
    logger.debug("dispatching builtin %s", name)
    return fn(env, args)


def register(env: Environment) -> None:
    """Register all builtin functions into the given environment."""
    for name, fn in BUILTINS.items():
        env.add_builtin(name, fn)
