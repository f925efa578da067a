"""Argument-contract checks shared by the builtins.

Each check returns None when the contract holds and an Error value
describing the violation otherwise, so a builtin reads as

    if (err := check_arg_count(args, "head", 1)) is not None:
        return err
"""
from __future__ import annotations
from typing import Optional

from byol.types.value import Value, ValueType


def check_arg_count(args: Value, func: str, expected: int) -> Optional[Value]:
    if len(args) != expected:
        return Value.error(
            f"Function '{func}' passed incorrect number of arguments "
            f"(got {len(args)}, expected {expected})"
        )
    return None


def check_min_args(args: Value, func: str, minimum: int) -> Optional[Value]:
    if len(args) < minimum:
        return Value.error(
            f"Function '{func}' passed too few arguments "
            f"(got {len(args)}, expected at least {minimum})"
        )
    return None


def check_arg_type(args: Value, func: str, index: int, expected: ValueType) -> Optional[Value]:
    got = args.cells[index].type
    if got is not expected:
        return Value.error(
            f"Function '{func}' passed incorrect type for argument {index} "
            f"(got {got.value}, expected {expected.value})"
        )
    return None


def check_all_types(args: Value, func: str, expected: ValueType) -> Optional[Value]:
    for i in range(len(args)):
        if (err := check_arg_type(args, func, i, expected)) is not None:
            return err
    return None


def check_not_empty(args: Value, func: str, index: int) -> Optional[Value]:
    if not args.cells[index].cells:
        return Value.error(f"Function '{func}' passed {{}} for argument {index}")
    return None
