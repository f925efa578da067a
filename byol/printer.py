"""Render byol Values as text."""
from __future__ import annotations

import sys
from io import StringIO
from typing import TextIO

from byol.types.value import Value, ValueType


def _write(value: Value, buffer: StringIO) -> None:
    t = value.type
    if t is ValueType.NUM:
        buffer.write(str(value.num))
    elif t is ValueType.ERR:
        buffer.write(f"Error: {value.err}")
    elif t is ValueType.SYM:
        buffer.write(value.sym)
    elif t is ValueType.FUN:
        buffer.write("<function>")
    else:
        open_, close = ("(", ")") if t is ValueType.SEXPR else ("{", "}")
        buffer.write(open_)
        for i, cell in enumerate(value.cells):
            if i:
                buffer.write(" ")
            _write(cell, buffer)
        buffer.write(close)


def render(value: Value) -> str:
    with StringIO() as buffer:
        _write(value, buffer)
        return buffer.getvalue()


def print_value(value: Value, file: TextIO = sys.stdout) -> None:
    print(render(value), file=file)
