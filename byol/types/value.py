"""Value model for byol.

A Value is a tagged union: Number, Error, Symbol, Function, S-Expression or
Q-Expression. The two expression forms own an ordered list of child Values.
Values form a tree: a child lives in exactly one container, and the only way
to share structure is an explicit `deep_copy`.

Container operations move children rather than duplicate them:

- `append` moves a child into a container.
- `pop` moves a child out of a container.
- `take` moves one child out and empties the container.
- `join` moves every child of another container into this one and empties it.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator, Optional

from byol import Builtin
from byol.errors import ByolIndexError, ByolTypeError


class ValueType(Enum):
    ERR = "Error"
    NUM = "Number"
    SYM = "Symbol"
    FUN = "Function"
    SEXPR = "S-Expression"
    QEXPR = "Q-Expression"


_CONTAINERS = (ValueType.SEXPR, ValueType.QEXPR)


class Value:
    """A single byol value. Build instances through the classmethod constructors."""

    __slots__ = ("type", "num", "err", "sym", "fn", "fn_name", "cells")

    def __init__(self, kind: ValueType):
        self.type: ValueType = kind
        self.num: int = 0
        self.err: str = ""
        self.sym: str = ""
        self.fn: Optional[Builtin] = None
        self.fn_name: str = ""
        self.cells: list[Value] = []

    # --- Constructors ---
    @classmethod
    def number(cls, num: int) -> Value:
        val = cls(ValueType.NUM)
        val.num = num
        return val

    @classmethod
    def error(cls, message: str) -> Value:
        val = cls(ValueType.ERR)
        val.err = message
        return val

    @classmethod
    def symbol(cls, name: str) -> Value:
        val = cls(ValueType.SYM)
        val.sym = name
        return val

    @classmethod
    def function(cls, fn: Builtin, name: str = "") -> Value:
        val = cls(ValueType.FUN)
        val.fn = fn
        val.fn_name = name or getattr(fn, "__name__", "")
        return val

    @classmethod
    def sexpr(cls, cells: Optional[list[Value]] = None) -> Value:
        val = cls(ValueType.SEXPR)
        if cells:
            val.cells.extend(cells)
        return val

    @classmethod
    def qexpr(cls, cells: Optional[list[Value]] = None) -> Value:
        val = cls(ValueType.QEXPR)
        if cells:
            val.cells.extend(cells)
        return val

    # --- Predicates ---
    @property
    def is_error(self) -> bool:
        return self.type is ValueType.ERR

    @property
    def is_container(self) -> bool:
        return self.type in _CONTAINERS

    def type_description(self) -> str:
        """Human readable name of this value's type, for diagnostics."""
        return type_description(self.type)

    # --- Ownership-transferring container operations ---
    def _require_container(self, op: str) -> None:
        if self.type not in _CONTAINERS:
            raise ByolTypeError(f"Cannot {op} on a {self.type.value}")

    def append(self, child: Value) -> Value:
        """Move `child` to the end of this container. Returns the container."""
        self._require_container("append")
        self.cells.append(child)
        return self

    def pop(self, index: int) -> Value:
        """Remove and return the child at `index`; later children shift down."""
        self._require_container("pop")
        if not 0 <= index < len(self.cells):
            raise ByolIndexError(
                f"Index {index} out of range for {self.type.value} of length {len(self.cells)}"
            )
        return self.cells.pop(index)

    def take(self, index: int) -> Value:
        """Pop the child at `index` and discard everything left in this container."""
        child = self.pop(index)
        self.cells.clear()
        return child

    def join(self, other: Value) -> Value:
        """Move every child of `other` onto the end of this container, emptying `other`."""
        self._require_container("join")
        other._require_container("join")
        self.cells.extend(other.cells)
        other.cells.clear()
        return self

    def deep_copy(self) -> Value:
        """Return a fully independent copy. Functions share their callable."""
        val = Value(self.type)
        val.num = self.num
        val.err = self.err
        val.sym = self.sym
        val.fn = self.fn
        val.fn_name = self.fn_name
        val.cells = [cell.deep_copy() for cell in self.cells]
        return val

    # --- Python protocol ---
    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value) or self.type is not other.type:
            return False
        t = self.type
        if t is ValueType.NUM:
            return self.num == other.num
        if t is ValueType.ERR:
            return self.err == other.err
        if t is ValueType.SYM:
            return self.sym == other.sym
        if t is ValueType.FUN:
            return self.fn is other.fn
        return self.cells == other.cells

    __hash__ = None  # mutable

    def __str__(self) -> str:
        from byol.printer import render
        return render(self)

    def __repr__(self) -> str:
        t = self.type
        if t is ValueType.NUM:
            return f"Value(Number, {self.num})"
        if t is ValueType.ERR:
            return f"Value(Error, {self.err!r})"
        if t is ValueType.SYM:
            return f"Value(Symbol, {self.sym!r})"
        if t is ValueType.FUN:
            return f"Value(Function, {self.fn_name!r})"
        return f"Value({t.value}, {self.cells!r})"


def type_description(t: ValueType) -> str:
    return t.value
