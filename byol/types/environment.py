"""Global environment for byol.

The Environment is a single flat frame mapping names to Values. Values are
deep-copied on the way in (`put`) and on the way out (`get`), so nothing the
evaluator later consumes or mutates can reach a stored binding.
"""

from __future__ import annotations

import logging
from io import StringIO

from byol import Builtin
from byol.types.value import Value

logger = logging.getLogger(__name__)


class Environment:
    """Ordered mapping from names to owned Values."""

    __slots__ = ("vars",)

    def __init__(self):
        self.vars: dict[str, Value] = {}

    def get(self, name: str) -> Value:
        """Return a copy of the value bound to `name`, or an Error value if unbound."""
        val = self.vars.get(name)
        if val is None:
            return Value.error(f"Unbound symbol '{name}'")
        return val.deep_copy()

    def put(self, name: str, value: Value) -> None:
        """Bind `name` to a copy of `value`, replacing any earlier binding.

        The caller keeps ownership of `value`.
        """
        if name in self.vars:
            logger.debug("rebinding %s", name)
        else:
            logger.debug("binding %s", name)
        self.vars[name] = value.deep_copy()

    def add_builtin(self, name: str, fn: Builtin) -> None:
        self.put(name, Value.function(fn, name))

    def names(self) -> list[str]:
        return list(self.vars)

    def __contains__(self, name: str) -> bool:
        return name in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {len(self.vars)} bindings>"
