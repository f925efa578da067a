# Core type aliases for the byol interpreter.
#
# Every runtime datum is a `byol.types.value.Value`: numbers, errors, symbols,
# native functions and the two list forms (S-Expressions and Q-Expressions).
# A builtin is any callable taking (Environment, argument S-Expression) and
# returning a fresh Value; it owns the argument container it receives.

from typing import Any, Callable

# Builtin calling convention: (env, args) -> Value
Builtin = Callable[[Any, Any], Any]
