"""Translate a generic parse tree into byol Values.

Number leaves become Numbers (or an Error for out of range text), symbol
leaves become Symbols, brace groups become Q-Expressions, and anything else
(parenthesised groups and the program root) becomes an S-Expression.
Delimiter and anchor nodes carry no meaning and are skipped.
"""

from __future__ import annotations

import logging

from byol.config import NUMBER_MAX, NUMBER_MIN
from byol.reader.parser import ParseNode, parse
from byol.types.value import Value

logger = logging.getLogger(__name__)

_DELIMITERS = frozenset("(){}")


def read_number(text: str) -> Value:
    try:
        num = int(text, 10)
    except ValueError:
        return Value.error("Invalid Number")
    if not NUMBER_MIN <= num <= NUMBER_MAX:
        return Value.error("Invalid Number")
    return Value.number(num)


def is_valid_expr(node: ParseNode) -> bool:
    if node.contents in _DELIMITERS:
        return False
    return node.tag != "regex"


def translate(node: ParseNode) -> Value:
    """Convert `node` and its children into a freshly owned Value tree."""
    if "number" in node.tag:
        return read_number(node.contents)
    if "symbol" in node.tag:
        return Value.symbol(node.contents)

    val = Value.qexpr() if "qexpr" in node.tag else Value.sexpr()
    for child in node.children:
        if is_valid_expr(child):
            val.append(translate(child))
    return val


def read(source: str) -> Value:
    """Parse and translate one line of source into a top-level S-Expression."""
    tree = parse(source)
    val = translate(tree)
    logger.debug("read %r -> %r", source, val)
    return val
