"""Statistics and a plain dump for reader parse trees."""
from __future__ import annotations

from io import StringIO

from byol.reader.parser import ParseNode


def num_leaves(node: ParseNode) -> int:
    if not node.children:
        return 1
    return sum(num_leaves(child) for child in node.children)


def num_branches(node: ParseNode) -> int:
    if not node.children:
        return 0
    return 1 + sum(num_branches(child) for child in node.children)


def most_children(node: ParseNode) -> int:
    if not node.children:
        return 0
    return max(len(node.children), *(most_children(child) for child in node.children))


def summary(node: ParseNode) -> str:
    return (
        f"Leaves: {num_leaves(node)}, Branches: {num_branches(node)}, "
        f"Most Children: {most_children(node)}"
    )


def format_tree(node: ParseNode, indent: int = 0) -> str:
    """Indented one-node-per-line dump of the tree."""
    with StringIO() as buffer:
        _format(node, indent, buffer)
        return buffer.getvalue()


def _format(node: ParseNode, indent: int, buffer: StringIO) -> None:
    buffer.write("  " * indent)
    buffer.write(node.tag)
    if node.contents:
        buffer.write(f" '{node.contents}'")
    buffer.write("\n")
    for child in node.children:
        _format(child, indent + 1, buffer)
