"""Non-mutating AST node rewriting."""

from __future__ import annotations

from typing import Any, TypeVar

from graphql import Node

NodeT = TypeVar("NodeT", bound=Node)


def rebuild_node(node: NodeT, **changes: Any) -> NodeT:
    """Return a new node of the same class with selected attributes replaced."""
    unknown = set(changes) - set(node.keys)
    if unknown:
        raise ValueError(f"{type(node).__name__} has no attribute(s): {', '.join(sorted(unknown))}")
    values = {key: getattr(node, key, None) for key in node.keys}
    values.update(changes)
    return type(node)(**values)
