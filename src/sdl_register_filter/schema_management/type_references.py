"""Named-type reference helpers."""

from __future__ import annotations

from graphql import ListTypeNode, NamedTypeNode, Node, NonNullTypeNode, TypeNode, Visitor, visit


def named_type_of(type_node: TypeNode | None) -> str | None:
    """Unwrap list and non-null wrappers down to the innermost named type."""
    current = type_node
    while isinstance(current, (ListTypeNode, NonNullTypeNode)):
        current = current.type
    if isinstance(current, NamedTypeNode) and current.name is not None:
        return current.name.value
    return None


class _NamedTypeCollector(Visitor):
    """Records every name found in a named-type position."""

    def __init__(self) -> None:
        super().__init__()
        self.names: set[str] = set()

    def enter_named_type(self, node: NamedTypeNode, *_args) -> None:
        if node.name is not None and node.name.value:
            self.names.add(node.name.value)


def collect_references(node: Node) -> set[str]:
    """Return every named type referenced anywhere under `node`, built-ins included."""
    collector = _NamedTypeCollector()
    visit(node, collector)
    return collector.names
