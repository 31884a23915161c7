"""Lookup structures over parsed SDL definitions."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from graphql import (
    DefinitionNode,
    DirectiveDefinitionNode,
    DocumentNode,
    ScalarTypeDefinitionNode,
    ScalarTypeExtensionNode,
    SchemaDefinitionNode,
    SchemaExtensionNode,
    TypeDefinitionNode,
    TypeExtensionNode,
)


@dataclass(frozen=True)
class DefinitionIndex:
    """Read-only views over one parsed document."""

    definitions: tuple[DefinitionNode, ...]
    by_name: Mapping[str, tuple[DefinitionNode, ...]]
    scalars: tuple[ScalarTypeDefinitionNode | ScalarTypeExtensionNode, ...]
    directives: tuple[DirectiveDefinitionNode, ...]
    schema_definition: SchemaDefinitionNode | None
    schema_extensions: tuple[SchemaExtensionNode, ...]

    def lookup(self, name: str) -> tuple[DefinitionNode, ...]:
        """Return every definition registered under `name` (base plus extensions)."""
        return self.by_name.get(name, ())

    @property
    def type_names(self) -> tuple[str, ...]:
        """Indexed type names in first-seen order."""
        return tuple(self.by_name)


def definition_name(definition: DefinitionNode) -> str | None:
    """Return the declared type name of a type definition or extension."""
    if not isinstance(definition, (TypeDefinitionNode, TypeExtensionNode)):
        return None
    name_node = definition.name
    if name_node is None or not name_node.value:
        return None
    return name_node.value


def build_definition_index(document: DocumentNode) -> DefinitionIndex:
    """Index definitions by name and collect the order-agnostic declarations."""
    definitions: Sequence[DefinitionNode] = tuple(document.definitions or ())
    by_name: dict[str, list[DefinitionNode]] = {}
    scalars: list[ScalarTypeDefinitionNode | ScalarTypeExtensionNode] = []
    directives: list[DirectiveDefinitionNode] = []
    schema_definition: SchemaDefinitionNode | None = None
    schema_extensions: list[SchemaExtensionNode] = []

    for definition in definitions:
        if isinstance(definition, SchemaDefinitionNode):
            schema_definition = definition
        elif isinstance(definition, SchemaExtensionNode):
            schema_extensions.append(definition)
        elif isinstance(definition, DirectiveDefinitionNode):
            directives.append(definition)
        elif isinstance(definition, (ScalarTypeDefinitionNode, ScalarTypeExtensionNode)):
            scalars.append(definition)

        name = definition_name(definition)
        if name is not None:
            by_name.setdefault(name, []).append(definition)

    return DefinitionIndex(
        definitions=tuple(definitions),
        by_name={name: tuple(entries) for name, entries in by_name.items()},
        scalars=tuple(scalars),
        directives=tuple(directives),
        schema_definition=schema_definition,
        schema_extensions=tuple(schema_extensions),
    )
