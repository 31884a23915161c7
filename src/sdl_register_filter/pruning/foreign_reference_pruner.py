"""Foreign reference pruning."""

from __future__ import annotations

from collections.abc import Callable

from graphql import (
    DefinitionNode,
    FieldDefinitionNode,
    InputObjectTypeDefinitionNode,
    InputObjectTypeExtensionNode,
    InterfaceTypeDefinitionNode,
    InterfaceTypeExtensionNode,
    ObjectTypeDefinitionNode,
    ObjectTypeExtensionNode,
    UnionTypeDefinitionNode,
    UnionTypeExtensionNode,
)

from sdl_register_filter.schema_management.type_references import named_type_of

from .node_rewrite import rebuild_node

NamePredicate = Callable[[str], bool]

_FIELDED_TYPES = (
    ObjectTypeDefinitionNode,
    ObjectTypeExtensionNode,
    InterfaceTypeDefinitionNode,
    InterfaceTypeExtensionNode,
)
_INPUT_TYPES = (InputObjectTypeDefinitionNode, InputObjectTypeExtensionNode)
_UNION_TYPES = (UnionTypeDefinitionNode, UnionTypeExtensionNode)


def prune_foreign(definition: DefinitionNode, is_allowed: NamePredicate) -> DefinitionNode:
    """Drop fields, arguments, interfaces and union members that reference disallowed types.

    Object and interface fields go when their return type or any argument type is
    disallowed. Input fields go when their type is disallowed. Other definition
    kinds are returned unchanged. Applying the function to its own output is a no-op.
    """
    if isinstance(definition, _FIELDED_TYPES):
        return rebuild_node(
            definition,
            fields=tuple(
                field for field in definition.fields or () if _field_allowed(field, is_allowed)
            ),
            interfaces=tuple(
                interface
                for interface in definition.interfaces or ()
                if is_allowed(interface.name.value)
            ),
        )
    if isinstance(definition, _INPUT_TYPES):
        return rebuild_node(
            definition,
            fields=tuple(
                field
                for field in definition.fields or ()
                if _reference_allowed(named_type_of(field.type), is_allowed)
            ),
        )
    if isinstance(definition, _UNION_TYPES):
        return rebuild_node(
            definition,
            types=tuple(member for member in definition.types or () if is_allowed(member.name.value)),
        )
    return definition


def _field_allowed(field: FieldDefinitionNode, is_allowed: NamePredicate) -> bool:
    if not _reference_allowed(named_type_of(field.type), is_allowed):
        return False
    return all(
        _reference_allowed(named_type_of(argument.type), is_allowed)
        for argument in field.arguments or ()
    )


def _reference_allowed(name: str | None, is_allowed: NamePredicate) -> bool:
    return name is None or is_allowed(name)
