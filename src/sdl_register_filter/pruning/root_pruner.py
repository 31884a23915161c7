"""Root operation type pruning."""

from __future__ import annotations

from collections.abc import Callable

from graphql import DefinitionNode, ObjectTypeDefinitionNode, ObjectTypeExtensionNode, TypeNode

from sdl_register_filter.schema_management.type_references import named_type_of
from sdl_register_filter.selection_policy.policy_models import is_root_type_name

from .node_rewrite import rebuild_node

NamePredicate = Callable[[str], bool]


def is_root_definition(definition: DefinitionNode) -> bool:
    """Return True for object definitions or extensions named Query/Mutation/Subscription."""
    if not isinstance(definition, (ObjectTypeDefinitionNode, ObjectTypeExtensionNode)):
        return False
    return definition.name is not None and is_root_type_name(definition.name.value)


def prune_root(definition: DefinitionNode, is_kept: NamePredicate) -> DefinitionNode:
    """Keep only root fields whose name or unwrapped return type passes `is_kept`.

    Non-root definitions are returned unchanged. A result with zero fields is
    returned as well; deciding whether that is fatal is left to the caller.
    """
    if not is_root_definition(definition):
        return definition
    assert isinstance(definition, (ObjectTypeDefinitionNode, ObjectTypeExtensionNode))

    kept_fields = tuple(
        field
        for field in definition.fields or ()
        if is_kept(field.name.value) or _return_type_kept(field.type, is_kept)
    )
    return rebuild_node(definition, fields=kept_fields)


def _return_type_kept(type_node: TypeNode, is_kept: NamePredicate) -> bool:
    return_type = named_type_of(type_node)
    return return_type is not None and is_kept(return_type)
