"""Document assembly service."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from graphql import (
    DefinitionNode,
    DirectiveDefinitionNode,
    DocumentNode,
    ScalarTypeDefinitionNode,
    ScalarTypeExtensionNode,
    SchemaDefinitionNode,
    SchemaExtensionNode,
    TypeExtensionNode,
    UnionTypeDefinitionNode,
    UnionTypeExtensionNode,
)

from sdl_register_filter.closure.closure_engine import collect_closure_seeds, compute_closure
from sdl_register_filter.pruning.effective_definitions import (
    EffectiveDefinitions,
    find_collapsed_unions,
)
from sdl_register_filter.pruning.node_rewrite import rebuild_node
from sdl_register_filter.pruning.root_pruner import is_root_definition
from sdl_register_filter.schema_management.definition_index import (
    DefinitionIndex,
    build_definition_index,
    definition_name,
)
from sdl_register_filter.selection_policy.policy_models import ROOT_TYPE_NAMES, SelectionPolicy
from sdl_register_filter.selection_policy.register_presence import find_unmatched_registers

from .assembly_models import OPERATION_ROOT_TYPES, AssemblyResult

_LOGGER = logging.getLogger(__name__)

_UNION_TYPES = (UnionTypeDefinitionNode, UnionTypeExtensionNode)
_PASS_THROUGH_TYPES = (DirectiveDefinitionNode, ScalarTypeDefinitionNode, ScalarTypeExtensionNode)
_EXTENSION_MEMBERS = ("directives", "interfaces", "fields", "types", "values")


class EmptyResultError(Exception):
    """Raised when pruning leaves the Query root without any field."""


def assemble_document(document: DocumentNode, policy: SelectionPolicy) -> AssemblyResult:
    """Filter `document` down to what the selected registers need, in original order.

    Raises:
      EmptyResultError: If the pruned Query type has no fields left.
    """
    index = build_definition_index(document)
    unmatched_registers = find_unmatched_registers(index, policy)
    collapsed_unions = find_collapsed_unions(index, policy)
    effective = EffectiveDefinitions(policy, excluded_type_names=collapsed_unions)

    root_field_counts = {
        root_name: _aggregate_size(index, effective, root_name, "fields")
        for root_name in ROOT_TYPE_NAMES
    }
    if root_field_counts["Query"] == 0:
        raise EmptyResultError(
            "After pruning, Query has 0 fields. Are the registers correct? "
            f"({', '.join(policy.registers)})"
        )

    kept_operations = tuple(
        operation for operation, root_name in OPERATION_ROOT_TYPES if root_field_counts[root_name]
    )
    pruned_schema_nodes = _prune_schema_nodes(index, kept_operations)

    seeds = collect_closure_seeds(
        index,
        policy,
        kept_root_names=[name for name in ROOT_TYPE_NAMES if root_field_counts[name]],
        schema_nodes=[node for node in pruned_schema_nodes.values() if node is not None],
    )
    _LOGGER.info("Collecting transitive dependencies...")
    selected = compute_closure(seeds, index.lookup, effective.effective_of)

    definitions = _select_definitions(
        index=index,
        effective=effective,
        selected=selected,
        root_field_counts=root_field_counts,
        pruned_schema_nodes=pruned_schema_nodes,
    )

    _LOGGER.info("Selected named types: %d", len(selected))
    _LOGGER.info("Directive defs:       %d (kept all)", len(index.directives))
    _LOGGER.info("Scalar defs:          %d (kept all)", len(index.scalars))
    if collapsed_unions:
        _LOGGER.info("Unions left without members: %s", ", ".join(sorted(collapsed_unions)))

    return AssemblyResult(
        document=rebuild_node(document, definitions=tuple(definitions)),
        selected_type_names=selected,
        kept_operations=kept_operations,
        root_field_counts=root_field_counts,
        directive_count=len(index.directives),
        scalar_count=len(index.scalars),
        unmatched_registers=unmatched_registers,
        dropped_union_names=collapsed_unions,
    )


def _select_definitions(
    *,
    index: DefinitionIndex,
    effective: EffectiveDefinitions,
    selected: frozenset[str],
    root_field_counts: Mapping[str, int],
    pruned_schema_nodes: Mapping[int, SchemaDefinitionNode | SchemaExtensionNode | None],
) -> list[DefinitionNode]:
    kept: list[DefinitionNode] = []
    for definition in index.definitions:
        if isinstance(definition, (SchemaDefinitionNode, SchemaExtensionNode)):
            pruned_schema_node = pruned_schema_nodes[id(definition)]
            if pruned_schema_node is not None:
                kept.append(pruned_schema_node)
            continue
        if isinstance(definition, _PASS_THROUGH_TYPES):
            kept.append(definition)
            continue

        name = definition_name(definition)
        if name is None:
            kept.append(definition)
            continue
        if name not in selected:
            continue

        pruned = effective.effective_of(definition)
        if is_root_definition(pruned) and _is_emptied(pruned, "fields", root_field_counts[name]):
            continue
        if isinstance(pruned, _UNION_TYPES) and _is_emptied(
            pruned, "types", _aggregate_size(index, effective, name, "types")
        ):
            continue
        if isinstance(pruned, TypeExtensionNode) and _is_bare_extension(pruned):
            continue
        kept.append(pruned)
    return kept


def _aggregate_size(
    index: DefinitionIndex, effective: EffectiveDefinitions, name: str, attribute: str
) -> int:
    """Sum one list attribute over the effective forms of every definition named `name`."""
    total = 0
    for definition in index.lookup(name):
        if attribute == "fields" and not is_root_definition(definition):
            continue
        if attribute == "types" and not isinstance(definition, _UNION_TYPES):
            continue
        total += len(getattr(effective.effective_of(definition), attribute) or ())
    return total


def _is_emptied(definition: DefinitionNode, attribute: str, aggregate: int) -> bool:
    """Extensions go when they contribute nothing; a base definition only when all are empty."""
    if isinstance(definition, TypeExtensionNode):
        return not getattr(definition, attribute)
    return aggregate == 0


def _is_bare_extension(definition: TypeExtensionNode) -> bool:
    """An extension with nothing left to add cannot be printed as valid SDL."""
    return not any(getattr(definition, attribute, None) for attribute in _EXTENSION_MEMBERS)


def _prune_schema_nodes(
    index: DefinitionIndex, kept_operations: Sequence[str]
) -> dict[int, SchemaDefinitionNode | SchemaExtensionNode | None]:
    """Drop operation entries whose root type did not survive; None marks a dropped node."""
    pruned: dict[int, SchemaDefinitionNode | SchemaExtensionNode | None] = {}
    schema_nodes: list[SchemaDefinitionNode | SchemaExtensionNode] = list(index.schema_extensions)
    if index.schema_definition is not None:
        schema_nodes.insert(0, index.schema_definition)
    for node in schema_nodes:
        operation_types = tuple(
            operation_type
            for operation_type in node.operation_types or ()
            if operation_type.operation.value in kept_operations
        )
        if operation_types:
            pruned[id(node)] = rebuild_node(node, operation_types=operation_types)
        elif isinstance(node, SchemaExtensionNode) and node.directives:
            pruned[id(node)] = rebuild_node(node, operation_types=())
        else:
            pruned[id(node)] = None
    return pruned
