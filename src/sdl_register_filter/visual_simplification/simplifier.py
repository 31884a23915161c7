"""Visualization simplifier service.

Produces a small schema that shows only domain entities and the relationships
between them: pagination wrappers become plain lists, scalar and spatial leaves
become `String`, and every argument and directive is removed.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Collection, Mapping
from dataclasses import dataclass

from graphql import (
    DocumentNode,
    FieldDefinitionNode,
    ListTypeNode,
    NamedTypeNode,
    NameNode,
    ObjectTypeDefinitionNode,
    OperationType,
    OperationTypeDefinitionNode,
    SchemaDefinitionNode,
    StringValueNode,
    TypeNode,
)

from sdl_register_filter.schema_management.type_references import named_type_of

from .simplification_rules import (
    GENERIC_LEAF_TYPE,
    entity_of_connection,
    is_builtin_scalar,
    is_infrastructure_type,
    is_leaf_type,
    is_skipped_field,
)

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class RelationshipEdge:
    """A field on one entity pointing at another entity."""

    source: str
    target: str
    field: str


@dataclass(frozen=True)
class SimplificationResult:
    """Simplified document and what was learnt while building it."""

    document: DocumentNode
    entity_count: int
    domain_count: int
    simplified_types: tuple[str, ...]
    relationships: tuple[RelationshipEdge, ...]
    missing_entities: tuple[str, ...]


def simplify_for_visualization(
    document: DocumentNode, domain_mappings: Mapping[str, str]
) -> SimplificationResult:
    """Collapse `document` to the entity types named in `domain_mappings`."""
    entity_domains = {
        type_name: domain
        for type_name, domain in domain_mappings.items()
        if not is_infrastructure_type(type_name)
    }
    _LOGGER.info(
        "Found %d entity types across %d domains",
        len(entity_domains),
        len(set(domain_mappings.values())),
    )

    object_types = {
        definition.name.value: definition
        for definition in document.definitions
        if isinstance(definition, ObjectTypeDefinitionNode)
    }

    simplified: list[ObjectTypeDefinitionNode] = []
    relationships: list[RelationshipEdge] = []
    missing: list[str] = []
    for entity_name, domain in entity_domains.items():
        type_definition = object_types.get(entity_name)
        if type_definition is None:
            _LOGGER.warning("Entity type %s not found in schema", entity_name)
            missing.append(entity_name)
            continue

        fields = []
        for field in type_definition.fields or ():
            field_name = field.name.value
            if is_skipped_field(field_name, named_type_of(field.type)):
                continue
            simplified_type = simplify_field_type(field.type, entity_domains)
            if simplified_type is None:
                continue
            target = named_type_of(simplified_type)
            if target in entity_domains and target != entity_name:
                relationships.append(
                    RelationshipEdge(source=entity_name, target=target, field=field_name)
                )
            fields.append(_field(field_name, simplified_type))

        if fields:
            simplified.append(
                ObjectTypeDefinitionNode(
                    description=StringValueNode(value=f"Domain: {domain}", block=False),
                    name=NameNode(value=entity_name),
                    interfaces=(),
                    directives=(),
                    fields=tuple(fields),
                )
            )

    _LOGGER.info("Simplified %d entity types", len(simplified))
    _LOGGER.info("Found %d relationships", len(relationships))

    return SimplificationResult(
        document=_build_document(simplified),
        entity_count=len(entity_domains),
        domain_count=len(set(domain_mappings.values())),
        simplified_types=tuple(definition.name.value for definition in simplified),
        relationships=tuple(relationships),
        missing_entities=tuple(missing),
    )


def simplify_field_type(type_node: TypeNode, entity_types: Collection[str]) -> TypeNode | None:
    """Return the visualization type for one field, or None when it has no named type."""
    type_name = named_type_of(type_node)
    if type_name is None:
        return None
    connection_entity = entity_of_connection(type_name)
    if connection_entity is not None and connection_entity in entity_types:
        return ListTypeNode(type=_named(connection_entity))
    if is_leaf_type(type_name):
        return _named(GENERIC_LEAF_TYPE)
    if type_name in entity_types or is_builtin_scalar(type_name):
        return type_node
    return _named(GENERIC_LEAF_TYPE)


def summarize_relationships(
    relationships: Collection[RelationshipEdge], domain_mappings: Mapping[str, str]
) -> list[tuple[str, int]]:
    """Count relationships per `from-domain -> to-domain` pair, most frequent first."""
    counts = Counter(
        f"{domain_mappings.get(edge.source)} -> {domain_mappings.get(edge.target)}"
        for edge in relationships
    )
    return sorted(counts.items(), key=lambda item: (-item[1], item[0]))


def _build_document(entities: list[ObjectTypeDefinitionNode]) -> DocumentNode:
    schema_definition = SchemaDefinitionNode(
        description=None,
        directives=(),
        operation_types=(
            OperationTypeDefinitionNode(operation=OperationType.QUERY, type=_named("Query")),
        ),
    )
    query_type = ObjectTypeDefinitionNode(
        description=None,
        name=NameNode(value="Query"),
        interfaces=(),
        directives=(),
        fields=tuple(
            _field(entity.name.value, ListTypeNode(type=_named(entity.name.value)))
            for entity in entities
        ),
    )
    return DocumentNode(definitions=(schema_definition, query_type, *entities))


def _named(type_name: str) -> NamedTypeNode:
    return NamedTypeNode(name=NameNode(value=type_name))


def _field(field_name: str, type_node: TypeNode) -> FieldDefinitionNode:
    return FieldDefinitionNode(
        description=None,
        name=NameNode(value=field_name),
        arguments=(),
        type=type_node,
        directives=(),
    )
