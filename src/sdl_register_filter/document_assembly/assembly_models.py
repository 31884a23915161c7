"""Document assembly entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from graphql import DocumentNode

OPERATION_ROOT_TYPES: tuple[tuple[str, str], ...] = (
    ("query", "Query"),
    ("mutation", "Mutation"),
    ("subscription", "Subscription"),
)


@dataclass(frozen=True)
class AssemblyResult:  # pylint: disable=too-many-instance-attributes
    """Filtered document plus the figures gathered while producing it."""

    document: DocumentNode
    selected_type_names: frozenset[str]
    kept_operations: tuple[str, ...]
    root_field_counts: Mapping[str, int]
    directive_count: int
    scalar_count: int
    unmatched_registers: tuple[str, ...]
    dropped_union_names: frozenset[str] = frozenset()
