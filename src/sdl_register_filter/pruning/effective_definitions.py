"""Cached effective (pruned) forms of original definitions."""

from __future__ import annotations

from collections.abc import Iterable

from graphql import DefinitionNode, UnionTypeDefinitionNode, UnionTypeExtensionNode

from sdl_register_filter.schema_management.definition_index import DefinitionIndex
from sdl_register_filter.selection_policy.policy_models import SelectionPolicy

from .foreign_reference_pruner import prune_foreign
from .root_pruner import prune_root


class EffectiveDefinitions:
    """Computes pruned definitions on demand, keyed by the identity of the original node.

    The cache holds the original node next to its pruned form so an `id()` key can
    never be reused by a different object while the cache is alive.
    """

    def __init__(
        self, policy: SelectionPolicy, excluded_type_names: Iterable[str] = ()
    ) -> None:
        self._policy = policy
        self._excluded_type_names = frozenset(excluded_type_names)
        self._cache: dict[int, tuple[DefinitionNode, DefinitionNode]] = {}

    @property
    def policy(self) -> SelectionPolicy:
        return self._policy

    @property
    def excluded_type_names(self) -> frozenset[str]:
        return self._excluded_type_names

    def is_reference_allowed(self, name: str) -> bool:
        """Policy check plus the names removed from the output altogether."""
        return self._policy.is_type_allowed(name) and name not in self._excluded_type_names

    def effective_of(self, definition: DefinitionNode) -> DefinitionNode:
        """Return the root-pruned and, when enabled, foreign-pruned form of `definition`."""
        cached = self._cache.get(id(definition))
        if cached is not None:
            return cached[1]
        effective = prune_root(definition, self._policy.is_root_field_kept)
        if self._policy.prune_foreign:
            effective = prune_foreign(effective, self.is_reference_allowed)
        self._cache[id(definition)] = (definition, effective)
        return effective


def find_collapsed_unions(index: DefinitionIndex, policy: SelectionPolicy) -> frozenset[str]:
    """Return union names whose members would all be pruned away as foreign.

    Members are counted across the union definition and all of its extensions.
    Without foreign pruning no union loses members, so the result is empty.
    """
    if not policy.prune_foreign:
        return frozenset()
    collapsed = set()
    for name in index.type_names:
        definitions = index.lookup(name)
        unions = [
            definition
            for definition in definitions
            if isinstance(definition, (UnionTypeDefinitionNode, UnionTypeExtensionNode))
        ]
        if not unions:
            continue
        members = [
            member.name.value for union in unions for member in union.types or ()
        ]
        if not any(policy.is_type_allowed(member) for member in members):
            collapsed.add(name)
    return frozenset(collapsed)
