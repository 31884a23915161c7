"""Transitive closure over named-type references."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence

from graphql import DefinitionNode, Node

from sdl_register_filter.schema_management.definition_index import DefinitionIndex
from sdl_register_filter.schema_management.type_references import collect_references
from sdl_register_filter.selection_policy.policy_models import BUILTIN_SCALARS, SelectionPolicy

_LOGGER = logging.getLogger(__name__)

DefinitionLookup = Callable[[str], Sequence[DefinitionNode]]
EffectiveResolver = Callable[[DefinitionNode], DefinitionNode]


def compute_closure(
    seeds: Iterable[str],
    lookup: DefinitionLookup,
    effective_of: EffectiveResolver,
) -> frozenset[str]:
    """Return every name reachable from `seeds` through effective definitions.

    Each popped name may resolve to several definitions (a type and its
    extensions); references of all of them are followed. Built-in scalars are
    never enqueued. The returned set is plain graph reachability, so the order
    in which the worklist is drained does not affect it.
    """
    seen = {name for name in seeds if name not in BUILTIN_SCALARS}
    queue = list(seen)
    while queue:
        name = queue.pop()
        for definition in lookup(name):
            for reference in collect_references(effective_of(definition)):
                if reference in BUILTIN_SCALARS or reference in seen:
                    continue
                seen.add(reference)
                queue.append(reference)
    return frozenset(seen)


def collect_closure_seeds(
    index: DefinitionIndex,
    policy: SelectionPolicy,
    *,
    kept_root_names: Iterable[str],
    schema_nodes: Iterable[Node] = (),
) -> set[str]:
    """Gather the names the closure walk starts from.

    Seeds are every indexed type of a selected register (kept even when nothing
    references it), the retained root types, everything the directive
    definitions reference (directives are always emitted in full) and
    everything the schema declaration and extensions still reference.
    """
    seeds = {name for name in index.type_names if policy.matches_register(name)}
    _LOGGER.debug("Register types seeded: %d", len(seeds))
    seeds.update(kept_root_names)
    for directive in index.directives:
        seeds.update(collect_references(directive))
    for node in schema_nodes:
        seeds.update(collect_references(node))
    return {name for name in seeds if name not in BUILTIN_SCALARS}
