"""Definition pruning exports."""

from .effective_definitions import EffectiveDefinitions, find_collapsed_unions
from .foreign_reference_pruner import prune_foreign
from .node_rewrite import rebuild_node
from .root_pruner import is_root_definition, prune_root

__all__ = [
    "EffectiveDefinitions",
    "find_collapsed_unions",
    "is_root_definition",
    "prune_foreign",
    "prune_root",
    "rebuild_node",
]
