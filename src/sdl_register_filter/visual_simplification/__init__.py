"""Visualization simplifier exports."""

from .simplifier import (
    RelationshipEdge,
    SimplificationResult,
    simplify_field_type,
    simplify_for_visualization,
    summarize_relationships,
)

__all__ = [
    "RelationshipEdge",
    "SimplificationResult",
    "simplify_field_type",
    "simplify_for_visualization",
    "summarize_relationships",
]
