"""Closure engine exports."""

from .closure_engine import collect_closure_seeds, compute_closure

__all__ = ["collect_closure_seeds", "compute_closure"]
