"""Run execution domain exports."""

from .filter_run_use_case import RunExecutionError, execute_schema_filter_run
from .run_contracts import FilterOutcome, FilterRequest

__all__ = [
    "FilterRequest",
    "FilterOutcome",
    "RunExecutionError",
    "execute_schema_filter_run",
]
