"""Results writing domain exports."""

from .filter_report_writer import (
    RUN_INFO_SHEET_NAME,
    TYPES_SHEET_NAME,
    list_retained_definitions,
    write_filter_report,
)
from .report_models import FilterRunMetadata, RetainedDefinition

__all__ = [
    "FilterRunMetadata",
    "RetainedDefinition",
    "RUN_INFO_SHEET_NAME",
    "TYPES_SHEET_NAME",
    "list_retained_definitions",
    "write_filter_report",
]
