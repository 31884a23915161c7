"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FilterRequest:  # pylint: disable=too-many-instance-attributes
    """Input contract for one filter run; None means "take it from the config file"."""

    config_path: str | None = None
    registers: tuple[str, ...] | None = None
    input_path: str | None = None
    output_path: str | None = None
    keep_root_fields: tuple[str, ...] | None = None
    allow_prefixes: tuple[str, ...] | None = None
    prune_foreign: bool | None = None
    validate: bool | None = None
    report_path: str | None = None


@dataclass(frozen=True)
class FilterOutcome:
    """Output contract for one completed filter run."""

    output_path: Path
    selected_type_count: int
    kept_operations: tuple[str, ...]
    unmatched_registers: tuple[str, ...]
    validated: bool
    report_path: Path | None = None
