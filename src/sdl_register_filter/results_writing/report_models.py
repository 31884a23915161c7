"""Results writing entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from sdl_register_filter.selection_policy.policy_models import SelectionPolicy


@dataclass(frozen=True)
class FilterRunMetadata:
    """Metadata rendered into the RunInfo sheet."""

    run_start: datetime
    input_path: Path
    output_path: Path
    policy: SelectionPolicy
    validated: bool
    input_bytes: int
    output_bytes: int


@dataclass(frozen=True)
class RetainedDefinition:
    """One row of the Types sheet."""

    name: str
    kind: str
    register: str
