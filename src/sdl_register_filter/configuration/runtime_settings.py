"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from sdl_register_filter.selection_policy.policy_models import SelectionPolicy


@dataclass(frozen=True)
class FilterSettings:
    """Resolved settings for one schema filter run."""

    input_path: Path
    output_path: Path
    policy: SelectionPolicy
    validate: bool
    report_path: Path | None
    config_path: Path | None = None
