"""Tests for run execution domain entities."""

from __future__ import annotations

from pathlib import Path

from sdl_register_filter.run_execution.run_contracts import FilterOutcome, FilterRequest


def test_filter_request_defaults_defer_to_configuration() -> None:
    request = FilterRequest(registers=("BBR",), input_path="in.graphql")

    assert request.config_path is None
    assert request.output_path is None
    assert request.prune_foreign is None
    assert request.validate is None
    assert request.report_path is None


def test_filter_outcome_contains_resolved_output_path_and_counts() -> None:
    outcome = FilterOutcome(
        output_path=Path("/tmp/filtered.graphql"),
        selected_type_count=4,
        kept_operations=("query",),
        unmatched_registers=(),
        validated=True,
    )

    assert outcome.output_path.name == "filtered.graphql"
    assert outcome.selected_type_count == 4
    assert outcome.report_path is None
