"""Filter report workbook writer service."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from sdl_register_filter.document_assembly.assembly_models import AssemblyResult
from sdl_register_filter.schema_management.definition_index import definition_name
from sdl_register_filter.selection_policy.policy_models import (
    SelectionPolicy,
    underscore_prefix,
)

from .report_models import FilterRunMetadata, RetainedDefinition

RUN_INFO_SHEET_NAME = "RunInfo"
TYPES_SHEET_NAME = "Types"
TYPES_COLUMNS: tuple[str, ...] = ("Name", "Kind", "Register")
COMMON_REGISTER_LABEL = "common"


def write_filter_report(
    output_path: Path | str,
    result: AssemblyResult,
    run_metadata: FilterRunMetadata,
) -> Path:
    """Write the run summary and the retained type listing to an Excel workbook."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = RUN_INFO_SHEET_NAME

    _write_run_info_sheet(sheet, result, run_metadata)
    _write_types_sheet(
        workbook.create_sheet(TYPES_SHEET_NAME),
        list_retained_definitions(result, run_metadata.policy),
    )

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)
    return output.resolve()


def list_retained_definitions(
    result: AssemblyResult, policy: SelectionPolicy
) -> tuple[RetainedDefinition, ...]:
    """Return one entry per named definition in the filtered document, in document order."""
    rows: list[RetainedDefinition] = []
    seen: set[str] = set()
    for definition in result.document.definitions:
        name = definition_name(definition)
        if name is None or name in seen:
            continue
        seen.add(name)
        rows.append(
            RetainedDefinition(
                name=name,
                kind=definition.kind,
                register=_register_label(name, policy),
            )
        )
    return tuple(rows)


def _register_label(name: str, policy: SelectionPolicy) -> str:
    register = policy.register_of(name)
    if register is not None:
        return register
    return underscore_prefix(name) or COMMON_REGISTER_LABEL


def _write_run_info_sheet(
    sheet: Worksheet, result: AssemblyResult, run_metadata: FilterRunMetadata
) -> None:
    policy = run_metadata.policy
    entries = (
        ("run_start", run_metadata.run_start.isoformat()),
        ("input_path", str(run_metadata.input_path)),
        ("output_path", str(run_metadata.output_path)),
        ("registers", ", ".join(policy.registers)),
        ("keep_root_fields", ", ".join(sorted(policy.keep_root_field_names))),
        ("allow_prefixes", ", ".join(sorted(policy.allow_prefixes))),
        ("prune_foreign", policy.prune_foreign),
        ("validated", run_metadata.validated),
        ("input_bytes", run_metadata.input_bytes),
        ("output_bytes", run_metadata.output_bytes),
        ("kept_operations", ", ".join(result.kept_operations)),
        ("query_fields", result.root_field_counts.get("Query", 0)),
        ("mutation_fields", result.root_field_counts.get("Mutation", 0)),
        ("subscription_fields", result.root_field_counts.get("Subscription", 0)),
        ("selected_types", len(result.selected_type_names)),
        ("directives", result.directive_count),
        ("scalars", result.scalar_count),
        ("unmatched_registers", ", ".join(result.unmatched_registers)),
        ("dropped_unions", ", ".join(sorted(result.dropped_union_names))),
    )
    for row, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row, column=1, value=key)
        sheet.cell(row=row, column=2, value=value)


def _write_types_sheet(sheet: Worksheet, rows: Sequence[RetainedDefinition]) -> None:
    for column_index, header in enumerate(TYPES_COLUMNS, start=1):
        sheet.cell(row=1, column=column_index, value=header)
        sheet[f"{get_column_letter(column_index)}1"].style = "Headline 1"
    for row_index, row in enumerate(rows, start=2):
        sheet.cell(row=row_index, column=1, value=row.name)
        sheet.cell(row=row_index, column=2, value=row.kind)
        sheet.cell(row=row_index, column=3, value=row.register)
    sheet.column_dimensions["A"].width = max(
        12, min(max((len(row.name) for row in rows), default=0) + 4, 60)
    )
