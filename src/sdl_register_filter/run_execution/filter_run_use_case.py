"""Filter run use-case service."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

from sdl_register_filter.configuration import (
    ConfigurationError,
    FilterSettings,
    load_filter_settings,
)
from sdl_register_filter.document_assembly import (
    AssemblyResult,
    EmptyResultError,
    assemble_document,
)
from sdl_register_filter.results_writing import FilterRunMetadata, write_filter_report
from sdl_register_filter.schema_management import (
    SchemaParseError,
    SchemaValidationError,
    parse_sdl,
    print_sdl,
    validate_sdl_document,
)

from .run_contracts import FilterOutcome, FilterRequest

_LOGGER = logging.getLogger(__name__)


class RunExecutionError(Exception):
    """Raised when a filter run cannot be completed."""


def execute_schema_filter_run(request: FilterRequest) -> FilterOutcome:
    """Filter one SDL file down to the requested registers and write the result.

    The output is validated (when enabled) before anything is written, so a
    failed run never leaves a partial or invalid output file behind.
    """
    settings = _load_settings(request)
    _log_settings(settings)
    run_start = datetime.now(UTC)

    sdl_text = _read_input_schema(settings.input_path)
    _LOGGER.info("Read %.2f MB", len(sdl_text) / 1024 / 1024)
    result, output_text = _filter_schema(sdl_text, settings)

    _write_output_schema(settings.output_path, output_text)
    _LOGGER.info("Wrote %.2f MB", len(output_text) / 1024 / 1024)

    report_path = None
    if settings.report_path is not None:
        report_path = _write_report(
            settings,
            result,
            FilterRunMetadata(
                run_start=run_start,
                input_path=settings.input_path.resolve(),
                output_path=settings.output_path.resolve(),
                policy=settings.policy,
                validated=settings.validate,
                input_bytes=len(sdl_text.encode("utf-8")),
                output_bytes=len(output_text.encode("utf-8")),
            ),
        )

    return FilterOutcome(
        output_path=settings.output_path.resolve(),
        selected_type_count=len(result.selected_type_names),
        kept_operations=result.kept_operations,
        unmatched_registers=result.unmatched_registers,
        validated=settings.validate,
        report_path=report_path,
    )


def _load_settings(request: FilterRequest) -> FilterSettings:
    overrides = {
        "registers": request.registers,
        "input": request.input_path,
        "output": request.output_path,
        "keep_root_fields": request.keep_root_fields,
        "allow_prefixes": request.allow_prefixes,
        "prune_foreign": request.prune_foreign,
        "validate": request.validate,
        "report": request.report_path,
    }
    try:
        return load_filter_settings(request.config_path, overrides)
    except ConfigurationError as exc:
        raise RunExecutionError(str(exc)) from exc


def _log_settings(settings: FilterSettings) -> None:
    policy = settings.policy
    _LOGGER.info("Registers: %s", ", ".join(policy.registers))
    _LOGGER.info("Input:     %s", settings.input_path.resolve())
    _LOGGER.info("Output:    %s", settings.output_path.resolve())
    _LOGGER.info("Validate:  %s", "yes" if settings.validate else "no")
    _LOGGER.info("Prune foreign: %s", "yes" if policy.prune_foreign else "no")
    if policy.allow_prefixes:
        _LOGGER.info("Allow prefixes: %s", ", ".join(sorted(policy.allow_prefixes)))
    if policy.keep_root_field_names:
        _LOGGER.info("Keep root fields: %s", ", ".join(sorted(policy.keep_root_field_names)))


def _read_input_schema(input_path: Path) -> str:
    if not input_path.exists():
        raise RunExecutionError(f"Input schema file not found: {input_path}")
    try:
        return input_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise RunExecutionError(f"Failed to read input schema {input_path}: {exc}") from exc


def _filter_schema(sdl_text: str, settings: FilterSettings) -> tuple[AssemblyResult, str]:
    try:
        _LOGGER.info("Parsing SDL to AST...")
        document = parse_sdl(sdl_text)
        result = assemble_document(document, settings.policy)
        if settings.validate:
            _LOGGER.info("Validating by building schema...")
            validate_sdl_document(result.document)
            _LOGGER.info("Valid SDL")
        else:
            _LOGGER.info("Skipped validation.")
    except (SchemaParseError, EmptyResultError, SchemaValidationError) as exc:
        raise RunExecutionError(str(exc)) from exc
    return result, print_sdl(result.document)


def _write_output_schema(output_path: Path, output_text: str) -> None:
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(output_text, encoding="utf-8")
    except OSError as exc:
        raise RunExecutionError(f"Failed to write output schema {output_path}: {exc}") from exc


def _write_report(
    settings: FilterSettings, result: AssemblyResult, run_metadata: FilterRunMetadata
) -> Path:
    assert settings.report_path is not None
    try:
        return write_filter_report(settings.report_path, result, run_metadata)
    except OSError as exc:
        raise RunExecutionError(f"Failed to write report {settings.report_path}: {exc}") from exc
