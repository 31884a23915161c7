"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from sdl_register_filter.configuration import (
    DEFAULT_CONFIG_FILENAME,
    split_comma_list,
    write_placeholder_configuration,
)
from sdl_register_filter.domain_mapping import (
    DEFAULT_DOMAIN_PREFIXES,
    DomainMappingError,
    build_domain_mappings,
    domain_statistics,
    load_domain_mappings,
    parse_domain_prefixes,
    write_domain_mappings,
)
from sdl_register_filter.run_execution import (
    FilterRequest,
    RunExecutionError,
    execute_schema_filter_run,
)
from sdl_register_filter.schema_management import SchemaParseError, parse_sdl, print_sdl
from sdl_register_filter.visual_simplification import (
    simplify_for_visualization,
    summarize_relationships,
)

_PACKAGE_LOGGER_NAME = "sdl_register_filter"


class CliError(Exception):
    """Custom CLI error."""


class _ClickEchoHandler(logging.Handler):
    """Routes log records to stderr through click so test runners can capture them."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:  # pylint: disable=broad-exception-caught
            self.handleError(record)


def _configure_logging(verbose: bool) -> None:
    logger = logging.getLogger(_PACKAGE_LOGGER_NAME)
    logger.setLevel(logging.INFO if verbose else logging.WARNING)
    if not any(isinstance(handler, _ClickEchoHandler) for handler in logger.handlers):
        handler = _ClickEchoHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        logger.addHandler(handler)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="sdl-register-filter")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log progress details.")
def cli(verbose: bool) -> None:
    """Reduce a federated GraphQL SDL schema to selected registers."""
    _configure_logging(verbose)


@cli.command(name="filter")
@click.option(
    "-r",
    "--registers",
    "registers",
    required=False,
    help="Comma-separated register prefixes (e.g. BBR,CVR,DAR)",
)
@click.option(
    "-i",
    "--input",
    "input_path",
    required=False,
    type=click.Path(path_type=str),
    help="Input schema SDL file",
)
@click.option(
    "-o",
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Output filtered SDL file",
)
@click.option(
    "--keep-root-fields",
    "keep_root_fields",
    required=False,
    help="Comma-separated root fields to always keep (in Query/Mutation/Subscription)",
)
@click.option(
    "--no-prune-foreign",
    "no_prune_foreign",
    is_flag=True,
    default=False,
    help="Keep cross-register fields and types (larger output).",
)
@click.option(
    "--allow-prefixes",
    "allow_prefixes",
    required=False,
    help="Comma-separated underscore-prefixes to allow even if not selected (e.g. MAT,EJF)",
)
@click.option(
    "--no-validate",
    "no_validate",
    is_flag=True,
    default=False,
    help="Skip building the schema to validate output.",
)
@click.option(
    "--report",
    "report_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional path of an .xlsx run summary",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="YAML/JSON filter configuration; command-line options take precedence",
)
# pylint: disable-next=too-many-arguments
def filter_schema(
    registers: str | None,
    input_path: str | None,
    output_path: str | None,
    keep_root_fields: str | None,
    no_prune_foreign: bool,
    allow_prefixes: str | None,
    no_validate: bool,
    report_path: str | None,
    config_path: str | None,
) -> None:
    """Filter a schema down to the selected registers and their dependencies."""
    request = FilterRequest(
        config_path=config_path,
        registers=split_comma_list(registers) or None,
        input_path=input_path,
        output_path=output_path,
        keep_root_fields=split_comma_list(keep_root_fields) or None,
        allow_prefixes=split_comma_list(allow_prefixes) or None,
        prune_foreign=False if no_prune_foreign else None,
        validate=False if no_validate else None,
        report_path=report_path,
    )
    try:
        outcome = execute_schema_filter_run(request)
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(outcome.output_path))
    if outcome.report_path is not None:
        click.echo(str(outcome.report_path))


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML filter configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML filter configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="domain-mappings")
@click.option(
    "-i",
    "--input",
    "input_path",
    required=True,
    type=click.Path(path_type=str),
    help="Schema SDL file to classify",
)
@click.option(
    "--output-dir",
    "output_dir",
    required=False,
    default=".",
    show_default=True,
    type=click.Path(path_type=str),
    help="Directory receiving the .json and .txt mapping files",
)
@click.option(
    "--prefix",
    "prefixes",
    multiple=True,
    help="PREFIX=DOMAIN declaration; repeat to replace the built-in register table",
)
def generate_domain_mappings(input_path: str, output_dir: str, prefixes: tuple[str, ...]) -> None:
    """Derive a type-to-domain mapping from type name prefixes."""
    source = Path(input_path)
    try:
        domain_prefixes = parse_domain_prefixes(prefixes) if prefixes else DEFAULT_DOMAIN_PREFIXES
        document = parse_sdl(_read_text(source))
        mappings = build_domain_mappings(document, domain_prefixes)
        written = write_domain_mappings(mappings, output_dir, source.stem)
    except (DomainMappingError, SchemaParseError, OSError) as exc:
        raise CliError(str(exc)) from exc

    for domain, count in domain_statistics(mappings):
        click.echo(f"{domain}: {count} types")
    click.echo(f"Total: {len(mappings)} types")
    click.echo(str(written.json_path))
    click.echo(str(written.text_path))


@cli.command(name="simplify")
@click.option(
    "-i",
    "--input",
    "input_path",
    required=True,
    type=click.Path(path_type=str),
    help="Input schema SDL file",
)
@click.option(
    "-o",
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Output simplified SDL file",
)
@click.option(
    "-m",
    "--mappings",
    "mappings_path",
    required=True,
    type=click.Path(path_type=str),
    help="Domain mappings JSON file",
)
def simplify(input_path: str, output_path: str, mappings_path: str) -> None:
    """Create a minimal entity-and-relationship schema for visualization."""
    try:
        mappings = load_domain_mappings(mappings_path)
        document = parse_sdl(_read_text(Path(input_path)))
        result = simplify_for_visualization(document, mappings)
        destination = Path(output_path)
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(print_sdl(result.document), encoding="utf-8")
    except (DomainMappingError, SchemaParseError, OSError) as exc:
        raise CliError(str(exc)) from exc

    for pair, count in summarize_relationships(result.relationships, mappings):
        click.echo(f"{pair}: {count} relationships")
    click.echo(str(destination.resolve()))


def _read_text(path: Path) -> str:
    if not path.exists():
        raise FileNotFoundError(f"Input schema file not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise CliError(f"Input schema file is not valid UTF-8: {path}: {exc}") from exc


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
