"""CLI smoke tests."""

from click.testing import CliRunner
from sdl_register_filter.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    for command in ("filter", "generate-config", "domain-mappings", "simplify"):
        assert command in result.output


def test_filter_help_lists_selection_options() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["filter", "--help"])

    assert result.exit_code == 0
    for option in (
        "--registers",
        "--input",
        "--output",
        "--keep-root-fields",
        "--no-prune-foreign",
        "--allow-prefixes",
        "--no-validate",
        "--report",
        "--config",
    ):
        assert option in result.output
