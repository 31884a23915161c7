"""CLI orchestration integration tests."""

from __future__ import annotations

import json
import shutil
from pathlib import Path

from click.testing import CliRunner
from openpyxl import load_workbook
from sdl_register_filter.cli import cli, main
from sdl_register_filter.schema_management import definition_name, parse_sdl


def _copy_sample(tmp_path: Path) -> Path:
    sample_path = (
        Path(__file__).resolve().parents[3] / "samples" / "sample-federation.schema.graphql"
    )
    destination = tmp_path / "FLEXCURRENT.schema.graphql"
    shutil.copyfile(sample_path, destination)
    return destination


def _type_names(path: Path) -> set[str]:
    document = parse_sdl(path.read_text(encoding="utf-8"))
    return {
        name
        for name in (definition_name(definition) for definition in document.definitions)
        if name is not None
    }


def test_filter_command_writes_filtered_schema_and_report(tmp_path: Path) -> None:
    runner = CliRunner()
    input_path = _copy_sample(tmp_path)
    output_path = tmp_path / "schema" / "FLEXCURRENT_BBR_DAR.graphql"
    report_path = tmp_path / "run.xlsx"

    result = runner.invoke(
        cli,
        [
            "filter",
            "-r",
            "BBR,DAR",
            "-i",
            str(input_path),
            "-o",
            str(output_path),
            "--report",
            str(report_path),
        ],
    )

    assert result.exit_code == 0, result.output
    assert str(output_path.resolve()) in result.output
    assert str(report_path.resolve()) in result.output
    names = _type_names(output_path)
    assert {"BBR_Bygning", "DAR_Adresse", "Adresse", "Omraade"} <= names
    assert not any(name.startswith(("CVR_", "CPR_")) for name in names)
    assert "BBR_Ejer" not in names
    assert load_workbook(report_path).sheetnames == ["RunInfo", "Types"]


def test_filter_command_without_pruning_and_with_kept_root_field(tmp_path: Path) -> None:
    runner = CliRunner()
    input_path = _copy_sample(tmp_path)
    output_path = tmp_path / "bbr.graphql"

    result = runner.invoke(
        cli,
        [
            "filter",
            "-r",
            "BBR",
            "-i",
            str(input_path),
            "-o",
            str(output_path),
            "--no-prune-foreign",
            "--keep-root-fields",
            "version",
            "--no-validate",
        ],
    )

    assert result.exit_code == 0, result.output
    text = output_path.read_text(encoding="utf-8")
    assert "version: String" in text
    assert "type CVR_Virksomhed" in text


def test_filter_command_uses_configuration_file(tmp_path: Path) -> None:
    runner = CliRunner()
    _copy_sample(tmp_path)
    config_path = tmp_path / "filter-config.yaml"
    config_path.write_text(
        "\n".join(
            [
                "registers: [CVR]",
                "input: FLEXCURRENT.schema.graphql",
                "output: out/cvr.graphql",
                "allow_prefixes: [DAR]",
            ]
        ),
        encoding="utf-8",
    )

    result = runner.invoke(cli, ["filter", "--config", str(config_path), "-r", "BBR"])

    assert result.exit_code == 0, result.output
    names = _type_names(tmp_path / "out" / "cvr.graphql")
    assert "BBR_Bygning" in names
    assert "CVR_Virksomhed" not in names


def test_verbose_flag_logs_progress(tmp_path: Path, capsys) -> None:
    input_path = _copy_sample(tmp_path)

    exit_code = main(
        ["-v", "filter", "-r", "BBR", "-i", str(input_path), "-o", str(tmp_path / "bbr.graphql")]
    )
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "INFO: Registers: BBR" in captured.err
    assert "INFO: Selected named types" in captured.err
    assert "Valid SDL" in captured.err


def test_unmatched_register_warns_and_fails(tmp_path: Path, capsys) -> None:
    input_path = _copy_sample(tmp_path)
    output_path = tmp_path / "xyz.graphql"

    exit_code = main(["filter", "-r", "XYZ", "-i", str(input_path), "-o", str(output_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "WARNING: No types or root fields found for register(s): XYZ" in captured.err
    assert "Query has 0 fields" in captured.err
    assert not output_path.exists()


def test_generate_config_command_writes_template(tmp_path: Path) -> None:
    runner = CliRunner()
    output_path = tmp_path / "filter-config.yaml"

    result = runner.invoke(cli, ["generate-config", "--output", str(output_path)])

    assert result.exit_code == 0
    assert str(output_path.resolve()) in result.output
    assert "<REQUIRED>" in output_path.read_text(encoding="utf-8")


def test_domain_mappings_then_simplify(tmp_path: Path) -> None:
    runner = CliRunner()
    input_path = _copy_sample(tmp_path)
    mappings_dir = tmp_path / "mappings"

    mapping_result = runner.invoke(
        cli, ["domain-mappings", "-i", str(input_path), "--output-dir", str(mappings_dir)]
    )

    assert mapping_result.exit_code == 0, mapping_result.output
    assert "BBR: 4 types" in mapping_result.output
    assert "Total: 10 types" in mapping_result.output
    json_path = mappings_dir / "FLEXCURRENT.schema-domain-mappings.json"
    assert json.loads(json_path.read_text(encoding="utf-8"))["DAR_Adresse"] == "DAR"

    output_path = tmp_path / "visual.graphql"
    simplify_result = runner.invoke(
        cli, ["simplify", "-i", str(input_path), "-o", str(output_path), "-m", str(json_path)]
    )

    assert simplify_result.exit_code == 0, simplify_result.output
    assert "BBR -> BBR: 2 relationships" in simplify_result.output
    assert '"Domain: DAR"' in output_path.read_text(encoding="utf-8")


def test_domain_mappings_with_custom_prefixes(tmp_path: Path) -> None:
    runner = CliRunner()
    input_path = _copy_sample(tmp_path)

    result = runner.invoke(
        cli,
        [
            "domain-mappings",
            "-i",
            str(input_path),
            "--output-dir",
            str(tmp_path),
            "--prefix",
            "BBR_=Bygninger",
        ],
    )

    assert result.exit_code == 0, result.output
    assert "Bygninger: 4 types" in result.output
    assert "Total: 4 types" in result.output
