"""Boundary tests for the filtering core's dependencies."""

from __future__ import annotations

from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def test_filtering_core_does_not_import_io_or_cli_layers() -> None:
    package_dir = _project_root() / "src" / "sdl_register_filter"
    core_modules = [
        *sorted((package_dir / "selection_policy").glob("*.py")),
        *sorted((package_dir / "pruning").glob("*.py")),
        *sorted((package_dir / "closure").glob("*.py")),
        *sorted((package_dir / "document_assembly").glob("*.py")),
    ]
    forbidden_import_fragments = (
        "import click",
        "import yaml",
        "import openpyxl",
        "from openpyxl",
        "sdl_register_filter.cli",
        "sdl_register_filter.configuration",
        "sdl_register_filter.run_execution",
        "sdl_register_filter.results_writing",
    )

    assert core_modules
    for module_path in core_modules:
        text = module_path.read_text(encoding="utf-8")
        for fragment in forbidden_import_fragments:
            assert fragment not in text, f"Forbidden core dependency in {module_path}: {fragment}"
