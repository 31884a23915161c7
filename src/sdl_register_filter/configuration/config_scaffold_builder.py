"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "filter-config.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Filter configuration template for sdl-register-filter.
# Replace every <REQUIRED> placeholder before running `sdl-register-filter filter --config`.
# Remove <OPTIONAL> entries you do not need. Command-line options override these values.
# Relative paths are resolved against the directory of this file.

# Register prefixes to keep; a type belongs to a register when its name starts with "<REGISTER>_".
registers:
  - "<REQUIRED>"

input: "<REQUIRED>"
output: "<REQUIRED>"

# Root fields (Query/Mutation/Subscription) to keep regardless of register.
keep_root_fields:
  - "<OPTIONAL>"

# Additional underscore-prefixes whose types may be referenced without being selected.
allow_prefixes:
  - "<OPTIONAL>"

# Drop fields, arguments, interfaces and union members that point into other registers.
prune_foreign: true

# Rebuild the filtered schema before writing it to make sure it is valid.
validate: true

# Optional path of an .xlsx summary of the run.
# report: "<OPTIONAL>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML filter configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder filter configuration to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Filter configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
