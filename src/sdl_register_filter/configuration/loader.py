"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from sdl_register_filter.selection_policy.policy_models import SelectionPolicy

from .runtime_settings import FilterSettings

_PATH_KEYS = ("input", "output", "report")
_KNOWN_KEYS = frozenset(
    {
        "registers",
        "input",
        "output",
        "keep_root_fields",
        "allow_prefixes",
        "prune_foreign",
        "validate",
        "report",
    }
)


class ConfigurationError(Exception):
    """Raised when the filter settings are missing or invalid."""


def load_filter_settings(
    config_path: Path | str | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> FilterSettings:
    """Merge an optional YAML/JSON configuration file with command-line overrides.

    Values in `overrides` win over the file; `None` overrides are ignored.
    Relative paths from the file are resolved against the file's directory.
    """
    file_values: dict[str, Any] = {}
    resolved_config_path: Path | None = None
    if config_path is not None:
        resolved_config_path = Path(config_path)
        file_values = _read_configuration_file(resolved_config_path)

    values = dict(file_values)
    values.update({key: value for key, value in (overrides or {}).items() if value is not None})

    registers = _normalize_name_list(values.get("registers"), "registers")
    if not registers:
        raise ConfigurationError("At least one register prefix is required (--registers).")
    input_path = _require_path(values.get("input"), "input")
    output_path = _require_path(values.get("output"), "output")
    report_path = _optional_path(values.get("report"), "report")

    policy = SelectionPolicy(
        registers=registers,
        keep_root_field_names=frozenset(
            _normalize_name_list(values.get("keep_root_fields"), "keep_root_fields")
        ),
        allow_prefixes=frozenset(
            _normalize_name_list(values.get("allow_prefixes"), "allow_prefixes")
        ),
        prune_foreign=_optional_bool(values.get("prune_foreign"), "prune_foreign", default=True),
    )
    return FilterSettings(
        input_path=input_path,
        output_path=output_path,
        policy=policy,
        validate=_optional_bool(values.get("validate"), "validate", default=True),
        report_path=report_path,
        config_path=resolved_config_path,
    )


def split_comma_list(value: str | None) -> tuple[str, ...]:
    """Split a comma-separated option value, dropping blanks."""
    if not value:
        return ()
    return tuple(item.strip() for item in value.split(",") if item.strip())


def _read_configuration_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}
    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    unknown = sorted(str(key) for key in parsed if key not in _KNOWN_KEYS)
    if unknown:
        raise ConfigurationError(f"Unknown configuration key(s): {', '.join(unknown)}")

    values = dict(parsed)
    for key in _PATH_KEYS:
        raw = values.get(key)
        if raw is None:
            continue
        if not isinstance(raw, str) or not raw.strip():
            raise ConfigurationError(f"{key} must be a non-empty string.")
        values[key] = _resolve_path(path.parent, raw.strip())
    return values


def _normalize_name_list(value: Any, field_name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        items: Sequence[Any] = split_comma_list(value)
    elif isinstance(value, Sequence):
        items = value
    else:
        raise ConfigurationError(f"{field_name} must be a string or list of strings.")

    normalized: list[str] = []
    for item in items:
        if not isinstance(item, str):
            raise ConfigurationError(f"{field_name} entries must be strings.")
        stripped = item.strip()
        if stripped and stripped not in normalized:
            normalized.append(stripped)
    return tuple(normalized)


def _require_path(value: Any, field_name: str) -> Path:
    path = _optional_path(value, field_name)
    if path is None:
        raise ConfigurationError(f"An {field_name} path is required (--{field_name}).")
    return path


def _optional_path(value: Any, field_name: str) -> Path | None:
    if value is None:
        return None
    if isinstance(value, Path):
        return value
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return Path(stripped) if stripped else None


def _optional_bool(value: Any, field_name: str, *, default: bool) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be true or false.")
    return value


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate
