"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_filter_settings, split_comma_list
from .runtime_settings import FilterSettings

__all__ = [
    "FilterSettings",
    "ConfigurationError",
    "load_filter_settings",
    "split_comma_list",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
