"""Selection policy exports."""

from .policy_models import (
    BUILTIN_SCALARS,
    REGISTER_SEPARATOR,
    ROOT_TYPE_NAMES,
    SelectionPolicy,
    is_root_type_name,
    underscore_prefix,
)
from .register_presence import RegisterPresence, find_unmatched_registers, measure_register_presence

__all__ = [
    "BUILTIN_SCALARS",
    "REGISTER_SEPARATOR",
    "ROOT_TYPE_NAMES",
    "RegisterPresence",
    "SelectionPolicy",
    "find_unmatched_registers",
    "is_root_type_name",
    "measure_register_presence",
    "underscore_prefix",
]
