"""Selection policy entities."""

from __future__ import annotations

from dataclasses import dataclass, field

BUILTIN_SCALARS: frozenset[str] = frozenset({"String", "Int", "Float", "Boolean", "ID"})
ROOT_TYPE_NAMES: tuple[str, ...] = ("Query", "Mutation", "Subscription")
REGISTER_SEPARATOR = "_"


def is_root_type_name(name: str) -> bool:
    """Return True for the three root operation type names."""
    return name in ROOT_TYPE_NAMES


def underscore_prefix(name: str) -> str | None:
    """Return the text before the first separator, or None when there is no prefix."""
    index = name.find(REGISTER_SEPARATOR)
    if index <= 0:
        return None
    return name[:index]


@dataclass(frozen=True)
class SelectionPolicy:
    """Which registers to keep and how strictly to cut references to the rest."""

    registers: tuple[str, ...]
    keep_root_field_names: frozenset[str] = field(default_factory=frozenset)
    allow_prefixes: frozenset[str] = field(default_factory=frozenset)
    prune_foreign: bool = True

    def matches_register(self, name: str) -> bool:
        """Return True when the name starts with `<register>_` for a selected register."""
        return self.register_of(name) is not None

    def register_of(self, name: str) -> str | None:
        """Return the selected register whose prefix the name carries, if any."""
        for register in self.registers:
            if name.startswith(f"{register}{REGISTER_SEPARATOR}"):
                return register
        return None

    def is_root_field_kept(self, name: str) -> bool:
        """Root field (or its return type) belongs to a register or is explicitly kept."""
        return self.matches_register(name) or name in self.keep_root_field_names

    def is_type_allowed(self, name: str) -> bool:
        """Return True when a reference to `name` may survive foreign pruning."""
        if name in BUILTIN_SCALARS or is_root_type_name(name):
            return True
        prefix = underscore_prefix(name)
        if prefix is None:
            return True
        if prefix in self.allow_prefixes:
            return True
        return prefix in self.registers
