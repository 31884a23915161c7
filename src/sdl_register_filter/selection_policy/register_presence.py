"""Register presence diagnostics."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sdl_register_filter.schema_management.definition_index import DefinitionIndex
from sdl_register_filter.schema_management.type_references import named_type_of

from .policy_models import REGISTER_SEPARATOR, ROOT_TYPE_NAMES, SelectionPolicy

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegisterPresence:
    """How often one register shows up in the input document."""

    register: str
    type_definitions: int
    root_fields: int

    @property
    def is_missing(self) -> bool:
        """Return True when neither types nor root fields carry the register prefix."""
        return self.type_definitions == 0 and self.root_fields == 0


def measure_register_presence(
    index: DefinitionIndex, policy: SelectionPolicy
) -> tuple[RegisterPresence, ...]:
    """Count type definitions and root fields per selected register."""
    results = []
    for register in policy.registers:
        prefix = f"{register}{REGISTER_SEPARATOR}"
        type_definitions = sum(1 for name in index.type_names if name.startswith(prefix))
        root_fields = 0
        for root_name in ROOT_TYPE_NAMES:
            for definition in index.lookup(root_name):
                for field in getattr(definition, "fields", None) or ():
                    return_type = named_type_of(field.type) or ""
                    if field.name.value.startswith(prefix) or return_type.startswith(prefix):
                        root_fields += 1
        results.append(
            RegisterPresence(
                register=register,
                type_definitions=type_definitions,
                root_fields=root_fields,
            )
        )
    return tuple(results)


def find_unmatched_registers(index: DefinitionIndex, policy: SelectionPolicy) -> tuple[str, ...]:
    """Return selected registers absent from the document and warn about them."""
    missing = tuple(
        presence.register
        for presence in measure_register_presence(index, policy)
        if presence.is_missing
    )
    if missing:
        _LOGGER.warning(
            "No types or root fields found for register(s): %s. "
            "They may not exist in this input schema.",
            ", ".join(missing),
        )
    return missing
