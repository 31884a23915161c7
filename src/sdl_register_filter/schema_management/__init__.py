"""Schema management exports."""

from .definition_index import DefinitionIndex, build_definition_index, definition_name
from .sdl_document import (
    SchemaParseError,
    SchemaValidationError,
    parse_sdl,
    print_sdl,
    validate_sdl_document,
)
from .type_references import collect_references, named_type_of

__all__ = [
    "DefinitionIndex",
    "SchemaParseError",
    "SchemaValidationError",
    "build_definition_index",
    "collect_references",
    "definition_name",
    "named_type_of",
    "parse_sdl",
    "print_sdl",
    "validate_sdl_document",
]
