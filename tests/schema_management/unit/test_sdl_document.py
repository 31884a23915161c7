"""SDL parse, print and validation tests."""

from __future__ import annotations

from textwrap import dedent

import pytest
from sdl_register_filter.schema_management import (
    SchemaParseError,
    SchemaValidationError,
    parse_sdl,
    print_sdl,
    validate_sdl_document,
)


def test_parse_and_print_preserve_definitions_in_order() -> None:
    sdl = dedent(
        """
        scalar DafDateTime

        type Query {
          bygning(id: ID!): Bygning
        }

        type Bygning {
          id: ID!
          opdateret: DafDateTime
        }
        """
    )

    document = parse_sdl(sdl)
    printed = print_sdl(document)

    assert document.loc is None
    assert [definition.name.value for definition in document.definitions] == [
        "DafDateTime",
        "Query",
        "Bygning",
    ]
    assert printed.endswith("\n")
    assert printed.index("scalar DafDateTime") < printed.index("type Bygning")
    assert print_sdl(parse_sdl(printed)) == printed


def test_parse_rejects_invalid_sdl_with_clear_message() -> None:
    with pytest.raises(SchemaParseError, match="Invalid SDL"):
        parse_sdl("type Query { broken: }")


def test_validation_accepts_self_contained_document() -> None:
    validate_sdl_document(parse_sdl("type Query { version: String }"))


def test_validation_rejects_dangling_reference() -> None:
    document = parse_sdl("type Query { bygning: Bygning }")

    with pytest.raises(SchemaValidationError, match="Filtered schema is not valid"):
        validate_sdl_document(document)


def test_validation_rejects_document_that_does_not_print_as_valid_sdl() -> None:
    document = parse_sdl("type Query { version: String }\nextend type Query { extra: String }")
    extension = document.definitions[1]
    bare_extension = type(extension)(name=extension.name, directives=(), interfaces=(), fields=())
    broken = type(document)(definitions=(document.definitions[0], bare_extension))

    with pytest.raises(SchemaValidationError, match="Filtered schema is not valid"):
        validate_sdl_document(broken)
