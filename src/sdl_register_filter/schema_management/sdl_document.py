"""SDL parsing, printing and validation service."""

from __future__ import annotations

from graphql import DocumentNode, GraphQLError, build_ast_schema, parse, print_ast


class SchemaParseError(Exception):
    """Raised when the input text is not syntactically valid SDL."""


class SchemaValidationError(Exception):
    """Raised when a filtered document cannot be rebuilt into a schema."""


def parse_sdl(text: str) -> DocumentNode:
    """Parse SDL text into a location-free document."""
    try:
        return parse(text, no_location=True)
    except GraphQLError as exc:
        raise SchemaParseError(f"Invalid SDL: {exc.message}") from exc


def print_sdl(document: DocumentNode) -> str:
    """Render a document back to SDL text terminated by a newline."""
    return print_ast(document) + "\n"


def validate_sdl_document(document: DocumentNode) -> None:
    """Re-parse the printed document, build a schema from it and surface any error."""
    try:
        build_ast_schema(parse(print_sdl(document), no_location=True))
    except (GraphQLError, TypeError) as exc:
        raise SchemaValidationError(f"Filtered schema is not valid: {exc}") from exc
