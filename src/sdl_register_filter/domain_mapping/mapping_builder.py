"""Type-to-domain mapping generation service."""

from __future__ import annotations

import json
from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path

from graphql import DocumentNode, ObjectTypeDefinitionNode, ObjectTypeExtensionNode

from .domain_prefixes import DEFAULT_DOMAIN_PREFIXES


class DomainMappingError(Exception):
    """Raised for unreadable mapping files or malformed prefix declarations."""


@dataclass(frozen=True)
class DomainMappingFiles:
    """Paths written by one mapping export."""

    json_path: Path
    text_path: Path


def build_domain_mappings(
    document: DocumentNode,
    domain_prefixes: Mapping[str, str] = DEFAULT_DOMAIN_PREFIXES,
) -> dict[str, str]:
    """Map every object type name to a domain by its longest matching prefix.

    Types without a matching prefix are left out. The result is sorted by type name.
    """
    prefixes = sorted(domain_prefixes, key=len, reverse=True)
    mappings: dict[str, str] = {}
    for definition in document.definitions:
        if not isinstance(definition, (ObjectTypeDefinitionNode, ObjectTypeExtensionNode)):
            continue
        type_name = definition.name.value
        for prefix in prefixes:
            if type_name.startswith(prefix):
                mappings[type_name] = domain_prefixes[prefix]
                break
    return dict(sorted(mappings.items()))


def domain_statistics(mappings: Mapping[str, str]) -> list[tuple[str, int]]:
    """Count mapped types per domain, largest domain first."""
    counts = Counter(mappings.values())
    return sorted(counts.items(), key=lambda item: (-item[1], item[0]))


def parse_domain_prefixes(declarations: Iterable[str]) -> dict[str, str]:
    """Parse `PREFIX=DOMAIN` declarations into a prefix table."""
    table: dict[str, str] = {}
    for declaration in declarations:
        prefix, separator, domain = declaration.partition("=")
        if not separator or not prefix.strip() or not domain.strip():
            raise DomainMappingError(
                f"Domain prefix must look like PREFIX=DOMAIN, got: {declaration!r}"
            )
        table[prefix.strip()] = domain.strip()
    return table


def write_domain_mappings(
    mappings: Mapping[str, str], output_dir: Path | str, stem: str
) -> DomainMappingFiles:
    """Write `<stem>-domain-mappings.json` and `<stem>-domain-mappings.txt`."""
    directory = Path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)
    json_path = directory / f"{stem}-domain-mappings.json"
    text_path = directory / f"{stem}-domain-mappings.txt"
    text_path.write_text(
        "\n".join(f"{type_name}: {domain}" for type_name, domain in mappings.items()),
        encoding="utf-8",
    )
    json_path.write_text(json.dumps(dict(mappings), indent=2), encoding="utf-8")
    return DomainMappingFiles(json_path=json_path.resolve(), text_path=text_path.resolve())


def load_domain_mappings(path: Path | str) -> dict[str, str]:
    """Read a JSON mapping file produced by `write_domain_mappings`."""
    mapping_path = Path(path)
    if not mapping_path.exists():
        raise DomainMappingError(f"Domain mappings file not found: {mapping_path}")
    try:
        parsed = json.loads(mapping_path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DomainMappingError(f"Invalid domain mappings file {mapping_path}: {exc}") from exc
    if not isinstance(parsed, Mapping):
        raise DomainMappingError("Domain mappings root must be an object.")
    for type_name, domain in parsed.items():
        if not isinstance(domain, str):
            raise DomainMappingError(f"Domain for {type_name} must be a string.")
    return dict(parsed)
