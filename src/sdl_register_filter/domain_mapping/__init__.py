"""Domain mapping exports."""

from .domain_prefixes import DEFAULT_DOMAIN_PREFIXES
from .mapping_builder import (
    DomainMappingError,
    DomainMappingFiles,
    build_domain_mappings,
    domain_statistics,
    load_domain_mappings,
    parse_domain_prefixes,
    write_domain_mappings,
)

__all__ = [
    "DEFAULT_DOMAIN_PREFIXES",
    "DomainMappingError",
    "DomainMappingFiles",
    "build_domain_mappings",
    "domain_statistics",
    "load_domain_mappings",
    "parse_domain_prefixes",
    "write_domain_mappings",
]
