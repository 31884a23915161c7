"""Rules deciding how field types collapse in the visualization schema."""

from __future__ import annotations

from sdl_register_filter.selection_policy.policy_models import BUILTIN_SCALARS

GENERIC_LEAF_TYPE = "String"
CONNECTION_SUFFIX = "Connection"
INFRASTRUCTURE_SUFFIXES: tuple[str, ...] = ("Connection", "Edge", "FilterInput", "SortInput")
SKIPPED_FIELD_PREFIXES: tuple[str, ...] = ("datafordeler",)
SKIPPED_FIELD_NAMES: frozenset[str] = frozenset({"id_namespace"})

# Spatial geometries plus date, uuid and long scalars.
LEAF_TYPE_NAMES: frozenset[str] = frozenset(
    {
        "SpatialInterfaceType",
        "SpatialLineStringEpsg25832Type",
        "SpatialLineStringZEpsg25832Type",
        "SpatialMultiLineStringEpsg25832Type",
        "SpatialMultiLineStringZEpsg25832Type",
        "SpatialMultiPointEpsg25832Type",
        "SpatialMultiPointZEpsg25832Type",
        "SpatialMultiPolygonEpsg25832Type",
        "SpatialPointEpsg25832Type",
        "SpatialPointEpsg4326Type",
        "SpatialPointZEpsg25832Type",
        "SpatialPointZEpsg4326Type",
        "SpatialPolygonEpsg25832Type",
        "SpatialPolygonEpsg4326Type",
        "SpatialPolygonZEpsg25832Type",
        "DafDateTime",
        "LocalDate",
        "UUID",
        "Long",
    }
)


def is_infrastructure_type(type_name: str) -> bool:
    """Pagination, filter and sort helpers are not domain entities."""
    return type_name.endswith(INFRASTRUCTURE_SUFFIXES)


def entity_of_connection(type_name: str) -> str | None:
    """`BBR_BygningConnection` -> `BBR_Bygning`."""
    if type_name.endswith(CONNECTION_SUFFIX) and len(type_name) > len(CONNECTION_SUFFIX):
        return type_name[: -len(CONNECTION_SUFFIX)]
    return None


def is_leaf_type(type_name: str) -> bool:
    return type_name in LEAF_TYPE_NAMES or type_name.startswith("Spatial")


def is_skipped_field(field_name: str, type_name: str | None) -> bool:
    """Metadata fields and filter-input typed fields are left out of the visualization."""
    if field_name.startswith(SKIPPED_FIELD_PREFIXES) or field_name in SKIPPED_FIELD_NAMES:
        return True
    return type_name is not None and type_name.endswith("FilterInput")


def is_builtin_scalar(type_name: str) -> bool:
    return type_name in BUILTIN_SCALARS
