"""Default type-name prefix to domain table."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

# EJF types appear both with and without the separator.
DEFAULT_DOMAIN_PREFIXES: Mapping[str, str] = MappingProxyType(
    {
        "BBR_": "BBR",
        "CPR_": "CPR",
        "CVR_": "CVR",
        "DAGI_": "DAGI",
        "DAR_": "DAR",
        "DHMHoejdekurver_": "DHMHoejdekurver",
        "DHMOprindelse_": "DHMOprindelse",
        "DS_": "DS",
        "EBR_": "EBR",
        "EJF_": "EJF",
        "EJF": "EJF",
        "FIKSPUNKT_": "FIKSPUNKT",
        "GEODKV_": "GEODKV",
        "HISTKORT_": "HISTKORT",
        "MAT_": "MAT",
        "SVR_": "SVR",
        "VUR_": "VUR",
    }
)
