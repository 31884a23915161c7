"""Selection policy predicate tests."""

from __future__ import annotations

import pytest
from sdl_register_filter.selection_policy import (
    SelectionPolicy,
    is_root_type_name,
    underscore_prefix,
)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("BBR_Bygning", "BBR"),
        ("DAR_Adresse_Historik", "DAR"),
        ("PageInfo", None),
        ("_Service", None),
        ("String", None),
    ],
)
def test_underscore_prefix_reads_text_before_first_separator(name: str, expected) -> None:
    assert underscore_prefix(name) == expected


def test_root_type_names_are_fixed() -> None:
    assert is_root_type_name("Query")
    assert is_root_type_name("Subscription")
    assert not is_root_type_name("query")
    assert not is_root_type_name("BBR_Query")


def test_register_match_requires_separator_after_prefix() -> None:
    policy = SelectionPolicy(registers=("BBR", "CVR"))

    assert policy.matches_register("BBR_Bygning")
    assert policy.matches_register("CVR_Virksomhed")
    assert not policy.matches_register("BBRBygning")
    assert not policy.matches_register("bbr_bygning")
    assert not policy.matches_register("DAR_Adresse")
    assert policy.register_of("CVR_Virksomhed") == "CVR"
    assert policy.register_of("PageInfo") is None


def test_root_field_kept_by_register_or_explicit_name() -> None:
    policy = SelectionPolicy(registers=("BBR",), keep_root_field_names=frozenset({"version"}))

    assert policy.is_root_field_kept("BBR_Bygning")
    assert policy.is_root_field_kept("version")
    assert not policy.is_root_field_kept("bbr_bygning")
    assert not policy.is_root_field_kept("CVR_Virksomhed")


def test_type_allowed_for_builtins_roots_common_and_selected_registers() -> None:
    policy = SelectionPolicy(registers=("BBR",))

    for name in ("String", "ID", "Query", "Mutation", "PageInfo", "BBR_Bygning", "_Service"):
        assert policy.is_type_allowed(name), name
    assert not policy.is_type_allowed("CVR_Virksomhed")
    assert not policy.is_type_allowed("DAR_Adresse")


def test_allow_prefixes_open_up_unselected_registers() -> None:
    policy = SelectionPolicy(registers=("BBR",), allow_prefixes=frozenset({"MAT"}))

    assert policy.is_type_allowed("MAT_Jordstykke")
    assert not policy.matches_register("MAT_Jordstykke")
    assert not policy.is_type_allowed("EJF_Ejerskab")
