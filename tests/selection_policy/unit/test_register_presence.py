"""Register presence diagnostics tests."""

from __future__ import annotations

import logging
from textwrap import dedent

from sdl_register_filter.schema_management import build_definition_index, parse_sdl
from sdl_register_filter.selection_policy import (
    SelectionPolicy,
    find_unmatched_registers,
    measure_register_presence,
)

_SDL = dedent(
    """
    type Query {
      bbr_bygning: BBR_Bygning
      CVR_Virksomhed: Firma
    }

    type BBR_Bygning {
      id: ID
    }

    type Firma {
      id: ID
    }
    """
)


def test_presence_counts_types_and_root_fields_per_register() -> None:
    index = build_definition_index(parse_sdl(_SDL))
    presence = {
        entry.register: entry
        for entry in measure_register_presence(index, SelectionPolicy(registers=("BBR", "CVR")))
    }

    assert presence["BBR"].type_definitions == 1
    assert presence["BBR"].root_fields == 1
    assert presence["CVR"].type_definitions == 0
    assert presence["CVR"].root_fields == 1
    assert not presence["CVR"].is_missing


def test_unmatched_registers_are_reported_with_a_warning(caplog) -> None:
    index = build_definition_index(parse_sdl(_SDL))

    with caplog.at_level(logging.WARNING, logger="sdl_register_filter"):
        missing = find_unmatched_registers(index, SelectionPolicy(registers=("BBR", "XYZ")))

    assert missing == ("XYZ",)
    assert "No types or root fields found for register(s): XYZ" in caplog.text


def test_no_warning_when_every_register_is_present(caplog) -> None:
    index = build_definition_index(parse_sdl(_SDL))

    with caplog.at_level(logging.WARNING, logger="sdl_register_filter"):
        missing = find_unmatched_registers(index, SelectionPolicy(registers=("BBR",)))

    assert missing == ()
    assert caplog.records == []
