"""Testy sklejania bufora i właściwości przebiegu na bajtach."""

from __future__ import annotations

import pytest

from conftest import CONSTRUCTOR_SRC, FREE_ONLY_SRC, SCENARIO_SRC
from go_source import parse_go_source
from reordering import (
    SEPARATOR,
    ReorderStatus,
    assemble,
    extract_units,
    plan_reorder,
)

EXPECTED_SCENARIO = """\
package demo

import "fmt"

// T is a type.
type T struct{}

// Apple does nothing.
func (t *T) Apple() {}

func (t *T) Mango() int {
\treturn 1 // one
}

// Zebra prints z.
func (t *T) Zebra() {
\tfmt.Println("z")
}

func main() {
\thelper()
}
"""


def test_scenario_drops_interleaved_helper() -> None:
    result = plan_reorder(SCENARIO_SRC.encode(), "demo.go")

    assert result.status is ReorderStatus.REWRITTEN
    assert [u.name for u in result.units] == ["Apple", "Mango", "Zebra"]
    assert result.new_source == EXPECTED_SCENARIO.encode()
    # helper() leżał pomiędzy metodami — znika z wyniku
    assert b"func helper()" not in result.new_source
    assert [d.name for d in result.block.dropped] == ["helper"]


def test_bytes_outside_block_unchanged() -> None:
    src = SCENARIO_SRC.encode()
    result = plan_reorder(src)
    block = result.block
    tail = src[block.last_end:]

    assert result.new_source[:block.first_start] == src[:block.first_start]
    assert result.new_source.endswith(tail)


def test_units_reproduced_verbatim_and_separated_by_one_blank_line() -> None:
    src = SCENARIO_SRC.encode()
    units = extract_units(parse_go_source(src))
    result = plan_reorder(src)
    block = result.block

    middle = result.new_source[block.first_start:len(result.new_source) - len(src[block.last_end:])]
    ordered = sorted(units, key=lambda u: u.name)
    assert middle == SEPARATOR.join(u.text for u in ordered)
    assert middle.split(SEPARATOR)[0] == ordered[0].text
    assert not middle.startswith(b"\n")
    assert not middle.endswith(b"\n")


def test_output_is_name_ordered() -> None:
    result = plan_reorder(SCENARIO_SRC.encode())
    names = [u.name for u in result.units]
    assert all(a <= b for a, b in zip(names, names[1:]))


def test_ordering_is_case_sensitive() -> None:
    src = (
        b"package p\n\n"
        b"func (v V) beta() {}\n\n"
        b"func (v V) Zeta() {}\n\n"
        b"func (v V) Alpha() {}\n"
    )
    result = plan_reorder(src)
    assert [u.name for u in result.units] == ["Alpha", "Zeta", "beta"]


def test_second_run_is_fixed_point() -> None:
    first = plan_reorder(SCENARIO_SRC.encode())
    second = plan_reorder(first.new_source)

    assert second.status is ReorderStatus.UNCHANGED
    assert second.new_source == first.new_source


def test_free_functions_only_is_noop() -> None:
    result = plan_reorder(FREE_ONLY_SRC.encode())
    assert result.status is ReorderStatus.NOOP
    assert result.new_source is None
    assert result.units == []


def test_every_selected_name_survives_once() -> None:
    src = CONSTRUCTOR_SRC.encode()
    result = plan_reorder(src)
    out = result.new_source

    for name in (b"Alpha", b"Beta"):
        assert out.count(b") " + name + b"()") == 1
    # Konstruktor-metoda leżał w bloku — jest usuwany razem z nim
    assert b"NewChild" not in out
    # Konstruktor-funkcja przed blokiem zostaje
    assert b"func NewS() *S" in out


def test_assemble_requires_units() -> None:
    with pytest.raises(ValueError):
        assemble(b"package p\n", [])
