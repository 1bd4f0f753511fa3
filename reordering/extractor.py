"""
reordering/extractor.py — wybór jednostek i wyznaczanie ich spanów.

extract_units(parsed, policy) -> list[ReorderableUnit]
  Iteruje deklaracje najwyższego poziomu w kolejności źródła, stosuje
  SelectionPolicy i wycina z oryginalnego bufora [span_start, end).

find_block(parsed, units) -> Block
  Zakres [min(start), max(end)) oraz deklaracje wewnątrz niego, które nie
  są jednostkami (zostaną usunięte przy sklejaniu).
"""

from __future__ import annotations

from typing import Sequence

from go_source import ParsedFile

from .ordering import in_source_order
from .selection import SelectionPolicy
from .types import Block, ReorderableUnit


def extract_units(
    parsed: ParsedFile,
    policy: SelectionPolicy | None = None,
) -> list[ReorderableUnit]:
    """Zwraca jednostki w kolejności źródła; pusta lista = nic do przestawienia."""
    policy = policy or SelectionPolicy()
    units: list[ReorderableUnit] = []

    for decl in parsed.declarations:
        if not policy.accepts(decl):
            continue

        start = decl.span_start
        units.append(ReorderableUnit(
            name=decl.name or "",
            receiver=decl.receiver or "",
            start=start,
            end=decl.end,
            text=parsed.slice(start, decl.end),
            line=decl.line,
        ))

    _check_disjoint(units)
    return units


def find_block(parsed: ParsedFile, units: Sequence[ReorderableUnit]) -> Block:
    if not units:
        raise ValueError("Brak jednostek — blok jest nieokreślony.")

    positioned  = in_source_order(units)
    first_start = positioned[0].start
    last_end    = max(u.end for u in positioned)

    selected = {u.start for u in positioned}
    dropped = tuple(
        d for d in parsed.declarations
        if first_start <= d.span_start and d.end <= last_end
        and d.span_start not in selected
    )
    return Block(first_start=first_start, last_end=last_end, dropped=dropped)


def _check_disjoint(units: Sequence[ReorderableUnit]) -> None:
    prev: ReorderableUnit | None = None
    for unit in in_source_order(units):
        if prev is not None and unit.start < prev.end:
            raise ValueError(
                f"Nakładające się spany: {prev.name!r} [{prev.start}, {prev.end}) "
                f"i {unit.name!r} [{unit.start}, {unit.end})"
            )
        prev = unit
