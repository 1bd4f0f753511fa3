"""
reordering/ordering.py — klucze sortowania jednostek.

Oba porządki to zwykłe funkcje klucza dla stabilnego sorted():
  by_name     — kolejność wyjściowa (nazwa, leksykograficznie, z rozróżnieniem wielkości liter)
  by_position — kolejność w źródle (offset początku spanu)

Jednostki o tej samej nazwie zachowują kolejność ze źródła.
"""

from __future__ import annotations

from typing import Iterable

from .types import ReorderableUnit


def by_name(unit: ReorderableUnit) -> str:
    return unit.name


def by_position(unit: ReorderableUnit) -> int:
    return unit.start


def in_source_order(units: Iterable[ReorderableUnit]) -> list[ReorderableUnit]:
    return sorted(units, key=by_position)


def in_output_order(units: Iterable[ReorderableUnit]) -> list[ReorderableUnit]:
    # Remisy nazw zostają w kolejności źródła
    return sorted(in_source_order(units), key=by_name)
