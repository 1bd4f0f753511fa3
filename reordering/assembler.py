"""
reordering/assembler.py — sklejanie nowego bufora.

  source[:first_start] + SEPARATOR.join(teksty jednostek po nazwie) + source[last_end:]

Tekst każdej jednostki jest kopiowany bajt w bajt; poza blokiem bufor się
nie zmienia.
"""

from __future__ import annotations

from typing import Sequence

from .ordering import in_output_order, in_source_order
from .types import ReorderableUnit

# Dokładnie jedna pusta linia między jednostkami
SEPARATOR = b"\n\n"


def join_units(units: Sequence[ReorderableUnit]) -> bytes:
    return SEPARATOR.join(u.text for u in units)


def assemble(source: bytes, units: Sequence[ReorderableUnit]) -> bytes:
    """
    Zwraca nowy bufor z jednostkami posortowanymi po nazwie.

    Args:
        source: Oryginalny bufor, z którego wycięto jednostki.
        units:  Jednostki w dowolnej kolejności (niepusta lista).
    """
    if not units:
        raise ValueError("Brak jednostek do sklejenia.")

    positioned  = in_source_order(units)
    first_start = positioned[0].start
    last_end    = max(u.end for u in positioned)

    return source[:first_start] + join_units(in_output_order(positioned)) + source[last_end:]
