"""
reordering — alfabetyczne przestawianie metod w pliku Go.

Interfejs publiczny:
    SelectionPolicy  — które deklaracje są jednostkami (metody, bez konstruktorów "New...")
    extract_units    — jednostki + spany (z komentarzem dokumentującym) w kolejności źródła
    find_block       — zakres [first_start, last_end) i deklaracje usuwane przy sklejaniu
    assemble         — nowy bufor: jednostki po nazwie, rozdzielone pustą linią
    plan_reorder     — przebieg na bajtach (bez I/O)
    reorder_file     — przebieg na pliku (odczyt, zapis)
    ReorderResult, ReorderStatus, ReorderError, ErrorCode — typy wyniku

Typowe użycie:
    from reordering import reorder_file, ReorderStatus

    result = reorder_file("server.go")
    if result.status is ReorderStatus.NOOP:
        print("Brak metod do przestawienia")
"""

from .types import (
    Block,
    ErrorCode,
    ReorderableUnit,
    ReorderError,
    ReorderResult,
    ReorderStatus,
    SkipReason,
)
from .selection import DEFAULT_CONSTRUCTOR_PREFIX, SelectionPolicy
from .ordering import by_name, by_position, in_output_order, in_source_order
from .extractor import extract_units, find_block
from .assembler import SEPARATOR, assemble, join_units
from .pipeline import load_file, plan_reorder, read_source, reorder_file, write_source

__all__ = [
    # types
    "Block",
    "ErrorCode",
    "ReorderableUnit",
    "ReorderError",
    "ReorderResult",
    "ReorderStatus",
    "SkipReason",
    # selection
    "DEFAULT_CONSTRUCTOR_PREFIX",
    "SelectionPolicy",
    # ordering
    "by_name",
    "by_position",
    "in_output_order",
    "in_source_order",
    # extractor / assembler
    "extract_units",
    "find_block",
    "SEPARATOR",
    "assemble",
    "join_units",
    # pipeline
    "load_file",
    "plan_reorder",
    "read_source",
    "reorder_file",
    "write_source",
]
