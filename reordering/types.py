"""
reordering/types.py — jednostki do przestawienia, wynik przebiegu i kody błędów.

ReorderableUnit — metoda (z dołączonym komentarzem) wycięta z oryginalnego bufora.
Block           — zakres [first_start, last_end) zastępowany przy sklejaniu.
ReorderResult   — wynik przebiegu: status, jednostki w kolejności wyjściowej,
    blok i nowy bufor.
ReorderError    — błąd odczytu / parsowania / zapisu z kodem i ścieżką.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

from go_source import Declaration


class ErrorCode(StrEnum):
    """Stałe kody błędów przebiegu."""

    READ_FAILURE  = "E_READ_FAILURE"
    PARSE_FAILURE = "E_PARSE_FAILURE"
    WRITE_FAILURE = "E_WRITE_FAILURE"


class ReorderStatus(StrEnum):
    """
    Stan końcowy przebiegu.

    Są dwa stany końcowe: NOOP i Rewritten. UNCHANGED należy do stanu
    Rewritten (bufor wyliczony, ale identyczny z wejściem); widok
    dwustanowy daje ReorderResult.changed.
    """

    NOOP      = "noop"       # brak metod do przestawienia — plik nietknięty
    REWRITTEN = "rewritten"  # nowy bufor różni się od wejścia
    UNCHANGED = "unchanged"  # metody już posortowane — bufor identyczny


class SkipReason(StrEnum):
    """Powód, dla którego deklaracja nie jest jednostką do przestawienia."""

    NOT_FUNCTION   = "not-function"
    FREE_FUNCTION  = "free-function"
    EMPTY_RECEIVER = "empty-receiver"
    CONSTRUCTOR    = "constructor"


@dataclass(frozen=True, slots=True)
class ReorderableUnit:
    """
    Metoda wraz z komentarzem dokumentującym.

    - name:     nazwa metody (klucz sortowania)
    - receiver: tekst receivera, np. "(t *T)"
    - start:    offset komentarza dokumentującego albo słowa kluczowego func
    - end:      offset tuż za zamykającym "}"
    - text:     source[start:end] z oryginalnego bufora
    - line:     numer linii (1-based) słowa kluczowego func
    """

    name: str
    receiver: str
    start: int
    end: int
    text: bytes
    line: int

    def __post_init__(self) -> None:
        if not self.start < self.end:
            raise ValueError(
                f"Pusty span jednostki {self.name!r}: [{self.start}, {self.end})"
            )


@dataclass(frozen=True, slots=True)
class Block:
    """
    Zakres bufora zastępowany posortowanymi jednostkami.

    dropped — deklaracje leżące wewnątrz bloku, które nie są jednostkami;
    sklejenie je usuwa.
    """

    first_start: int
    last_end: int
    dropped: tuple[Declaration, ...] = ()


@dataclass(slots=True)
class ReorderResult:
    """
    Wynik jednego przebiegu.

    - status:     NOOP | REWRITTEN | UNCHANGED
    - path:       ścieżka (lub nazwa) przetwarzanego pliku
    - units:      jednostki w kolejności wyjściowej (po nazwie)
    - block:      zastępowany zakres (None przy NOOP)
    - new_source: nowy bufor (None przy NOOP)
    - written_to: ścieżka, do której zapisano bufor (None gdy nic nie zapisano)
    """

    status: ReorderStatus
    path: str
    units: list[ReorderableUnit] = field(default_factory=list)
    block: Block | None = None
    new_source: bytes | None = None
    written_to: Path | None = None

    @property
    def changed(self) -> bool:
        """True, gdy nowy bufor różni się od wejścia."""
        return self.status is ReorderStatus.REWRITTEN


class ReorderError(Exception):
    """Błąd przebiegu: odczyt, parsowanie albo zapis."""

    def __init__(self, code: ErrorCode, path: str | Path, message: str) -> None:
        self.code = code
        self.path = str(path)
        self.message = message
        super().__init__(f"{self.path}: {message}")
