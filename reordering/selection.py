"""
reordering/selection.py — polityka wyboru deklaracji do przestawienia.

Deklaracja jest jednostką, gdy:
  - jest metodą (func z receiverem),
  - receiver ma co najmniej jeden parametr,
  - nazwa nie zaczyna się od prefiksu konstruktora (domyślnie "New").

Pusty prefiks wyłącza wykluczanie konstruktorów.
"""

from __future__ import annotations

from dataclasses import dataclass

from go_source import DeclKind, Declaration

from .types import SkipReason

DEFAULT_CONSTRUCTOR_PREFIX = "New"


@dataclass(frozen=True, slots=True)
class SelectionPolicy:
    """Predykat wyboru jednostek; oceniany raz na deklarację najwyższego poziomu."""

    constructor_prefix: str = DEFAULT_CONSTRUCTOR_PREFIX

    def reason(self, decl: Declaration) -> SkipReason | None:
        """Zwraca powód pominięcia albo None, gdy deklaracja jest jednostką."""
        if decl.kind is DeclKind.FUNCTION:
            return SkipReason.FREE_FUNCTION
        if decl.kind is not DeclKind.METHOD:
            return SkipReason.NOT_FUNCTION
        if decl.receiver_fields == 0:
            return SkipReason.EMPTY_RECEIVER
        if self.constructor_prefix and (decl.name or "").startswith(self.constructor_prefix):
            return SkipReason.CONSTRUCTOR
        return None

    def accepts(self, decl: Declaration) -> bool:
        return self.reason(decl) is None
