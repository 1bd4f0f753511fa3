"""
go_source — adapter parsera Go (tree-sitter) dla goreorder.

Interfejs publiczny:
    parse_go_source(source, filename) → ParsedFile
    ParsedFile    — oryginalne bajty + deklaracje najwyższego poziomu
    Declaration   — deklaracja z offsetami bajtowymi i komentarzem dokumentującym
    DeclKind      — rodzaj deklaracji (func / method / type / var / const / import)
    GoSyntaxError — błąd składni z numerem linii i kolumny
"""

from .parser import (
    GO_LANGUAGE,
    DeclKind,
    Declaration,
    GoSyntaxError,
    ParsedFile,
    parse_go_source,
)

__all__ = [
    "GO_LANGUAGE",
    "DeclKind",
    "Declaration",
    "GoSyntaxError",
    "ParsedFile",
    "parse_go_source",
]
