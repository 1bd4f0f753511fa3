"""
go_source/parser.py — parsowanie plików Go do listy deklaracji najwyższego poziomu.

Architektura:
  bytes → tree-sitter (gramatyka tree-sitter-go) → drzewo składni
  → _check_syntax() → GoSyntaxError przy węzłach ERROR / MISSING
  → _collect_declarations() → lista Declaration (offsety bajtowe + doc komentarz)
  → ParsedFile

Kluczowe funkcje publiczne:
  parse_go_source(source, filename) -> ParsedFile
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Iterator

import tree_sitter_go
from tree_sitter import Language, Node, Parser

GO_LANGUAGE = Language(tree_sitter_go.language())

_PACKAGE_CLAUSE = "package_clause"
_COMMENT        = "comment"


# ---------------------------------------------------------------------------
# Typy
# ---------------------------------------------------------------------------

class DeclKind(StrEnum):
    """Rodzaj deklaracji najwyższego poziomu."""

    FUNCTION = "func"
    METHOD   = "method"
    TYPE     = "type"
    VAR      = "var"
    CONST    = "const"
    IMPORT   = "import"


# Węzły dozwolone bezpośrednio pod source_file (poza package_clause i comment)
_DECL_KINDS: dict[str, DeclKind] = {
    "function_declaration": DeclKind.FUNCTION,
    "method_declaration":   DeclKind.METHOD,
    "type_declaration":     DeclKind.TYPE,
    "var_declaration":      DeclKind.VAR,
    "const_declaration":    DeclKind.CONST,
    "import_declaration":   DeclKind.IMPORT,
}


@dataclass(frozen=True, slots=True)
class Declaration:
    """
    Deklaracja najwyższego poziomu (tylko do odczytu).

    - kind:            rodzaj deklaracji (DeclKind)
    - name:            nazwa funkcji/metody; dla type/var/const nazwy specyfikacji
                       połączone ", "; None dla import
    - receiver:        tekst receivera, np. "(t *T)"; None gdy brak
    - receiver_fields: liczba parametrów receivera (0 gdy brak lub "()")
    - receiver_type:   typ receivera, np. "*T"; None gdy brak
    - doc_start:       offset bajtowy dołączonego komentarza dokumentującego
    - start, end:      offsety bajtowe słowa kluczowego i końca deklaracji
    - line:            numer linii (1-based) słowa kluczowego
    """

    kind: DeclKind
    name: str | None
    start: int
    end: int
    line: int
    doc_start: int | None = None
    receiver: str | None = None
    receiver_fields: int = 0
    receiver_type: str | None = None

    @property
    def span_start(self) -> int:
        """Początek spanu: komentarz dokumentujący, a gdy go brak — sama deklaracja."""
        return self.doc_start if self.doc_start is not None else self.start


@dataclass(slots=True)
class ParsedFile:
    """Wynik parsowania jednego pliku: oryginalne bajty + deklaracje w kolejności źródła."""

    source: bytes
    filename: str
    package: str | None
    declarations: list[Declaration] = field(default_factory=list)

    def slice(self, start: int, end: int) -> bytes:
        return self.source[start:end]


class GoSyntaxError(Exception):
    """Plik nie jest poprawnym źródłem Go."""

    def __init__(self, filename: str, line: int, column: int, message: str) -> None:
        self.filename = filename
        self.line = line
        self.column = column
        self.message = message
        super().__init__(f"{filename}:{line}:{column}: {message}")


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def parse_go_source(source: bytes, filename: str = "<source>") -> ParsedFile:
    """
    Parsuje źródło Go i zwraca ParsedFile.

    Args:
        source:   Oryginalne bajty pliku (nie są modyfikowane).
        filename: Nazwa pliku używana w komunikatach błędów.

    Raises:
        GoSyntaxError: gdy drzewo zawiera błędy składni, brakuje klauzuli
                       package albo na najwyższym poziomie stoi instrukcja.
    """
    tree = Parser(GO_LANGUAGE).parse(source)
    root = tree.root_node

    _check_syntax(root, filename)

    package: str | None = None
    for child in root.named_children:
        if child.type == _PACKAGE_CLAUSE:
            package = _package_name(child, source)
            break
    if package is None:
        raise GoSyntaxError(filename, 1, 1, "expected 'package'")

    return ParsedFile(
        source=source,
        filename=filename,
        package=package,
        declarations=_collect_declarations(root, source, filename),
    )


# ---------------------------------------------------------------------------
# Błędy składni
# ---------------------------------------------------------------------------

def _check_syntax(root: Node, filename: str) -> None:
    if not root.has_error:
        return
    node = next(_error_nodes(root), root)
    row, col = node.start_point
    if node.is_missing:
        message = f"missing {node.type!r}"
    else:
        message = "syntax error"
    raise GoSyntaxError(filename, row + 1, col + 1, message)


def _error_nodes(node: Node) -> Iterator[Node]:
    """Węzły ERROR / MISSING w kolejności dokumentu (schodzi tylko do gałęzi z błędem)."""
    if node.type == "ERROR" or node.is_missing:
        yield node
        return
    for child in node.children:
        if child.has_error or child.is_missing:
            yield from _error_nodes(child)


# ---------------------------------------------------------------------------
# Deklaracje
# ---------------------------------------------------------------------------

def _collect_declarations(root: Node, source: bytes, filename: str) -> list[Declaration]:
    children = root.named_children
    decls: list[Declaration] = []

    for i, node in enumerate(children):
        if node.type in (_COMMENT, _PACKAGE_CLAUSE):
            continue

        kind = _DECL_KINDS.get(node.type)
        if kind is None:
            row, col = node.start_point
            raise GoSyntaxError(
                filename, row + 1, col + 1,
                "non-declaration statement outside function body",
            )

        decl = Declaration(
            kind=kind,
            name=_decl_name(node, kind, source),
            start=node.start_byte,
            end=node.end_byte,
            line=node.start_point[0] + 1,
            doc_start=_doc_start(children, i),
        )
        if kind is DeclKind.METHOD:
            decl = _with_receiver(decl, node, source)
        decls.append(decl)

    return decls


def _text(node: Node, source: bytes) -> str:
    return source[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


def _package_name(node: Node, source: bytes) -> str | None:
    for child in node.named_children:
        if child.type == "package_identifier":
            return _text(child, source)
    return None


def _decl_name(node: Node, kind: DeclKind, source: bytes) -> str | None:
    if kind in (DeclKind.FUNCTION, DeclKind.METHOD):
        name = node.child_by_field_name("name")
        return _text(name, source) if name is not None else None
    if kind is DeclKind.IMPORT:
        return None

    # type / var / const — pojedyncze lub grupowane "( ... )"
    names: list[str] = []
    stack = list(reversed(node.named_children))
    while stack:
        n = stack.pop()
        if n.type.endswith("_spec") or n.type == "type_alias":
            names.extend(_text(c, source) for c in n.children_by_field_name("name"))
        elif n.type.endswith("_spec_list"):
            stack.extend(reversed(n.named_children))
    return ", ".join(names) if names else None


def _with_receiver(decl: Declaration, node: Node, source: bytes) -> Declaration:
    receiver = node.child_by_field_name("receiver")
    if receiver is None:
        return decl

    params = [
        c for c in receiver.named_children
        if c.type in ("parameter_declaration", "variadic_parameter_declaration")
    ]
    receiver_type: str | None = None
    if params:
        type_node = params[0].child_by_field_name("type")
        if type_node is not None:
            receiver_type = _text(type_node, source)

    return dataclasses.replace(
        decl,
        receiver=_text(receiver, source),
        receiver_fields=len(params),
        receiver_type=receiver_type,
    )


# ---------------------------------------------------------------------------
# Komentarz dokumentujący
# ---------------------------------------------------------------------------

def _doc_start(siblings: list[Node], index: int) -> int | None:
    """
    Zwraca offset początku grupy komentarzy dołączonej do deklaracji siblings[index].

    Grupa to komentarze w kolejnych liniach (bez pustej linii pomiędzy);
    jest dokumentacją, gdy jej ostatnia linia leży bezpośrednio nad
    deklaracją. Komentarz w tej samej linii co koniec poprzedniego węzła
    należy do tamtego węzła.
    """
    decl_row = siblings[index].start_point[0]

    group: list[Node] = []
    expected_row = decl_row - 1
    j = index - 1
    while j >= 0 and siblings[j].type == _COMMENT:
        comment = siblings[j]
        if comment.end_point[0] != expected_row and not (
            group and comment.end_point[0] == group[-1].start_point[0]
        ):
            break
        group.append(comment)
        expected_row = comment.start_point[0] - 1
        j -= 1

    if not group:
        return None

    # Komentarze końcowe poprzedniego węzła (ta sama linia co jego koniec)
    if j >= 0:
        prev_end_row = siblings[j].end_point[0]
        while group and group[-1].start_point[0] <= prev_end_row:
            prev_end_row = max(prev_end_row, group[-1].end_point[0])
            group.pop()

    if not group:
        return None
    return group[-1].start_byte
