"""Wspólne źródła Go i fikstury dla testów goreorder."""

from __future__ import annotations

from pathlib import Path

import pytest

# Zebra, helper() i Apple przeplatane; Mango kończy blok
SCENARIO_SRC = """\
package demo

import "fmt"

// T is a type.
type T struct{}

// Zebra prints z.
func (t *T) Zebra() {
\tfmt.Println("z")
}

func helper() {}

// Apple does nothing.
func (t *T) Apple() {}

func (t *T) Mango() int {
\treturn 1 // one
}

func main() {
\thelper()
}
"""

FREE_ONLY_SRC = """\
package demo

func b() {}

func a() {}
"""

CONSTRUCTOR_SRC = """\
package demo

type S struct{}

func NewS() *S { return &S{} }

func (s *S) Beta() {}

func (s *S) NewChild() *S { return s }

func (s *S) Alpha() {}
"""


@pytest.fixture
def go_file(tmp_path: Path):
    """Zapisuje źródło Go do pliku tymczasowego i zwraca ścieżkę."""

    def _write(text: str, name: str = "demo.go") -> Path:
        path = tmp_path / name
        path.write_bytes(text.encode("utf-8"))
        return path

    return _write
