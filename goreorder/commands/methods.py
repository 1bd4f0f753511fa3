"""Komenda: goreorder methods — alfabetyczne przestawianie metod w pliku Go."""

from __future__ import annotations

import argparse
import sys

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from goreorder._config import ENV_CONSTRUCTOR_PREFIX, get_policy
from reordering import (
    ReorderError,
    ReorderResult,
    ReorderStatus,
    in_source_order,
    reorder_file,
)

console     = Console()
err_console = Console(stderr=True)


def _units_table(result: ReorderResult) -> Table:
    """Tabela: pozycja w źródle → pozycja po posortowaniu."""
    source_pos = {u.start: i for i, u in enumerate(in_source_order(result.units), 1)}

    table = Table(box=box.SIMPLE_HEAD, show_header=True, header_style="bold white")
    table.add_column("#",        justify="right", style="dim")
    table.add_column("BYŁO",     justify="right", style="dim")
    table.add_column("METODA",   style="bold", no_wrap=True)
    table.add_column("RECEIVER", style="cyan", no_wrap=True)
    table.add_column("LINIA",    justify="right", style="dim")

    for i, unit in enumerate(result.units, 1):
        moved = source_pos[unit.start] != i
        table.add_row(
            str(i),
            str(source_pos[unit.start]),
            Text(unit.name, style="yellow" if moved else ""),
            Text(unit.receiver),
            str(unit.line),
        )
    return table


def _warn_dropped(out: Console, result: ReorderResult, written: bool) -> None:
    if result.block is None or not result.block.dropped:
        return
    verb = "została usunięta" if written else "zostanie usunięta"
    for decl in result.block.dropped:
        label = f"{decl.kind} {decl.name}" if decl.name else str(decl.kind)
        out.print(
            f"[yellow]Uwaga:[/yellow] deklaracja [bold]{escape(label)}[/bold] "
            f"(linia {decl.line}) leży wewnątrz bloku metod i {verb}."
        )


def _write_stdout(data: bytes) -> None:
    """Wypisuje bajty bez dekodowania."""
    sys.stdout.flush()
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()


def run(args: argparse.Namespace) -> None:
    policy  = get_policy(args.constructor_prefix)
    dry_run = args.dry_run or args.check or args.stdout

    # Przy --stdout komunikaty idą na stderr, stdout zostaje na źródło
    out = err_console if args.stdout else console

    try:
        result = reorder_file(args.file, policy, output=args.output, dry_run=dry_run)
    except ReorderError as exc:
        out.print(f"[red]Błąd ({exc.code}):[/red] {escape(str(exc))}")
        raise SystemExit(1)

    path = escape(result.path)

    if result.status is ReorderStatus.NOOP:
        out.print("[yellow]Brak metod do przestawienia.[/yellow]")
        if args.stdout:
            with open(args.file, "rb") as fh:
                _write_stdout(fh.read())
        return

    if args.verbose:
        out.print(_units_table(result))

    written = result.written_to is not None
    _warn_dropped(out, result, written)

    if args.stdout:
        _write_stdout(result.new_source)
        return

    if args.check:
        if result.changed:
            out.print(f"[red]NIEPOSORTOWANE[/red]  {path}")
            raise SystemExit(1)
        out.print(f"[green]OK[/green]  {path}")
        return

    if result.status is ReorderStatus.UNCHANGED and not written:
        out.print(f"[dim]Metody w {path} są już posortowane.[/dim]")
        return

    if args.dry_run:
        out.print(
            f"[cyan]--dry-run:[/cyan] {len(result.units)} metod(y) w {path} "
            f"— nic nie zapisano."
        )
        return

    out.print(
        f"[green]OK[/green]  Przestawiono {len(result.units)} metod(y) "
        f"→ {escape(str(result.written_to))}"
    )


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "methods",
        help="Przestawia metody w pliku Go alfabetycznie.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=f"""\
Sortuje metody (funkcje z receiverem) w pliku Go alfabetycznie po nazwie
i nadpisuje plik.

Zasady:
  - każda metoda przenoszona jest razem z komentarzem dokumentującym,
  - metody rozdzielane są dokładnie jedną pustą linią,
  - funkcje wolne, typy, zmienne i konstruktory "New..." nie są przestawiane,
  - wszystko przed pierwszą i za ostatnią metodą zostaje bez zmian,
  - deklaracje leżące POMIĘDZY metodami są usuwane (wypisywane jako ostrzeżenie).

Prefiks konstruktora: --constructor-prefix albo zmienna {ENV_CONSTRUCTOR_PREFIX}
(domyślnie "New"; pusty prefiks wyłącza wykluczanie).

Przykłady:
  goreorder methods server.go
  goreorder methods server.go --dry-run --verbose
  goreorder methods server.go --output server_sorted.go
  goreorder methods server.go --stdout | diff server.go -
  goreorder methods server.go --check
        """,
    )
    p.add_argument(
        "file",
        metavar="PLIK",
        help="Plik źródłowy Go.",
    )
    p.add_argument(
        "--output", "-o",
        default=None,
        metavar="PLIK",
        help="Zapisz wynik do innego pliku zamiast nadpisywać źródło.",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Wylicz wynik i pokaż podsumowanie, nic nie zapisuj.",
    )
    p.add_argument(
        "--stdout",
        action="store_true",
        help="Wypisz przestawione źródło na stdout zamiast zapisywać.",
    )
    p.add_argument(
        "--check",
        action="store_true",
        help="Nic nie zapisuj; kod wyjścia 1, gdy metody nie są posortowane.",
    )
    p.add_argument(
        "--constructor-prefix",
        default=None,
        metavar="PREFIKS",
        help='Prefiks nazw konstruktorów pomijanych przy sortowaniu (domyślnie: "New").',
    )
    p.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Pokaż tabelę metod przed i po posortowaniu.",
    )
    p.set_defaults(func=run)
