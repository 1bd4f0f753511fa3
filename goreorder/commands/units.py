"""Komenda: goreorder units — listuje deklaracje pliku Go i decyzję wyboru."""

from __future__ import annotations

import argparse
import json

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from goreorder._config import get_policy
from reordering import ReorderError, SkipReason, load_file

console = Console(width=160)

# Kolory per powód pominięcia
REASON_STYLE: dict[str, str] = {
    SkipReason.NOT_FUNCTION:   "dim",
    SkipReason.FREE_FUNCTION:  "dim",
    SkipReason.EMPTY_RECEIVER: "red",
    SkipReason.CONSTRUCTOR:    "magenta",
}


def run(args: argparse.Namespace) -> None:
    policy = get_policy(args.constructor_prefix)

    try:
        parsed = load_file(args.file)
    except ReorderError as exc:
        console.print(f"[red]Błąd ({exc.code}):[/red] {escape(str(exc))}")
        raise SystemExit(1)

    rows = []
    for decl in parsed.declarations:
        reason = policy.reason(decl)
        rows.append({
            "kind":      str(decl.kind),
            "name":      decl.name,
            "receiver":  decl.receiver,
            "receiver_type": decl.receiver_type,
            "line":      decl.line,
            "start":     decl.span_start,
            "end":       decl.end,
            "has_doc":   decl.doc_start is not None,
            "selected":  reason is None,
            "skip":      str(reason) if reason is not None else None,
        })

    if args.json_output:
        print(json.dumps(
            {"file": parsed.filename, "package": parsed.package, "declarations": rows},
            ensure_ascii=False,
            indent=2,
        ))
        return

    if not rows:
        console.print("[yellow]Brak deklaracji w pliku.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
    )
    table.add_column("LINIA",    justify="right", style="dim")
    table.add_column("RODZAJ",   no_wrap=True)
    table.add_column("NAZWA",    style="bold", no_wrap=True)
    table.add_column("RECEIVER", style="cyan", no_wrap=True)
    table.add_column("TYP",      style="cyan", no_wrap=True)
    table.add_column("SPAN",     justify="right", style="dim", no_wrap=True)
    table.add_column("DOC",      justify="center")
    table.add_column("DECYZJA",  no_wrap=True)

    for row in rows:
        if row["selected"]:
            verdict = Text("sortowana", style="green")
        else:
            verdict = Text(row["skip"], style=REASON_STYLE.get(row["skip"], ""))
        table.add_row(
            str(row["line"]),
            row["kind"],
            Text(row["name"] or ""),
            Text(row["receiver"] or ""),
            Text(row["receiver_type"] or ""),
            f"{row['start']}–{row['end']}",
            "✓" if row["has_doc"] else "-",
            verdict,
        )

    selected = sum(1 for r in rows if r["selected"])
    console.print()
    console.print(table)
    console.print(
        f"  [dim]pakiet {escape(parsed.package or '?')}: {len(rows)} deklaracji, "
        f"{selected} do sortowania[/dim]\n"
    )


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "units",
        help="Listuje deklaracje najwyższego poziomu i decyzję wyboru.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Listuje deklaracje najwyższego poziomu pliku Go (bez zapisu).

Kolumny:
  LINIA    – linia słowa kluczowego deklaracji
  RODZAJ   – func / method / type / var / const / import
  RECEIVER – receiver metody, np. (t *T)
  TYP      – typ receivera, np. *T
  SPAN     – offsety bajtowe [początek, koniec) razem z komentarzem
  DOC      – ✓ jeśli deklaracja ma komentarz dokumentujący
  DECYZJA  – "sortowana" albo powód pominięcia:
             free-function, not-function, empty-receiver, constructor
        """,
    )
    p.add_argument(
        "file",
        metavar="PLIK",
        help="Plik źródłowy Go.",
    )
    p.add_argument(
        "--constructor-prefix",
        default=None,
        metavar="PREFIKS",
        help='Prefiks nazw konstruktorów (domyślnie: "New").',
    )
    p.add_argument(
        "--json-output",
        action="store_true",
        help="Wypisz listę deklaracji jako JSON na stdout.",
    )
    p.set_defaults(func=run)
