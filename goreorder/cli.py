"""
goreorder — narzędzie CLI porządkujące metody w plikach Go.

Użycie:
  goreorder <komenda> [opcje]

Komendy:
  methods   Przestawia metody w pliku alfabetycznie (nadpisuje plik).
  units     Listuje deklaracje najwyższego poziomu i decyzję wyboru.
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252 — wymuszamy UTF-8, żeby polskie znaki
# w tekstach pomocy argparse były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from goreorder.commands import methods as cmd_methods
from goreorder.commands import units as cmd_units

__version__ = "0.1.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="goreorder",
        description="goreorder — alfabetyczne porządkowanie metod w plikach Go.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"goreorder {__version__}"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_methods.add_parser(subparsers)
    cmd_units.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
