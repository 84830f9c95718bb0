"""
ddk — narzędzie CLI silnika dedukcji rachunku zdań.

Użycie:
  ddk <komenda> [opcje]

Komendy:
  solve   Wyznacza wartości zmiennych z przesłanek i sprawdza wniosek (z tokiem rozumowania).
  parse   Parsuje formułę i pokazuje jej postać kanoniczną / drzewo węzłów.
  check   Waliduje plik z przesłankami bez uruchamiania dedukcji.

Konfiguracja (zmienne środowiskowe):
  DDK_CONSOLE_WIDTH     szerokość konsoli (domyślnie 200)
  DDK_LOG_LEVEL         poziom logów silnika (domyślnie WARNING)
  DDK_ON_SYNTAX_ERROR   abort | skip — co zrobić z niepoprawną przesłanką
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252 — wymuszamy UTF-8, żeby glify ¬ ∧ ∨ →
# i polskie znaki były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from ddk._config import get_console, get_settings
from ddk.commands import solve as cmd_solve
from ddk.commands import parse as cmd_parse
from ddk.commands import check as cmd_check


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ddk",
        description="deduktor — dedukcja w przód dla rachunku zdań.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="ddk 0.1.0"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_solve.add_parser(subparsers)
    cmd_parse.add_parser(subparsers)
    cmd_check.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        get_settings()
    except ValueError as e:
        get_console().print(f"[red]Błąd konfiguracji:[/red] {e}")
        raise SystemExit(1)
    args.func(args)


if __name__ == "__main__":
    main()
