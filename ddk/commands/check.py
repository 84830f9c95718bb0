"""Komenda: ddk check — waliduje plik z przesłankami bez uruchamiania dedukcji."""

from __future__ import annotations

import argparse
import dataclasses
import json
import pathlib

from rich.text import Text

from ddk._config import get_console
from ddk.commands.parse import _show_caret

console = get_console()


# ---------------------------------------------------------------------------
# Raport (używany też przez `ddk solve`)
# ---------------------------------------------------------------------------

def _show_errors(errors) -> None:
    """Każdy błąd: ścieżka i kod, komunikat, formuła z `^` pod pozycją, podpowiedź."""
    for e in errors:
        console.print(Text(f"  {e.path}  ", style="cyan") + Text(str(e.code), style="yellow"))
        console.print(Text(f"    {e.message}"))
        details = e.details or {}
        if details.get("formula") is not None:
            _show_caret(details["formula"], details.get("position"), indent="    ")
        console.print(Text(f"    → {e.expected_fix}", style="dim"))


def _show_warnings(warnings: list[str]) -> None:
    for w in warnings:
        console.print(Text("  ! ", style="yellow") + Text(w))


def _report_payload(case_id: str, report) -> dict:
    return {
        "case_id":  case_id,
        "is_valid": report.is_valid,
        "errors":   [dataclasses.asdict(e) for e in report.errors],
        "warnings": report.warnings,
        "premises": [str(p) for p in report.parsed],
    }


# ---------------------------------------------------------------------------
# Komenda
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    from solver import load_premises
    from validator import PremiseValidator

    path = pathlib.Path(args.file)
    if not path.exists():
        console.print(f"[red]Brak pliku przesłanek:[/red] {path}")
        raise SystemExit(1)
    try:
        premise_set = load_premises(path)
    except ValueError as exc:
        console.print(f"[red]Błąd wczytywania przesłanek:[/red] {exc}")
        raise SystemExit(1)

    report = PremiseValidator().validate(premise_set.premises, premise_set.conclusion)

    status = Text("OK", style="green") if report.is_valid else Text("BŁĄD", style="red")
    console.print(
        status
        + Text(f"  {premise_set.case_id}: {len(report.parsed)}/{len(premise_set.premises)} "
               f"przesłanek poprawnych, błędów {len(report.errors)}, ostrzeżeń {len(report.warnings)}")
    )
    _show_errors(report.errors)
    _show_warnings(report.warnings)

    if args.json_output:
        print(json.dumps(_report_payload(premise_set.case_id, report), ensure_ascii=False, indent=2))

    if not report.is_valid:
        raise SystemExit(1)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "check",
        help="Waliduje plik z przesłankami (składnia, duplikaty, pokrycie wniosku).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""\
Waliduje plik z przesłankami (etapy A–C):

  A  Składnia     (znaki, nawiasy, struktura operand/spójnik)
  B  Duplikaty    (ta sama postać kanoniczna więcej niż raz)
  C  Pokrycie     (zmienne wniosku obecne w przesłankach)

Przykłady:
  ddk check sylogizm.txt
  ddk check sylogizm.json --json-output
        """,
    )
    p.add_argument(
        "file",
        metavar="PLIK",
        help="Plik z przesłankami (.json lub tekstowy).",
    )
    p.add_argument(
        "--json-output",
        action="store_true",
        help="Wypisz raport walidacji jako JSON na stdout.",
    )
    p.set_defaults(func=run)
