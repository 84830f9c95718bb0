"""Komenda: ddk solve — uruchamia dedukcję na przesłankach i pokazuje tok rozumowania."""

from __future__ import annotations

import argparse
import pathlib

from rich         import box
from rich.table   import Table
from rich.text    import Text

from ddk._config import get_console, get_settings, setup_logging
from ddk.commands.check import _show_errors, _show_warnings

console = get_console()

VALUE_STYLE: dict[bool | None, tuple[str, str]] = {
    True:  ("PRAWDA",   "green"),
    False: ("FAŁSZ",    "red"),
    None:  ("nieznana", "dim"),
}

VERDICT_TEXT: dict[str, tuple[str, str]] = {
    "proved":       ("UDOWODNIONO",       "bold green"),
    "disproved":    ("FAŁSZ",             "bold red"),
    "undetermined": ("NIEROZSTRZYGNIĘTE", "bold yellow"),
}

# Kody wyjścia
EXIT_INPUT_ERROR   = 1
EXIT_CONTRADICTION = 2


# ---------------------------------------------------------------------------
# Wyświetlanie wyników
# ---------------------------------------------------------------------------

def _premise_line(premise, tags: list[str]) -> Text:
    line = Text(str(premise))
    for tag in tags:
        line.append(f" [{tag}]", style="cyan")
    return line


def _show_trace(history, conclusion: str | None) -> None:
    """Wypisuje przesłanki wejściowe i kolejne rundy w stylu `=> ... [SUBSTITUTE]`."""
    console.print()
    for premise in history.initial.premises:
        console.print(Text(str(premise)))
    if conclusion:
        console.print(Text(f"∴ {conclusion}", style="bold"))

    snapshots = list(history)
    if history.setup is not None:
        snapshots.insert(0, history.setup)

    for snapshot in snapshots:
        console.print()
        title = f"=> runda {snapshot.round}" if snapshot.round else "=> przygotowanie"
        console.print(Text(title, style="bold"))
        for i, premise in enumerate(snapshot.deduction.premises):
            tags = [str(s) for s in snapshot.steps_for(i)]
            console.print(_premise_line(premise, tags))
        for fact in snapshot.facts:
            console.print(Text(f"  {fact}", style="green"))
        if snapshot.contradiction is not None:
            console.print(Text(f"  ⊥ {snapshot.contradiction}", style="bold red"))


def _show_values(values: dict[str, bool | None]) -> None:
    console.print("\n[bold]Wartości zmiennych:[/bold]")
    table = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
    table.add_column("ZMIENNA", style="bold cyan", no_wrap=True)
    table.add_column("WARTOŚĆ", no_wrap=True)
    for prop in sorted(values):
        label, style = VALUE_STYLE[values[prop]]
        table.add_row(prop, Text(label, style=style))
    console.print(table)
    n_known = sum(1 for v in values.values() if v is not None)
    console.print(f"  [dim]{n_known}/{len(values)} zmiennych wyznaczonych[/dim]")


def _show_verdict(conclusion: str, verdict) -> None:
    label, style = VERDICT_TEXT[str(verdict)]
    line = Text("Wniosek: ")
    line.append(conclusion, style="bold cyan")
    line.append("  ")
    line.append(label, style=style)
    console.print(line)


# ---------------------------------------------------------------------------
# Główna logika
# ---------------------------------------------------------------------------

def _collect_input(args: argparse.Namespace) -> tuple[list[str], str | None]:
    from solver import load_premises

    premises:   list[str]  = []
    conclusion: str | None = None

    if args.file:
        path = pathlib.Path(args.file)
        if not path.exists():
            console.print(f"[red]Brak pliku przesłanek:[/red] {path}")
            raise SystemExit(EXIT_INPUT_ERROR)
        try:
            premise_set = load_premises(path)
        except ValueError as e:
            console.print(f"[red]Błąd wczytywania przesłanek:[/red] {e}")
            raise SystemExit(EXIT_INPUT_ERROR)
        premises.extend(premise_set.premises)
        conclusion = premise_set.conclusion

    premises.extend(args.premise or [])
    if args.conclusion:
        conclusion = args.conclusion

    return premises, conclusion


def run(args: argparse.Namespace) -> None:
    from solver import Deduction, EvaluationHistory, Status, check_conclusion, run as run_deduction
    from validator import PremiseValidator

    setup_logging(getattr(args, "verbose", False))

    premises, conclusion = _collect_input(args)
    if not premises:
        console.print("[red]Brak przesłanek[/red] — podaj plik albo --premise.")
        raise SystemExit(EXIT_INPUT_ERROR)

    # 1. Walidacja składni
    report = PremiseValidator().validate(premises, conclusion)
    if not report.is_valid:
        skip = args.skip_invalid or get_settings().on_syntax_error == "skip"
        conclusion_broken = any(e.path == "/conclusion" for e in report.errors)
        if not skip or conclusion_broken or not report.parsed:
            console.print(f"[red]Błędy składni[/red] ({len(report.errors)}):")
            _show_errors(report.errors)
            _show_warnings(report.warnings)
            raise SystemExit(EXIT_INPUT_ERROR)
        skipped = len(premises) - len(report.parsed)
        console.print(f"[yellow]Pominięto {skipped} niepoprawnych przesłanek:[/yellow]")
        _show_errors(report.errors)
    if report.warnings:
        console.print("[yellow]Ostrzeżenia:[/yellow]")
        _show_warnings(report.warnings)

    # 2. Dedukcja
    deduction = Deduction(report.parsed)
    history   = EvaluationHistory()
    result    = run_deduction(deduction, history)

    console.print(
        f"Przesłanki: [bold]{len(deduction)}[/bold]  "
        f"zmienne: [bold]{len(deduction.values)}[/bold]  "
        f"rundy: [bold]{result.rounds}[/bold]"
    )

    if not args.no_trace:
        _show_trace(history, conclusion)

    _show_values(result.values)

    # 3. Sprzeczność / wniosek
    if result.status is Status.CONTRADICTION:
        console.print(
            Text("Przesłanki są sprzeczne: ", style="bold red") + Text(str(result.contradiction))
        )
        raise SystemExit(EXIT_CONTRADICTION)

    if conclusion:
        _show_verdict(conclusion, check_conclusion(deduction, conclusion))


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "solve",
        help="Uruchamia dedukcję na przesłankach i sprawdza wniosek.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wczytuje przesłanki (plik JSON / tekstowy i/lub --premise), wyznacza wartości
zmiennych przez podstawianie i upraszczanie do punktu stałego i pokazuje tok
rozumowania.

Format pliku tekstowego (jedna formuła w linii, '#' = komentarz):
  (m ∧ ¬b) → j
  (f ∨ s) → m
  b → t
  f → ¬t
  f
  ∴ j

Kody wyjścia: 0 — OK, 1 — błąd wejścia, 2 — przesłanki sprzeczne.

Przykłady:
  ddk solve sylogizm.txt
  ddk solve sylogizm.json --no-trace
  ddk solve -p "f > !t" -p "f" -c t
  ddk solve przesłanki.txt --skip-invalid -v
        """,
    )
    p.add_argument(
        "file",
        nargs="?",
        metavar="PLIK",
        help="Plik z przesłankami (.json lub tekstowy).",
    )
    p.add_argument(
        "--premise", "-p",
        metavar="FORMUŁA",
        action="append",
        help="Dodatkowa przesłanka. Można podać wielokrotnie.",
    )
    p.add_argument(
        "--conclusion", "-c",
        metavar="FORMUŁA",
        help="Wniosek do sprawdzenia (nadpisuje wniosek z pliku).",
    )
    p.add_argument(
        "--no-trace",
        action="store_true",
        dest="no_trace",
        help="Nie pokazuj kolejnych rund, tylko wartości i werdykt.",
    )
    p.add_argument(
        "--skip-invalid",
        action="store_true",
        dest="skip_invalid",
        help="Pomiń przesłanki z błędami składni zamiast przerywać (jak DDK_ON_SYNTAX_ERROR=skip).",
    )
    p.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Logi silnika na poziomie DEBUG (stderr).",
    )
    p.set_defaults(func=run)
