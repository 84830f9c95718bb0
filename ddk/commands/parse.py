"""Komenda: ddk parse — pokazuje postać kanoniczną i drzewo węzłów formuły."""

from __future__ import annotations

import argparse

from rich.text import Text
from rich.tree import Tree

from ddk._config import get_console

console = get_console()


def _build_tree(expression, label: str) -> Tree:
    from logic import Operator, Proposition, Subexpression, TruthValue

    tree = Tree(Text(label, style="bold"))
    for node in expression.nodes:
        if isinstance(node, Subexpression):
            tree.add(_build_tree(node.expression, f"Subexpression  ({node.expression})"))
        elif isinstance(node, Proposition):
            tree.add(Text(f"Proposition  {node.id}", style="cyan"))
        elif isinstance(node, TruthValue):
            tree.add(Text(f"TruthValue  {node}", style="green" if node.value else "red"))
        elif isinstance(node, Operator):
            tree.add(Text(f"Operator  {node.name}  {node.value}", style="yellow"))
    return tree


def _show_caret(formula: str, position: int | None, indent: str = "  ") -> None:
    """Formuła i znak `^` pod pozycją błędu."""
    if position is None:
        return
    console.print(Text(f"{indent}{formula}"))
    console.print(Text(f"{indent}{' ' * position}^", style="red"))


def run(args: argparse.Namespace) -> None:
    from logic import FormulaSyntaxError, parse_formula

    try:
        expression = parse_formula(args.formula)
    except FormulaSyntaxError as e:
        console.print(Text(f"{e.code}  ", style="red") + Text(str(e)))
        _show_caret(args.formula, e.position)
        raise SystemExit(1)

    console.print(Text("Postać kanoniczna: ") + Text(str(expression), style="bold cyan"))
    if args.tree:
        console.print(_build_tree(expression, f"Expression  ({len(expression)} węzłów)"))


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "parse",
        help="Parsuje formułę i pokazuje jej postać kanoniczną.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Parsuje formułę (zapis ASCII lub Unicode) i wypisuje postać kanoniczną
z glifami ¬ ∧ ∨ →. Z --tree pokazuje także sekwencję węzłów.

Przykłady:
  ddk parse "(m & b) > j"
  ddk parse "a ∧ b ∨ (c → d)" --tree
        """,
    )
    p.add_argument(
        "formula",
        metavar="FORMUŁA",
        help="Formuła do sparsowania.",
    )
    p.add_argument(
        "--tree", "-t",
        action="store_true",
        help="Pokaż drzewo węzłów.",
    )
    p.set_defaults(func=run)
