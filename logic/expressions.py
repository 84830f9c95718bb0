"""
logic/expressions.py — reprezentacja formuły zdaniowej.

Expression to uporządkowana sekwencja węzłów (nie drzewo binarne):
operandy i operatory w kolejności wejściowej, np. `a ∧ b ∨ (c → d)`
to pięć węzłów rodzeństwa. Negacja wiąże tylko następny węzeł, spójniki
binarne są wartościowane od lewej do prawej, nawiasy grupują.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TypeAlias


# ---------------------------------------------------------------------------
# Węzły
# ---------------------------------------------------------------------------

class Operator(StrEnum):
    """Spójnik logiczny; wartość to kanoniczny glif Unicode."""
    NOT     = "¬"
    AND     = "∧"
    OR      = "∨"
    IMPLIES = "→"

    @property
    def is_binary(self) -> bool:
        return self is not Operator.NOT


@dataclass(frozen=True, slots=True)
class Proposition:
    """Zmienna zdaniowa — dokładnie jedna mała litera."""
    id: str

    def __str__(self) -> str:
        return self.id


@dataclass(frozen=True, slots=True)
class TruthValue:
    """Rozstrzygnięta wartość logiczna."""
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(slots=True)
class Subexpression:
    """Podformuła w nawiasach; rodzic jest jedynym właścicielem drzewa."""
    expression: Expression

    def __str__(self) -> str:
        return f"({self.expression})"


ExpressionNode: TypeAlias = Proposition | TruthValue | Operator | Subexpression

_OPERANDS = (Proposition, TruthValue, Subexpression)


def is_operand(node: ExpressionNode) -> bool:
    return isinstance(node, _OPERANDS)


# ---------------------------------------------------------------------------
# Expression
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Expression:
    """
    Formuła jako sekwencja węzłów.

    Równość jest strukturalna: `parse_formula("(m & b) > j")` i
    `parse_formula("(m ∧ b) → j")` dają równe obiekty.
    """
    nodes: list[ExpressionNode] = field(default_factory=list)

    def __str__(self) -> str:
        # Spacja między węzłami, oprócz miejsca bezpośrednio po negacji
        parts: list[str] = []
        for i, node in enumerate(self.nodes):
            text = str(node)
            if i == 0 or self.nodes[i - 1] is Operator.NOT:
                parts.append(text)
            else:
                parts.append(f" {text}")
        return "".join(parts)

    def __len__(self) -> int:
        return len(self.nodes)

    def propositions(self) -> Iterator[str]:
        """Zwraca identyfikatory wszystkich zmiennych (również w podformułach), w kolejności wystąpienia."""
        for node in self.nodes:
            if isinstance(node, Proposition):
                yield node.id
            elif isinstance(node, Subexpression):
                yield from node.expression.propositions()

    def truth_value(self) -> bool | None:
        """Wartość formuły, jeśli zwinęła się do pojedynczego literału."""
        if len(self.nodes) == 1 and isinstance(self.nodes[0], TruthValue):
            return self.nodes[0].value
        return None

    def is_resolved(self) -> bool:
        return self.truth_value() is not None
