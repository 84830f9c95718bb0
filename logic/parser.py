"""
logic/parser.py — parser formuł zdaniowych.

Publiczne API:
  parse_formula(formula) -> Expression

Gramatyka:
  - zmienne:   pojedyncze małe litery a–z
  - negacja:   ¬ lub !
  - koniunkcja: ∧ lub &
  - alternatywa: ∨ lub |
  - implikacja: → lub >
  - nawiasy grupują, spacje są ignorowane

Zapis ASCII i Unicode jest równoważny; wynik zawsze renderuje się glifami Unicode.
Każda sparsowana formuła ma kształt `operand (spójnik operand)*`,
gdzie `operand = ¬* (zmienna | (podformuła))`.
"""

from __future__ import annotations

from .errors import ErrorCode, FormulaSyntaxError
from .expressions import Expression, ExpressionNode, Operator, Proposition, Subexpression, is_operand

_OPERATOR_CHARS: dict[str, Operator] = {
    "¬": Operator.NOT,
    "!": Operator.NOT,
    "∧": Operator.AND,
    "&": Operator.AND,
    "∨": Operator.OR,
    "|": Operator.OR,
    "→": Operator.IMPLIES,
    ">": Operator.IMPLIES,
}


def parse_formula(formula: str) -> Expression:
    """
    Parsuje formułę do Expression.

    Przykłady::

        "f"             → [Proposition('f')]
        "f > !t"        → [Proposition('f'), IMPLIES, NOT, Proposition('t')]
        "(m & b) > j"   → [Subexpression([m, AND, b]), IMPLIES, Proposition('j')]

    Raises:
        FormulaSyntaxError przy nieznanym znaku, niezbalansowanych nawiasach
        albo formule o złej strukturze.
    """
    return _parse_range(formula, 0, len(formula))


def _parse_range(formula: str, start: int, end: int) -> Expression:
    """Parsuje formula[start:end]; pozycje w błędach są liczone względem całej formuły."""
    nodes:     list[ExpressionNode] = []
    positions: list[int]            = []

    i = start
    while i < end:
        c = formula[i]

        if c.isspace():
            i += 1
            continue

        if c == "(":
            close = _find_closing_paren(formula, i, end)
            nodes.append(Subexpression(_parse_range(formula, i + 1, close)))
            positions.append(i)
            i = close + 1
            continue

        if c == ")":
            raise FormulaSyntaxError(
                ErrorCode.UNBALANCED_CLOSE,
                "Nawias zamykający bez otwierającego",
                formula, position=i, character=c,
            )

        if c in _OPERATOR_CHARS:
            nodes.append(_OPERATOR_CHARS[c])
        elif "a" <= c <= "z":
            nodes.append(Proposition(c))
        else:
            raise FormulaSyntaxError(
                ErrorCode.INVALID_CHARACTER,
                f"Nieprawidłowy znak w formule: '{c}'",
                formula, position=i, character=c,
            )
        positions.append(i)
        i += 1

    if not nodes:
        # Pusta podformuła "()" — wskazujemy nawias otwierający
        raise FormulaSyntaxError(
            ErrorCode.EMPTY_FORMULA,
            "Pusta formuła",
            formula, position=start - 1 if start > 0 else None,
        )

    _check_structure(nodes, positions, formula)
    return Expression(nodes)


def _find_closing_paren(formula: str, open_at: int, end: int) -> int:
    """Zwraca indeks nawiasu zamykającego pasującego do formula[open_at] == '('."""
    depth = 1
    for j in range(open_at + 1, end):
        if formula[j] == "(":
            depth += 1
        elif formula[j] == ")":
            depth -= 1
            if depth == 0:
                return j
    raise FormulaSyntaxError(
        ErrorCode.UNBALANCED_OPEN,
        "Nawias otwierający bez zamykającego",
        formula, position=open_at, character="(",
    )


def _check_structure(nodes: list[ExpressionNode], positions: list[int], formula: str) -> None:
    """Sprawdza naprzemienność operandów i spójników binarnych."""
    expect_operand = True

    for node, pos in zip(nodes, positions):
        if expect_operand:
            if node is Operator.NOT:
                continue
            if is_operand(node):
                expect_operand = False
                continue
            raise FormulaSyntaxError(
                ErrorCode.MISSING_OPERAND,
                f"Brak operandu przed spójnikiem '{node}'",
                formula, position=pos, character=formula[pos],
            )

        if isinstance(node, Operator) and node.is_binary:
            expect_operand = True
            continue
        raise FormulaSyntaxError(
            ErrorCode.MISSING_OPERATOR,
            "Brak spójnika między operandami",
            formula, position=pos, character=formula[pos],
        )

    if expect_operand:
        raise FormulaSyntaxError(
            ErrorCode.MISSING_OPERAND,
            f"Brak operandu po '{nodes[-1]}'",
            formula, position=positions[-1], character=formula[positions[-1]],
        )
