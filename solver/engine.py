"""
solver/engine.py — silnik dedukcji: podstawianie, fakty jednostkowe, upraszczanie, punkt stały.

Obsługuje:
  - podstawianie znanych wartości za zmienne (bez zmiany kształtu formuły)
  - wyciąganie faktów jednostkowych z przesłanek zwiniętych do `p` / `¬p`
  - upraszczanie stałych (true ∧ x → x, x → false → ¬x, ...)
  - iterację do punktu stałego z zapisem historii

Ograniczenia:
  - To nie jest solver SAT: brak rezolucji, nawrotów i tablic prawdy.
    Zmienne, których nie da się wyznaczyć bez rozważania przypadków,
    zostają nieznane.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable

from logic import (
    Expression,
    ExpressionNode,
    Operator,
    Proposition,
    Subexpression,
    TruthValue,
    is_operand,
    parse_formula,
)

from .history import EvaluationHistory, Snapshot
from .types import (
    Contradiction,
    ContradictionKind,
    DeductionResult,
    Fact,
    Status,
    Step,
    ValueMap,
    Verdict,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Podstawianie
# ---------------------------------------------------------------------------

def substitute(expression: Expression, values: ValueMap) -> bool:
    """
    Zastępuje w miejscu każdą zmienną o znanej wartości węzłem TruthValue.

    Rekurencyjnie obejmuje podformuły. Nie zmienia liczby ani kolejności
    węzłów i nie upraszcza wyniku.

    Returns:
        True gdy podstawiono przynajmniej jeden węzeł.
    """
    changed = False
    for i, node in enumerate(expression.nodes):
        if isinstance(node, Proposition):
            value = values.get(node.id)
            if value is not None:
                expression.nodes[i] = TruthValue(value)
                changed = True
        elif isinstance(node, Subexpression):
            changed = substitute(node.expression, values) or changed
    return changed


# ---------------------------------------------------------------------------
# Fakty jednostkowe
# ---------------------------------------------------------------------------

def extract_unit_fact(expression: Expression) -> tuple[str, bool] | None:
    """
    Rozpoznaje przesłankę zwiniętą do pojedynczej zmiennej.

        [p]     → ('p', True)
        [¬, p]  → ('p', False)

    Każdy inny kształt (w tym samotny TruthValue) → None.
    """
    nodes = expression.nodes
    if len(nodes) == 1 and isinstance(nodes[0], Proposition):
        return nodes[0].id, True
    if len(nodes) == 2 and nodes[0] is Operator.NOT and isinstance(nodes[1], Proposition):
        return nodes[1].id, False
    return None


# ---------------------------------------------------------------------------
# Upraszczanie stałych
# ---------------------------------------------------------------------------

def simplify(expression: Expression) -> bool:
    """
    Upraszcza formułę w miejscu, zwijając stałe logiczne.

    Podformuły upraszczane są najpierw; podformuła zredukowana do jednego
    operandu traci nawiasy. Formuła w pełni rozstrzygnięta zwija się
    do pojedynczego TruthValue. Formuła o niepoprawnym kształcie zostaje
    bez zmian.

    Returns:
        True gdy formuła się zmieniła.
    """
    folded = _fold(expression.nodes)
    if folded is None:
        return False
    if len(folded) == 1 and isinstance(folded[0], Subexpression):
        folded = folded[0].expression.nodes
    if folded == expression.nodes:
        return False
    expression.nodes = folded
    return True


def _truth(nodes: list[ExpressionNode]) -> bool | None:
    if len(nodes) == 1 and isinstance(nodes[0], TruthValue):
        return nodes[0].value
    return None


def _is_single_operand(nodes: list[ExpressionNode]) -> bool:
    if len(nodes) == 1:
        return is_operand(nodes[0])
    return len(nodes) == 2 and nodes[0] is Operator.NOT and is_operand(nodes[1])


def _negated(nots: int, core: list[ExpressionNode]) -> list[ExpressionNode]:
    """Nakłada `nots` negacji na pojedynczy operand `core` (`x` lub `¬x`)."""
    if core[0] is Operator.NOT:
        nots += 1
    target = core[-1]
    if isinstance(target, TruthValue):
        return [TruthValue(target.value != (nots % 2 == 1))]
    return [Operator.NOT, target] if nots % 2 else [target]


def _negate(nodes: list[ExpressionNode]) -> list[ExpressionNode]:
    if _is_single_operand(nodes):
        return _negated(1, nodes)
    return [Operator.NOT, Subexpression(Expression(nodes))]


def _apply(op: Operator, left: bool, right: bool) -> bool:
    if op is Operator.AND:
        return left and right
    if op is Operator.OR:
        return left or right
    return (not left) or right


def _combine(
    left:  list[ExpressionNode],
    op:    Operator,
    right: list[ExpressionNode],
) -> list[ExpressionNode]:
    lv = _truth(left)
    rv = _truth(right)

    if lv is not None and rv is not None:
        return [TruthValue(_apply(op, lv, rv))]

    if lv is not None:
        if op is Operator.AND:
            return right if lv else [TruthValue(False)]
        if op is Operator.OR:
            return [TruthValue(True)] if lv else right
        return right if lv else [TruthValue(True)]

    if rv is not None:
        if op is Operator.AND:
            return left if rv else [TruthValue(False)]
        if op is Operator.OR:
            return [TruthValue(True)] if rv else left
        return [TruthValue(True)] if rv else _negate(left)

    return [*left, op, *right]


def _fold(nodes: list[ExpressionNode]) -> list[ExpressionNode] | None:
    """Zwraca nową, uproszczoną listę węzłów lub None dla niepoprawnego kształtu."""
    operands:  list[list[ExpressionNode]] = []
    operators: list[Operator]             = []

    nots = 0
    expect_operand = True
    for node in nodes:
        if expect_operand:
            if node is Operator.NOT:
                nots += 1
                continue
            if not is_operand(node):
                return None
            core: list[ExpressionNode] = [node]
            if isinstance(node, Subexpression):
                inner = _fold(node.expression.nodes)
                if inner is not None:
                    core = inner if _is_single_operand(inner) else [Subexpression(Expression(inner))]
            operands.append(_negated(nots, core))
            nots = 0
            expect_operand = False
        else:
            if not (isinstance(node, Operator) and node.is_binary):
                return None
            operators.append(node)
            expect_operand = True

    if expect_operand:
        return None

    result = operands[0]
    for op, right in zip(operators, operands[1:]):
        result = _combine(result, op, right)
    return result


# ---------------------------------------------------------------------------
# Deduction
# ---------------------------------------------------------------------------

class Deduction:
    """
    Stos przesłanek wraz z mapą wartości zmiennych.

    Stos nigdy nie jest skracany ani przestawiany: przesłanki rozstrzygnięte
    zwijają się do `true` albo do `p` / `¬p`, dzięki czemu ślad pozostaje pełny.

    Użycie::

        deduction = Deduction.from_strs(["f > !t", "f"])
        result    = run(deduction, history)
        verdict   = check_conclusion(deduction, "t")
    """

    def __init__(self, premises: Iterable[Expression]) -> None:
        self.premises: list[Expression] = list(premises)
        self.values:   ValueMap         = ValueMap.from_expressions(self.premises)

    @classmethod
    def from_strs(cls, formulas: Iterable[str]) -> Deduction:
        """Parsuje wszystkie formuły, a następnie inicjuje ValueMap. Propaguje FormulaSyntaxError."""
        return cls(parse_formula(f) for f in formulas)

    def __str__(self) -> str:
        return "\n".join(str(p) for p in self.premises)

    def __len__(self) -> int:
        return len(self.premises)

    # ------------------------------------------------------------------

    def update_actual_values(self) -> tuple[list[Fact], Contradiction | None]:
        """
        Zapisuje do ValueMap fakty jednostkowe ze wszystkich przesłanek.

        Fakt przeczący znanej wartości nie nadpisuje jej: zapis zostaje
        przerwany i zwracana jest sprzeczność.

        Returns:
            (nowe fakty, sprzeczność lub None)
        """
        learned: list[Fact] = []
        for i, premise in enumerate(self.premises):
            unit = extract_unit_fact(premise)
            if unit is None:
                continue
            prop, value = unit
            current = self.values.get(prop)
            if current is not None and current is not value:
                return learned, Contradiction(ContradictionKind.CONFLICTING_FACTS, i, prop)
            if self.values.set(prop, value):
                learned.append(Fact(prop, value, i))
        return learned, None

    def substitute_all(self) -> list[int]:
        """Podstawia znane wartości we wszystkich przesłankach; zwraca indeksy zmienionych."""
        return [i for i, p in enumerate(self.premises) if substitute(p, self.values)]

    def simplify_all(self) -> list[int]:
        """Upraszcza wszystkie przesłanki; zwraca indeksy zmienionych."""
        return [i for i, p in enumerate(self.premises) if simplify(p)]

    def find_false_premise(self) -> Contradiction | None:
        for i, premise in enumerate(self.premises):
            if premise.truth_value() is False:
                return Contradiction(ContradictionKind.FALSE_PREMISE, i)
        return None


# ---------------------------------------------------------------------------
# Punkt stały
# ---------------------------------------------------------------------------

def run(deduction: Deduction, history: EvaluationHistory | None = None) -> DeductionResult:
    """
    Iteruje rundy {fakty jednostkowe → podstawienie → upraszczanie} do punktu stałego.

    Przed pierwszą rundą wszystkie przesłanki są raz upraszczane (krok
    przygotowania, zapisywany w `history.setup`, nie liczony jako runda), więc
    każda produktywna runda wyznacza co najmniej jeden nowy fakt.

    Runda bez nowych faktów i bez zmian w przesłankach kończy pętlę i nie
    jest zapisywana w historii. Sprzeczność kończy pętlę po zapisaniu rundy.

    Returns:
        DeductionResult z liczbą produktywnych rund.
    """
    if history is not None and history.initial is None:
        history.initial = copy.deepcopy(deduction)

    # Przygotowanie poza licznikiem rund: ¬¬, zbędne nawiasy, stałe
    folded = deduction.simplify_all()
    if folded:
        logger.debug("Przygotowanie: uproszczono przesłanki %s", folded)
        if history is not None and history.setup is None:
            history.setup = Snapshot(
                round=0,
                deduction=copy.deepcopy(deduction),
                steps={i: {Step.EVALUATE} for i in folded},
            )

    rounds = 0
    while True:
        facts, contradiction = deduction.update_actual_values()

        steps: dict[int, set[Step]] = {}
        if contradiction is None:
            for i in deduction.substitute_all():
                steps.setdefault(i, set()).add(Step.SUBSTITUTE)
            for i in deduction.simplify_all():
                steps.setdefault(i, set()).add(Step.EVALUATE)
            contradiction = deduction.find_false_premise()

        if not facts and not steps:
            status = Status.STABLE if contradiction is None else Status.CONTRADICTION
            logger.debug("Punkt stały po %d rundach (%s)", rounds, status)
            return DeductionResult(status, rounds, deduction.values.as_dict(), contradiction)

        rounds += 1
        logger.debug(
            "Runda %d: fakty=[%s] podstawienia=%s uproszczenia=%s",
            rounds,
            ", ".join(str(f) for f in facts),
            sorted(i for i, s in steps.items() if Step.SUBSTITUTE in s),
            sorted(i for i, s in steps.items() if Step.EVALUATE in s),
        )

        if history is not None:
            history.push(Snapshot(
                round=rounds,
                deduction=copy.deepcopy(deduction),
                facts=facts,
                steps=steps,
                contradiction=contradiction,
            ))

        if contradiction is not None:
            logger.warning("Sprzeczność w przesłankach: %s", contradiction)
            return DeductionResult(
                Status.CONTRADICTION, rounds, deduction.values.as_dict(), contradiction,
            )


def check_conclusion(deduction: Deduction, conclusion: str | Expression) -> Verdict:
    """
    Sprawdza wniosek względem wartości wyznaczonych przez `run()`.

    Wniosek jest podstawiany (zmienne spoza przesłanek pozostają nieznane)
    i upraszczany na kopii.

    Raises:
        FormulaSyntaxError gdy wniosek jest niepoprawną formułą.
    """
    if isinstance(conclusion, str):
        expression = parse_formula(conclusion)
    else:
        expression = copy.deepcopy(conclusion)

    scoped = ValueMap({
        p: deduction.values.get(p) if p in deduction.values else None
        for p in expression.propositions()
    })
    substitute(expression, scoped)
    simplify(expression)

    value = expression.truth_value()
    if value is True:
        return Verdict.PROVED
    if value is False:
        return Verdict.DISPROVED
    return Verdict.UNDETERMINED
